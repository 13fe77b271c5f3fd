# This project was developed with assistance from AI tools.
"""Authentication and authorization schemas."""

from db.enums import UserRole
from pydantic import BaseModel, ConfigDict, Field


class UserContext(BaseModel):
    """Injected by auth middleware into every authenticated request."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    role: UserRole
    email: str
    name: str
    company_id: int | None = None


class TokenPayload(BaseModel):
    """Decoded JWT token claims from Keycloak.

    ``company_id`` is a custom claim mapped from the user's Keycloak attribute.
    """

    sub: str
    email: str = ""
    preferred_username: str = ""
    name: str = ""
    company_id: int | None = None
    realm_access: dict = Field(default_factory=dict)
