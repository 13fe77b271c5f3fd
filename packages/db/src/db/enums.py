# This project was developed with assistance from AI tools.
"""
Domain enums for company compliance checklists.

Shared domain types used by both SQLAlchemy models (db package)
and Pydantic schemas (api package).
"""

import enum


class Jurisdiction(str, enum.Enum):
    """Governmental tier a checklist requirement is scoped to."""

    STATE = "State"
    COUNTY = "County"
    CITY = "City"
    ALL = "All"

    @classmethod
    def ordered(cls) -> tuple["Jurisdiction", ...]:
        """Display order used by catalog groupings and per-jurisdiction counts."""
        return (cls.STATE, cls.COUNTY, cls.CITY, cls.ALL)


class InputType(str, enum.Enum):
    BOOLEAN = "boolean"
    TEXT = "text"
    DATE = "date"
    NUMBER = "number"


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    COMPANY_OWNER = "company_owner"
    TEAM_MEMBER = "team_member"
    USER = "user"
