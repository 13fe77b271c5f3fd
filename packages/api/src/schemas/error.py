# This project was developed with assistance from AI tools.
"""RFC 7807 Problem Details error response schema."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """RFC 7807 Problem Details body returned for every error status.

    See https://datatracker.ietf.org/doc/html/rfc7807
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "type": "about:blank",
                "title": "Unprocessable Entity",
                "status": 422,
                "detail": "Unknown checklist field: business_licence_state",
                "request_id": "0b7c5c1e-3f7a-4d2b-9a54-6f1d2e8c9b10",
                "instance": "/api/company/checklist",
            }
        }
    )

    type: str = Field(default="about:blank", description="Problem type URI.")
    title: str = Field(description="Short summary, fixed per status code.")
    status: int = Field(description="HTTP status code.")
    detail: str = Field(default="", description="What went wrong with this request.")
    request_id: str = Field(
        default="",
        description="X-Request-ID from the caller, or a generated UUID.",
    )
    instance: str = Field(default="", description="Request path that produced the error.")
