"""Common schemas shared across API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    success: bool = Field(default=False)
    detail: str = Field(..., description="Error message")
    code: str | None = Field(None, description="Error code for programmatic handling")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "detail": "User not found: 3f1c...",
                "code": "USER_NOT_FOUND",
            },
        },
    )


class MessageResponse(BaseModel):
    """Acknowledgement without a payload."""

    success: bool = True
    message: str


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    api_versions: list[str] = Field(default_factory=list)
