"""Common models and helpers shared by the input and output models."""

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationInfo

from taskmaster.config import Settings

NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]


def settings_from(info: ValidationInfo) -> Settings:
    """Settings passed as validation context, or the built-in defaults."""
    context = info.context or {}
    settings = context.get("settings")
    if isinstance(settings, Settings):
        return settings
    return Settings()


class ErrorResponse(BaseModel):
    """Error response structure."""

    model_config = ConfigDict(extra="ignore")

    error_code: str
    message: str
    recovery_strategy: str
    details: Optional[dict] = None


class PingOutput(BaseModel):
    """Health check output."""

    status: str
    timestamp: str
    message: str
    credential_source: Optional[str] = None
