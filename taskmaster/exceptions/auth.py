"""Credential and OAuth exceptions."""

from typing import Optional

from taskmaster.exceptions.base import TaskmasterError
from taskmaster.exceptions.upstream import UpstreamError


class MissingCredentialError(TaskmasterError):
    """Neither a stored OAuth token nor a static API token is available."""

    default_code = "AUTH_REQUIRED"

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "No ClickUp credential available: connect via /oauth/authorize "
            "or set CLICKUP_API_TOKEN."
        )


class InvalidStateError(TaskmasterError):
    """OAuth state nonce is unknown, expired, or already consumed."""

    default_code = "INVALID_STATE"

    def __init__(self, message: str = "State parameter is invalid or expired. Please try again."):
        super().__init__(message)


class TokenDecryptionError(TaskmasterError):
    """A stored token could not be decrypted (wrong key or corrupted blob)."""

    default_code = "DECRYPTION_FAILED"


class TokenExchangeError(UpstreamError):
    """The authorization code could not be exchanged for an access token."""

    default_code = "TOKEN_EXCHANGE_FAILED"
