"""OAuth token exchange, token encryption and credential resolution."""

from taskmaster.auth.credentials import CredentialResolver
from taskmaster.auth.crypto import TokenCipher
from taskmaster.auth.models import (
    DEFAULT_USER_ID,
    CallbackResult,
    OAuthState,
    OAuthToken,
    state_key,
    token_key,
)
from taskmaster.auth.oauth import OAuthService, generate_state

__all__ = [
    "CredentialResolver",
    "TokenCipher",
    "DEFAULT_USER_ID",
    "CallbackResult",
    "OAuthState",
    "OAuthToken",
    "state_key",
    "token_key",
    "OAuthService",
    "generate_state",
]
