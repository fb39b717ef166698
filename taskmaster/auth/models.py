"""OAuth records persisted in the key-value store."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

TOKEN_KEY_PREFIX = "oauth_token:"
STATE_KEY_PREFIX = "oauth_state:"
DEFAULT_USER_ID = "default"


def token_key(user_id: str) -> str:
    return f"{TOKEN_KEY_PREFIX}{user_id}"


def state_key(state: str) -> str:
    return f"{STATE_KEY_PREFIX}{state}"


class OAuthToken(BaseModel):
    """Access token obtained from ClickUp (stored encrypted)."""

    model_config = ConfigDict(frozen=True)

    access_token: str
    token_type: str = "Bearer"
    created_at: int


class OAuthState(BaseModel):
    """Pending authorization, keyed by its one-time state nonce."""

    model_config = ConfigDict(frozen=True)

    redirect_after: Optional[str] = None
    created_at: int


class CallbackResult(BaseModel):
    """Outcome of a completed authorization."""

    user_id: str
    redirect_after: Optional[str] = None
