"""Runtime configuration for taskmaster.

``Settings`` is an explicit, immutable value built once at startup and passed
into every component (ClickUp client, OAuth service, MCP server, web server).
Nothing reads configuration from module globals.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Optional

DEFAULT_API_URL = "https://api.clickup.com/api/v2"
DEFAULT_AUTH_URL = "https://app.clickup.com/api"
DEFAULT_TOKEN_URL = "https://api.clickup.com/api/v2/oauth/token"
DEFAULT_LIST_ID = "176135389"
DEFAULT_TEAM_ID = "8472392"
DEFAULT_ENCRYPTION_KEY = "default-key-change-me"
DEFAULT_REQUEST_TIMEOUT = 30.0


def _optional(environ: Mapping[str, str], name: str) -> Optional[str]:
    value = environ.get(name)
    if value is None or value.strip() == "":
        return None
    return value.strip()


@dataclass(frozen=True)
class Settings:
    """Immutable service configuration.

    Attributes:
        api_url: ClickUp REST base URL
        default_list_id: List used when a tool call omits ``list_id``
        default_team_id: Workspace (team) used when a tool call omits ``workspace_id``/``team_id``
        api_token: Static fallback token used when no OAuth token is stored
        client_id: OAuth client id
        client_secret: OAuth client secret
        encryption_key: Key material for encrypting stored OAuth tokens
        auth_url: ClickUp consent page
        token_url: ClickUp code-for-token endpoint
        public_url: Externally visible base URL of the web server (callback address)
        data_dir: Directory for the file-backed key-value store
        request_timeout: Timeout in seconds for every outbound HTTP call
        auth_scheme: Authorization header scheme; empty sends the raw token
    """

    api_url: str = DEFAULT_API_URL
    default_list_id: str = DEFAULT_LIST_ID
    default_team_id: str = DEFAULT_TEAM_ID
    api_token: Optional[str] = None
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    encryption_key: str = DEFAULT_ENCRYPTION_KEY
    auth_url: str = DEFAULT_AUTH_URL
    token_url: str = DEFAULT_TOKEN_URL
    public_url: Optional[str] = None
    data_dir: Path = Path("data")
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    auth_scheme: str = "Bearer"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides: Any) -> "Settings":
        """Build settings from environment variables, then apply ``overrides``."""
        env = os.environ if environ is None else environ
        timeout_raw = _optional(env, "TASKMASTER_REQUEST_TIMEOUT")
        settings = cls(
            api_url=(_optional(env, "TASKMASTER_API_URL") or DEFAULT_API_URL).rstrip("/"),
            default_list_id=_optional(env, "TASKMASTER_DEFAULT_LIST_ID") or DEFAULT_LIST_ID,
            default_team_id=_optional(env, "TASKMASTER_DEFAULT_TEAM_ID") or DEFAULT_TEAM_ID,
            api_token=_optional(env, "CLICKUP_API_TOKEN"),
            client_id=_optional(env, "CLICKUP_CLIENT_ID"),
            client_secret=_optional(env, "CLICKUP_CLIENT_SECRET"),
            encryption_key=_optional(env, "TASKMASTER_ENCRYPTION_KEY") or DEFAULT_ENCRYPTION_KEY,
            auth_url=_optional(env, "TASKMASTER_AUTH_URL") or DEFAULT_AUTH_URL,
            token_url=_optional(env, "TASKMASTER_TOKEN_URL") or DEFAULT_TOKEN_URL,
            public_url=_optional(env, "TASKMASTER_PUBLIC_URL"),
            data_dir=Path(_optional(env, "TASKMASTER_DATA_DIR") or "data"),
            request_timeout=float(timeout_raw) if timeout_raw else DEFAULT_REQUEST_TIMEOUT,
            auth_scheme=env.get("TASKMASTER_AUTH_SCHEME", "Bearer").strip(),
        )
        if overrides:
            settings = replace(settings, **overrides)
        return settings

    @property
    def oauth_configured(self) -> bool:
        return bool(self.client_id and self.client_secret)

    @property
    def kv_store_path(self) -> Path:
        """Location of the file-backed key-value store shared by MCP and web processes."""
        return Path(self.data_dir) / "oauth" / "kv.json"

    def authorization_header(self, token: str) -> str:
        if not self.auth_scheme:
            return token
        return f"{self.auth_scheme} {token}"
