"""Resolve which ClickUp credential a tool call uses."""

from typing import Optional

from taskmaster.auth.oauth import OAuthService

SOURCE_OAUTH = "oauth"
SOURCE_STATIC = "static"


class CredentialResolver:
    """Prefers the stored OAuth token, then the static API token."""

    def __init__(self, oauth: Optional[OAuthService], static_token: Optional[str]):
        self.oauth = oauth
        self.static_token = static_token or None

    def resolve_with_source(self) -> tuple[Optional[str], Optional[str]]:
        if self.oauth is not None:
            token = self.oauth.get_stored_token()
            if token:
                return token, SOURCE_OAUTH
        if self.static_token:
            return self.static_token, SOURCE_STATIC
        return None, None

    def resolve(self) -> Optional[str]:
        return self.resolve_with_source()[0]

    def source(self) -> Optional[str]:
        return self.resolve_with_source()[1]
