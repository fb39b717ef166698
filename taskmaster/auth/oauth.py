"""ClickUp OAuth 2.0 authorization-code exchange.

Flow:
1. ``authorization_url`` stores a one-time state nonce (10 minute TTL) and
   returns the ClickUp consent URL.
2. ``handle_callback`` consumes the nonce, exchanges the code for an access
   token, and stores the encrypted token under the ClickUp user id and under
   the shared ``default`` key used by the MCP tools.
3. ``get_stored_token`` hands the decrypted access token to callers.

The stored token is single-tenant: whichever account completed the flow last
owns the ``default`` slot.
"""

from __future__ import annotations

import secrets
import time
from typing import Any, Callable, Dict, Optional, Tuple
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError as PydanticValidationError

from taskmaster.auth.crypto import TokenCipher
from taskmaster.auth.models import (
    DEFAULT_USER_ID,
    CallbackResult,
    OAuthState,
    OAuthToken,
    state_key,
    token_key,
)
from taskmaster.config import Settings
from taskmaster.config_docs import STATE_TTL_SECONDS, TOKEN_TTL_SECONDS
from taskmaster.exceptions import (
    ConfigurationError,
    InvalidArgumentsError,
    InvalidStateError,
    TokenDecryptionError,
    TokenExchangeError,
)
from taskmaster.logger import Logger, session_logger
from taskmaster.storage import KeyValueStore


def generate_state() -> str:
    """64 hex characters from 32 cryptographically random bytes."""
    return secrets.token_hex(32)


def _now_ms(clock: Callable[[], float]) -> int:
    return int(clock() * 1000)


class OAuthService:
    """Authorization-code exchange and encrypted token storage."""

    def __init__(
        self,
        settings: Settings,
        store: KeyValueStore,
        cipher: Optional[TokenCipher] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[Logger] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        self.settings = settings
        self.store = store
        self.cipher = cipher or TokenCipher(settings.encryption_key)
        self.transport = transport
        self.logger: Logger = logger or session_logger
        self._clock = clock or time.time

    # ------------------------------------------------------------------
    # Authorize
    # ------------------------------------------------------------------

    def authorization_url(
        self, callback_url: str, redirect_after: Optional[str] = None
    ) -> Tuple[str, str]:
        """Issue a state nonce and build the ClickUp consent URL.

        Returns:
            (consent URL, state nonce)

        Raises:
            ConfigurationError: CLICKUP_CLIENT_ID is not configured
        """
        if not self.settings.client_id:
            raise ConfigurationError("CLICKUP_CLIENT_ID is not configured")

        state = generate_state()
        record = OAuthState(redirect_after=redirect_after or None, created_at=_now_ms(self._clock))
        self.store.put(state_key(state), record.model_dump_json(), ttl_seconds=STATE_TTL_SECONDS)

        query = urlencode(
            {
                "client_id": self.settings.client_id,
                "redirect_uri": callback_url,
                "state": state,
            }
        )
        self.logger.info("OAuth authorization started", redirect_uri=callback_url)
        return f"{self.settings.auth_url}?{query}", state

    # ------------------------------------------------------------------
    # Callback
    # ------------------------------------------------------------------

    def _consume_state(self, state: str) -> OAuthState:
        key = state_key(state)
        raw = self.store.get(key)
        if raw is None:
            self.logger.warning("OAuth state not found or expired")
            raise InvalidStateError()
        # Single use: only the caller whose delete succeeds may continue
        if not self.store.delete(key):
            self.logger.warning("OAuth state already consumed")
            raise InvalidStateError()
        try:
            return OAuthState.model_validate_json(raw)
        except PydanticValidationError as exc:
            raise InvalidStateError("Stored state record is unreadable. Please try again.") from exc

    async def _exchange_code(self, client: httpx.AsyncClient, code: str) -> str:
        try:
            response = await client.post(
                self.settings.token_url,
                json={
                    "client_id": self.settings.client_id,
                    "client_secret": self.settings.client_secret,
                    "code": code,
                },
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as exc:
            raise TokenExchangeError(status_code=None, body=str(exc)) from exc

        if not response.is_success:
            raise TokenExchangeError(status_code=response.status_code, body=response.text)

        try:
            access_token = response.json().get("access_token")
        except ValueError:
            access_token = None
        if not access_token:
            raise TokenExchangeError(status_code=response.status_code, body=response.text)
        return access_token

    async def _resolve_user_id(self, client: httpx.AsyncClient, access_token: str) -> str:
        """ClickUp user id for the token, or ``default`` when it cannot be read."""
        try:
            response = await client.get(
                f"{self.settings.api_url}/user",
                headers={"Authorization": self.settings.authorization_header(access_token)},
            )
            if response.is_success:
                user = response.json().get("user") or {}
                if user.get("id"):
                    return str(user["id"])
            else:
                self.logger.warning("OAuth user lookup failed", status=response.status_code)
        except (httpx.HTTPError, ValueError, AttributeError) as exc:
            self.logger.warning("OAuth user lookup failed", error=str(exc))
        return DEFAULT_USER_ID

    async def handle_callback(self, code: Optional[str], state: Optional[str]) -> CallbackResult:
        """Validate the state nonce, exchange ``code``, and persist the token.

        Raises:
            InvalidArgumentsError: code or state missing
            InvalidStateError: unknown, expired or already consumed state
            ConfigurationError: client id or secret not configured
            TokenExchangeError: ClickUp refused the code
        """
        if not code or not state:
            raise InvalidArgumentsError("Missing code or state parameter")

        stored_state = self._consume_state(state)

        if not self.settings.oauth_configured:
            raise ConfigurationError("OAuth credentials are not configured")

        async with httpx.AsyncClient(
            timeout=self.settings.request_timeout, transport=self.transport
        ) as client:
            access_token = await self._exchange_code(client, code)
            user_id = await self._resolve_user_id(client, access_token)

        token = OAuthToken(
            access_token=access_token,
            token_type="Bearer",
            created_at=_now_ms(self._clock),
        )
        encrypted = self.cipher.encrypt(token)
        self.store.put(token_key(user_id), encrypted, ttl_seconds=TOKEN_TTL_SECONDS)
        if user_id != DEFAULT_USER_ID:
            self.store.put(token_key(DEFAULT_USER_ID), encrypted, ttl_seconds=TOKEN_TTL_SECONDS)

        self.logger.info("OAuth token stored", user_id=user_id)
        return CallbackResult(user_id=user_id, redirect_after=stored_state.redirect_after)

    # ------------------------------------------------------------------
    # Stored token
    # ------------------------------------------------------------------

    def store_token(self, access_token: str, user_id: str = DEFAULT_USER_ID) -> None:
        """Encrypt and store a token obtained outside the OAuth flow."""
        token = OAuthToken(access_token=access_token, created_at=_now_ms(self._clock))
        self.store.put(token_key(user_id), self.cipher.encrypt(token), ttl_seconds=TOKEN_TTL_SECONDS)

    def load_token(self, user_id: str = DEFAULT_USER_ID) -> Optional[OAuthToken]:
        """Decrypted token record, or None when absent or unreadable."""
        encrypted = self.store.get(token_key(user_id))
        if encrypted is None:
            return None
        try:
            return self.cipher.decrypt(encrypted)
        except TokenDecryptionError as exc:
            self.logger.error("Failed to decrypt stored token", user_id=user_id, error=str(exc))
            return None

    def get_stored_token(self, user_id: str = DEFAULT_USER_ID) -> Optional[str]:
        token = self.load_token(user_id)
        return token.access_token if token else None

    def has_valid_token(self, user_id: str = DEFAULT_USER_ID) -> bool:
        return self.get_stored_token(user_id) is not None

    def revoke_token(self, user_id: str = DEFAULT_USER_ID) -> bool:
        """Delete the stored token; deleting a missing token is not an error."""
        deleted = self.store.delete(token_key(user_id))
        self.logger.info("OAuth token revoked", user_id=user_id, existed=deleted)
        return deleted

    def status(self) -> Dict[str, Any]:
        return {
            "authenticated": self.has_valid_token(),
            "oauth_configured": self.settings.oauth_configured,
            "fallback_token": bool(self.settings.api_token),
        }
