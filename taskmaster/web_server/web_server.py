"""Taskmaster Web Server - OAuth endpoints for connecting a ClickUp account.

Exposes:
- GET /               service summary
- GET /ping           health check
- GET /oauth/authorize       start the authorization-code flow
- GET /oauth/callback        finish the flow and store the encrypted token
- GET /oauth/status          whether a token is stored / OAuth is configured
- GET|POST /oauth/logout     revoke the stored token

The token stored here is read by the MCP server through the shared key-value
store.
"""

import html
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from taskmaster import __version__
from taskmaster.auth import OAuthService
from taskmaster.config import Settings
from taskmaster.config_docs import STATE_TTL_SECONDS
from taskmaster.exceptions import (
    ConfigurationError,
    InvalidArgumentsError,
    InvalidStateError,
    TokenExchangeError,
)
from taskmaster.logger import Logger, session_logger

SERVICE_NAME = "ClickUp Taskmaster MCP"

_SUCCESS_PAGE = """<!DOCTYPE html>
<html>
<head>
  <title>ClickUp Connected</title>
  <style>
    body {{
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
      display: flex;
      justify-content: center;
      align-items: center;
      min-height: 100vh;
      margin: 0;
      background: #f4f5f7;
    }}
    .card {{
      background: white;
      padding: 2rem 3rem;
      border-radius: 12px;
      box-shadow: 0 10px 40px rgba(0,0,0,0.2);
      text-align: center;
      max-width: 400px;
    }}
    .user-id {{
      background: #f0f0f0;
      padding: 0.5rem 1rem;
      border-radius: 4px;
      font-family: monospace;
      margin: 1rem 0;
    }}
  </style>
</head>
<body>
  <div class="card">
    <h1>Connected to ClickUp!</h1>
    <p>Your ClickUp account has been successfully connected.</p>
    <div class="user-id">User ID: {user_id}</div>
    <p>You can now close this window and use the MCP server.</p>{continue_link}
  </div>
</body>
</html>
"""


def _error_response(status_code: int, error: str, message: str, **extra) -> JSONResponse:
    content = {"error": error, "message": message}
    content.update({k: v for k, v in extra.items() if v is not None})
    return JSONResponse(status_code=status_code, content=content)


def render_success_page(user_id: str, redirect_after: Optional[str] = None) -> str:
    continue_link = ""
    if redirect_after:
        continue_link = f'\n    <p><a href="{html.escape(redirect_after, quote=True)}">Continue</a></p>'
    return _SUCCESS_PAGE.format(user_id=html.escape(user_id), continue_link=continue_link)


class TaskmasterWebServer:
    """FastAPI web server for the ClickUp OAuth flow."""

    def __init__(
        self,
        settings: Settings,
        oauth_service: OAuthService,
        logger: Optional[Logger] = None,
    ):
        """
        Initialize the Taskmaster web server.

        Args:
            settings: Service settings (public_url overrides the callback base)
            oauth_service: OAuth service bound to the shared key-value store
            logger: Logger (defaults to the session logger)
        """
        self.app = FastAPI(
            title="clickup-taskmaster",
            description="ClickUp OAuth connection endpoints",
            version=__version__,
        )
        self.settings = settings
        self.oauth = oauth_service
        self.logger: Logger = logger or session_logger

        self.logger.info(
            "Taskmaster web server initialized",
            oauth_configured=settings.oauth_configured,
            public_url=settings.public_url,
        )
        self._setup_routes()

    def callback_url(self, request: Request) -> str:
        """Absolute /oauth/callback address registered with ClickUp."""
        base = self.settings.public_url or str(request.base_url)
        return f"{base.rstrip('/')}/oauth/callback"

    def _setup_routes(self):
        """Set up the service and OAuth routes."""

        @self.app.get("/")
        async def root():
            return JSONResponse(
                content={
                    "status": "online",
                    "name": SERVICE_NAME,
                    "endpoints": {
                        "authorize": "/oauth/authorize",
                        "callback": "/oauth/callback",
                        "status": "/oauth/status",
                        "logout": "/oauth/logout",
                    },
                    "has_token": self.oauth.has_valid_token() or bool(self.settings.api_token),
                }
            )

        @self.app.get("/ping")
        async def ping():
            """
            Health check endpoint.

            Returns:
                {status: "ok", timestamp: ISO8601, service: "clickup-taskmaster"}
            """
            current_time = datetime.now(timezone.utc).isoformat()
            self.logger.debug("GET /ping", timestamp=current_time)
            return JSONResponse(
                content={"status": "ok", "timestamp": current_time, "service": "clickup-taskmaster"}
            )

        @self.app.get("/oauth/authorize")
        async def authorize(request: Request, redirect_after: Optional[str] = None):
            self.logger.info("GET /oauth/authorize", redirect_after=redirect_after)
            try:
                url, state = self.oauth.authorization_url(
                    self.callback_url(request), redirect_after=redirect_after
                )
            except ConfigurationError as exc:
                self.logger.error("/oauth/authorize failed", error=exc.message, status=500)
                return _error_response(500, "Configuration Error", exc.message)

            response = RedirectResponse(url=url, status_code=302)
            response.set_cookie(
                "oauth_state",
                state,
                max_age=STATE_TTL_SECONDS,
                httponly=True,
                samesite="lax",
            )
            return response

        @self.app.get("/oauth/callback")
        async def callback(
            code: Optional[str] = None,
            state: Optional[str] = None,
            error: Optional[str] = None,
            error_description: Optional[str] = None,
        ):
            self.logger.info("GET /oauth/callback", has_code=bool(code), has_error=bool(error))
            if error:
                self.logger.warning("OAuth provider returned an error", error=error)
                return _error_response(400, "OAuth Error", error, description=error_description)

            try:
                result = await self.oauth.handle_callback(code, state)
            except InvalidArgumentsError as exc:
                return _error_response(400, "Invalid Request", exc.message)
            except InvalidStateError as exc:
                return _error_response(400, "Invalid State", exc.message)
            except ConfigurationError as exc:
                self.logger.error("/oauth/callback failed", error=exc.message, status=500)
                return _error_response(500, "Configuration Error", exc.message)
            except TokenExchangeError as exc:
                self.logger.error(
                    "Token exchange failed", status_code=exc.status_code, status=500
                )
                return _error_response(
                    500,
                    "Token Exchange Failed",
                    "Failed to exchange authorization code for token",
                    details=exc.body,
                )

            self.logger.info("/oauth/callback completed", user_id=result.user_id, status=200)
            return HTMLResponse(render_success_page(result.user_id, result.redirect_after))

        @self.app.get("/oauth/status")
        async def status():
            return JSONResponse(content=self.oauth.status())

        @self.app.api_route("/oauth/logout", methods=["GET", "POST"])
        async def logout():
            self.oauth.revoke_token()
            return JSONResponse(content={"success": True, "message": "Token revoked successfully"})
