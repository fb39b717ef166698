"""Centralized configuration documentation and defaults for the taskmaster service.

This module provides an overview of all configuration options and their
environment variable mappings.
"""

# =============================================================================
# ENVIRONMENT VARIABLES REFERENCE
# =============================================================================

# ClickUp API
# -----------
# TASKMASTER_API_URL: ClickUp REST base URL (default: https://api.clickup.com/api/v2)
# TASKMASTER_DEFAULT_LIST_ID: List used when tools omit list_id
# TASKMASTER_DEFAULT_TEAM_ID: Workspace used when tools omit workspace_id/team_id
# TASKMASTER_REQUEST_TIMEOUT: Timeout for outbound HTTP calls in seconds (default: 30)
# TASKMASTER_AUTH_SCHEME: Authorization header scheme (default: Bearer, empty = raw token)
#
# Credentials
# -----------
# CLICKUP_API_TOKEN: Static token used when no OAuth token is stored
# CLICKUP_CLIENT_ID: OAuth client id (required for /oauth/authorize)
# CLICKUP_CLIENT_SECRET: OAuth client secret (required for /oauth/callback)
# TASKMASTER_ENCRYPTION_KEY: Key used to encrypt stored OAuth tokens
# TASKMASTER_AUTH_URL / TASKMASTER_TOKEN_URL: OAuth endpoint overrides
# TASKMASTER_PUBLIC_URL: External base URL of the web server, used for the callback address
#
# Data & Ports
# ------------
# TASKMASTER_DATA_DIR: Base directory for the OAuth key-value store (default: ./data)
# TASKMASTER_MCP_PORT: MCP server port (default: 8010)
# TASKMASTER_WEB_PORT: OAuth web server port (default: 8012)
# TASKMASTER_LOG_LEVEL: Logging verbosity (default: INFO)
#   Values: DEBUG, INFO, WARNING, ERROR, CRITICAL

# =============================================================================
# CONFIGURATION DEFAULTS
# =============================================================================

from taskmaster.config import DEFAULT_ENCRYPTION_KEY, Settings
from taskmaster.logger import Logger

DEFAULT_MCP_PORT = 8010
DEFAULT_WEB_PORT = 8012
DEFAULT_LOG_LEVEL = "INFO"

# OAuth record lifetimes (seconds)
STATE_TTL_SECONDS = 60 * 10
TOKEN_TTL_SECONDS = 60 * 60 * 24 * 365

# list_tasks paging
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

# =============================================================================
# CONFIGURATION HELPER FUNCTIONS
# =============================================================================


def get_config_summary(settings: Settings) -> dict:
    """Get a summary of the effective configuration.

    Secrets are reported only as set/unset.

    Returns:
        Dictionary with current configuration values
    """
    return {
        "api_url": settings.api_url,
        "default_list_id": settings.default_list_id,
        "default_team_id": settings.default_team_id,
        "data_dir": str(settings.data_dir),
        "kv_store_path": str(settings.kv_store_path),
        "public_url": settings.public_url,
        "request_timeout": settings.request_timeout,
        "oauth_configured": settings.oauth_configured,
        "api_token_set": bool(settings.api_token),
        "default_encryption_key": settings.encryption_key == DEFAULT_ENCRYPTION_KEY,
    }


def log_config_summary(settings: Settings, logger: Logger) -> None:
    """Log the effective configuration at startup."""
    logger.info("Effective configuration", **get_config_summary(settings))

def validate_configuration(settings: Settings) -> tuple[bool, list[str]]:
    """Validate configuration for completeness and consistency.

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    errors = []

    if not settings.api_url.startswith(("http://", "https://")):
        errors.append(f"TASKMASTER_API_URL must be an http(s) URL: {settings.api_url}")

    if not settings.default_list_id:
        errors.append("TASKMASTER_DEFAULT_LIST_ID must not be empty")

    if not settings.default_team_id:
        errors.append("TASKMASTER_DEFAULT_TEAM_ID must not be empty")

    if bool(settings.client_id) != bool(settings.client_secret):
        errors.append("CLICKUP_CLIENT_ID and CLICKUP_CLIENT_SECRET must be set together")

    if settings.oauth_configured and settings.encryption_key == DEFAULT_ENCRYPTION_KEY:
        errors.append("TASKMASTER_ENCRYPTION_KEY must be changed from the default when OAuth is enabled")

    if settings.request_timeout <= 0:
        errors.append("TASKMASTER_REQUEST_TIMEOUT must be positive")

    return len(errors) == 0, errors
