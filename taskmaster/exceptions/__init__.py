"""Custom exceptions for the ClickUp adapter and the OAuth exchange.

All exceptions carry a ``code`` used to build structured error payloads for
MCP tool results and OAuth HTTP responses.
"""

from taskmaster.exceptions.base import (
    ConfigurationError,
    InvalidArgumentsError,
    TaskmasterError,
)
from taskmaster.exceptions.upstream import UpstreamError
from taskmaster.exceptions.auth import (
    InvalidStateError,
    MissingCredentialError,
    TokenDecryptionError,
    TokenExchangeError,
)

__all__ = [
    "TaskmasterError",
    "InvalidArgumentsError",
    "ConfigurationError",
    "UpstreamError",
    "MissingCredentialError",
    "InvalidStateError",
    "TokenDecryptionError",
    "TokenExchangeError",
]
