"""Component initialization for the MCP server.

Builds the ClickUp client, key-value store, OAuth service and credential
resolver from one ``Settings`` value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx

from taskmaster.auth import CredentialResolver, OAuthService
from taskmaster.clickup import ClickUpClient
from taskmaster.config import Settings
from taskmaster.logger import Logger
from taskmaster.storage import KeyValueStore, create_store


@dataclass
class ServerComponents:
    settings: Settings
    client: ClickUpClient
    store: KeyValueStore
    oauth: OAuthService
    credentials: CredentialResolver


def initialize_components(
    *,
    settings: Settings,
    logger: Logger,
    store: Optional[KeyValueStore] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ServerComponents:
    """Initialize all server components.

    Args:
            settings: Service settings
            logger: Logger
            store: Key-value store override (tests); defaults to the shared file store
            transport: httpx transport override (tests)
    """
    store = store or create_store(settings, logger=logger)
    client = ClickUpClient(settings, transport=transport, logger=logger)
    oauth = OAuthService(settings, store, transport=transport, logger=logger)
    credentials = CredentialResolver(oauth, settings.api_token)
    logger.info(
        "Server components initialized",
        api_url=settings.api_url,
        default_list_id=settings.default_list_id,
        oauth_configured=settings.oauth_configured,
        static_token=bool(settings.api_token),
    )
    return ServerComponents(
        settings=settings,
        client=client,
        store=store,
        oauth=oauth,
        credentials=credentials,
    )
