from __future__ import annotations

from typing import Optional

from taskmaster.mcp_server.components import ServerComponents

components: Optional[ServerComponents] = None


def set_components(value: Optional[ServerComponents]) -> None:
    global components
    components = value


def get_components() -> Optional[ServerComponents]:
    return components


def ensure_components() -> ServerComponents:
    if components is None:
        raise RuntimeError("Server components have not been initialised")
    return components
