"""Status request URL construction."""

from __future__ import annotations

from dataclasses import dataclass

from .keys import QueryKey
from .query import UrlBuilder


@dataclass(frozen=True, slots=True)
class StatusRequest:
    """Parameters of a status request sent to the beacon endpoint."""
    server_id: int
    application_id: str
    agent_version: str
    platform_type: int
    agent_technology_type: str

    # Timestamp (ms since epoch) of the configuration in use, 0 if none yet
    timestamp: int = 0


def build_status_url(base_url: str, request: StatusRequest, new_session: bool) -> str:
    """Monitor URL for ``request``; ``ns=1`` is only sent for a new session."""
    return (
        UrlBuilder(base_url)
        .add(QueryKey.TYPE, "m")
        .add(QueryKey.SERVER_ID, request.server_id)
        .add(QueryKey.APPLICATION, request.application_id)
        .add(QueryKey.VERSION, request.agent_version)
        .add(QueryKey.PLATFORM_TYPE, request.platform_type)
        .add(QueryKey.AGENT_TECHNOLOGY_TYPE, request.agent_technology_type)
        .add_if_defined(QueryKey.NEW_SESSION, 1 if new_session else None)
        .build()
    )
