"""
Store selection.

Picks the backend once, at construction time, from configuration.
"""

import logging
from typing import Optional

import httpx

from tickettrack.store.base import SurveyStore
from tickettrack.store.local import LocalJsonStore
from tickettrack.store.remote import RemoteHttpStore

logger = logging.getLogger(__name__)

BACKENDS = ("local", "remote")


def create_store(
    backend: str = "local",
    local_path: Optional[str] = None,
    api_url: Optional[str] = None,
    clear_path: Optional[str] = None,
    timeout_seconds: float = 10.0,
    latency_seconds: float = 0.0,
    client: Optional[httpx.AsyncClient] = None
) -> SurveyStore:
    """
    Build the configured store.

    Args:
        backend: "local" or "remote"
        local_path: JSON file for the local backend
        api_url: Collection URL for the remote backend
        clear_path: Optional bulk-clear route for the remote backend
        timeout_seconds: Remote request timeout
        latency_seconds: Artificial delay for the local backend
        client: Optional shared AsyncClient for the remote backend

    Raises:
        ValueError: If the backend is unknown or its settings are missing
    """
    backend = backend.lower()
    logger.debug(f"Creating {backend} store")

    if backend == "local":
        if not local_path:
            raise ValueError("Local backend requires local_path")
        return LocalJsonStore(local_path, latency_seconds=latency_seconds)

    if backend == "remote":
        if not api_url:
            raise ValueError("Remote backend requires api_url (set REMOTE_API_URL)")
        return RemoteHttpStore(
            api_url,
            clear_path=clear_path,
            timeout_seconds=timeout_seconds,
            client=client
        )

    raise ValueError(f"Unknown store backend: '{backend}'. Must be one of {', '.join(BACKENDS)}")
