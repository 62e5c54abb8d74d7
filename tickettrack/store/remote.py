"""
Remote HTTP backend.

Talks to a REST-style collection endpoint:
- GET    {base}        -> JSON array of records
- POST   {base}        -> stored record
- DELETE {base}/{id}   -> success status
- DELETE {base}/{clear_path} (only when a clear route is configured)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional
from urllib.parse import quote

import httpx

from tickettrack.models.survey import SurveyRecord
from tickettrack.store.base import SurveyStore
from tickettrack.store.errors import (
    StoreConnectionError,
    StoreWriteError,
    UnsupportedOperationError,
)

logger = logging.getLogger(__name__)


class RemoteHttpStore(SurveyStore):
    """
    SurveyStore backed by a remote collection URL.

    Order of list_all() is whatever the server returns. The remote backend
    never seeds and, unless `clear_path` is set, has no bulk clear.
    """

    backend_name = "remote"

    def __init__(
        self,
        base_url: str,
        clear_path: Optional[str] = None,
        timeout_seconds: float = 10.0,
        client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize remote store.

        Args:
            base_url: Collection endpoint (e.g. https://api.example.com/surveys)
            clear_path: Sub-path accepting DELETE for bulk clear, if the API has one
            timeout_seconds: Per-request timeout when the store owns its client
            client: Shared AsyncClient; the caller keeps ownership and closes it
        """
        if not base_url:
            raise ValueError("RemoteHttpStore requires a base_url")

        self.base_url = base_url.rstrip('/')
        self.clear_path = clear_path.strip('/') if clear_path else None
        self.timeout_seconds = timeout_seconds
        self._client = client

        logger.info(f"Initialized RemoteHttpStore with base_url={self.base_url}")

    @property
    def supports_clear(self) -> bool:
        return self.clear_path is not None

    async def list_all(self) -> List[SurveyRecord]:
        try:
            async with self._session() as client:
                response = await client.get(self.base_url)
        except httpx.HTTPError as e:
            logger.error(f"GET {self.base_url} failed: {e}")
            raise StoreConnectionError(f"Remote store unreachable: {e}") from e

        if not response.is_success:
            logger.error(f"GET {self.base_url} returned {response.status_code}")
            raise StoreConnectionError(f"Remote store returned HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise StoreConnectionError("Remote store response was not valid JSON") from e

        if not isinstance(data, list):
            logger.error(f"GET {self.base_url} returned {type(data).__name__}, expected list")
            raise StoreConnectionError("Remote store did not return a collection")

        try:
            records = [SurveyRecord.from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise StoreConnectionError(f"Malformed record from remote store: {e}") from e

        logger.debug(f"Fetched {len(records)} records from {self.base_url}")
        return records

    async def insert(self, record: SurveyRecord) -> SurveyRecord:
        try:
            async with self._session() as client:
                response = await client.post(self.base_url, json=record.to_dict())
        except httpx.HTTPError as e:
            logger.error(f"POST {self.base_url} failed: {e}")
            raise StoreWriteError(f"Remote store unreachable: {e}") from e

        if not response.is_success:
            logger.error(f"POST {self.base_url} returned {response.status_code}")
            raise StoreWriteError(f"Remote store rejected insert with HTTP {response.status_code}")

        try:
            stored = SurveyRecord.from_dict(response.json())
        except (KeyError, TypeError, ValueError) as e:
            raise StoreWriteError(f"Remote store returned an invalid record: {e}") from e

        logger.info(f"Inserted record {stored.id} for ticket {stored.ticket_id}")
        return stored

    async def remove_by_id(self, record_id: str) -> bool:
        url = f"{self.base_url}/{quote(record_id, safe='')}"
        try:
            async with self._session() as client:
                response = await client.delete(url)
        except httpx.HTTPError as e:
            logger.error(f"DELETE {url} failed: {e}")
            raise StoreWriteError(f"Remote store unreachable: {e}") from e

        if response.status_code == 404:
            logger.warning(f"No remote record with id {record_id}, nothing removed")
            return False

        if not response.is_success:
            logger.error(f"DELETE {url} returned {response.status_code}")
            raise StoreWriteError(f"Remote store rejected delete with HTTP {response.status_code}")

        logger.info(f"Removed record {record_id}")
        return True

    async def clear_all(self) -> bool:
        if self.clear_path is None:
            raise UnsupportedOperationError("clear_all", self.backend_name)

        url = f"{self.base_url}/{self.clear_path}"
        try:
            async with self._session() as client:
                response = await client.delete(url)
        except httpx.HTTPError as e:
            logger.error(f"DELETE {url} failed: {e}")
            raise StoreWriteError(f"Remote store unreachable: {e}") from e

        if not response.is_success:
            logger.error(f"DELETE {url} returned {response.status_code}")
            raise StoreWriteError(f"Remote store rejected clear with HTTP {response.status_code}")

        logger.info("Cleared all remote records")
        return True

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        """Yield the shared client, or a short-lived one owned by this call."""
        if self._client is not None:
            yield self._client
            return

        async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
            yield client


# Design Notes:
#
# 1. Error mapping
#    - Reads fail with StoreConnectionError, writes with StoreWriteError
#    - A 404 on delete means "nothing removed", not a failure
#
# 2. Client ownership
#    - An injected AsyncClient is never closed here
#    - Without one, each call opens and closes its own client
#
# 3. Stored record
#    - insert() returns the server's echo, so ids may differ from the input
