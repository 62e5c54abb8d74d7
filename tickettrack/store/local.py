"""
Local durable backend.

Keeps the whole collection as one JSON array in a single file (the
"durable key"). Every mutation is a read-modify-write of the full array.
"""

import asyncio
import json
import logging
import os
from typing import List, Optional

from tickettrack.models.survey import SurveyRecord
from tickettrack.store.base import SurveyStore
from tickettrack.store.errors import StoreConnectionError, StoreWriteError
from tickettrack.store.seed import build_seed_records

logger = logging.getLogger(__name__)


class LocalJsonStore(SurveyStore):
    """
    SurveyStore backed by a JSON file.

    Seeding happens when the file does not exist yet: the first list_all()
    writes the sample set and returns it. A collection that was explicitly
    cleared is an existing empty file and is never reseeded.
    """

    backend_name = "local"
    supports_clear = True

    def __init__(
        self,
        path: str,
        seed_on_first_access: bool = True,
        latency_seconds: float = 0.0
    ):
        """
        Initialize local store.

        Args:
            path: Path to the JSON file holding the record array
            seed_on_first_access: Write the sample set when the file is missing
            latency_seconds: Artificial delay applied to every operation
        """
        self.path = path
        self.seed_on_first_access = seed_on_first_access
        self.latency_seconds = latency_seconds
        self._lock = asyncio.Lock()  # serializes read-modify-write cycles

        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        logger.info(f"Initialized LocalJsonStore with path={path}")

    async def list_all(self) -> List[SurveyRecord]:
        await self._pause()
        async with self._lock:
            records = await asyncio.to_thread(self._read)

            if records is None:
                if not self.seed_on_first_access:
                    return []
                records = build_seed_records()
                try:
                    await asyncio.to_thread(self._write, records)
                except StoreWriteError as e:
                    raise StoreConnectionError(f"Could not persist seed data: {e}") from e
                logger.info(f"Seeded empty store with {len(records)} sample records")

            logger.debug(f"Loaded {len(records)} records from {self.path}")
            return records

    async def insert(self, record: SurveyRecord) -> SurveyRecord:
        await self._pause()
        async with self._lock:
            records = await self._read_for_write()
            records.append(record)
            await asyncio.to_thread(self._write, records)

        logger.info(f"Inserted record {record.id} for ticket {record.ticket_id}")
        return record

    async def remove_by_id(self, record_id: str) -> bool:
        await self._pause()
        async with self._lock:
            records = await self._read_for_write()
            remaining = [r for r in records if r.id != record_id]

            if len(remaining) == len(records):
                logger.warning(f"No record with id {record_id}, nothing removed")
                return False

            await asyncio.to_thread(self._write, remaining)

        logger.info(f"Removed record {record_id}")
        return True

    async def clear_all(self) -> bool:
        await self._pause()
        async with self._lock:
            await asyncio.to_thread(self._write, [])

        logger.info("Cleared all records")
        return True

    async def reset_to_seed(self) -> List[SurveyRecord]:
        await self._pause()
        records = build_seed_records()
        async with self._lock:
            await asyncio.to_thread(self._write, records)

        logger.info(f"Reset store to {len(records)} seed records")
        return records

    async def _pause(self) -> None:
        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)

    async def _read_for_write(self) -> List[SurveyRecord]:
        """Read the current collection as the first half of a mutation."""
        try:
            records = await asyncio.to_thread(self._read)
        except StoreConnectionError as e:
            raise StoreWriteError(f"Cannot modify unreadable store: {e}") from e
        return records or []

    def _read(self) -> Optional[List[SurveyRecord]]:
        """
        Load the collection from disk.

        Returns:
            List of records, or None if the file does not exist

        Raises:
            StoreConnectionError: If the file is unreadable or malformed
        """
        if not os.path.exists(self.path):
            return None

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read store file {self.path}: {e}")
            raise StoreConnectionError(f"Failed to read {self.path}: {e}") from e

        if not isinstance(data, list):
            logger.error(f"Store file {self.path} does not hold a JSON array")
            raise StoreConnectionError(f"{self.path} does not hold a JSON array")

        try:
            return [SurveyRecord.from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Malformed record in {self.path}: {e}")
            raise StoreConnectionError(f"Malformed record in {self.path}: {e}") from e

    def _write(self, records: List[SurveyRecord]) -> None:
        """
        Persist the collection with atomic write pattern.

        Raises:
            StoreWriteError: If the file could not be written
        """
        temp_path = f"{self.path}.tmp"
        try:
            with open(temp_path, 'w', encoding='utf-8') as f:
                json.dump([r.to_dict() for r in records], f, indent=2, ensure_ascii=False)

            os.replace(temp_path, self.path)
            logger.debug(f"Saved {len(records)} records to {self.path}")

        except OSError as e:
            logger.error(f"Failed to save store file {self.path}: {e}")
            if os.path.exists(temp_path):
                os.remove(temp_path)
            raise StoreWriteError(f"Failed to write {self.path}: {e}") from e


# Design Notes:
#
# 1. Whole-array rewrite
#    - Every mutation reads and rewrites the full collection
#    - Fine for survey volumes; not meant for large datasets
#
# 2. Locking
#    - asyncio.Lock serializes mutations within one process only
#    - Two processes sharing the file can still lose an update
#
# 3. Seeding
#    - Only a missing file is seeded; an empty array stays empty
