"""
Store contract.

Defines the backend-agnostic interface the UI session depends on.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from tickettrack.models.survey import SurveyRecord
from tickettrack.store.errors import UnsupportedOperationError

logger = logging.getLogger(__name__)


class SurveyStore(ABC):
    """
    Durable collection of SurveyRecords.

    All operations are coroutines because they may involve I/O. The store
    does not validate ratings or enforce ticket uniqueness: both are
    write-time contracts owned by intake.

    Subclasses set `backend_name` and `supports_clear`.
    """

    backend_name = "abstract"
    supports_clear = False

    @abstractmethod
    async def list_all(self) -> List[SurveyRecord]:
        """
        Return every stored record.

        Raises:
            StoreConnectionError: If the backend cannot be read
        """

    @abstractmethod
    async def insert(self, record: SurveyRecord) -> SurveyRecord:
        """
        Append one record and persist the collection.

        Returns:
            The record as stored by the backend

        Raises:
            StoreWriteError: If the record could not be persisted
        """

    @abstractmethod
    async def remove_by_id(self, record_id: str) -> bool:
        """
        Remove the record with the given id.

        Returns:
            True if a record was removed, False if no record had that id

        Raises:
            StoreWriteError: If the reduced collection could not be persisted
        """

    async def clear_all(self) -> bool:
        """
        Replace the collection with an empty one.

        Raises:
            UnsupportedOperationError: If the backend has no bulk clear
            StoreWriteError: If the empty collection could not be persisted
        """
        raise UnsupportedOperationError("clear_all", self.backend_name)

    async def reset_to_seed(self) -> List[SurveyRecord]:
        """
        Replace the collection with the sample seed set.

        Raises:
            UnsupportedOperationError: If the backend cannot be reseeded
        """
        raise UnsupportedOperationError("reset_to_seed", self.backend_name)

    async def exists_by_ticket_id(self, ticket_id: str) -> bool:
        """
        Check whether any record already rates this ticket.

        Exact, case-sensitive match after trimming whitespace. Linear scan
        over list_all(); survey volumes keep n small.
        """
        target = ticket_id.strip()
        records = await self.list_all()
        found = any(record.ticket_id == target for record in records)
        logger.debug(f"Ticket lookup '{target}': {'found' if found else 'not found'}")
        return found
