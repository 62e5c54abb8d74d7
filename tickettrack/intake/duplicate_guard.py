"""
Duplicate Guard.

Read-before-write check enforcing one survey record per ticket.
"""

import logging

from tickettrack.store.base import SurveyStore

logger = logging.getLogger(__name__)


class DuplicateGuard:
    """
    Rejects submissions for tickets that already have a record.

    The check and the later insert are separate store calls, so two
    clients submitting the same ticket at the same moment can both pass.
    Acceptable for one interactive writer at a time; a multi-writer
    deployment needs a unique constraint on ticket_id in the backend.
    """

    def __init__(self, store: SurveyStore):
        self.store = store

    async def validate(self, ticket_id: str) -> bool:
        """
        Check whether a ticket has already been rated.

        Args:
            ticket_id: Ticket identifier (surrounding whitespace ignored)

        Returns:
            True if a record exists and the submission must be rejected
        """
        exists = await self.store.exists_by_ticket_id(ticket_id)
        if exists:
            logger.info(f"Ticket {ticket_id.strip()} already has a survey record")
        return exists


# Design Notes:
#
# 1. Check-then-insert
#    - Not atomic; see the class docstring for the concurrent-submit gap
#
# 2. Normalization
#    - The store strips whitespace before comparing ticket ids
#    - Ids are compared as strings, so "0042" and "42" are different tickets
