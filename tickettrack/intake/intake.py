"""
Survey Intake.

Turns a SurveyDraft from the form into a stored SurveyRecord.
"""

import logging
import re
import uuid
from datetime import datetime, timezone
from typing import Optional

from tickettrack.intake.duplicate_guard import DuplicateGuard
from tickettrack.models.survey import SurveyDraft, SurveyRecord, RATING_FIELDS
from tickettrack.store.base import SurveyStore

logger = logging.getLogger(__name__)

# ASCII digits only; kept as a string so leading zeros survive ("0001")
TICKET_ID_PATTERN = re.compile(r"^[0-9]+$")


class ValidationError(ValueError):
    """A submission was rejected before reaching the store."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class SurveyIntake:
    """
    Validates submissions and inserts accepted records.

    Validation order:
    1. Ticket id present and numeric
    2. Customer id present
    3. All three ratings set and within 1-5
    4. Ticket not already rated (Duplicate Guard)
    """

    def __init__(self, store: SurveyStore, guard: Optional[DuplicateGuard] = None):
        """
        Args:
            store: Store receiving accepted records
            guard: Duplicate guard (defaults to one over the same store)
        """
        self.store = store
        self.guard = guard or DuplicateGuard(store)

    async def submit(self, draft: SurveyDraft) -> SurveyRecord:
        """
        Validate a draft and persist it.

        Args:
            draft: Form submission

        Returns:
            The stored record

        Raises:
            ValidationError: If the draft is invalid or the ticket was already rated
            StoreError: If the duplicate check or the insert fails
        """
        ticket_id = (draft.ticket_id or "").strip()
        customer_id = (draft.customer_id or "").strip()

        self._check_fields(ticket_id, customer_id, draft)

        if await self.guard.validate(ticket_id):
            raise ValidationError(
                "ticket_id",
                f"Ticket {ticket_id} has already been rated"
            )

        record = SurveyRecord(
            id=uuid.uuid4().hex,
            ticket_id=ticket_id,
            customer_id=customer_id,
            ease_rating=draft.ease_rating,
            process_rating=draft.process_rating,
            solution_rating=draft.solution_rating,
            comment=(draft.comment or "").strip(),
            timestamp=datetime.now(timezone.utc).isoformat()
        )

        stored = await self.store.insert(record)
        logger.info(f"Accepted survey for ticket {ticket_id}")
        return stored

    @staticmethod
    def _check_fields(ticket_id: str, customer_id: str, draft: SurveyDraft) -> None:
        if not ticket_id:
            raise ValidationError("ticket_id", "Ticket number is required")

        if not TICKET_ID_PATTERN.match(ticket_id):
            raise ValidationError("ticket_id", f"Ticket number must contain digits only: '{ticket_id}'")

        if not customer_id:
            raise ValidationError("customer_id", "Customer identification is required")

        for name in RATING_FIELDS:
            value = getattr(draft, name)
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(name, f"{name} must be an integer, got {value!r}")
            if value == 0:
                raise ValidationError(name, f"{name} is required")
            if not (1 <= value <= 5):
                raise ValidationError(name, f"Invalid {name}: {value}. Must be 1-5")
