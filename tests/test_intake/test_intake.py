"""
Unit tests for Survey Intake and the Duplicate Guard.
"""

import os
import tempfile
from unittest.mock import AsyncMock, Mock

import pytest

from tickettrack.intake import DuplicateGuard, SurveyIntake, ValidationError
from tickettrack.models.survey import SurveyDraft
from tickettrack.store.errors import StoreWriteError
from tickettrack.store.local import LocalJsonStore


@pytest.fixture
def store():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield LocalJsonStore(os.path.join(tmpdir, "db.json"), seed_on_first_access=False)


def make_draft(ticket_id="1001", customer_id="joao@empresa.com", ratings=(4, 5, 5), comment=""):
    ease, process, solution = ratings
    return SurveyDraft(
        ticket_id=ticket_id,
        customer_id=customer_id,
        ease_rating=ease,
        process_rating=process,
        solution_rating=solution,
        comment=comment
    )


@pytest.mark.asyncio
async def test_submit_stores_record(store):
    """Test that a valid draft is stored with id and timestamp assigned."""
    intake = SurveyIntake(store)

    record = await intake.submit(make_draft(ticket_id=" 1001 ", customer_id=" joao@empresa.com ", comment="Great"))

    assert record.ticket_id == "1001"
    assert record.customer_id == "joao@empresa.com"
    assert record.id
    assert record.timestamp
    assert await store.list_all() == [record]


@pytest.mark.asyncio
async def test_ids_are_unique(store):
    intake = SurveyIntake(store)

    first = await intake.submit(make_draft(ticket_id="1001"))
    second = await intake.submit(make_draft(ticket_id="1002"))

    assert first.id != second.id


@pytest.mark.asyncio
async def test_leading_zeros_preserved(store):
    record = await SurveyIntake(store).submit(make_draft(ticket_id="0001"))

    assert record.ticket_id == "0001"


@pytest.mark.asyncio
async def test_duplicate_ticket_rejected(store):
    """Test that a second record for the same ticket is rejected."""
    intake = SurveyIntake(store)
    await intake.submit(make_draft(ticket_id="1001", ratings=(4, 5, 5)))

    with pytest.raises(ValidationError, match="already been rated") as exc_info:
        await intake.submit(make_draft(ticket_id="1001", customer_id="other@client.org", ratings=(1, 1, 1)))

    assert exc_info.value.field == "ticket_id"
    assert len(await store.list_all()) == 1


@pytest.mark.asyncio
async def test_duplicate_ticket_with_whitespace_rejected(store):
    intake = SurveyIntake(store)
    await intake.submit(make_draft(ticket_id="1001"))

    with pytest.raises(ValidationError):
        await intake.submit(make_draft(ticket_id="  1001"))


@pytest.mark.asyncio
@pytest.mark.parametrize("draft, field", [
    (make_draft(ticket_id=""), "ticket_id"),
    (make_draft(ticket_id="   "), "ticket_id"),
    (make_draft(ticket_id="10-01"), "ticket_id"),
    (make_draft(ticket_id="\uff11\uff10\uff10\uff11"), "ticket_id"),
    (make_draft(ticket_id="\u0661\u0660\u0660\u0661"), "ticket_id"),
    (make_draft(customer_id=""), "customer_id"),
    (make_draft(ratings=(0, 5, 5)), "ease_rating"),
    (make_draft(ratings=(4, 0, 5)), "process_rating"),
    (make_draft(ratings=(4, 5, 6)), "solution_rating"),
    (make_draft(ratings=(-1, 5, 5)), "ease_rating"),
    (make_draft(ratings=(True, 5, 5)), "ease_rating"),
])
async def test_invalid_drafts_rejected(store, draft, field):
    """Test that invalid drafts never reach the store."""
    with pytest.raises(ValidationError) as exc_info:
        await SurveyIntake(store).submit(draft)

    assert exc_info.value.field == field
    assert not os.path.exists(store.path)


@pytest.mark.asyncio
async def test_store_failure_propagates():
    """Test that a failed insert is surfaced to the caller."""
    store = Mock()
    store.exists_by_ticket_id = AsyncMock(return_value=False)
    store.insert = AsyncMock(side_effect=StoreWriteError("disk full"))

    with pytest.raises(StoreWriteError):
        await SurveyIntake(store).submit(make_draft())


@pytest.mark.asyncio
async def test_guard_validate(store):
    guard = DuplicateGuard(store)
    await SurveyIntake(store, guard=guard).submit(make_draft(ticket_id="1001"))

    assert await guard.validate("1001") is True
    assert await guard.validate("9999") is False


@pytest.mark.asyncio
async def test_full_width_digits_cannot_duplicate_ticket(store):
    """Test that a look-alike ticket number in non-ASCII digits is rejected."""
    intake = SurveyIntake(store)
    await intake.submit(make_draft(ticket_id="1001"))

    with pytest.raises(ValidationError) as exc_info:
        await intake.submit(make_draft(ticket_id="１００１"))

    assert exc_info.value.field == "ticket_id"
    assert [r.ticket_id for r in await store.list_all()] == ["1001"]
