"""
Survey record data model.

Represents one submitted evaluation of a support ticket.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any

# Rating dimensions, in display order
RATING_FIELDS = ("ease_rating", "process_rating", "solution_rating")


def _read_rating(data: Dict[str, Any], key: str) -> int:
    """
    Read a rating field exactly as stored.

    Raises:
        KeyError: If the field is missing
        ValueError: If the value is not a plain integer (no coercion)
    """
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    return value


@dataclass(frozen=True)
class SurveyDraft:
    """
    What the survey form produces before the record is stored.
    Has no id or timestamp yet; intake assigns both.
    """
    ticket_id: str
    customer_id: str
    ease_rating: int = 0  # 0 = unset
    process_rating: int = 0
    solution_rating: int = 0
    comment: str = ""


@dataclass(frozen=True)
class SurveyRecord:
    """
    A stored survey submission.

    Records are immutable once stored: there is no update operation,
    only insert and delete.
    """
    id: str  # Opaque unique id, used for targeted delete
    ticket_id: str  # Support ticket being rated (one record per ticket)
    customer_id: str  # Email or name of the submitter
    ease_rating: int  # Ease of opening the ticket (1-5)
    process_rating: int  # Routing and scheduling (1-5)
    solution_rating: int  # Technical resolution (1-5)
    comment: str  # Optional free text, "" when absent
    timestamp: str  # ISO-8601 creation time

    @property
    def ratings(self) -> tuple:
        return (self.ease_rating, self.process_rating, self.solution_rating)

    @property
    def average_rating(self) -> float:
        return sum(self.ratings) / len(self.ratings)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SurveyRecord":
        """
        Create SurveyRecord from its JSON form.

        Raises:
            KeyError: If a required field is missing
            ValueError: If a rating is not an integer
        """
        return cls(
            id=str(data["id"]),
            ticket_id=str(data["ticketId"]),
            customer_id=str(data["customerId"]),
            ease_rating=_read_rating(data, "easeRating"),
            process_rating=_read_rating(data, "processRating"),
            solution_rating=_read_rating(data, "solutionRating"),
            comment=data.get("comment") or "",
            timestamp=str(data["timestamp"])
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase JSON form used on disk and on the wire."""
        return {
            "id": self.id,
            "ticketId": self.ticket_id,
            "customerId": self.customer_id,
            "easeRating": self.ease_rating,
            "processRating": self.process_rating,
            "solutionRating": self.solution_rating,
            "comment": self.comment,
            "timestamp": self.timestamp
        }

    def to_row(self) -> Dict[str, Any]:
        """Flat snake_case dict, used for DataFrame construction."""
        return asdict(self)
