"""
Dashboard metrics.

Aggregates the record collection into the numbers the admin view shows:
totals, per-dimension averages and a recent-window trend.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import pandas as pd

from tickettrack.models.survey import SurveyRecord, RATING_FIELDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrendPoint:
    """Ratings of one recent record, for the trend chart."""
    ticket_id: str
    ease: int
    process: int
    solution: int


@dataclass
class SurveyMetrics:
    total: int = 0
    avg_ease: float = 0.0
    avg_process: float = 0.0
    avg_solution: float = 0.0
    overall: float = 0.0  # Mean of the three dimension averages
    recent_trend: List[TrendPoint] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "avgEase": round(self.avg_ease, 2),
            "avgProcess": round(self.avg_process, 2),
            "avgSolution": round(self.avg_solution, 2),
            "overall": round(self.overall, 2),
            "recentTrend": [
                {"ticketId": p.ticket_id, "ease": p.ease, "process": p.process, "solution": p.solution}
                for p in self.recent_trend
            ]
        }


def records_to_frame(records: Sequence[SurveyRecord]) -> pd.DataFrame:
    """Build a DataFrame with one row per record, in collection order."""
    if not records:
        return pd.DataFrame(columns=list(SurveyRecord.__dataclass_fields__))
    return pd.DataFrame([r.to_row() for r in records])


def compute_metrics(records: Sequence[SurveyRecord], trend_window: int = 10) -> SurveyMetrics:
    """
    Compute dashboard metrics.

    Args:
        records: Full record collection, in collection order
        trend_window: Number of most recent records in the trend series

    Returns:
        SurveyMetrics (all zeros for an empty collection)
    """
    if not records:
        logger.debug("No records, returning empty metrics")
        return SurveyMetrics()

    df = records_to_frame(records)
    means = df[list(RATING_FIELDS)].mean()

    recent = df.tail(trend_window)
    trend = [
        TrendPoint(
            ticket_id=row.ticket_id,
            ease=int(row.ease_rating),
            process=int(row.process_rating),
            solution=int(row.solution_rating)
        )
        for row in recent.itertuples(index=False)
    ]

    metrics = SurveyMetrics(
        total=len(df),
        avg_ease=float(means["ease_rating"]),
        avg_process=float(means["process_rating"]),
        avg_solution=float(means["solution_rating"]),
        overall=float(means.mean()),
        recent_trend=trend
    )

    logger.info(
        f"Computed metrics over {metrics.total} records "
        f"(ease={metrics.avg_ease:.2f}, process={metrics.avg_process:.2f}, "
        f"solution={metrics.avg_solution:.2f})"
    )
    return metrics


def recent_entries(records: Sequence[SurveyRecord], limit: int = 5) -> List[SurveyRecord]:
    """Return the last `limit` records, newest first."""
    if limit <= 0:
        return []
    return list(reversed(records[-limit:]))


def filter_records(
    records: Sequence[SurveyRecord],
    search: Optional[str] = None,
    min_rating: Optional[float] = None,
    max_rating: Optional[float] = None
) -> List[SurveyRecord]:
    """
    Select the records visible in the dashboard table.

    Args:
        records: Full record collection
        search: Case-insensitive substring over ticket id, customer id and comment
        min_rating: Lower bound (inclusive) on a record's average rating
        max_rating: Upper bound (inclusive) on a record's average rating

    Returns:
        Matching records, collection order preserved
    """
    needle = search.strip().lower() if search else ""

    visible = []
    for record in records:
        if needle:
            haystack = f"{record.ticket_id}\n{record.customer_id}\n{record.comment}".lower()
            if needle not in haystack:
                continue

        avg = record.average_rating
        if min_rating is not None and avg < min_rating:
            continue
        if max_rating is not None and avg > max_rating:
            continue

        visible.append(record)

    return visible
