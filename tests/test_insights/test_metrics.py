"""
Unit tests for dashboard metrics and filtering.
"""

import pytest

from tickettrack.insights.metrics import compute_metrics, filter_records, recent_entries
from tickettrack.models.survey import SurveyRecord


def make_record(index: int, ticket_id: str, ratings, customer_id="user@example.com", comment=""):
    ease, process, solution = ratings
    return SurveyRecord(
        id=f"id-{index}",
        ticket_id=ticket_id,
        customer_id=customer_id,
        ease_rating=ease,
        process_rating=process,
        solution_rating=solution,
        comment=comment,
        timestamp=f"2024-06-{index + 1:02d}T08:00:00+00:00"
    )


@pytest.fixture
def scenario_records():
    return [
        make_record(0, "1001", (4, 5, 5), customer_id="joao@empresa.com", comment="Technician on time"),
        make_record(1, "1024", (2, 3, 4), customer_id="maria.s@client.org", comment="Confusing form"),
        make_record(2, "1035", (5, 5, 5), customer_id="admin@tech.net", comment="Perfect process"),
    ]


def test_compute_metrics(scenario_records):
    """Test averages for the three-record scenario."""
    metrics = compute_metrics(scenario_records)

    assert metrics.total == 3
    assert metrics.avg_ease == pytest.approx(3.67, abs=0.005)
    assert metrics.avg_process == pytest.approx(13 / 3)
    assert metrics.avg_solution == pytest.approx(14 / 3)
    assert metrics.overall == pytest.approx(38 / 9)
    assert [p.ticket_id for p in metrics.recent_trend] == ["1001", "1024", "1035"]


def test_compute_metrics_empty():
    metrics = compute_metrics([])

    assert metrics.total == 0
    assert metrics.avg_ease == 0.0
    assert metrics.recent_trend == []


def test_trend_window_keeps_latest():
    """Test that the trend only covers the most recent records."""
    records = [make_record(i, str(2000 + i), (3, 3, 3)) for i in range(12)]

    metrics = compute_metrics(records, trend_window=10)

    assert len(metrics.recent_trend) == 10
    assert metrics.recent_trend[0].ticket_id == "2002"
    assert metrics.recent_trend[-1].ticket_id == "2011"
    assert metrics.total == 12


def test_metrics_to_dict(scenario_records):
    data = compute_metrics(scenario_records).to_dict()

    assert data["avgEase"] == 3.67
    assert data["recentTrend"][1] == {"ticketId": "1024", "ease": 2, "process": 3, "solution": 4}


def test_recent_entries_newest_first(scenario_records):
    recent = recent_entries(scenario_records, limit=2)

    assert [r.ticket_id for r in recent] == ["1035", "1024"]
    assert recent_entries(scenario_records, limit=0) == []


def test_filter_by_search(scenario_records):
    assert [r.ticket_id for r in filter_records(scenario_records, search="CONFUSING")] == ["1024"]
    assert [r.ticket_id for r in filter_records(scenario_records, search="tech.net")] == ["1035"]
    assert [r.ticket_id for r in filter_records(scenario_records, search="100")] == ["1001"]


def test_filter_by_rating(scenario_records):
    low = filter_records(scenario_records, max_rating=3.0)
    high = filter_records(scenario_records, min_rating=4.5)

    assert [r.ticket_id for r in low] == ["1024"]
    assert [r.ticket_id for r in high] == ["1001", "1035"]


def test_filter_without_criteria_returns_all(scenario_records):
    assert filter_records(scenario_records) == scenario_records
