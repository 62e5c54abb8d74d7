"""
Unit tests for SurveyRecord and AnalysisResult.
"""

import pytest

from tickettrack.models.analysis import AnalysisResult, FALLBACK_SUMMARY
from tickettrack.models.survey import SurveyRecord


def _record() -> SurveyRecord:
    return SurveyRecord(
        id="abc123",
        ticket_id="0042",
        customer_id="ana@startup.io",
        ease_rating=3,
        process_rating=4,
        solution_rating=5,
        comment="Scheduling took too long.",
        timestamp="2024-06-01T10:00:00+00:00"
    )


def test_survey_record_serialization():
    """Test SurveyRecord to/from dict conversion."""
    record = _record()

    data = record.to_dict()
    assert data["ticketId"] == "0042"
    assert data["easeRating"] == 3
    assert data["timestamp"] == "2024-06-01T10:00:00+00:00"

    restored = SurveyRecord.from_dict(data)
    assert restored == record


def test_survey_record_missing_comment_defaults_to_empty():
    """Test that records without a comment load with an empty comment."""
    data = _record().to_dict()
    del data["comment"]

    assert SurveyRecord.from_dict(data).comment == ""


def test_survey_record_missing_field():
    """Test that a record without a required field is rejected."""
    data = _record().to_dict()
    del data["ticketId"]

    with pytest.raises(KeyError):
        SurveyRecord.from_dict(data)


def test_survey_record_is_immutable():
    """Test that stored records cannot be modified."""
    record = _record()

    with pytest.raises(AttributeError):
        record.comment = "edited"


def test_average_rating():
    assert _record().average_rating == pytest.approx(4.0)


def test_analysis_result_validation():
    """Test AnalysisResult sentiment validation."""
    result = AnalysisResult(overall_sentiment="Negative", summary="Bad scheduling")
    assert result.pain_points == []

    with pytest.raises(ValueError):
        AnalysisResult(overall_sentiment="Negativo", summary="...")


def test_analysis_result_from_dict():
    result = AnalysisResult.from_dict({
        "overallSentiment": "Positive",
        "summary": "Customers are happy.",
        "painPoints": ["Slow scheduling"],
        "recommendations": ["Add online booking"]
    })

    assert result.overall_sentiment == "Positive"
    assert result.pain_points == ["Slow scheduling"]
    assert result.to_dict()["recommendations"] == ["Add online booking"]


def test_analysis_result_rejects_non_list_findings():
    with pytest.raises(ValueError):
        AnalysisResult.from_dict({
            "overallSentiment": "Neutral",
            "summary": "...",
            "painPoints": "Slow scheduling",
            "recommendations": []
        })


def test_neutral_result():
    result = AnalysisResult.neutral()

    assert result.overall_sentiment == "Neutral"
    assert result.summary == FALLBACK_SUMMARY
    assert result.pain_points == []
    assert result.recommendations == []


@pytest.mark.parametrize("key, value", [
    ("easeRating", 4.7),
    ("processRating", True),
    ("solutionRating", "5"),
    ("easeRating", None),
])
def test_survey_record_rejects_non_integer_rating(key, value):
    """Test that ratings are read as stored, never coerced."""
    data = _record().to_dict()
    data[key] = value

    with pytest.raises(ValueError, match=key):
        SurveyRecord.from_dict(data)
