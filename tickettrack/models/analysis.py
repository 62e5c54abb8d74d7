"""
Analysis result data model.

Structured output of the Gemini summarizer. Displayed, never stored.
"""

from dataclasses import dataclass, field
from typing import List

SENTIMENTS = ("Positive", "Neutral", "Negative")

FALLBACK_SUMMARY = (
    "AI analysis is not available right now. Check the API key and try again."
)


@dataclass
class AnalysisResult:
    """Executive summary of recent survey responses."""
    overall_sentiment: str  # "Positive", "Neutral", or "Negative"
    summary: str
    pain_points: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)

    def __post_init__(self):
        if self.overall_sentiment not in SENTIMENTS:
            raise ValueError(
                f"Invalid sentiment: {self.overall_sentiment}. Must be one of {', '.join(SENTIMENTS)}"
            )

    @classmethod
    def neutral(cls, summary: str = FALLBACK_SUMMARY) -> "AnalysisResult":
        """Default result used whenever the model output is unusable."""
        return cls(overall_sentiment="Neutral", summary=summary)

    @classmethod
    def from_dict(cls, data: dict) -> "AnalysisResult":
        """
        Create AnalysisResult from the model's JSON reply.

        Raises:
            KeyError: If a required field is missing
            ValueError: If the sentiment or list fields are invalid
        """
        pain_points = data["painPoints"]
        recommendations = data["recommendations"]
        if not isinstance(pain_points, list) or not isinstance(recommendations, list):
            raise ValueError("painPoints and recommendations must be lists")

        return cls(
            overall_sentiment=data["overallSentiment"],
            summary=str(data["summary"]),
            pain_points=[str(p) for p in pain_points],
            recommendations=[str(r) for r in recommendations]
        )

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "overallSentiment": self.overall_sentiment,
            "summary": self.summary,
            "painPoints": self.pain_points,
            "recommendations": self.recommendations
        }
