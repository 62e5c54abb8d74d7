"""Data models for TicketTrack."""

from tickettrack.models.survey import SurveyRecord, SurveyDraft, RATING_FIELDS
from tickettrack.models.analysis import AnalysisResult, SENTIMENTS

__all__ = ["SurveyRecord", "SurveyDraft", "RATING_FIELDS", "AnalysisResult", "SENTIMENTS"]
