"""
Survey intake.

Validates form submissions and writes accepted records to the store.
"""

from tickettrack.intake.duplicate_guard import DuplicateGuard
from tickettrack.intake.intake import SurveyIntake, ValidationError

__all__ = ["DuplicateGuard", "SurveyIntake", "ValidationError"]
