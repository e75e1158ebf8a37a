"""
Quiz Toolkit Core Package

Shared data models and the question bank schema.
"""

from .models import (
    Grade,
    GradingError,
    Question,
    EmptySourceError,
    QuestionSet,
    SessionOutcome,
    SessionStatus,
)

__all__ = [
    "Grade",
    "GradingError",
    "Question",
    "EmptySourceError",
    "QuestionSet",
    "SessionOutcome",
    "SessionStatus",
]
