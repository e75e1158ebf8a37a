"""
Core Models Package

Question data shared by loading, session and output.

Unlike the rest of the package these models are mutable: a Question
records its response exactly once during a session, and the QuestionSet
keeps the tally. Everything handed to reporting is a snapshot.
"""

from .question import Grade, GradingError, Question
from .question_set import EmptySourceError, QuestionSet
from .outcome import SessionOutcome, SessionStatus

__all__ = [
    "Grade",
    "GradingError",
    "Question",
    "EmptySourceError",
    "QuestionSet",
    "SessionOutcome",
    "SessionStatus",
]
