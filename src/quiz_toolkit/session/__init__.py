"""
Module: session

Purpose:
    The timed answer-collection protocol. A proctor thread asks questions
    and records answers while a countdown races it; the coordinator takes
    the first signal and returns the outcome.

Key Functions:
    - run_session(): Run a quiz session and return its outcome
    - presentation_order(): Sequential / randomized question order
    - normalize_answer(), is_correct(): Answer comparison

Key Classes:
    - SessionConfig, TimerPolicy, QuestionOrder: Configuration
    - AnswerReader, AnswerReadError: Response input
    - Countdown: Cancelable one-shot timer
    - Proctor: Question/answer loop

Used By:
    - quiz_toolkit.cli
"""

from .config import SessionConfig, TimerPolicy, QuestionOrder
from .reader import AnswerReader, AnswerReadError, normalize_answer, is_correct
from .timer import Countdown
from .proctor import Proctor, Signal, SignalKind, presentation_order
from .coordinator import run_session

__all__ = [
    # Config
    "SessionConfig",
    "TimerPolicy",
    "QuestionOrder",
    # Input
    "AnswerReader",
    "AnswerReadError",
    "normalize_answer",
    "is_correct",
    # Timing
    "Countdown",
    # Proctoring
    "Proctor",
    "Signal",
    "SignalKind",
    "presentation_order",
    # Coordinator
    "run_session",
]
