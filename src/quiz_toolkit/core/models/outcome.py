"""
Module: core.models.outcome

Purpose:
    Terminal result of a quiz session: how it ended and the QuestionSet as
    it stood at that moment.

Key Classes:
    - SessionStatus: COMPLETED / TIMED_OUT
    - SessionOutcome: Status + question set snapshot

Used By:
    - session.coordinator: run_session()
    - output.renderer / cli
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .question_set import QuestionSet


class SessionStatus(str, Enum):
    """How a session ended. A timeout is a valid outcome, not an error."""
    COMPLETED = "completed"
    TIMED_OUT = "timed_out"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SessionOutcome:
    """
    Result of a session (immutable).

    Attributes:
        status: How the session ended
        question_set: Snapshot taken at resolution; partially graded when
            status is TIMED_OUT
        elapsed: Wall-clock seconds from start to resolution
    """
    status: SessionStatus
    question_set: QuestionSet
    elapsed: float = 0.0

    @property
    def timed_out(self) -> bool:
        return self.status is SessionStatus.TIMED_OUT
