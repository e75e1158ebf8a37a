"""
Module: core.models.question

Purpose:
    Provides the Question dataclass - a single prompt/answer pair together
    with the response recorded for it during a session - and the three-state
    Grade enumeration.

Key Classes:
    - Grade: UNGRADED / CORRECT / INCORRECT
    - Question: Prompt, expected answer, recorded response
    - GradingError: Raised on an attempt to grade a question twice

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.models.question_set.QuestionSet
    - output.table / output.renderer
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GradingError(Exception):
    """Raised when a question that already has a grade is graded again."""
    pass


class Grade(str, Enum):
    """Grading state of a question."""
    UNGRADED = "ungraded"    # Not yet attempted
    CORRECT = "correct"
    INCORRECT = "incorrect"  # Wrong answer or per-question timeout

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True)
class Question:
    """
    Question with its recorded response.

    ``text`` and ``answer`` never change after load. ``user_answer``,
    ``grade`` and ``timed_out`` are written once, by ``mark()``.

    Attributes:
        text: Prompt shown to the user, e.g. "5+5"
        answer: Expected answer, e.g. "10"
        user_answer: Raw response as typed (terminator stripped)
        grade: Grading state
        timed_out: True when a per-question countdown expired unanswered

    Invariants:
        - grade moves UNGRADED -> CORRECT | INCORRECT exactly once
        - a timed out question is INCORRECT with an empty user_answer

    Example:
        >>> q = Question("5+5", "10")
        >>> q.mark("10", correct=True)
        >>> q.grade
        <Grade.CORRECT: 'correct'>
    """

    text: str
    answer: str
    user_answer: str = ""
    grade: Grade = Grade.UNGRADED
    timed_out: bool = False

    @property
    def is_graded(self) -> bool:
        return self.grade is not Grade.UNGRADED

    def mark(self, user_answer: str, *, correct: bool) -> None:
        """
        Record the response and its verdict.

        Raises:
            GradingError: If the question is already graded
        """
        if self.is_graded:
            raise GradingError(f"Question {self.text!r} is already graded ({self.grade})")
        self.user_answer = user_answer
        self.grade = Grade.CORRECT if correct else Grade.INCORRECT

    def mark_timed_out(self) -> None:
        """Grade the question incorrect because its countdown expired."""
        self.mark("", correct=False)
        self.timed_out = True
