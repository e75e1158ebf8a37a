"""
Module: core.models.question_set

Purpose:
    Ordered collection of Questions plus the tally counters for one quiz
    session. Owned by the session coordinator; the proctor updates it
    through record()/record_timeout() while a session runs.

Key Classes:
    - QuestionSet: Ordered questions, total and correct counts
    - EmptySourceError: Raised when loading zero records

Dependencies:
    - copy (std)
    - .question.Question

Used By:
    - loading.loader: load_question_set()
    - session.proctor / session.coordinator
    - output.scorer / output.table / output.renderer
"""

from __future__ import annotations

import copy
from typing import Iterable, Iterator, List, Tuple

from .question import Grade, Question


class EmptySourceError(Exception):
    """Raised when a question source yields no records."""
    pass


class QuestionSet:
    """
    Ordered questions with tally counters.

    Insertion order is file order and never changes. ``total_count`` is
    fixed at load time; ``correct_count`` only ever increases, once per
    question graded correct.

    Invariants:
        - 0 <= correct_count <= total_count
        - correct_count == number of questions with Grade.CORRECT

    Example:
        >>> qs = QuestionSet.load([("2+2", "4"), ("3+3", "6")])
        >>> qs.record(0, "4", correct=True)
        >>> qs.correct_count, qs.total_count
        (1, 2)
    """

    __slots__ = ("_questions", "_total_count", "_correct_count")

    def __init__(self, questions: List[Question]) -> None:
        self._questions = questions
        self._total_count = len(questions)
        self._correct_count = sum(1 for q in questions if q.grade is Grade.CORRECT)

    @classmethod
    def load(cls, records: Iterable[Tuple[str, str]]) -> QuestionSet:
        """
        Build a QuestionSet from ordered (text, answer) pairs.

        An empty source is rejected rather than producing a zero-question quiz.

        Raises:
            EmptySourceError: If records is empty
        """
        questions = [Question(text, answer) for text, answer in records]
        if not questions:
            raise EmptySourceError("Question source contains no questions")
        return cls(questions)

    # ─────────────────────────────────────────────────────────────────────────
    # Tallies
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def total_count(self) -> int:
        return self._total_count

    @property
    def correct_count(self) -> int:
        return self._correct_count

    @property
    def answered_count(self) -> int:
        """Number of questions that have been graded."""
        return sum(1 for q in self._questions if q.is_graded)

    # ─────────────────────────────────────────────────────────────────────────
    # Mutation (proctor only)
    # ─────────────────────────────────────────────────────────────────────────

    def record(self, index: int, user_answer: str, *, correct: bool) -> None:
        """Grade question ``index`` and bump the tally when correct."""
        self._questions[index].mark(user_answer, correct=correct)
        if correct:
            self._correct_count += 1

    def record_timeout(self, index: int) -> None:
        """Grade question ``index`` incorrect after its countdown expired."""
        self._questions[index].mark_timed_out()

    def snapshot(self) -> QuestionSet:
        """Independent copy; later changes to this set do not affect it."""
        return QuestionSet(copy.deepcopy(self._questions))

    # ─────────────────────────────────────────────────────────────────────────
    # Container protocol
    # ─────────────────────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return self._total_count

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)

    def __getitem__(self, index: int) -> Question:
        return self._questions[index]

    def __repr__(self) -> str:
        return (
            f"QuestionSet(total={self._total_count}, "
            f"answered={self.answered_count}, correct={self._correct_count})"
        )
