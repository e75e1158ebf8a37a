"""
Module: session.proctor

Purpose:
    Present questions one at a time, read a response for each, and record
    the verdicts in the QuestionSet. Runs on its own thread and reports back
    through a queue with exactly one terminal signal.

Key Functions:
    - presentation_order(): Sequential or draw-without-replacement indices

Key Classes:
    - Proctor: Question/answer loop with a stop gate
    - Signal / SignalKind: Events posted to the coordinator

Dependencies:
    - random / threading / queue (std)
    - session.reader: AnswerReader, is_correct
    - core.models: QuestionSet

Used By:
    - session.coordinator: run_session()
"""

from __future__ import annotations

import logging
import queue
import random
import sys
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, TextIO

from quiz_toolkit.core.models import QuestionSet

from .config import QuestionOrder
from .reader import AnswerReader, AnswerReadError, is_correct

logger = logging.getLogger(__name__)


class SignalKind(Enum):
    DONE = "done"        # Proctor presented and graded every question
    EXPIRED = "expired"  # Session countdown ran out
    FAILED = "failed"    # Answer stream broke


@dataclass(frozen=True)
class Signal:
    """Event posted to the coordinator's queue."""
    kind: SignalKind
    error: Optional[AnswerReadError] = None


def presentation_order(
    count: int,
    order: QuestionOrder,
    rng: Optional[random.Random] = None,
) -> Iterator[int]:
    """
    Yield question indices in presentation order.

    RANDOMIZED picks uniformly among the questions not yet presented and
    removes the pick from the pool, so every index appears exactly once and
    the pool shrinks by one per step.

    Example:
        >>> list(presentation_order(3, QuestionOrder.SEQUENTIAL))
        [0, 1, 2]
        >>> sorted(presentation_order(3, QuestionOrder.RANDOMIZED, random.Random(7)))
        [0, 1, 2]
    """
    if order is QuestionOrder.SEQUENTIAL:
        yield from range(count)
        return

    rng = rng or random.Random()
    remaining = list(range(count))
    while remaining:
        yield remaining.pop(rng.randrange(len(remaining)))


class Proctor:
    """
    Asks each question once and records the response.

    The proctor is the only writer of the QuestionSet while a session runs.
    Every write goes through a gate: after stop(), a response that arrives
    late is dropped and the set is left untouched, so whoever called stop()
    can read the set without racing the proctor.

    Attributes:
        presented: Question indices in the order they were asked
    """

    def __init__(
        self,
        question_set: QuestionSet,
        reader: AnswerReader,
        *,
        order: QuestionOrder = QuestionOrder.SEQUENTIAL,
        rng: Optional[random.Random] = None,
        per_question_limit: Optional[float] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self._set = question_set
        self._reader = reader
        self._order = order
        self._rng = rng
        self._limit = per_question_limit
        self._out = out
        self._gate = threading.Lock()
        self._stopped = False
        self.presented: List[int] = []

    def run(self, channel: "queue.Queue[Signal]") -> None:
        """
        Ask every question, then post one DONE signal.

        A broken input stream posts FAILED instead and stops immediately.
        A stopped proctor posts nothing.
        """
        try:
            for number, index in enumerate(
                presentation_order(self._set.total_count, self._order, self._rng), start=1
            ):
                if self.stopped:
                    return
                self._ask(number, index)
        except AnswerReadError as e:
            logger.warning(f"Proctor aborted: {e}")
            channel.put(Signal(SignalKind.FAILED, error=e))
            return

        if self.stopped:
            return
        logger.debug(f"Proctor finished {len(self.presented)} questions")
        channel.put(Signal(SignalKind.DONE))

    def stop(self) -> None:
        """Close the gate; no further writes reach the QuestionSet."""
        with self._gate:
            self._stopped = True

    @property
    def stopped(self) -> bool:
        with self._gate:
            return self._stopped

    def _ask(self, number: int, index: int) -> None:
        question = self._set[index]
        self._print(f"Question {number}: {question.text} = ", end="")
        asked_at = self._reader.now()
        self.presented.append(index)

        if self._limit is None:
            response = self._reader.read_line()
        else:
            response = self._reader.read_line(timeout=self._limit, since=asked_at)

        with self._gate:
            if self._stopped:
                logger.debug(f"Dropping response to question {number} after stop")
                return
            if response is None:
                self._set.record_timeout(index)
                verdict = None
            else:
                verdict = is_correct(response, question.answer)
                self._set.record(index, response, correct=verdict)

        if verdict is None:
            self._print("\tTime's up!")
        elif verdict:
            self._print("\tCorrect!")
        else:
            self._print("\tIncorrect.")

    def _print(self, text: str, end: str = "\n") -> None:
        out = self._out or sys.stdout
        out.write(text + end)
        out.flush()
