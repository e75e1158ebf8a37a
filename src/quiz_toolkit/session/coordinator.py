"""
Module: session.coordinator

Purpose:
    Run one quiz session: start the proctor and (under the global policy)
    the session countdown, take whichever signal arrives first, and return
    the outcome with a snapshot of the QuestionSet.

    GLOBAL:       Countdown ─┐
                             ├─> queue ─> first signal decides, once
                  Proctor  ──┘
    PER_QUESTION: Proctor races a countdown per read; the session ends
                  when every question is resolved.

Key Functions:
    - run_session(): Main entry point

Dependencies:
    - threading / queue / time (std)
    - session.proctor: Proctor, Signal
    - session.timer: Countdown

Used By:
    - quiz_toolkit.cli
"""

from __future__ import annotations

import logging
import queue
import random
import threading
import time
from typing import Optional, TextIO

from quiz_toolkit.core.models import QuestionSet, SessionOutcome, SessionStatus

from .config import SessionConfig, TimerPolicy
from .proctor import Proctor, Signal, SignalKind
from .reader import AnswerReader
from .timer import Countdown

logger = logging.getLogger(__name__)


def run_session(
    question_set: QuestionSet,
    reader: AnswerReader,
    config: SessionConfig,
    *,
    out: Optional[TextIO] = None,
) -> SessionOutcome:
    """
    Run a quiz session to completion or timeout.

    The first signal taken off the queue decides the outcome and nothing
    after it can change that decision. Simultaneous signals resolve in the
    order they were enqueued: if the countdown posted before the proctor's
    DONE, the session is TIMED_OUT even when every question was graded.

    Under the global policy the proctor is stopped by the countdown itself,
    at the instant of expiry and before EXPIRED is posted. No answer
    received after the deadline is graded, however late the coordinator
    gets to run. The proctor's in-flight read is abandoned (the thread is a
    daemon and never joined) and any response it later receives is dropped.

    Args:
        question_set: Questions to ask; graded in place
        reader: Source of responses
        config: Time budget, timer policy and order
        out: Where prompts are written (default sys.stdout)

    Returns:
        SessionOutcome holding a snapshot of the graded set

    Raises:
        AnswerReadError: If the answer stream breaks (session aborted)

    Example:
        >>> outcome = run_session(qs, AnswerReader(sys.stdin), SessionConfig(duration=30))
        >>> outcome.status
        <SessionStatus.COMPLETED: 'completed'>
    """
    rng = random.Random(config.seed) if config.seed is not None else None
    proctor = Proctor(
        question_set,
        reader,
        order=config.order,
        rng=rng,
        per_question_limit=config.per_question_limit,
        out=out,
    )
    events: "queue.Queue[Signal]" = queue.Queue()

    countdown = None
    if config.timer_policy is TimerPolicy.GLOBAL:
        countdown = Countdown(
            config.duration, events, Signal(SignalKind.EXPIRED), on_expire=proctor.stop
        )

    logger.info(
        f"Starting session: {question_set.total_count} questions, "
        f"{config.duration:g}s {config.timer_policy.value}, {config.order.value}"
    )
    start_time = time.perf_counter()

    worker = threading.Thread(target=proctor.run, args=(events,), name="proctor", daemon=True)
    if countdown is not None:
        countdown.start()
    worker.start()

    try:
        signal = events.get()
    finally:
        if countdown is not None:
            countdown.cancel()

    # Close the gate before reading the set; the proctor can no longer write.
    proctor.stop()
    elapsed = time.perf_counter() - start_time

    if signal.kind is SignalKind.FAILED:
        logger.error(f"Session aborted after {elapsed:.2f}s: {signal.error}")
        raise signal.error

    if signal.kind is SignalKind.EXPIRED:
        status = SessionStatus.TIMED_OUT
    else:
        status = SessionStatus.COMPLETED
        worker.join()

    snapshot = question_set.snapshot()
    logger.info(
        f"Session {status.value} after {elapsed:.2f}s: "
        f"{snapshot.answered_count}/{snapshot.total_count} answered, "
        f"{snapshot.correct_count} correct"
    )
    return SessionOutcome(status=status, question_set=snapshot, elapsed=elapsed)
