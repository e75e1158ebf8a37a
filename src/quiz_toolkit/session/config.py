"""
Module: session.config

Purpose:
    Configuration for a quiz session: time budget, timer policy and
    question order. Immutable configuration with validation on construction.

Key Classes:
    - TimerPolicy: GLOBAL / PER_QUESTION countdown
    - QuestionOrder: SEQUENTIAL / RANDOMIZED presentation
    - SessionConfig: Main configuration for running a session

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - session.coordinator: run_session()
    - quiz_toolkit.cli: Built from command line arguments
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TimerPolicy(Enum):
    """
    Where the time budget applies.

    Attributes:
        GLOBAL: One countdown for the whole session. On expiry the session
                is abandoned and scored with whatever was answered.
        PER_QUESTION: A fresh countdown for each question. A miss grades
                      that question incorrect and the session moves on.
    """

    GLOBAL = "global"
    PER_QUESTION = "per-question"

    @classmethod
    def from_string(cls, value: str) -> TimerPolicy:
        normalized = value.strip().lower().replace("_", "-")
        for policy in cls:
            if policy.value == normalized:
                return policy
        raise ValueError(f"Unknown timer policy: {value!r}")


class QuestionOrder(Enum):
    """
    Presentation order.

    Attributes:
        SEQUENTIAL: File order
        RANDOMIZED: Uniform draw without replacement
    """

    SEQUENTIAL = "sequential"
    RANDOMIZED = "randomized"

    @classmethod
    def from_flag(cls, shuffle: bool) -> QuestionOrder:
        return cls.RANDOMIZED if shuffle else cls.SEQUENTIAL


@dataclass(frozen=True)
class SessionConfig:
    """
    Configuration for one quiz session (immutable).

    Attributes:
        duration: Seconds allowed; for the whole session (GLOBAL) or for each
            question (PER_QUESTION)
        timer_policy: Where the budget applies
        order: Presentation order
        seed: Random seed for RANDOMIZED order (None = unseeded)

    Invariants:
        - duration > 0

    Example:
        >>> config = SessionConfig(duration=30.0)
        >>> config.timer_policy
        <TimerPolicy.GLOBAL: 'global'>
    """

    duration: float
    timer_policy: TimerPolicy = TimerPolicy.GLOBAL
    order: QuestionOrder = QuestionOrder.SEQUENTIAL
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.duration <= 0:
            raise ValueError(f"duration must be positive: {self.duration}")
        if not isinstance(self.timer_policy, TimerPolicy):
            raise ValueError(f"timer_policy must be a TimerPolicy: {self.timer_policy!r}")
        if not isinstance(self.order, QuestionOrder):
            raise ValueError(f"order must be a QuestionOrder: {self.order!r}")

    @property
    def per_question_limit(self) -> Optional[float]:
        """Countdown for each question, or None under the global policy."""
        if self.timer_policy is TimerPolicy.PER_QUESTION:
            return self.duration
        return None
