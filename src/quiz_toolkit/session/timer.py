"""
Module: session.timer

Purpose:
    Cancelable one-shot countdown. After its duration elapses it runs an
    optional expiry hook and posts a single event onto a queue; the listener
    on that queue decides what the expiry means.

Key Classes:
    - Countdown: threading.Timer wrapper posting onto a queue.Queue

Dependencies:
    - threading (std)
    - queue (std)

Used By:
    - session.coordinator: Global session countdown
    - session.reader: Per-question countdown raced against one read
"""

from __future__ import annotations

import logging
import queue
import threading
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class Countdown:
    """
    One-shot countdown posting ``event`` onto ``channel`` on expiry.

    Emits at most one event. ``cancel()`` is idempotent; cancelling after
    expiry is a no-op and cannot take back an event already posted.

    ``on_expire`` runs on the timer thread at the instant of expiry, before
    the event is posted and while a concurrent ``cancel()`` is held off. A
    listener uses it to act on the deadline without waiting to be scheduled.

    Usage:
        events: queue.Queue = queue.Queue()
        countdown = Countdown(30.0, events, "expired", on_expire=proctor.stop)
        countdown.start()
        try:
            ...
        finally:
            countdown.cancel()

    Attributes:
        duration: Seconds until expiry
        expired: True once the countdown has fired
    """

    def __init__(
        self,
        duration: float,
        channel: "queue.Queue[Any]",
        event: Any,
        *,
        on_expire: Optional[Callable[[], None]] = None,
    ) -> None:
        if duration <= 0:
            raise ValueError(f"duration must be positive: {duration}")
        self.duration = duration
        self._channel = channel
        self._event = event
        self._on_expire = on_expire
        self._lock = threading.Lock()
        self._fired = False
        self._cancelled = False
        self._timer: Optional[threading.Timer] = None

    @property
    def expired(self) -> bool:
        with self._lock:
            return self._fired

    def start(self) -> None:
        """Start counting down. A countdown can only be started once."""
        if self._timer is not None:
            raise RuntimeError("Countdown already started")
        self._timer = threading.Timer(self.duration, self._fire)
        self._timer.daemon = True
        self._timer.start()
        logger.debug(f"Countdown started ({self.duration:.3f}s)")

    def cancel(self) -> None:
        """Stop the countdown if it has not fired yet."""
        with self._lock:
            if self._fired or self._cancelled:
                return
            self._cancelled = True
        if self._timer is not None:
            self._timer.cancel()
        logger.debug("Countdown cancelled")

    def _fire(self) -> None:
        with self._lock:
            if self._cancelled:
                return
            self._fired = True
            if self._on_expire is not None:
                self._on_expire()
        logger.debug(f"Countdown expired after {self.duration:.3f}s")
        self._channel.put(self._event)
