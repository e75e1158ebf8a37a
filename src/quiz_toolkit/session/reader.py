"""
Module: session.reader

Purpose:
    Line-oriented answer input with optional per-read countdown, plus the
    pure answer-normalization rule used for grading.

    A daemon pump thread reads the input stream one character at a time and
    queues complete lines, each stamped with the monotonic time its first
    character arrived. read_line() takes lines off that queue, optionally
    racing a Countdown posted onto the same queue and discarding lines that
    started before a given instant.

Key Classes:
    - AnswerReader: Blocking/timed line reads from a text stream
    - AnswerReadError: Input stream closed or broken (session-fatal)

Key Functions:
    - normalize_answer(): Collapse whitespace and case-fold
    - is_correct(): Normalized equality of response and expected answer

Dependencies:
    - threading / queue (std)
    - session.timer.Countdown

Used By:
    - session.proctor: Reading responses
    - quiz_toolkit.cli: "Press [Enter] to start"
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional, TextIO, Union

from .timer import Countdown

logger = logging.getLogger(__name__)


class AnswerReadError(Exception):
    """Raised when the answer stream is closed or cannot be read."""
    pass


def normalize_answer(text: str) -> str:
    """
    Canonical form used to compare answers.

    Whitespace runs collapse to one space, the ends are trimmed and the
    text is case-folded. Both steps commute, so the result does not depend
    on their order. Normalization is textual only: "four" != "4".

    Example:
        >>> normalize_answer("  New   York ")
        'new york'
    """
    return " ".join(text.split()).casefold()


def is_correct(user_answer: str, expected: str) -> bool:
    """Pure verdict: same result for the same pair, every time."""
    return normalize_answer(user_answer) == normalize_answer(expected)


@dataclass(frozen=True)
class _Line:
    text: str
    started_at: float


@dataclass(frozen=True)
class _Expired:
    read_id: int


@dataclass(frozen=True)
class _Closed:
    error: AnswerReadError


_Item = Union[_Line, _Expired, _Closed]


class AnswerReader:
    """
    Reads answers line by line from a text stream.

    The pump thread starts on the first read. Once the stream reports end
    of file or an error, that read and every later read raise
    AnswerReadError.

    A reader serves one proctor at a time. A proctor abandoned mid-read
    stays parked on the queue and will swallow the next line, so a reader
    is not reused after a session times out.

    Usage:
        reader = AnswerReader(sys.stdin)
        text = reader.read_line()                               # block
        text = reader.read_line(timeout=5.0, since=asked_at)    # None on expiry
    """

    def __init__(self, stream: TextIO, *, clock: Callable[[], float] = time.monotonic) -> None:
        self._stream = stream
        self._clock = clock
        self._items: "queue.Queue[_Item]" = queue.Queue()
        self._pump: Optional[threading.Thread] = None
        self._pump_lock = threading.Lock()
        self._read_id = 0
        self._closed: Optional[AnswerReadError] = None

    def now(self) -> float:
        """Current time on the clock used to stamp lines."""
        return self._clock()

    def start(self) -> None:
        """Start the pump thread if it is not running yet."""
        with self._pump_lock:
            if self._pump is None:
                self._pump = threading.Thread(
                    target=self._pump_stream, name="answer-reader", daemon=True
                )
                self._pump.start()

    def read_line(
        self,
        *,
        timeout: Optional[float] = None,
        since: Optional[float] = None,
    ) -> Optional[str]:
        """
        Return the next line, terminator and surrounding whitespace removed.

        Args:
            timeout: Seconds to wait before giving up (None = wait forever)
            since: Discard lines whose first character arrived before this
                instant (clock of now())

        Returns:
            The line, or None if ``timeout`` expired first

        Raises:
            AnswerReadError: If the stream is closed or broken
        """
        if self._closed is not None:
            raise self._closed
        self.start()

        self._read_id += 1
        read_id = self._read_id
        countdown = None
        if timeout is not None:
            countdown = Countdown(timeout, self._items, _Expired(read_id))
            countdown.start()

        try:
            while True:
                item = self._items.get()
                if isinstance(item, _Expired):
                    if item.read_id == read_id:
                        return None
                    continue  # left over from an earlier read that was answered
                if isinstance(item, _Closed):
                    self._closed = item.error
                    raise item.error
                if since is not None and item.started_at < since:
                    logger.debug(f"Discarding stale input {item.text!r}")
                    continue
                return item.text.strip()
        finally:
            if countdown is not None:
                countdown.cancel()

    def _pump_stream(self) -> None:
        buffer: list[str] = []
        started_at: Optional[float] = None
        try:
            while True:
                char = self._stream.read(1)
                if not char:
                    break
                if started_at is None:
                    started_at = self._clock()
                if char == "\n":
                    self._items.put(_Line("".join(buffer).rstrip("\r"), started_at))
                    buffer = []
                    started_at = None
                else:
                    buffer.append(char)
        except (OSError, ValueError) as e:
            logger.error(f"Answer stream failed: {e}")
            self._items.put(_Closed(AnswerReadError(f"Failed to read answer: {e}")))
            return

        if buffer:
            self._items.put(_Line("".join(buffer), started_at))
        logger.debug("Answer stream reached end of file")
        self._items.put(_Closed(AnswerReadError("Input stream closed before an answer was given")))
