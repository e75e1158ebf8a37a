import sys
import threading
import time
from pathlib import Path
from typing import Iterable, Optional, Tuple

import pytest

# Add src to sys.path so we can import quiz_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


class ScriptedStream:
    """
    Text stream that delivers chunks after delays.

    Each (delay, text) chunk is released ``delay`` seconds after the reader
    asks for it, i.e. after the previous chunk was fully consumed. When the
    script runs out the stream either ends (EOF), stalls until release(),
    or raises ``fail_with``.
    """

    def __init__(
        self,
        chunks: Iterable[Tuple[float, str]] = (),
        *,
        stall: bool = False,
        fail_with: Optional[Exception] = None,
    ) -> None:
        self._chunks = list(chunks)
        self._pending = ""
        self._stall = stall
        self._fail_with = fail_with
        self._released = threading.Event()

    def read(self, size: int = -1) -> str:
        if not self._pending:
            if not self._chunks:
                if self._fail_with is not None:
                    raise self._fail_with
                if self._stall:
                    self._released.wait()
                return ""
            delay, text = self._chunks.pop(0)
            if delay:
                time.sleep(delay)
            self._pending = text
        char, self._pending = self._pending[0], self._pending[1:]
        return char

    def release(self) -> None:
        self._released.set()


# Common test fixtures
@pytest.fixture
def arithmetic_records():
    """The two-question bank used throughout the examples."""
    return [("2+2", "4"), ("3+3", "6")]


@pytest.fixture
def arithmetic_set(arithmetic_records):
    from quiz_toolkit.core.models import QuestionSet
    return QuestionSet.load(arithmetic_records)


@pytest.fixture
def scripted_stream():
    """Factory for ScriptedStream; stalled streams are released on teardown."""
    streams = []

    def _make(chunks=(), **kwargs) -> ScriptedStream:
        stream = ScriptedStream(chunks, **kwargs)
        streams.append(stream)
        return stream

    yield _make
    for stream in streams:
        stream.release()


@pytest.fixture
def problems_csv(tmp_path: Path) -> Path:
    path = tmp_path / "problems.csv"
    path.write_text("2+2,4\n3+3,6\n", encoding="utf-8")
    return path
