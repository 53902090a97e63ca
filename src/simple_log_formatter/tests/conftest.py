"""Shared fixtures: in-memory sinks and a clean configuration per test."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator

import pytest

from simple_log_formatter import SinkHandler, clear_settings_cache


class FailingSink:
    """Accepts ``fail_at`` bytes, short-writing up to that point, then raises OSError."""

    def __init__(self, fail_at: int) -> None:
        self.fail_at = fail_at
        self.data = bytearray()
        self.calls = 0

    def write(self, data: bytes) -> int:
        self.calls += 1
        room = self.fail_at - len(self.data)
        if room <= 0:
            raise OSError(28, "No space left on device")
        taken = data[:room]
        self.data += taken
        return len(taken)


class ChunkedSink:
    """Accepts at most ``chunk`` bytes per write call."""

    def __init__(self, chunk: int) -> None:
        self.chunk = chunk
        self.data = bytearray()
        self.calls = 0

    def write(self, data: bytes) -> int:
        self.calls += 1
        self.data += data[: self.chunk]
        return min(len(data), self.chunk)


class StuckSink:
    """Never accepts a byte."""

    def write(self, data: bytes) -> int:
        return 0


class WouldBlockSink(io.RawIOBase):
    """Non-blocking raw stream with a full buffer: write returns None."""

    def writable(self) -> bool:
        return True

    def write(self, data: bytes) -> None:
        return None


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("SIMPLE_LOG_FORMAT", raising=False)
    monkeypatch.delenv("SIMPLE_LOG_LEVEL", raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def app_logger() -> Iterator[logging.Logger]:
    """Isolated, non-propagating logger removed of its SinkHandlers afterwards."""
    log = logging.getLogger("app.module")
    log.propagate = False
    yield log
    for h in [h for h in log.handlers if isinstance(h, SinkHandler)]:
        log.removeHandler(h)
    log.setLevel(logging.NOTSET)
    log.propagate = True
