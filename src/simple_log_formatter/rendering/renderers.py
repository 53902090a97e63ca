"""Line renderers: one LogRecord in, one newline-terminated line out.

Two built-in formats:

    simple   DEBUG [app.module] started
    json     {"level":"DEBUG","msg":"[app.module] started"}

Renderers are plain functions ``(sink, record) -> Result[None, RenderError]``.
They hold no state, never retry, and write nothing but the one line, so they
may be called concurrently on distinct sinks. Sharing a sink between threads
needs the caller's lock (see integration.SinkHandler).

Quick Start:
    >>> import io
    >>> buf = io.BytesIO()
    >>> render_simple(buf, LogRecord(Level.INFO, "ready", "app.server")).is_ok()
    True
    >>> buf.getvalue()
    b'INFO [app.server] ready\\n'
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import orjson

from simple_log_formatter.foundation.errors import Err, Ok, RenderError, Result

from .record import LogRecord
from .sink import Sink, write_all

# Exceptions a sink raises on a failed write; ValueError covers closed files
_WRITE_ERRORS = (OSError, ValueError)


@runtime_checkable
class LogRenderer(Protocol):
    """Protocol for line renderers."""

    def __call__(self, sink: Sink, record: LogRecord, /) -> Result[None, RenderError]: ...


@dataclass(frozen=True, slots=True)
class LogEntry:
    """JSON view of a record. Field order is the output key order."""

    level: str
    msg: str

    @classmethod
    def from_record(cls, record: LogRecord) -> LogEntry:
        return cls(record.level.as_str(), f"[{record.module_path or ''}] {record.message}")


# ─────────────────────────────────────────────────────────────────────────────
# Built-in Renderers
# ─────────────────────────────────────────────────────────────────────────────


def render_simple(sink: Sink, record: LogRecord) -> Result[None, RenderError]:
    """Write ``<LEVEL> [<module_path>] <message>`` and a newline.

    The message is written verbatim. Text that is not encodable as UTF-8
    (lone surrogates) is backslash-escaped instead of failing.
    """
    line = f"{record.level.as_str()} [{record.module_path or ''}] {record.message}\n"
    try:
        write_all(sink, line.encode("utf-8", "backslashreplace"))
    except _WRITE_ERRORS as e:
        return Err(RenderError.write_failure("simple", e))
    return Ok(None)


def render_json(sink: Sink, record: LogRecord) -> Result[None, RenderError]:
    """Write ``{"level":..,"msg":"[<module_path>] <message>"}`` and a newline.

    Nothing is written when serialization fails.
    """
    try:
        payload = orjson.dumps(LogEntry.from_record(record), option=orjson.OPT_APPEND_NEWLINE)
    except orjson.JSONEncodeError as e:
        return Err(RenderError.serialization_failure("json", e))
    try:
        write_all(sink, payload)
    except _WRITE_ERRORS as e:
        return Err(RenderError.write_failure("json", e))
    return Ok(None)


def render_line(renderer: LogRenderer, record: LogRecord) -> Result[bytes, RenderError]:
    """Render into memory and return the bytes, trailing newline included."""
    buf = io.BytesIO()
    return renderer(buf, record).map(lambda _: buf.getvalue())


# ─────────────────────────────────────────────────────────────────────────────
# Registry
# ─────────────────────────────────────────────────────────────────────────────


_BUILTINS: dict[str, LogRenderer] = {"simple": render_simple, "json": render_json}
_renderers: dict[str, LogRenderer] = dict(_BUILTINS)


def get_renderer(name: str) -> LogRenderer:
    """Renderer registered under name (case-insensitive)."""
    try:
        return _renderers[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown format: {name}. Use {', '.join(repr(n) for n in _renderers)}") from None


def register_renderer(name: str, renderer: LogRenderer) -> None:
    """Make a custom renderer selectable by name. Built-in names cannot be replaced."""
    key = name.strip().lower()
    if not key:
        raise ValueError("Renderer name must not be empty")
    if key in _BUILTINS:
        raise ValueError(f"Cannot replace built-in renderer {key!r}")
    _renderers[key] = renderer


def unregister_renderer(name: str) -> None:
    """Remove a custom renderer; unknown names are ignored."""
    key = name.strip().lower()
    if key not in _BUILTINS:
        _renderers.pop(key, None)


def available_renderers() -> tuple[str, ...]:
    return tuple(_renderers)
