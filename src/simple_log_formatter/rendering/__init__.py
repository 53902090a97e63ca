"""Rendering core: records, sinks and the simple/json line renderers."""

from .record import Level, LogRecord
from .renderers import (
    LogEntry,
    LogRenderer,
    available_renderers,
    get_renderer,
    register_renderer,
    render_json,
    render_line,
    render_simple,
    unregister_renderer,
)
from .sink import Sink, WriteZeroError, write_all

__all__ = [
    "Level",
    "LogEntry",
    "LogRecord",
    "LogRenderer",
    "Sink",
    "WriteZeroError",
    "available_renderers",
    "get_renderer",
    "register_renderer",
    "render_json",
    "render_line",
    "render_simple",
    "unregister_renderer",
    "write_all",
]
