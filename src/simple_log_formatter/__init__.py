"""simple-log-formatter - one-line log renderers for stdlib logging.

Renders a log record (level, module path, message) as a single line in one of
two formats:

    simple   DEBUG [app.module] started
    json     {"level":"DEBUG","msg":"[app.module] started"}

Quick Start:
    >>> import logging
    >>> from simple_log_formatter import configure_logging
    >>> configure_logging(format="json", level="DEBUG")
    >>> logging.getLogger("app.module").debug("started")

Direct Use (any binary sink):
    >>> import io
    >>> from simple_log_formatter import Level, LogRecord, render_simple
    >>> buf = io.BytesIO()
    >>> render_simple(buf, LogRecord(Level.DEBUG, "started", "app.module"))
    Ok(None)

Configuration:
    SIMPLE_LOG_FORMAT=simple|json
    SIMPLE_LOG_LEVEL=TRACE|DEBUG|INFO|WARN|ERROR
"""

from __future__ import annotations

__version__ = "0.1.0"

# Errors
from .foundation.errors import Err, ErrorCode, Ok, RenderError, RenderException, Result

# Configuration
from .foundation.config import LogFormatSettings, clear_settings_cache, get_settings

# Rendering
from .rendering import (
    Level,
    LogEntry,
    LogRecord,
    LogRenderer,
    Sink,
    WriteZeroError,
    available_renderers,
    get_renderer,
    register_renderer,
    render_json,
    render_line,
    render_simple,
    unregister_renderer,
)

# stdlib logging
from .integration import RenderingFormatter, SinkHandler, TextSink, configure_logging

__all__ = [
    "__version__",
    # Errors
    "ErrorCode", "RenderError", "RenderException", "Result", "Ok", "Err",
    # Configuration
    "LogFormatSettings", "get_settings", "clear_settings_cache",
    # Rendering
    "Level", "LogRecord", "LogEntry", "LogRenderer", "Sink", "WriteZeroError",
    "render_simple", "render_json", "render_line",
    "get_renderer", "register_renderer", "unregister_renderer", "available_renderers",
    # stdlib logging
    "RenderingFormatter", "SinkHandler", "TextSink", "configure_logging",
]
