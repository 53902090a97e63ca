"""Plug the renderers into stdlib logging.

stdlib logging owns dispatch, filtering and destinations; this module only
hands it a rendering callback, either as a Formatter for existing handlers or
as a Handler writing rendered bytes straight into a binary sink.

Quick Start:
    >>> from simple_log_formatter import configure_logging
    >>> configure_logging(format="json", level="DEBUG")
    >>> logging.getLogger("app.db").debug("connected")
    # stderr: {"level":"DEBUG","msg":"[app.db] connected"}
"""

from __future__ import annotations

import logging
import sys
from typing import IO, TextIO

from simple_log_formatter.foundation.config import get_settings
from simple_log_formatter.rendering import Level, LogRecord, LogRenderer, Sink, get_renderer, render_line

log = logging.getLogger("simple_log_formatter.integration")


def _resolve(renderer: LogRenderer | str) -> LogRenderer:
    return get_renderer(renderer) if isinstance(renderer, str) else renderer


class RenderingFormatter(logging.Formatter):
    """Formatter producing the renderer's line for any text handler.

    The trailing newline is dropped because StreamHandler appends its own
    terminator. Render failures raise RenderException, which the handler
    reports through handleError.
    """

    def __init__(self, renderer: LogRenderer | str = "simple") -> None:
        super().__init__()
        self.renderer = _resolve(renderer)

    def format(self, record: logging.LogRecord) -> str:
        line = render_line(self.renderer, LogRecord.from_stdlib(record)).unwrap_or_raise()
        return line.decode("utf-8").removesuffix("\n")


class SinkHandler(logging.Handler):
    """Handler rendering each record directly into a binary sink.

    Handler.handle() holds the handler lock around emit(), so one SinkHandler
    per destination serializes writers sharing that sink. The sink is not
    closed by the handler.
    """

    def __init__(
        self,
        sink: Sink | None = None,
        renderer: LogRenderer | str = "simple",
        level: int = logging.NOTSET,
    ) -> None:
        super().__init__(level)
        self.sink: Sink = sink if sink is not None else _default_sink()
        self.renderer = _resolve(renderer)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.renderer(self.sink, LogRecord.from_stdlib(record)).unwrap_or_raise()
            self.flush()
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)

    def flush(self) -> None:
        with self.lock:
            if (flush := getattr(self.sink, "flush", None)) is not None:
                flush()

    def __repr__(self) -> str:
        name = getattr(self.renderer, "__name__", type(self.renderer).__name__)
        return f"<{type(self).__name__} {name} ({logging.getLevelName(self.level)})>"


def configure_logging(
    format: str | None = None,  # noqa: A002
    level: str | None = None,
    *,
    sink: Sink | None = None,
    logger: logging.Logger | None = None,
) -> SinkHandler:
    """Install a SinkHandler on logger (root by default) and set its level.

    Arguments left as None come from settings (SIMPLE_LOG_FORMAT,
    SIMPLE_LOG_LEVEL). SinkHandlers installed by earlier calls are removed.
    """
    settings = get_settings()
    fmt, threshold = format or settings.format, Level.parse(level or settings.level)
    renderer = get_renderer(fmt)
    logging.addLevelName(Level.TRACE, Level.TRACE.as_str())

    handler = SinkHandler(sink, renderer)
    target = logger if logger is not None else logging.getLogger()
    for old in [h for h in target.handlers if isinstance(h, SinkHandler)]:
        target.removeHandler(old)
        old.close()
    target.addHandler(handler)
    target.setLevel(threshold)
    log.debug("configured %s renderer at %s for %r", fmt, threshold.as_str(), target.name)
    return handler


class TextSink:
    """Binary sink over a text stream: bytes are decoded as UTF-8 and written as text."""

    __slots__ = ("stream",)

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def write(self, data: bytes) -> int:
        self.stream.write(bytes(data).decode("utf-8", "backslashreplace"))
        return len(data)

    def flush(self) -> None:
        self.stream.flush()


def _default_sink() -> IO[bytes] | TextSink:
    if (stream := sys.stderr) is None:
        raise ValueError("sys.stderr is not available; pass an explicit sink")
    if (buffer := getattr(stream, "buffer", None)) is not None:
        return buffer
    return TextSink(stream)
