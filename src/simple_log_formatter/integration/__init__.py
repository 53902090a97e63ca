"""stdlib logging integration: formatter, handler and one-call setup."""

from .handlers import RenderingFormatter, SinkHandler, TextSink, configure_logging

__all__ = ["RenderingFormatter", "SinkHandler", "TextSink", "configure_logging"]
