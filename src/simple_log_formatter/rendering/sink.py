"""Byte sinks that renderers write into."""

from __future__ import annotations

import errno
import io
from typing import Protocol, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """Writable destination for rendered bytes.

    Matches binary file objects (``sys.stderr.buffer``, ``io.BytesIO``, sockets
    wrapped with ``makefile('wb')``). ``write`` may accept fewer bytes than
    offered and report the count. Returning None means everything was taken,
    except for raw non-blocking streams (``io.RawIOBase``) where it means
    nothing was written.
    """

    def write(self, data: bytes, /) -> int | None: ...


class WriteZeroError(OSError):
    """Sink accepted no bytes while some were still pending."""


def write_all(sink: Sink, data: bytes) -> None:
    """Write every byte of data, continuing after short writes.

    Exceptions raised by the sink propagate unchanged; bytes already accepted
    stay in the sink. A raw stream that would block raises BlockingIOError.
    """
    while data:
        written = sink.write(data)
        if written is None:
            if isinstance(sink, io.RawIOBase):
                raise BlockingIOError(errno.EAGAIN, "sink would block")
            return
        if written == 0:
            raise WriteZeroError("failed to write whole buffer")
        data = data[written:]
