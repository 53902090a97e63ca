"""Render failures as structured values.

RenderError is what a renderer returns inside Err; RenderException is its
raisable form for callers (such as logging handlers) that work with exceptions.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field


class ErrorCode(StrEnum):
    """Kinds of render failure."""
    WRITE_FAILURE = "WRITE_FAILURE"
    SERIALIZATION_FAILURE = "SERIALIZATION_FAILURE"


class RenderError(BaseModel):
    """Structured failure of one render call.

    Attributes:
        code: Which stage failed (writing to the sink or serializing the entry)
        renderer: Name of the renderer that failed ("simple", "json", ...)
        message: Human-readable description, taken from the cause when present
        cause: The exception raised by the sink or serializer, kept unchanged
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        json_schema_extra={
            "title": "Render Error",
            "examples": [{
                "code": "WRITE_FAILURE",
                "renderer": "simple",
                "message": "[Errno 28] No space left on device",
            }],
        },
    )

    code: ErrorCode
    renderer: Annotated[str, Field(min_length=1)]
    message: Annotated[str, Field(min_length=1)]
    cause: BaseException | None = Field(default=None, exclude=True, repr=False)

    @classmethod
    def write_failure(cls, renderer: str, exc: BaseException) -> Self:
        return cls(code=ErrorCode.WRITE_FAILURE, renderer=renderer, message=_describe(exc), cause=exc)

    @classmethod
    def serialization_failure(cls, renderer: str, exc: BaseException) -> Self:
        return cls(code=ErrorCode.SERIALIZATION_FAILURE, renderer=renderer, message=_describe(exc), cause=exc)

    def to_exception(self) -> RenderException:
        """Raisable form, chained to the original cause."""
        exc = RenderException(self)
        exc.__cause__ = self.cause
        return exc

    def __str__(self) -> str:
        return f"{self.renderer} renderer {self.code.value.lower().replace('_', ' ')}: {self.message}"


class RenderException(Exception):
    """Exception wrapping a RenderError for raising."""

    __slots__ = ("error",)

    def __init__(self, error: RenderError) -> None:
        self.error = error
        super().__init__(str(error))

    @property
    def code(self) -> ErrorCode:
        return self.error.code


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__
