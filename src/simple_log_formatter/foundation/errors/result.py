"""Result type returned by renderers.

A rendering call either succeeds with no value or fails with a RenderError.
Failures are values so the calling logging framework decides the policy:
raise, report, or fall back to another sink.

    >>> Ok(None).is_ok()
    True
    >>> Err("boom").map(lambda _: 1).unwrap_err()
    'boom'
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


class Result(Generic[T, E]):
    """Success (Ok) or failure (Err) of a single operation."""

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_ok: bool) -> None:
        self._value = value
        self._is_ok = is_ok

    # ─── Variant Checks ──────────────────────────────────────────────

    def is_ok(self) -> bool:
        return self._is_ok

    def is_err(self) -> bool:
        return not self._is_ok

    # ─── Value Extraction ────────────────────────────────────────────

    def unwrap(self) -> T:
        """Ok value, or RuntimeError on Err."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise RuntimeError(f"unwrap() on Err: {self._value}")

    def unwrap_err(self) -> E:
        """Err value, or RuntimeError on Ok."""
        if not self._is_ok:
            return self._value  # type: ignore[return-value]
        raise RuntimeError(f"unwrap_err() on Ok: {self._value}")

    def unwrap_or_raise(self) -> T:
        """Ok value, or raise the exception form of the error.

        Errors exposing ``to_exception()`` (RenderError) are raised through it so
        the original cause stays chained; other errors raise RuntimeError.
        """
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        if (to_exc := getattr(self._value, "to_exception", None)) is not None:
            raise to_exc()
        raise RuntimeError(str(self._value))

    # ─── Composition ─────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        return Result(f(self._value), True) if self._is_ok else Result(self._value, False)  # type: ignore[arg-type]

    # ─── Dunder Methods ──────────────────────────────────────────────

    __repr__ = lambda self: f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"  # noqa: E731

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._is_ok == other._is_ok and self._value == other._value

    __hash__ = None  # type: ignore[assignment]


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    """Construct the success variant."""
    return Result(value, True)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Construct the failure variant."""
    return Result(error, False)
