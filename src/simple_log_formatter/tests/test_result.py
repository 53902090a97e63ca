"""Tests for the Result type returned by renderers."""

from __future__ import annotations

import pytest

from simple_log_formatter import Err, ErrorCode, Ok, RenderError, RenderException, Result


def test_ok_construction() -> None:
    result: Result[int, str] = Ok(42)

    assert result.is_ok()
    assert not result.is_err()
    assert result.unwrap() == 42


def test_err_construction() -> None:
    result: Result[int, str] = Err("failed")

    assert result.is_err()
    assert result.unwrap_err() == "failed"
    assert not result.is_ok()


def test_unwrap_on_err_raises() -> None:
    with pytest.raises(RuntimeError, match="unwrap\\(\\) on Err"):
        Err("x").unwrap()
    with pytest.raises(RuntimeError, match="unwrap_err\\(\\) on Ok"):
        Ok(1).unwrap_err()


def test_map() -> None:
    assert Ok(5).map(lambda x: x * 2) == Ok(10)
    assert Err("fail").map(lambda x: x * 2) == Err("fail")


def test_repr() -> None:
    assert repr(Ok(None)) == "Ok(None)"
    assert repr(Err("e")) == "Err('e')"


def test_unwrap_or_raise_render_error() -> None:
    cause = BrokenPipeError(32, "Broken pipe")
    result: Result[None, RenderError] = Err(RenderError.write_failure("simple", cause))

    with pytest.raises(RenderException) as info:
        result.unwrap_or_raise()

    assert info.value.error.code is ErrorCode.WRITE_FAILURE
    assert info.value.__cause__ is cause


def test_unwrap_or_raise_plain_error() -> None:
    with pytest.raises(RuntimeError, match="plain"):
        Err("plain").unwrap_or_raise()

    assert Ok("v").unwrap_or_raise() == "v"


def test_render_error_serialization_excludes_cause() -> None:
    error = RenderError.serialization_failure("json", ValueError("bad text"))

    assert error.model_dump(mode="json") == {
        "code": "SERIALIZATION_FAILURE",
        "renderer": "json",
        "message": "bad text",
    }
    assert str(error) == "json renderer serialization failure: bad text"


def test_render_error_message_falls_back_to_type_name() -> None:
    assert RenderError.write_failure("simple", OSError()).message == "OSError"
