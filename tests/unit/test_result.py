"""Tests for the Result pattern and error wrapping."""
from __future__ import annotations

import asyncio
import dataclasses

import pytest

from braindiff.shared.result import (
    Errors,
    Failure,
    Success,
    WrappedError,
    err,
    ok,
    try_catch,
    try_sync,
    wrap,
)


async def _resolve(value: object) -> object:
    await asyncio.sleep(0)
    return value


async def _reject(error: Exception) -> object:
    await asyncio.sleep(0)
    raise error


def _raise(error: Exception) -> object:
    raise error


class TestTryCatch:
    """Tests for the async boundary wrapper."""

    @pytest.mark.parametrize("value", [42, 0, "", None, [], "rows"])
    async def test_resolved_value_is_success(self, value: object) -> None:
        """Test that resolved values, falsy ones included, become Success."""
        result = await try_catch(_resolve(value))
        assert isinstance(result, Success)
        assert result.is_success()
        assert result.value == value
        assert result.error is None

    async def test_rejection_is_failure_with_same_error(self) -> None:
        """Test that the raised error is returned untouched."""
        error = ConnectionError("permission denied for schema analytics")
        result = await try_catch(_reject(error))
        assert isinstance(result, Failure)
        assert result.is_failure()
        assert result.error is error
        assert result.value is None

    async def test_accepts_tasks(self) -> None:
        """Test that any awaitable is accepted."""
        task = asyncio.ensure_future(_resolve("done"))
        result = await try_catch(task)
        assert result.unwrap() == "done"

    async def test_cancellation_propagates(self) -> None:
        """Test that cancellation is not captured."""

        async def cancelled() -> None:
            raise asyncio.CancelledError

        with pytest.raises(asyncio.CancelledError):
            await try_catch(cancelled())


class TestTrySync:
    """Tests for the synchronous boundary wrapper."""

    def test_return_value_is_success(self) -> None:
        """Test a normal return."""
        result = try_sync(lambda: 7)
        assert result == Success(7)
        assert result.error is None

    def test_falsy_return_is_success(self) -> None:
        """Test that a falsy value is not mistaken for failure."""
        result = try_sync(lambda: 0)
        assert result.is_success()
        assert result.value == 0

    def test_raise_is_failure(self) -> None:
        """Test that the raised error is captured by identity."""
        error = KeyError("missing")
        result = try_sync(lambda: _raise(error))
        assert result.is_failure()
        assert result.error is error
        assert result.value is None

    def test_keyboard_interrupt_propagates(self) -> None:
        """Test that BaseException outside Exception is not captured."""
        with pytest.raises(KeyboardInterrupt):
            try_sync(lambda: _raise(KeyboardInterrupt()))


class TestResultHelpers:
    """Tests for Success/Failure helpers."""

    def test_ok_and_err_constructors(self) -> None:
        """Test factory helpers."""
        assert ok(1) == Success(1)
        error = ValueError("bad")
        assert err(error) == Failure(error)

    def test_unwrap_or(self) -> None:
        """Test default handling."""
        assert Success(3).unwrap_or(0) == 3
        assert Failure(ValueError("x")).unwrap_or(0) == 0

    def test_unwrap_failure_raises(self) -> None:
        """Test that unwrapping a failure raises."""
        with pytest.raises(ValueError, match="Cannot unwrap Failure"):
            Failure(RuntimeError("boom")).unwrap()

    def test_results_are_immutable(self) -> None:
        """Test that results cannot be modified."""
        result = Success(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.value = 2  # type: ignore[misc]

    def test_pattern_matching(self) -> None:
        """Test structural pattern matching on the two arms."""
        match try_sync(lambda: _raise(OSError("disk"))):
            case Success(value):
                pytest.fail(f"unexpected success {value}")
            case Failure(error):
                assert str(error) == "disk"


class TestWrappedError:
    """Tests for error chaining."""

    def test_unwrap_returns_cause(self) -> None:
        """Test that unwrap preserves identity."""
        cause = OSError("connection refused")
        wrapped = wrap(cause, "failed to load states")
        assert wrapped.unwrap() is cause
        assert wrapped.cause is cause
        assert wrapped.__cause__ is cause
        assert wrapped.message == "failed to load states"
        assert wrapped.name == "WrappedError"

    def test_render_chain(self) -> None:
        """Test that rendering joins every level with ': '."""
        root = OSError("connection refused")
        wrapped = wrap(wrap(root, "B"), "A")
        assert str(wrapped) == "A: B: connection refused"

    def test_render_single_level(self) -> None:
        """Test one level of wrapping."""
        assert str(wrap(ValueError("bad input"), "parse failed")) == "parse failed: bad input"

    def test_render_empty_cause_message(self) -> None:
        """Test that a cause without a message renders its type name."""
        assert str(wrap(TimeoutError(), "drop failed")) == "drop failed: TimeoutError"

    @pytest.mark.parametrize("depth", [1, 2, 5, 50])
    def test_root_cause_any_depth(self, depth: int) -> None:
        """Test that the walk reaches the innermost error."""
        root = TimeoutError("timed out")
        error: Exception = root
        for level in range(depth):
            error = wrap(error, f"level {level}")
        assert WrappedError.root_cause(error) is root

    def test_root_cause_of_plain_error(self) -> None:
        """Test that an unwrapped error is its own root."""
        error = RuntimeError("plain")
        assert WrappedError.root_cause(error) is error

    def test_root_cause_stops_at_non_error_cause(self) -> None:
        """Test that a non-exception ``cause`` attribute ends the walk."""
        error = RuntimeError("odd")
        error.cause = "not an error"  # type: ignore[attr-defined]
        assert WrappedError.root_cause(error) is error

    def test_root_cause_stops_at_none_cause(self) -> None:
        """Test that a None cause ends the walk."""
        error = RuntimeError("odd")
        error.cause = None  # type: ignore[attr-defined]
        assert WrappedError.root_cause(error) is error

    def test_root_cause_follows_raise_from(self) -> None:
        """Test that the walk continues through ``__cause__`` links."""
        driver = PermissionError("permission denied for schema analytics")
        try:
            try:
                raise driver
            except PermissionError as e:
                raise RuntimeError("(sqlalchemy.dbapi.Error) wrapper") from e
        except RuntimeError as e:
            dbapi = e
        wrapped = wrap(dbapi, "failed to load states")
        assert wrapped.unwrap() is dbapi
        assert WrappedError.root_cause(wrapped) is driver

    def test_root_cause_prefers_cause_attribute(self) -> None:
        """Test that an explicit ``cause`` wins over ``__cause__``."""
        inner = OSError("inner")
        error = RuntimeError("outer")
        error.cause = inner  # type: ignore[attr-defined]
        error.__cause__ = ValueError("other")
        assert WrappedError.root_cause(error) is inner

    def test_root_cause_terminates_on_cycle(self) -> None:
        """Test that a hand-built cycle does not loop forever."""
        first = wrap(ValueError("x"), "first")
        second = wrap(first, "second")
        first.cause = second
        assert WrappedError.root_cause(second) is first

    def test_wrapping_twice_gives_distinct_errors(self) -> None:
        """Test that each wrap creates a new node."""
        cause = OSError("denied")
        a = wrap(cause, "drop failed")
        b = wrap(cause, "drop failed")
        assert a is not b
        assert a.unwrap() is b.unwrap() is cause
        assert str(a) == str(b)

    def test_can_be_raised_and_caught(self) -> None:
        """Test that wrapped errors behave as exceptions."""
        cause = OSError("denied")
        with pytest.raises(WrappedError) as exc_info:
            raise wrap(cause, "drop failed")
        assert exc_info.value.unwrap() is cause


class TestErrorsNamespace:
    """Tests for the Errors bundle."""

    async def test_bundle_exposes_helpers(self) -> None:
        """Test that the bundle delegates to the module functions."""
        assert Errors.try_ is try_catch
        assert Errors.try_sync is try_sync
        assert Errors.wrap is wrap
        assert Errors.WrappedError is WrappedError
        result = await Errors.try_(_resolve(5))
        assert result.value == 5

    def test_bundle_is_read_only(self) -> None:
        """Test that entries cannot be reassigned."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            Errors.wrap = lambda cause, message: cause  # type: ignore[misc]
