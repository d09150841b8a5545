"""Result pattern for explicit error handling.

Provides Success and Failure types to replace exception-based control flow
at call boundaries, and WrappedError for attaching context to a lower-level
failure without losing it.

Usage:
    result = await Errors.try_(session.execute(stmt))
    if result.is_failure():
        raise Errors.wrap(result.error, "failed to load states")
    rows = result.value
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")
CauseT = TypeVar("CauseT", bound=BaseException)


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful result."""

    value: T

    @property
    def error(self) -> None:
        """Success never carries an error."""
        return None

    def is_success(self) -> bool:
        """Check if result is success."""
        return True

    def is_failure(self) -> bool:
        """Check if result is failure."""
        return False

    def unwrap(self) -> T:
        """Get the value."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Get the value or default."""
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed result."""

    error: E

    @property
    def value(self) -> None:
        """Failure never carries a value."""
        return None

    def is_success(self) -> bool:
        """Check if result is success."""
        return False

    def is_failure(self) -> bool:
        """Check if result is failure."""
        return True

    def unwrap(self) -> None:
        """Raise error when unwrapping failure."""
        raise ValueError(f"Cannot unwrap Failure: {self.error}")

    def unwrap_or(self, default: T) -> T:
        """Get default value for failure."""
        return default


# Type alias
Result = Success[T] | Failure[E]


def ok(value: T) -> Success[T]:
    """Create a Success result.

    Args:
        value: The success value

    Returns:
        Success wrapping the value
    """
    return Success(value)


def err(error: E) -> Failure[E]:
    """Create a Failure result.

    Args:
        error: The error value

    Returns:
        Failure wrapping the error
    """
    return Failure(error)


async def try_catch(awaitable: Awaitable[T]) -> Result[T, Exception]:
    """Await an operation and capture its outcome.

    The error is passed through untouched; no context is added here.
    Cancellation and other non-``Exception`` signals propagate.

    Args:
        awaitable: In-flight operation (coroutine, task or future)

    Returns:
        Success with the awaited value, or Failure with the raised exception
    """
    try:
        value = await awaitable
    except Exception as e:
        return Failure(e)
    return Success(value)


def try_sync(fn: Callable[[], T]) -> Result[T, Exception]:
    """Call a zero-argument function and capture its outcome.

    Args:
        fn: Computation to run immediately

    Returns:
        Success with the return value, or Failure with the raised exception
    """
    try:
        value = fn()
    except Exception as e:
        return Failure(e)
    return Success(value)


class WrappedError(Exception, Generic[CauseT]):
    """An error that adds a message on top of an existing cause.

    Only wrap failures coming from a lower layer (database, third-party
    API). Errors raised by the current layer should be raised directly.
    """

    name = "WrappedError"

    def __init__(self, message: str, cause: CauseT) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.__cause__ = cause

    def unwrap(self) -> CauseT:
        """Return the immediate cause."""
        return self.cause

    def __str__(self) -> str:
        detail = str(self.cause) or type(self.cause).__name__
        return f"{self.message}: {detail}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, {self.cause!r})"

    @staticmethod
    def root_cause(error: BaseException) -> BaseException:
        """Follow ``cause`` links down to the innermost error.

        Errors whose ``cause`` is not an exception are followed through
        ``__cause__``, as set by ``raise ... from``.

        Args:
            error: Any exception, wrapped or not

        Returns:
            The last error in the chain; ``error`` itself if it has no cause
        """
        current = error
        seen = {id(current)}
        while True:
            nxt = getattr(current, "cause", None)
            if not isinstance(nxt, BaseException):
                nxt = current.__cause__
            if not isinstance(nxt, BaseException) or id(nxt) in seen:
                return current
            seen.add(id(nxt))
            current = nxt


def wrap(cause: CauseT, message: str) -> WrappedError[CauseT]:
    """Attach context to a lower-level failure.

    Args:
        cause: The original error
        message: What the current layer was trying to do

    Returns:
        A new WrappedError pointing at ``cause``
    """
    return WrappedError(message, cause)


@dataclass(frozen=True)
class ErrorToolkit:
    """Read-only bundle of the error helpers."""

    try_: Callable[..., Awaitable[Result]]
    try_sync: Callable[..., Result]
    wrap: Callable[..., WrappedError]
    WrappedError: type[WrappedError]


Errors = ErrorToolkit(
    try_=try_catch,
    try_sync=try_sync,
    wrap=wrap,
    WrappedError=WrappedError,
)
