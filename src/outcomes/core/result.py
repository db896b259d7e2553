"""
Result envelope for explicit success/failure handling.

A ``Result[T]`` holds either a success value or a present :class:`Failure`,
never both and never neither. Expected failures travel as values through
``map``/``flat_map`` chains instead of being raised; the first failure
short-circuits the rest of the chain.

Manifesto:
    - **Explicit over Implicit:** No hidden exceptions that callers might miss
    - **Functional composition:** Chain operations with map/flat_map without
      nested try/except blocks
    - **Capture at the edge:** ``Result.of`` turns raising code, sync or async,
      into a Result
    - **Misuse is loud:** Wrong-variant access raises ``IllegalArgument``

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                         Result[T]                            │
        ├─────────────────┬─────────────────┬─────────────────────────┤
        │  Construction   │  Extraction     │  Transformation         │
        ├─────────────────┼─────────────────┼─────────────────────────┤
        │ • ok()          │ • get()         │ • map()                 │
        │ • failure()     │ • expect()      │ • flat_map()            │
        │ • of() (async)  │ • failure()     │ • inspect_ok()          │
        │                 │ • if_ok()       │ • inspect_failure()     │
        └─────────────────┴─────────────────┴─────────────────────────┘

Value presence:
    ``get``, ``expect``, ``map``, ``flat_map`` and ``if_ok`` test the success
    value with Python truthiness. A success Result holding ``0``, ``""``,
    ``False``, ``None`` or an empty container reports ``is_ok() == True`` but
    is treated as holding no usable value by those operations. ``is_ok`` and
    ``is_failure`` only look at whether a failure is held.

Examples:
    Chaining with flat_map:

    >>> def divide(a: float, b: float) -> Result[float]:
    ...     if b == 0:
    ...         return Result.failure_with_message("Division by zero is not allowed.")
    ...     return Result.ok(a / b)
    >>> divide(100, 10).flat_map(lambda n: divide(n, 2)).get()
    5.0
    >>> divide(100, 10).flat_map(lambda n: divide(n, 0)).failure().message
    'Division by zero is not allowed.'

    Rendering:

    >>> str(Result.ok({"a": 1}))
    'Result.Ok({"a": 1})'

Guardrails:
    ❌ DON'T: Call get() without checking is_ok()
    ✅ DO: Use if_ok()/if_failure() or check is_failure() first

    ❌ DON'T: Store falsy success values and expect get() to return them
    ✅ DO: Wrap them (e.g. in a Pair or a dataclass) or use Option

Tags:
    result-pattern, error-handling, functional-programming, monadic,
    outcomes-core
"""

from __future__ import annotations

import inspect
import json
from typing import Any, Awaitable, Callable, Generic, TypeVar

from outcomes.core.failure import Failure, describe_error
from outcomes.core.failures import IllegalArgument
from outcomes.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_EXPECT_MESSAGE = "No value present, Result is in a failure state."
SUPPLIER_FALLBACK = "An unexpected error occurred during supplier execution."
MAP_FALLBACK = "An error occurred during mapping."
FLAT_MAP_FALLBACK = "An error occurred during flatMapping."
NO_VALUE_MESSAGE = "Result holds no usable value."


def _render_value(value: Any) -> str:
    """JSON form of a success value, or its repr when JSON cannot express it."""
    try:
        return json.dumps(value, default=str)
    except (TypeError, ValueError):
        # non-string dict keys, circular references
        return repr(value)


class _ClassOrInstanceMethod:
    """Dispatch to one callable on the class and another on instances."""

    def __init__(self, on_class: staticmethod, on_instance: Callable[..., Any]):
        self._on_class = on_class
        self._on_instance = on_instance

    def __get__(self, instance: Any, owner: type) -> Callable[..., Any]:
        if instance is None:
            return self._on_class.__get__(None, owner)
        return self._on_instance.__get__(instance, owner)


class Result(Generic[T]):
    """
    Success value or present Failure.

    Built by :meth:`ok`, :meth:`failure`, :meth:`failure_with_message` or the
    async :meth:`of`. Immutable; ``map``/``flat_map`` return new Results.
    """

    __slots__ = ("_value", "_failure")

    def __init__(self, failure: Failure | None = None, value: T | None = None):
        if failure is not None and failure.is_empty():
            raise IllegalArgument(
                "Cannot create a failure Result with an empty Failure. Use Result.ok() instead."
            )
        object.__setattr__(self, "_failure", failure)
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @staticmethod
    def ok(value: T) -> Result[T]:
        return Result(None, value)

    @staticmethod
    def failure_of(failure: Failure) -> Result[Any]:
        """
        Build a failure Result.

        Raises:
            IllegalArgument: If ``failure`` is None or the empty sentinel
        """
        if failure is None:
            raise IllegalArgument("Failure object cannot be None for a failure Result.")
        return Result(failure, None)

    @staticmethod
    def failure_with_message(message: str) -> Result[Any]:
        return Result.failure_of(Failure.of_message(message))

    @staticmethod
    async def of(supplier: Callable[[], T | Awaitable[T]]) -> Result[T]:
        """
        Run ``supplier`` and capture its value or the error it raised.

        The supplier runs synchronously until it returns; an awaitable result
        is then awaited. A raised exception becomes a failure Result whose
        cause is the exception.

        Raises:
            IllegalArgument: If ``supplier`` is None
        """
        if supplier is None:
            raise IllegalArgument("Supplier provided to Result.of is None")
        try:
            value = supplier()
            if inspect.isawaitable(value):
                value = await value
        except Exception as exc:
            logger.debug("supplier_failed", error_type=type(exc).__name__, error=str(exc))
            return Result.failure_of(Failure.wrap(describe_error(exc, SUPPLIER_FALLBACK), exc))
        return Result.ok(value)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def is_ok(self) -> bool:
        return self._failure is None

    def is_failure(self) -> bool:
        return self._failure is not None

    def _held_failure(self) -> Failure:
        """
        Return the held Failure.

        Raises:
            IllegalArgument: If this is a success Result
        """
        if self._failure is None:
            raise IllegalArgument("Cannot get failure from a successful Result.")
        return self._failure

    # Result.failure(f) builds a failure Result, result.failure() reads it.
    failure = _ClassOrInstanceMethod(failure_of, _held_failure)

    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------

    def expect(self, message: str) -> T:
        """
        Return the success value or raise a Failure prefixed with ``message``.

        The raised Failure wraps the held one, so ``unwrap()`` on it leads back
        to the original failure.
        """
        if not self._value:
            held = self._failure.message if self._failure is not None else None
            raise Failure.wrap(f"{message}: {held}", self._failure)
        return self._value

    def get(self) -> T:
        return self.expect(DEFAULT_EXPECT_MESSAGE)

    def if_ok(self, action: Callable[[T], None]) -> None:
        if action is None:
            raise IllegalArgument("Action provided to if_ok is None")
        if self._value:
            action(self._value)

    def if_failure(self, action: Callable[[Failure], None]) -> None:
        if action is None:
            raise IllegalArgument("Action provided to if_failure is None")
        if self._failure is not None:
            action(self._failure)

    def inspect_ok(self, action: Callable[[T], None]) -> Result[T]:
        self.if_ok(action)
        return self

    def inspect_failure(self, action: Callable[[Failure], None]) -> Result[T]:
        self.if_failure(action)
        return self

    # ------------------------------------------------------------------
    # Transformation
    # ------------------------------------------------------------------

    def _short_circuit(self) -> Result[Any]:
        if self._failure is not None:
            return self
        return Result(Failure.of_message(NO_VALUE_MESSAGE), None)

    def map(self, fn: Callable[[T], U]) -> Result[U]:
        """
        Apply ``fn`` to the success value.

        A failure Result is returned as-is. An exception raised by ``fn`` is
        captured into a new failure Result.
        """
        if fn is None:
            raise IllegalArgument("Mapper provided to map is None")
        if not self._value:
            return self._short_circuit()
        try:
            return Result.ok(fn(self._value))
        except Exception as exc:
            logger.debug("mapper_failed", error_type=type(exc).__name__, error=str(exc))
            return Result.failure_of(Failure.wrap(describe_error(exc, MAP_FALLBACK), exc))

    def flat_map(self, fn: Callable[[T], Result[U]]) -> Result[U]:
        """Chain to another Result-returning function."""
        if fn is None:
            raise IllegalArgument("Mapper provided to flat_map is None")
        if not self._value:
            return self._short_circuit()
        try:
            return fn(self._value)
        except Exception as exc:
            logger.debug("mapper_failed", error_type=type(exc).__name__, error=str(exc))
            return Result.failure_of(Failure.wrap(describe_error(exc, FLAT_MAP_FALLBACK), exc))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        if self._failure is None:
            return {"ok": True, "value": self._value}
        return {"ok": False, "error": self._failure.to_dict()}

    def __str__(self) -> str:
        if self._failure is None:
            return f"Result.Ok({_render_value(self._value)})"
        return f"Result.Failure({self._failure})"

    __repr__ = __str__


# =============================================================================
# MODULE-LEVEL CONSTRUCTORS
# =============================================================================


def ok_result(value: T) -> Result[T]:
    return Result.ok(value)


def failure_result(failure: Failure) -> Result[Any]:
    return Result.failure(failure)


def failure_result_with_message(message: str) -> Result[Any]:
    return Result.failure_with_message(message)


async def result_of(supplier: Callable[[], T | Awaitable[T]]) -> Result[T]:
    return await Result.of(supplier)


__all__ = [
    "Result",
    "ok_result",
    "failure_result",
    "failure_result_with_message",
    "result_of",
    "DEFAULT_EXPECT_MESSAGE",
]
