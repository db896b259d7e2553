"""
Option: a container that holds a value or nothing.

``Option`` expresses "maybe absent", not "failed with a reason": when a
supplier passed to :meth:`Option.of` raises, the error detail is dropped and
the result is empty. Use ``Result`` when the reason matters.

Manifesto:
    - **Absence, not falsiness:** ``0``, ``""`` and ``False`` are present values;
      only ``None`` is absent
    - **No None inside:** ``Option.ok(None)`` is a misuse and raises
    - **Transformation without unwrapping:** ``map``/``flat_map`` skip empty Options

Examples:
    >>> Option.ok(3).map(lambda x: x * 2).get()
    6
    >>> Option.or_none(None).is_empty()
    True
    >>> Option.empty().get_or_else("fallback")
    'fallback'

Guardrails:
    ❌ DON'T: Call get() without checking is_ok()
    ✅ DO: Use get_or_else() for a default

Tags:
    option, optional, maybe, outcomes-core
"""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Generic, TypeVar

from outcomes.core.failure import Failure
from outcomes.core.failures import IllegalArgument
from outcomes.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T]):
    """
    A present value or nothing.

    Construct through :meth:`ok`, :meth:`or_none`, :meth:`empty` or the async
    :meth:`of`; instances are immutable.
    """

    __slots__ = ("_value",)

    def __init__(self, value: T | None):
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @staticmethod
    def ok(value: T) -> Option[T]:
        if value is None:
            raise IllegalArgument("Option.ok received None. Use Option.or_none instead.")
        return Option(value)

    @staticmethod
    def or_none(value: T | None) -> Option[T]:
        if value is None:
            return Option.empty()
        return Option(value)

    or_undefined_or_nullable = or_none

    @staticmethod
    def empty() -> Option[Any]:
        return _EMPTY

    @staticmethod
    async def of(supplier: Callable[[], T | Awaitable[T]]) -> Option[T]:
        """
        Run ``supplier`` and wrap what it produced.

        An awaitable result is awaited first. A supplier that raises, or that
        produces None, yields an empty Option.

        Raises:
            IllegalArgument: If ``supplier`` is None
        """
        if supplier is None:
            raise IllegalArgument("Supplier provided to Option.of is None")
        try:
            value = supplier()
            if inspect.isawaitable(value):
                value = await value
            return Option.ok(value)
        except Exception as exc:
            logger.debug("supplier_discarded", error_type=type(exc).__name__, error=str(exc))
            return Option.empty()

    # ------------------------------------------------------------------
    # Inspection and extraction
    # ------------------------------------------------------------------

    def is_ok(self) -> bool:
        return self._value is not None

    def is_empty(self) -> bool:
        return self._value is None

    def get(self) -> T:
        if self._value is None:
            raise Failure("Attempted to get value from an empty Option.")
        return self._value

    def get_or_else(self, default: T) -> T:
        return self._value if self._value is not None else default

    # ------------------------------------------------------------------
    # Transformation
    # ------------------------------------------------------------------

    def map(self, fn: Callable[[T], U]) -> Option[U]:
        """Apply ``fn`` to a present value; empty stays empty."""
        if self._value is not None:
            return Option.ok(fn(self._value))
        return Option.empty()

    def flat_map(self, fn: Callable[[T], Option[U]]) -> Option[U]:
        if self._value is not None:
            return fn(self._value)
        return Option.empty()

    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        if self._value is None:
            return "Option.EMPTY"
        return f"Option.Ok({self._value!r})"

    __repr__ = __str__


_EMPTY: Option[Any] = Option(None)


__all__ = ["Option"]
