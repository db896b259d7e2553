"""
Failure: an error value with a message and an optional chained cause.

A Failure is the error payload of ``Result`` and ``ActionState``. It is an
``Exception`` so it can be raised when the caller asks for it (``or_raise``,
``Result.expect``), but everywhere else it travels as inert data.

Manifesto:
    - **Errors as values:** Expected failures are returned, never raised
    - **One empty sentinel:** ``Failure.empty()`` means "no failure" and is
      recognised by identity, not by content
    - **Cause chains:** A Failure may wrap another Failure; ``unwrap`` follows
      one link
    - **Tagged kinds:** ``kind`` identifies the taxonomy member, ``is_a``
      compares kinds rather than classes

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                         Failure                              │
        │        (message, cause, kind: FailureKind)                   │
        ├──────────────────┬──────────────────┬───────────────────────┤
        │  Construction    │  Inspection      │  Capture              │
        │  • empty()       │  • is_empty()    │  • of(thunk)  (async) │
        │  • of_message()  │  • is_present()  │                       │
        │  • wrap()        │  • is_a(kind)    │                       │
        │  • from_cause()  │  • unwrap()      │                       │
        │                  │  • if_*/inspect_*│                       │
        └──────────────────┴──────────────────┴───────────────────────┘

Examples:
    Building and chaining:

    >>> inner = Failure.of_message("Inner error")
    >>> outer = Failure.wrap("Outer error", inner)
    >>> outer.unwrap().message
    'Inner error'
    >>> str(Failure.wrap("Specific issue", TypeError("Invalid type provided")))
    "Failure{message='Specific issue', cause=TypeError('Invalid type provided')}"

    The empty sentinel:

    >>> Failure.empty().is_empty()
    True
    >>> str(Failure.empty())
    'Failure.EMPTY'

Guardrails:
    ❌ DON'T: Compare against a fresh Failure to test for "no failure"
    ✅ DO: Call is_empty() / is_present()

    ❌ DON'T: Raise a Failure for an expected business outcome
    ✅ DO: Return it inside a Result

Tags:
    failure, error-value, cause-chain, sentinel, outcomes-core
"""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, ClassVar

from outcomes.core.equality import shallow_equal
from outcomes.core.kinds import FailureCategory, FailureKind, kind_is_a
from outcomes.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MESSAGE = "An unknown failure occurred"
UNKNOWN_CAUSE = "unknown cause"
RUNNABLE_FALLBACK = "An unexpected error occurred during runnable execution."


def _illegal_argument(message: str) -> Failure:
    # failures imports this module, so resolve the subclass lazily
    from outcomes.core.failures import IllegalArgument

    return IllegalArgument(message)


def _looks_like_error(value: Any) -> bool:
    return isinstance(value, BaseException) or isinstance(getattr(value, "message", None), str)


def error_message(value: Any) -> str | None:
    """Return the message of an error-like value, or None if it is not one."""
    if isinstance(value, Failure):
        return value.message
    message = getattr(value, "message", None)
    if isinstance(message, str):
        return message
    if isinstance(value, BaseException):
        return str(value)
    return None


def describe_error(error: Any, fallback: str) -> str:
    """
    Derive a Failure message from something that was raised.

    Order: the error's own non-blank message, then the value itself if it is
    a non-blank string, then ``fallback``.
    """
    message = error_message(error)
    if message and message.strip():
        return message
    if isinstance(error, str) and error.strip():
        return error
    return fallback


def _same_cause(left: Any, right: Any) -> bool:
    if isinstance(left, Failure) and isinstance(right, Failure):
        return left == right
    return shallow_equal(left, right)


def _describe_cause(cause: Any) -> str:
    if isinstance(cause, Failure):
        return f"{cause.kind.value}('{cause.message}')"
    if _looks_like_error(cause):
        return f"{type(cause).__name__}('{error_message(cause)}')"
    return f"'{cause}'"


class Failure(Exception):
    """
    Error value with a message, an optional cause and a taxonomy kind.

    Instances are immutable after construction. Exactly one instance, returned
    by :meth:`empty`, represents "no failure"; every other instance is present
    and carries a non-blank message (``DEFAULT_MESSAGE`` when none is given).

    Two present Failures are equal when their messages are equal and their
    causes match: Failure causes compare as Failures, scalar causes by value
    and any other cause by identity. Kind does not take part in equality.

    Attributes:
        kind: Taxonomy discriminant, fixed per subclass
    """

    kind: ClassVar[FailureKind] = FailureKind.FAILURE

    def __init__(self, message: str | None = None, cause: Any = None):
        if not message or not message.strip():
            message = DEFAULT_MESSAGE
        super().__init__(message)
        Exception.__setattr__(self, "_message", message)
        Exception.__setattr__(self, "_cause", cause)
        # Chain real exceptions so tracebacks show them
        if isinstance(cause, BaseException) and cause is not self:
            self.__cause__ = cause

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @staticmethod
    def empty() -> Failure:
        """The process-wide "no failure" sentinel."""
        return _EMPTY

    @staticmethod
    def of_message(message: str) -> Failure:
        return Failure(message)

    @staticmethod
    def wrap(message: str | None, cause: Any = None) -> Failure:
        return Failure(message, cause)

    @staticmethod
    def from_cause(cause: Any, message: str | None = None) -> Failure:
        """
        Build a Failure around ``cause``.

        A present Failure is returned unchanged rather than wrapped again.
        Otherwise the message comes from ``message``, the cause's own message
        when it looks like an error, the stringified cause, or ``"unknown
        cause"``, in that order.
        """
        if isinstance(cause, Failure) and cause.is_present():
            return cause
        if message:
            effective = message
        elif _looks_like_error(cause):
            effective = error_message(cause) or ""
        else:
            effective = str(cause) if cause else UNKNOWN_CAUSE
        return Failure(effective, cause)

    @staticmethod
    def is_failure(obj: Any) -> bool:
        return isinstance(obj, Failure)

    @staticmethod
    async def of(thunk: Callable[[], Any | Awaitable[Any]]) -> Failure:
        """
        Run ``thunk`` and capture whether it raised.

        ``thunk`` may be synchronous or return an awaitable, which is awaited.
        Returns the empty sentinel on success, otherwise a present Failure
        wrapping the raised exception.

        Raises:
            IllegalArgument: If ``thunk`` is None
        """
        if thunk is None:
            raise _illegal_argument("Runnable provided to Failure.of is None")
        try:
            outcome = thunk()
            if inspect.isawaitable(outcome):
                await outcome
        except Exception as exc:
            logger.debug("runnable_failed", error_type=type(exc).__name__, error=str(exc))
            return Failure.wrap(describe_error(exc, RUNNABLE_FALLBACK), exc)
        return Failure.empty()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def message(self) -> str:
        return self._message

    @property
    def cause(self) -> Any:
        return self._cause

    @property
    def category(self) -> FailureCategory:
        return self.kind.category

    def unwrap(self) -> Failure:
        """Return the cause if it is a present Failure, else self. One level only."""
        cause = self._cause
        if isinstance(cause, Failure) and cause.is_present():
            return cause
        return self

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def is_empty(self) -> bool:
        return self is _EMPTY

    def is_present(self) -> bool:
        return not self.is_empty()

    def is_a(self, kind: FailureKind | str | type[Failure]) -> bool:
        """
        Check whether this Failure is present and of ``kind`` (or a
        specialization of it).

        A Failure subclass is accepted and resolved to its declared kind;
        a subclass that does not declare its own kind matches as its parent.
        A kind name such as ``"EntityNotFound"`` matches like the kind itself.
        """
        if kind is None:
            raise _illegal_argument("Kind provided to is_a is None")
        if isinstance(kind, type) and issubclass(kind, Failure):
            kind = kind.kind
        return self.is_present() and kind_is_a(self.kind, kind)

    def if_present(self, action: Callable[[Failure], None]) -> None:
        if action is None:
            raise _illegal_argument("Action provided to if_present is None")
        if self.is_present():
            action(self)

    def if_empty(self, action: Callable[[], None]) -> None:
        if action is None:
            raise _illegal_argument("Action provided to if_empty is None")
        if self.is_empty():
            action()

    def inspect_present(self, action: Callable[[Failure], None]) -> Failure:
        self.if_present(action)
        return self

    def inspect_empty(self, action: Callable[[], None]) -> Failure:
        self.if_empty(action)
        return self

    def or_raise(self) -> None:
        """Raise self if present; no-op for the empty sentinel."""
        if self.is_present():
            raise self

    # ------------------------------------------------------------------
    # Rendering and comparison
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        if self.is_empty():
            return {"kind": None, "message": None}
        result: dict[str, Any] = {
            "kind": self.kind.value,
            "category": self.category.value,
            "message": self._message,
        }
        if self._cause is not None:
            result["cause"] = _describe_cause(self._cause)
        return result

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Failure):
            return NotImplemented
        if self.is_empty() or other.is_empty():
            return False
        return self._message == other._message and _same_cause(self._cause, other._cause)

    def __setattr__(self, name: str, value: Any) -> None:
        # __cause__, __traceback__ and friends stay writable for the raise machinery
        if name.startswith("__") and name.endswith("__"):
            super().__setattr__(name, value)
            return
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __hash__(self) -> int:
        return hash(self._message)

    def __str__(self) -> str:
        if self.is_empty():
            return "Failure.EMPTY"
        text = f"{self.kind.value}{{message='{self._message}'"
        if self._cause is not None and self._cause is not self:
            text += f", cause={_describe_cause(self._cause)}"
        return text + "}"

    __repr__ = __str__


_EMPTY = Failure("no failure")


__all__ = [
    "Failure",
    "DEFAULT_MESSAGE",
    "describe_error",
    "error_message",
]
