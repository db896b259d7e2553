"""
ActionState: outcome of an action that may not have run yet.

``Result`` cannot say "not attempted"; ``ActionState`` adds an ``InitState``
variant next to success and failure. There are no combinators: callers match
on the variant.

Examples:
    >>> state = init_state()
    >>> state.is_ok, state.is_failure
    (False, False)
    >>> match ok_state(42):
    ...     case OkState(value):
    ...         print(value)
    42
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

from outcomes.core.failure import Failure
from outcomes.core.failures import IllegalArgument

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class InitState(Generic[T]):
    """No attempt has been made yet."""

    is_ok: bool = field(default=False, init=False)
    is_failure: bool = field(default=False, init=False)


@dataclass(frozen=True, slots=True)
class OkState(Generic[T]):
    """The action succeeded with ``value``."""

    value: T
    is_ok: bool = field(default=True, init=False)
    is_failure: bool = field(default=False, init=False)


@dataclass(frozen=True, slots=True)
class FailureState(Generic[T]):
    """The action failed; ``failure`` is always present."""

    failure: Failure
    is_ok: bool = field(default=False, init=False)
    is_failure: bool = field(default=True, init=False)

    def __post_init__(self) -> None:
        if self.failure is None:
            raise IllegalArgument("Failure object cannot be None for a failure state.")
        if self.failure.is_empty():
            raise IllegalArgument(
                "Cannot create a failure state with an empty Failure. Use ok_state() instead."
            )


ActionState = Union[InitState[T], OkState[T], FailureState[T]]


def ok_state(value: T) -> OkState[T]:
    return OkState(value)


def init_state() -> InitState[T]:
    return InitState()


def failure_state(failure: Failure) -> FailureState[T]:
    """
    Build the failure variant.

    Raises:
        IllegalArgument: If ``failure`` is None or the empty sentinel
    """
    return FailureState(failure)


__all__ = [
    "ActionState",
    "InitState",
    "OkState",
    "FailureState",
    "ok_state",
    "init_state",
    "failure_state",
]
