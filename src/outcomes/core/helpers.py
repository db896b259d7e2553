"""Free functions for building Failures with input validation.

Examples:
    >>> wrap_failure(None, None).message
    'An unexpected error occurred.'
    >>> original = failure_with_message("Original login failed")
    >>> wrap_existing_failure("User authentication issue", original).unwrap() is original
    True
"""

from __future__ import annotations

from typing import Any

from outcomes.core.failure import Failure, error_message
from outcomes.core.failures import IllegalArgument

GENERIC_MESSAGE = "An unexpected error occurred."


def empty_failure() -> Failure:
    return Failure.empty()


def failure_with_message(message: str) -> Failure:
    """Create a present Failure, rejecting a missing or blank message."""
    if message is None or not message.strip():
        raise IllegalArgument(
            "Failure message cannot be None or blank when created directly."
        )
    return Failure.of_message(message)


def wrap_failure(message: str | None, cause: Any) -> Failure:
    """
    Wrap ``cause`` in a present Failure.

    The message is ``message`` when it is non-blank, else the cause's own
    non-blank message when the cause is an error, else ``GENERIC_MESSAGE``.
    """
    if message and message.strip():
        final_message = message
    else:
        cause_message = error_message(cause)
        if cause_message and cause_message.strip():
            final_message = cause_message
        else:
            final_message = GENERIC_MESSAGE
    return Failure.wrap(final_message, cause)


def wrap_existing_failure(message: str | None, original_failure: Failure) -> Failure:
    """Wrap an existing Failure so that ``unwrap()`` leads back to it."""
    if original_failure is None:
        raise IllegalArgument("Original failure to wrap cannot be None.")
    return wrap_failure(message, original_failure)


__all__ = [
    "GENERIC_MESSAGE",
    "empty_failure",
    "failure_with_message",
    "wrap_failure",
    "wrap_existing_failure",
]
