"""Shallow equality for values held inside outcome containers.

Immutable scalars compare by value; everything else compares by identity.
Lists, dicts and other objects are never traversed, so two containers holding
structurally equal but distinct lists are different.

Examples:
    >>> shallow_equal(1, 1), shallow_equal("a", "a")
    (True, True)
    >>> shallow_equal([1], [1])
    False
"""

from __future__ import annotations

from enum import Enum
from typing import Any

_SCALARS = (type(None), bool, int, float, complex, str, bytes, Enum)


def is_scalar(value: Any) -> bool:
    return isinstance(value, _SCALARS)


def shallow_equal(left: Any, right: Any) -> bool:
    """Identity for objects, ``==`` for immutable scalars."""
    if left is right:
        return True
    if is_scalar(left) and is_scalar(right):
        return bool(left == right)
    return False


def shallow_hash(value: Any) -> int:
    """Hash consistent with :func:`shallow_equal`."""
    if is_scalar(value):
        return hash(value)
    return id(value)


__all__ = ["shallow_equal", "shallow_hash", "is_scalar"]
