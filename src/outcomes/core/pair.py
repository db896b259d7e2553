"""Immutable 2-tuple.

Examples:
    >>> pair = Pair.of("a", 1)
    >>> pair.get_first(), pair.get_second()
    ('a', 1)
    >>> str(pair)
    'Pair(a, 1)'
    >>> Pair.of("a", 1) == Pair.of("a", 1)
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from outcomes.core.equality import shallow_equal, shallow_hash

A = TypeVar("A")
B = TypeVar("B")

_HASH_MULTIPLIER = 31


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x1_0000_0000 if value & 0x8000_0000 else value


def _fold(element: Any) -> int:
    """Fold the UTF-16 code units of ``str(element)`` as ``h * 31 + c``."""
    if element is None:
        return 0
    encoded = str(element).encode("utf-16-le")
    acc = 0
    for i in range(0, len(encoded), 2):
        unit = encoded[i] | (encoded[i + 1] << 8)
        # (h << 5) - h with the shift applied to the 32-bit value only
        acc = _to_int32(_to_int32(acc) << 5) - acc + unit
    return acc


@dataclass(frozen=True, slots=True, eq=False)
class Pair(Generic[A, B]):
    """
    Two values fixed at construction.

    No validation is applied: ``None`` is stored as-is. Equality is shallow:
    scalar elements compare by value, any other element by identity, so
    ``Pair.of([1], [2]) != Pair.of([1], [2])``. :meth:`hash_code` provides a
    stable 32-bit value computed from the elements' string forms.
    """

    first: A
    second: B

    @classmethod
    def of(cls, a: A, b: B) -> Pair[A, B]:
        return cls(a, b)

    def get_first(self) -> A:
        return self.first

    def get_second(self) -> B:
        return self.second

    def hash_code(self) -> int:
        """32-bit hash from the string forms of both elements."""
        combined = _to_int32(_fold(self.first) * _HASH_MULTIPLIER)
        return _to_int32(combined ^ _to_int32(_fold(self.second)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return shallow_equal(self.first, other.first) and shallow_equal(self.second, other.second)

    def __hash__(self) -> int:
        return hash((shallow_hash(self.first), shallow_hash(self.second)))

    def __str__(self) -> str:
        return f"Pair({self.first}, {self.second})"

    def __repr__(self) -> str:
        return f"Pair({self.first!r}, {self.second!r})"


__all__ = ["Pair"]
