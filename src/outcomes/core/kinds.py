"""
Failure kinds and categories.

Every Failure carries a ``kind`` discriminant instead of relying on runtime
class identity. "Is-a" questions are answered by walking a small parent table,
so a failure built in one module compares correctly against a kind declared in
another.

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────────┐
        │                         FAILURE                               │
        ├──────────────────┬──────────────────┬─────────────────────────┤
        │ INPUT_VALIDATION │ STATE            │ DOMAIN                  │
        │  ILLEGAL_ARGUMENT│  ILLEGAL_STATE   │  ENTITY_NOT_FOUND       │
        │  INVALID_REQUEST │  OPERATION_NOT_  │  ENTITY_ALREADY_EXISTS  │
        │                  │    ALLOWED       │  ENTITY_VALIDATION_...  │
        ├──────────────────┴──────────────────┴─────────────────────────┤
        │ INFRASTRUCTURE: API_FAILURE, AUTH_FAILURE, INTERNAL_FAILURE    │
        └──────────────────────────────────────────────────────────────┘

Examples:
    >>> kind_is_a(FailureKind.ENTITY_NOT_FOUND, FailureKind.FAILURE)
    True
    >>> FailureKind.AUTH_FAILURE.category
    <FailureCategory.INFRASTRUCTURE: 'INFRASTRUCTURE'>

Tags:
    failure-kind, tagged-union, classification, outcomes-core
"""

from __future__ import annotations

from enum import Enum


class FailureCategory(str, Enum):
    """Coarse grouping of failure kinds for routing and reporting."""

    INPUT_VALIDATION = "INPUT_VALIDATION"  # caller supplied invalid input
    STATE = "STATE"                        # invalid given current state or policy
    DOMAIN = "DOMAIN"                      # business-entity outcome
    INFRASTRUCTURE = "INFRASTRUCTURE"      # external dependency or system failure
    UNCATEGORIZED = "UNCATEGORIZED"


class FailureKind(str, Enum):
    """
    Discriminant identifying which taxonomy member a Failure belongs to.

    The value is the rendered kind name used by ``str(failure)``.
    """

    FAILURE = "Failure"
    API_FAILURE = "ApiFailure"
    AUTH_FAILURE = "AuthFailure"
    ENTITY_ALREADY_EXISTS = "EntityAlreadyExists"
    ENTITY_NOT_FOUND = "EntityNotFound"
    ENTITY_VALIDATION_FAILED = "EntityValidationFailed"
    ILLEGAL_ARGUMENT = "IllegalArgument"
    ILLEGAL_STATE = "IllegalState"
    INTERNAL_FAILURE = "InternalFailure"
    INVALID_REQUEST = "InvalidRequest"
    OPERATION_NOT_ALLOWED = "OperationNotAllowed"

    @property
    def parent(self) -> FailureKind | None:
        return _PARENTS.get(self)

    @property
    def category(self) -> FailureCategory:
        return _CATEGORIES.get(self, FailureCategory.UNCATEGORIZED)


# Every taxonomy member specializes the base kind directly.
_PARENTS: dict[FailureKind, FailureKind] = {
    kind: FailureKind.FAILURE for kind in FailureKind if kind is not FailureKind.FAILURE
}

_CATEGORIES: dict[FailureKind, FailureCategory] = {
    FailureKind.ILLEGAL_ARGUMENT: FailureCategory.INPUT_VALIDATION,
    FailureKind.INVALID_REQUEST: FailureCategory.INPUT_VALIDATION,
    FailureKind.ILLEGAL_STATE: FailureCategory.STATE,
    FailureKind.OPERATION_NOT_ALLOWED: FailureCategory.STATE,
    FailureKind.ENTITY_NOT_FOUND: FailureCategory.DOMAIN,
    FailureKind.ENTITY_ALREADY_EXISTS: FailureCategory.DOMAIN,
    FailureKind.ENTITY_VALIDATION_FAILED: FailureCategory.DOMAIN,
    FailureKind.API_FAILURE: FailureCategory.INFRASTRUCTURE,
    FailureKind.AUTH_FAILURE: FailureCategory.INFRASTRUCTURE,
    FailureKind.INTERNAL_FAILURE: FailureCategory.INFRASTRUCTURE,
}


def kind_is_a(kind: FailureKind, other: FailureKind | str) -> bool:
    """Check whether ``kind`` is ``other`` or specializes it.

    ``other`` may also be the kind's rendered name, e.g. ``"ApiFailure"``.
    """
    current: FailureKind | None = kind
    while current is not None:
        if current == other:
            return True
        current = current.parent
    return False


def kinds_in(category: FailureCategory) -> list[FailureKind]:
    """List the kinds grouped under a category, in declaration order."""
    return [kind for kind in FailureKind if kind.category is category]


__all__ = [
    "FailureCategory",
    "FailureKind",
    "kind_is_a",
    "kinds_in",
]
