"""
Failure taxonomy.

Each member is a present Failure specialized only by its ``kind`` and how its
message is built. Categories follow :class:`~outcomes.core.kinds.FailureCategory`.

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────────┐
        │                           Failure                                │
        ├─────────────────────────────────────────────────────────────────┤
        │  INPUT_VALIDATION   STATE                 DOMAIN                 │
        │  IllegalArgument    IllegalState          EntityNotFound         │
        │  InvalidRequest     OperationNotAllowed   EntityAlreadyExists    │
        │                                           EntityValidationFailed │
        │                                                                  │
        │  INFRASTRUCTURE                                                  │
        │  ApiFailure   AuthFailure   InternalFailure                      │
        └─────────────────────────────────────────────────────────────────┘

Examples:
    >>> EntityNotFound("user 42 not found").is_a(FailureKind.FAILURE)
    True
    >>> InvalidRequest.for_key("email", "required").message
    'Invalid request for key email with reasons required'
    >>> InvalidRequest.from_reasons({"a": ["r1", "r2"]}).message
    'Invalid request with reasons {a: [r1, r2]}'

Guardrails:
    ❌ DON'T: Raise these for expected outcomes
    ✅ DO: Return them through Result.failure(...)

    IllegalArgument is the one member that *is* raised: it signals misuse of
    this library's own API.

Tags:
    failure-taxonomy, error-kinds, outcomes-core
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from outcomes.core.failure import Failure
from outcomes.core.kinds import FailureKind


class _MessageFailure(Failure):
    """Taxonomy member whose message is passed through unchanged."""

    def __init__(self, message: str):
        super().__init__(message)


# =============================================================================
# INPUT VALIDATION
# =============================================================================


class IllegalArgument(_MessageFailure):
    """Caller supplied an invalid argument. Raised for API misuse."""

    kind = FailureKind.ILLEGAL_ARGUMENT


class InvalidRequest(Failure):
    """
    Request failed field-level validation.

    Carries a read-only ``reasons`` mapping of field name to reason strings.
    Build it with :meth:`for_key` (one field, one reason) or
    :meth:`from_reasons` (a whole mapping); both produce the same kind.
    """

    kind = FailureKind.INVALID_REQUEST

    def __init__(self, message: str, reasons: Mapping[str, Iterable[str]]):
        super().__init__(message)
        frozen = MappingProxyType({key: list(values) for key, values in reasons.items()})
        Exception.__setattr__(self, "_reasons", frozen)

    @classmethod
    def for_key(cls, key: str, reason: str) -> InvalidRequest:
        return cls(f"Invalid request for key {key} with reasons {reason}", {key: [reason]})

    @classmethod
    def from_reasons(cls, reasons: Mapping[str, Iterable[str]]) -> InvalidRequest:
        if reasons is None:
            raise IllegalArgument("Reasons provided to InvalidRequest.from_reasons is None")
        entries = {key: list(values) for key, values in reasons.items()}
        rendered = "; ".join(f"{key}: [{', '.join(values)}]" for key, values in entries.items())
        return cls(f"Invalid request with reasons {{{rendered}}}", entries)

    @property
    def reasons(self) -> Mapping[str, list[str]]:
        return self._reasons

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["reasons"] = {key: list(values) for key, values in self._reasons.items()}
        return result


# =============================================================================
# STATE / PERMISSION
# =============================================================================


class IllegalState(_MessageFailure):
    """Operation is invalid given the current state."""

    kind = FailureKind.ILLEGAL_STATE


class OperationNotAllowed(_MessageFailure):
    """Operation is forbidden by policy."""

    kind = FailureKind.OPERATION_NOT_ALLOWED


# =============================================================================
# DOMAIN / ENTITY
# =============================================================================


class EntityNotFound(_MessageFailure):
    kind = FailureKind.ENTITY_NOT_FOUND


class EntityAlreadyExists(_MessageFailure):
    kind = FailureKind.ENTITY_ALREADY_EXISTS


class EntityValidationFailed(_MessageFailure):
    kind = FailureKind.ENTITY_VALIDATION_FAILED


# =============================================================================
# INFRASTRUCTURE
# =============================================================================


class ApiFailure(_MessageFailure):
    """External API call failed."""

    kind = FailureKind.API_FAILURE


class AuthFailure(_MessageFailure):
    """Authentication or authorization failed."""

    kind = FailureKind.AUTH_FAILURE


class InternalFailure(_MessageFailure):
    """Bug or unexpected system-level condition."""

    kind = FailureKind.INTERNAL_FAILURE


FAILURE_TYPES: Mapping[FailureKind, type[Failure]] = MappingProxyType({
    FailureKind.FAILURE: Failure,
    FailureKind.API_FAILURE: ApiFailure,
    FailureKind.AUTH_FAILURE: AuthFailure,
    FailureKind.ENTITY_ALREADY_EXISTS: EntityAlreadyExists,
    FailureKind.ENTITY_NOT_FOUND: EntityNotFound,
    FailureKind.ENTITY_VALIDATION_FAILED: EntityValidationFailed,
    FailureKind.ILLEGAL_ARGUMENT: IllegalArgument,
    FailureKind.ILLEGAL_STATE: IllegalState,
    FailureKind.INTERNAL_FAILURE: InternalFailure,
    FailureKind.INVALID_REQUEST: InvalidRequest,
    FailureKind.OPERATION_NOT_ALLOWED: OperationNotAllowed,
})


__all__ = [
    "ApiFailure",
    "AuthFailure",
    "EntityAlreadyExists",
    "EntityNotFound",
    "EntityValidationFailed",
    "IllegalArgument",
    "IllegalState",
    "InternalFailure",
    "InvalidRequest",
    "OperationNotAllowed",
    "FAILURE_TYPES",
]
