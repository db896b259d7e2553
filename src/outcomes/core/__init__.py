"""Outcomes Core -- explicit, exception-free outcome handling.

Architecture::

    Layer 1 -- Failure
        equality.py   Shallow equality for held values and causes
        kinds.py      FailureKind discriminant, FailureCategory, kind_is_a
        failure.py    Failure value, empty sentinel, cause chains, Failure.of
        failures.py   Taxonomy members (IllegalArgument, InvalidRequest, ...)
        helpers.py    Validating factory functions

    Layer 2 -- Containers
        pair.py       Pair[A, B]
        option.py     Option[T]
        result.py     Result[T]
        action.py     ActionState (InitState / OkState / FailureState)

    Layer 3 -- Cross-Cutting Concerns
        logging.py    structlog wiring (debug events on captured errors)
        settings.py   OUTCOMES_* environment settings

Only Failure, Option and Result suspend, and only while awaiting a thunk's
awaitable. Every instance is immutable after construction.
"""

from outcomes.core.action import (
    ActionState,
    FailureState,
    InitState,
    OkState,
    failure_state,
    init_state,
    ok_state,
)
from outcomes.core.failure import Failure, describe_error, error_message
from outcomes.core.failures import (
    FAILURE_TYPES,
    ApiFailure,
    AuthFailure,
    EntityAlreadyExists,
    EntityNotFound,
    EntityValidationFailed,
    IllegalArgument,
    IllegalState,
    InternalFailure,
    InvalidRequest,
    OperationNotAllowed,
)
from outcomes.core.helpers import (
    empty_failure,
    failure_with_message,
    wrap_existing_failure,
    wrap_failure,
)
from outcomes.core.kinds import FailureCategory, FailureKind, kind_is_a, kinds_in
from outcomes.core.option import Option
from outcomes.core.pair import Pair
from outcomes.core.result import (
    Result,
    failure_result,
    failure_result_with_message,
    ok_result,
    result_of,
)

__all__ = [
    # Failure
    "Failure",
    "FailureKind",
    "FailureCategory",
    "kind_is_a",
    "kinds_in",
    "describe_error",
    "error_message",
    # Taxonomy
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
    # Helpers
    "empty_failure",
    "failure_with_message",
    "wrap_failure",
    "wrap_existing_failure",
    # Containers
    "Pair",
    "Option",
    "Result",
    "ok_result",
    "failure_result",
    "failure_result_with_message",
    "result_of",
    # ActionState
    "ActionState",
    "InitState",
    "OkState",
    "FailureState",
    "ok_state",
    "init_state",
    "failure_state",
]
