"""Classification of store and validation failures into domain errors.

Low-level failures (driver errors, pydantic validation, store lookups) are
first reduced to a ``FailureSignal`` and only then mapped to a ``UserError``
subclass, so every call site shares the same three-way split between a
missing record, a badly shaped input and a uniqueness violation.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from enum import StrEnum

import pydantic
from pymongo.errors import DuplicateKeyError

from mesto.core.db import MalformedIdError, RecordNotFoundError
from mesto.errors import ConflictError, NotFoundError, UserError, ValidationError


class FailureSignal(StrEnum):
    NOT_FOUND = "not_found"
    SHAPE = "shape"
    UNIQUENESS = "uniqueness"
    OTHER = "other"


def classify_failure(exc: BaseException) -> FailureSignal:
    """Reduce an exception to the signal that decides its domain error kind."""
    match exc:
        case RecordNotFoundError():
            return FailureSignal.NOT_FOUND
        case MalformedIdError() | pydantic.ValidationError():
            return FailureSignal.SHAPE
        case DuplicateKeyError():
            return FailureSignal.UNIQUENESS
        case _:
            return FailureSignal.OTHER


@contextmanager
def translate_failures(
    *,
    not_found: str = "User not found",
    invalid: str = "Invalid data",
    conflict: str = "User with this email already exists",
    invalid_error: type[UserError] = ValidationError,
) -> Iterator[None]:
    """Re-raise failures from the wrapped block as domain errors.

    Unclassified exceptions propagate unchanged. ``invalid_error`` lets a caller
    report shape failures under another kind (login reports them as 401).
    """
    try:
        yield
    except UserError:
        raise
    except Exception as exc:
        match classify_failure(exc):
            case FailureSignal.NOT_FOUND:
                raise NotFoundError(not_found) from exc
            case FailureSignal.SHAPE:
                raise invalid_error(invalid) from exc
            case FailureSignal.UNIQUENESS:
                raise ConflictError(conflict) from exc
            case FailureSignal.OTHER:
                raise
