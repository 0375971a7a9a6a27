"""
postal_climate.errors

Classified error taxonomy shared by both services.

Responsibilities:
- Define the closed set of failure kinds (validation, not found, unknown).
- Carry the underlying cause and observability tags alongside a user-facing message.
- Map each kind to exactly one HTTP status.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, ClassVar


class ErrorKind(str, enum.Enum):
    validation = "validation"
    not_found = "not_found"
    unknown = "unknown"


@dataclass(eq=False)
class ClassifiedError(Exception):
    """
    Base of the taxonomy. Only the three subclasses below are ever raised.

    `message` is safe to show to callers; `cause` and `tags` are for spans and logs only.
    """

    kind: ClassVar[ErrorKind]

    message: str
    cause: BaseException | str | None = None
    tags: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


@dataclass(eq=False)
class ValidationError(ClassifiedError):
    kind: ClassVar[ErrorKind] = ErrorKind.validation

    reasons: list[str] = field(default_factory=list)


@dataclass(eq=False)
class NotFoundError(ClassifiedError):
    kind: ClassVar[ErrorKind] = ErrorKind.not_found


@dataclass(eq=False)
class UnknownError(ClassifiedError):
    kind: ClassVar[ErrorKind] = ErrorKind.unknown


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.validation: 422,
    ErrorKind.not_found: 404,
    ErrorKind.unknown: 500,
}

# Every kind must map to a status.
_missing = set(ErrorKind) - set(STATUS_BY_KIND)
if _missing:
    raise RuntimeError(f"no HTTP status mapped for error kinds: {sorted(k.value for k in _missing)}")


def describe_cause(error: ClassifiedError) -> str:
    if error.cause is None:
        return ""
    if isinstance(error.cause, BaseException):
        return f"{type(error.cause).__name__}: {error.cause}"
    return str(error.cause)


# --- Module Notes -----------------------------------------------------------
# Errors cross process boundaries only as an HTTP status; the Input Service rebuilds the
# kind from the Orchestrator's status code (see `postal_climate.services.input`).
