"""Tagged outcomes returned by use cases.

Use cases never raise for expected business results. They return an
``Outcome`` and the HTTP layer turns it into a response.
"""

import enum
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class OutcomeKind(enum.Enum):
    """Every way a use case can finish."""

    SUCCESS = "success"
    INVALID_REQUEST = "invalid_request"
    NOT_FOUND = "not_found"
    DUPLICATE_ENTITY = "duplicate_entity"
    MISSING_REFERENCE = "missing_reference"
    PERSISTENCE_FAILURE = "persistence_failure"


class ReferenceKind(enum.Enum):
    """Foreign keys a pokemon creation request can point at."""

    CATEGORY = "category"
    OWNER = "owner"
    TYPE = "type"


STATUS_CODES: dict[OutcomeKind, int] = {
    OutcomeKind.SUCCESS: 200,
    OutcomeKind.INVALID_REQUEST: 400,
    OutcomeKind.NOT_FOUND: 404,
    OutcomeKind.DUPLICATE_ENTITY: 422,
    OutcomeKind.MISSING_REFERENCE: 422,
    OutcomeKind.PERSISTENCE_FAILURE: 500,
}


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    """Result of a use case: a value on success, a reason otherwise."""

    kind: OutcomeKind
    value: T | None = None
    detail: str | None = None
    reference: ReferenceKind | None = None

    @property
    def is_success(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(kind=OutcomeKind.SUCCESS, value=value)

    @classmethod
    def invalid_request(cls, detail: str) -> "Outcome[T]":
        return cls(kind=OutcomeKind.INVALID_REQUEST, detail=detail)

    @classmethod
    def not_found(cls) -> "Outcome[T]":
        return cls(kind=OutcomeKind.NOT_FOUND)

    @classmethod
    def duplicate_entity(cls, detail: str) -> "Outcome[T]":
        return cls(kind=OutcomeKind.DUPLICATE_ENTITY, detail=detail)

    @classmethod
    def missing_reference(cls, reference: ReferenceKind, detail: str) -> "Outcome[T]":
        return cls(
            kind=OutcomeKind.MISSING_REFERENCE, detail=detail, reference=reference
        )

    @classmethod
    def persistence_failure(cls, detail: str) -> "Outcome[T]":
        return cls(kind=OutcomeKind.PERSISTENCE_FAILURE, detail=detail)
