"""Domain error taxonomy.

Every failure the core reports to its callers is a :class:`VoteCoreError`
carrying an :class:`ErrorKind`. Callers branch on ``error.kind``, never on the
message text.
"""

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Kinds of failure distinguishable by callers."""

    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    INVALID_INPUT = "invalid_input"
    CONFLICT = "conflict"
    PRECONDITION_FAILED = "precondition_failed"
    INTERNAL = "internal"


class VoteCoreError(Exception):
    """Base class for all errors raised by the core."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    @property
    def public_message(self) -> str:
        """Message safe to show to end users."""
        return self.message

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.public_message,
        }


class NotFoundError(VoteCoreError):
    """The requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class UnauthorizedError(VoteCoreError):
    """The caller lacks the owner or election-admin relation."""

    kind = ErrorKind.UNAUTHORIZED


class InvalidInputError(VoteCoreError):
    """Field invariants were violated.

    Attributes:
        errors: Every violated rule, in validation order
    """

    kind = ErrorKind.INVALID_INPUT

    def __init__(
        self,
        message: str,
        errors: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)
        self.errors = list(errors or [])

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["errors"] = self.errors
        return data


class ConflictError(VoteCoreError):
    """Duplicate candidacy or a mutation the current state does not allow."""

    kind = ErrorKind.CONFLICT


class PreconditionFailedError(VoteCoreError):
    """The election is not in the status the action requires."""

    kind = ErrorKind.PRECONDITION_FAILED


class InternalError(VoteCoreError):
    """Storage or transaction failure."""

    kind = ErrorKind.INTERNAL

    @property
    def public_message(self) -> str:
        return "An internal error occurred"
