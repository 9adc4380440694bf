"""Infrastructure layer exceptions."""

from votecore.domain.exceptions import ConflictError, InternalError


class DatabaseError(InternalError):
    """A storage statement or transaction failed."""


class DuplicateEntityError(ConflictError):
    """A unique constraint rejected the write."""


class ConfigurationError(InternalError):
    """Settings are missing or malformed."""
