"""DTOs for election result operations."""

from dataclasses import dataclass
from typing import Any

from votecore.domain.value_objects.election_result_summary import (
    ElectionResultSummary,
)


@dataclass
class GetElectionResultInputDto:
    """Input for reading, and if stale persisting, an election's result."""

    election_id: int | None
    regenerate: bool = False


@dataclass
class ElectionResultOutputDto:
    """A freshly built summary and the outcome of persisting it.

    ``persisted`` is False both when no write was needed and when the write
    failed; ``persistence_error`` is set only in the latter case.
    """

    summary: ElectionResultSummary
    persisted: bool = False
    persistence_error: str | None = None

    @property
    def persistence_failed(self) -> bool:
        return self.persistence_error is not None

    def to_dict(self) -> dict[str, Any]:
        data = self.summary.to_dict()
        data["persisted"] = self.persisted
        data["persistence_error"] = self.persistence_error
        return data
