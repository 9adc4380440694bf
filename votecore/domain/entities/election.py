"""Election entity."""

from datetime import datetime
from enum import Enum

from votecore.domain.entities.base import BaseEntity


class ElectionStatus(str, Enum):
    """Election status values."""

    DRAFT = "DRAFT"
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class Election(BaseEntity):
    """An election referenced by the candidacy and result logic.

    The core does not own elections. It reads them, adjusts the denormalized
    ``total_candidates`` counter and caches the winner pointer.
    """

    CLOSED_FOR_REGISTRATION: frozenset[ElectionStatus] = frozenset(
        {ElectionStatus.COMPLETED, ElectionStatus.CANCELLED}
    )

    def __init__(
        self,
        title: str,
        status: ElectionStatus = ElectionStatus.DRAFT,
        total_candidates: int = 0,
        total_voters: int = 0,
        start_time: datetime | None = None,
        end_time: datetime | None = None,
        winner_candidate_id: int | None = None,
        id: int | None = None,
    ) -> None:
        """Initialize the election entity.

        Args:
            title: Display title
            status: Current status
            total_candidates: Number of PENDING or APPROVED candidacies
            total_voters: Registered voter count (0 when unknown)
            start_time: Voting start
            end_time: Voting end
            winner_candidate_id: Cached winner pointer
            id: Election ID
        """
        super().__init__(id)
        self.title = title
        self.status = ElectionStatus(status)
        self.total_candidates = total_candidates
        self.total_voters = total_voters
        self.start_time = start_time
        self.end_time = end_time
        self.winner_candidate_id = winner_candidate_id

    def __str__(self) -> str:
        return f"{self.title} ({self.status.value})"

    @property
    def is_completed(self) -> bool:
        return self.status == ElectionStatus.COMPLETED

    @property
    def accepts_registrations(self) -> bool:
        """Whether new candidacies may still be registered."""
        return self.status not in self.CLOSED_FOR_REGISTRATION
