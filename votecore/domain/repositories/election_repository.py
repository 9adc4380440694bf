"""Election repository interface."""

from abc import ABC, abstractmethod

from votecore.domain.entities.election import Election


class ElectionRepository(ABC):
    """Repository interface for elections.

    Elections are owned by another part of the system. This interface only
    exposes the reads and the atomic updates the core needs.
    """

    @abstractmethod
    async def get_by_id(self, election_id: int) -> Election | None:
        """Get election by ID."""
        pass

    @abstractmethod
    async def get_completed(self) -> list[Election]:
        """Get COMPLETED elections, most recently ended first."""
        pass

    @abstractmethod
    async def adjust_candidate_count(self, election_id: int, delta: int) -> None:
        """Atomically add ``delta`` to total_candidates.

        Implementations must use the storage engine's in-place arithmetic,
        never a read followed by a write.
        """
        pass

    @abstractmethod
    async def set_winner(self, election_id: int, candidate_id: int) -> None:
        """Update the cached winner pointer."""
        pass

    @abstractmethod
    async def count_votes(self, election_id: int) -> int:
        """Count vote records cast in the election."""
        pass

    @abstractmethod
    async def count_registered_voters(self, election_id: int) -> int:
        """Count rows of the election's registered-voter relation."""
        pass
