"""Election result repository interface."""

from abc import ABC, abstractmethod

from votecore.domain.entities.election_result import ElectionResult


class ElectionResultRepository(ABC):
    """Repository interface for the stored result of each election."""

    @abstractmethod
    async def get_by_election_id(self, election_id: int) -> ElectionResult | None:
        """Get the stored result of an election."""
        pass

    @abstractmethod
    async def get_by_election_ids(
        self, election_ids: list[int]
    ) -> dict[int, ElectionResult]:
        """Get stored results keyed by election ID."""
        pass

    @abstractmethod
    async def upsert(self, entity: ElectionResult) -> ElectionResult:
        """Insert the result, or overwrite the one stored for the election."""
        pass
