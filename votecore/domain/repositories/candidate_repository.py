"""Candidate repository interface."""

from abc import abstractmethod

from votecore.domain.entities.candidate import Candidate, CandidateStatus
from votecore.domain.repositories.base import BaseRepository


class CandidateRepository(BaseRepository[Candidate]):
    """Repository interface for candidacies.

    Every method that changes a candidacy is conditional on its current
    status, so that concurrent requests cannot move a candidacy out of a
    terminal state.
    """

    @abstractmethod
    async def get_by_election_and_user(
        self, election_id: int, user_id: int
    ) -> Candidate | None:
        """Get the candidacy a user holds in an election.

        Args:
            election_id: Election ID
            user_id: User ID

        Returns:
            Candidate, or None if the user has not registered
        """
        pass

    @abstractmethod
    async def get_by_election(
        self, election_id: int, status: CandidateStatus | None = None
    ) -> list[Candidate]:
        """Get candidacies of an election, newest registration first.

        Args:
            election_id: Election ID
            status: Only return candidacies in this status

        Returns:
            List of candidates
        """
        pass

    @abstractmethod
    async def get_approved_by_election(self, election_id: int) -> list[Candidate]:
        """Get APPROVED candidacies ranked by votes.

        Ordered by total_votes descending, then earliest registration, then
        ID. This order is the ranking used for winners and display.

        Args:
            election_id: Election ID

        Returns:
            Ranked list of candidates
        """
        pass

    @abstractmethod
    async def get_by_user(self, user_id: int) -> list[Candidate]:
        """Get every candidacy of a user, newest registration first."""
        pass

    @abstractmethod
    async def count_by_status(self, election_id: int) -> dict[CandidateStatus, int]:
        """Count candidacies per status for an election.

        Returns:
            Mapping of status to count. Statuses with no rows are omitted.
        """
        pass

    @abstractmethod
    async def transition_status(
        self,
        candidate_id: int,
        from_status: CandidateStatus,
        to_status: CandidateStatus,
    ) -> Candidate | None:
        """Move a candidacy between statuses if it is still in ``from_status``.

        Returns:
            The updated candidate, or None if the row was missing or no
            longer in ``from_status``
        """
        pass

    @abstractmethod
    async def update_pending(self, entity: Candidate) -> Candidate | None:
        """Write profile fields of a candidacy that is still PENDING.

        Returns:
            The updated candidate, or None if it is no longer PENDING
        """
        pass

    @abstractmethod
    async def delete_pending(self, candidate_id: int) -> bool:
        """Delete a candidacy that is still PENDING.

        Returns:
            True if a row was deleted
        """
        pass
