"""Unit of Work interface for transaction management.

All repositories handed out by one unit of work share a single database
transaction. Use cases commit or roll back through it, so that a row change
and the counter change it implies land together or not at all.
"""

from abc import ABC, abstractmethod

from votecore.domain.repositories.candidate_repository import CandidateRepository
from votecore.domain.repositories.election_admin_repository import (
    ElectionAdminRepository,
)
from votecore.domain.repositories.election_repository import ElectionRepository
from votecore.domain.repositories.election_result_repository import (
    ElectionResultRepository,
)


class IUnitOfWork(ABC):
    """Unit of Work interface for transaction management."""

    @property
    @abstractmethod
    def candidate_repository(self) -> CandidateRepository:
        """Get the candidate repository for this unit of work."""
        pass

    @property
    @abstractmethod
    def election_repository(self) -> ElectionRepository:
        """Get the election repository for this unit of work."""
        pass

    @property
    @abstractmethod
    def election_admin_repository(self) -> ElectionAdminRepository:
        """Get the election admin repository for this unit of work."""
        pass

    @property
    @abstractmethod
    def election_result_repository(self) -> ElectionResultRepository:
        """Get the election result repository for this unit of work."""
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Commit the current transaction."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Rollback the current transaction."""
        pass

    @abstractmethod
    async def flush(self) -> None:
        """Flush changes to the database without committing."""
        pass
