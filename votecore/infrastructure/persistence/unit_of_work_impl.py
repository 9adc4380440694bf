"""Unit of Work implementation over one SQLAlchemy session."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from votecore.common.logging import get_logger
from votecore.domain.repositories.candidate_repository import CandidateRepository
from votecore.domain.repositories.election_admin_repository import (
    ElectionAdminRepository,
)
from votecore.domain.repositories.election_repository import ElectionRepository
from votecore.domain.repositories.election_result_repository import (
    ElectionResultRepository,
)
from votecore.domain.repositories.session_adapter import ISessionAdapter
from votecore.domain.services.interfaces.unit_of_work import IUnitOfWork
from votecore.infrastructure.exceptions import DatabaseError
from votecore.infrastructure.persistence.candidate_repository_impl import (
    CandidateRepositoryImpl,
)
from votecore.infrastructure.persistence.election_admin_repository_impl import (
    ElectionAdminRepositoryImpl,
)
from votecore.infrastructure.persistence.election_repository_impl import (
    ElectionRepositoryImpl,
)
from votecore.infrastructure.persistence.election_result_repository_impl import (
    ElectionResultRepositoryImpl,
)
from votecore.infrastructure.persistence.sqlalchemy_session_adapter import (
    SQLAlchemySessionAdapter,
)


logger = get_logger(__name__)


class UnitOfWorkImpl(IUnitOfWork):
    """Hands out repositories that share one session and transaction."""

    def __init__(self, session: AsyncSession | ISessionAdapter):
        """Initialize with a session.

        Args:
            session: AsyncSession, wrapped in an adapter, or an ISessionAdapter
        """
        if isinstance(session, AsyncSession):
            session = SQLAlchemySessionAdapter(session)
        self._session: ISessionAdapter = session
        self._candidate_repository = CandidateRepositoryImpl(session)
        self._election_repository = ElectionRepositoryImpl(session)
        self._election_admin_repository = ElectionAdminRepositoryImpl(session)
        self._election_result_repository = ElectionResultRepositoryImpl(session)

    @property
    def candidate_repository(self) -> CandidateRepository:
        return self._candidate_repository

    @property
    def election_repository(self) -> ElectionRepository:
        return self._election_repository

    @property
    def election_admin_repository(self) -> ElectionAdminRepository:
        return self._election_admin_repository

    @property
    def election_result_repository(self) -> ElectionResultRepository:
        return self._election_result_repository

    async def commit(self) -> None:
        try:
            await self._session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Commit failed: {e}")
            raise DatabaseError("Failed to commit transaction", {"error": str(e)}) from e

    async def rollback(self) -> None:
        try:
            await self._session.rollback()
        except SQLAlchemyError as e:
            # The original failure is already propagating.
            logger.error(f"Rollback failed: {e}")

    async def flush(self) -> None:
        try:
            await self._session.flush()
        except SQLAlchemyError as e:
            logger.error(f"Flush failed: {e}")
            raise DatabaseError("Failed to flush session", {"error": str(e)}) from e
