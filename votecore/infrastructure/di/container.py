"""Explicit wiring of infrastructure and use cases.

Entry points build one Container from settings and pass it down. Nothing
here is cached at module level.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from votecore.application.usecases.manage_candidates_usecase import (
    ManageCandidatesUseCase,
)
from votecore.application.usecases.manage_election_results_usecase import (
    ManageElectionResultsUseCase,
)
from votecore.common.logging import configure_logging
from votecore.domain.services.election_result_domain_service import (
    ElectionResultDomainService,
)
from votecore.domain.services.interfaces.unit_of_work import IUnitOfWork
from votecore.infrastructure.config.async_database import AsyncDatabase
from votecore.infrastructure.config.settings import Settings, get_settings
from votecore.infrastructure.persistence.unit_of_work_impl import UnitOfWorkImpl


class Container:
    """Builds the database handle and the use cases that run on it."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        configure_logging(self.settings.log_level, self.settings.log_format)
        self.database = AsyncDatabase(self.settings)
        self.result_service = ElectionResultDomainService()

    @asynccontextmanager
    async def unit_of_work(self) -> AsyncIterator[IUnitOfWork]:
        """Open a session and wrap it in a unit of work."""
        async with self.database.get_session() as session:
            yield UnitOfWorkImpl(session)

    def candidates_usecase(self, uow: IUnitOfWork) -> ManageCandidatesUseCase:
        return ManageCandidatesUseCase(uow)

    def results_usecase(self, uow: IUnitOfWork) -> ManageElectionResultsUseCase:
        return ManageElectionResultsUseCase(uow, self.result_service)

    async def close(self) -> None:
        await self.database.dispose()
