"""Election result publication use case."""

from datetime import UTC, datetime

from votecore.application.dtos.election_result_dto import (
    ElectionResultOutputDto,
    GetElectionResultInputDto,
)
from votecore.common.logging import get_logger
from votecore.domain.entities.election import Election
from votecore.domain.entities.election_result import ElectionResult
from votecore.domain.exceptions import (
    InternalError,
    InvalidInputError,
    NotFoundError,
    PreconditionFailedError,
)
from votecore.domain.services.election_result_domain_service import (
    ElectionResultDomainService,
)
from votecore.domain.services.interfaces.unit_of_work import IUnitOfWork
from votecore.domain.value_objects.election_result_summary import (
    ElectionResultSummary,
)


PERSISTENCE_FAILED_MESSAGE = "Failed to persist election result"


class ManageElectionResultsUseCase:
    """Builds election result summaries and keeps the stored result in sync.

    A summary is rebuilt from live data on every request. The condensed form
    is written back only when it differs from what is stored (or when a
    regeneration is forced), so repeated reads of an unchanged election do
    not write.
    """

    def __init__(
        self,
        uow: IUnitOfWork,
        result_service: ElectionResultDomainService | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            uow: Unit of work giving access to repositories in one transaction
            result_service: Summary builder
        """
        self.uow = uow
        self.result_service = result_service or ElectionResultDomainService()
        self.logger = get_logger(self.__class__.__name__)

    async def list_completed_results(self) -> list[ElectionResultSummary]:
        """Build summaries of every COMPLETED election, most recently ended first.

        Nothing is persisted.
        """
        elections = await self.uow.election_repository.get_completed()
        stored_results = await self.uow.election_result_repository.get_by_election_ids(
            [e.id for e in elections if e.id is not None]
        )

        summaries = []
        for election in elections:
            summary = await self._build_summary(
                election, stored_results.get(election.id)  # type: ignore[arg-type]
            )
            summaries.append(summary)
        return summaries

    async def get_result(
        self, input_dto: GetElectionResultInputDto
    ) -> ElectionResultOutputDto:
        """Build one election's summary and persist it if stale.

        Raises:
            InvalidInputError: No election ID was given
            NotFoundError: The election does not exist
            PreconditionFailedError: The election is not COMPLETED
        """
        if not input_dto.election_id:
            raise InvalidInputError(
                "Election ID is required", ["Election ID is required"]
            )

        election = await self.uow.election_repository.get_by_id(input_dto.election_id)
        if election is None:
            raise NotFoundError(
                "Election not found", {"election_id": input_dto.election_id}
            )
        if not election.is_completed:
            raise PreconditionFailedError(
                "Election is not completed yet",
                {"election_id": election.id, "status": election.status.value},
            )

        stored = await self.uow.election_result_repository.get_by_election_id(
            input_dto.election_id
        )
        summary = await self._build_summary(election, stored)

        if not self.should_persist(summary, stored, input_dto.regenerate):
            self.logger.debug(
                "Stored result is current", election_id=input_dto.election_id
            )
            return ElectionResultOutputDto(summary=summary, persisted=False)

        try:
            await self._persist(summary)
        except InternalError as e:
            # The caller still gets the summary; the stored copy is now stale.
            self.logger.error(
                "Failed to persist election result",
                election_id=input_dto.election_id,
                error=e.message,
                exc_info=True,
            )
            return ElectionResultOutputDto(
                summary=summary,
                persisted=False,
                persistence_error=PERSISTENCE_FAILED_MESSAGE,
            )

        self.logger.info(
            "Election result persisted",
            election_id=input_dto.election_id,
            total_votes=summary.total_votes,
            winner_candidate_id=summary.winner_candidate_id,
            regenerate=input_dto.regenerate,
        )
        return ElectionResultOutputDto(summary=summary, persisted=True)

    async def regenerate_result(self, election_id: int | None) -> ElectionResultOutputDto:
        """Like :meth:`get_result` but always persists."""
        return await self.get_result(
            GetElectionResultInputDto(election_id=election_id, regenerate=True)
        )

    @staticmethod
    def should_persist(
        summary: ElectionResultSummary,
        stored: ElectionResult | None,
        regenerate: bool = False,
    ) -> bool:
        """Decide whether ``summary`` must overwrite the stored result."""
        if regenerate or stored is None:
            return True
        if stored.total_votes != summary.total_votes:
            return True
        if stored.voter_turnout_percentage != summary.voter_turnout_percentage:
            return True
        winner_id = summary.winner_candidate_id
        return winner_id is not None and stored.winner_candidate_id != winner_id

    async def _build_summary(
        self, election: Election, stored: ElectionResult | None
    ) -> ElectionResultSummary:
        election_id = election.id
        assert election_id is not None

        candidates = await self.uow.candidate_repository.get_approved_by_election(
            election_id
        )
        votes_cast = await self.uow.election_repository.count_votes(election_id)

        counted_voters = 0
        if not election.total_voters:
            counted_voters = await self.uow.election_repository.count_registered_voters(
                election_id
            )
        registered = self.result_service.resolve_registered_voters(
            election, counted_voters
        )

        return self.result_service.build_summary(
            election=election,
            ranked_candidates=candidates,
            votes_cast=votes_cast,
            registered_voters=registered,
            stored_result=stored,
        )

    async def _persist(self, summary: ElectionResultSummary) -> None:
        """Upsert the result row and the winner pointer in one transaction."""
        election_id = summary.election_id
        assert election_id is not None

        result = ElectionResult(
            election_id=election_id,
            total_votes=summary.total_votes,
            voter_turnout_percentage=summary.voter_turnout_percentage,
            winner_candidate_id=summary.winner_candidate_id,
            remarks=summary.remarks,
            result_generated_at=datetime.now(UTC),
        )

        try:
            await self.uow.election_result_repository.upsert(result)
            if summary.winner_candidate_id is not None:
                await self.uow.election_repository.set_winner(
                    election_id, summary.winner_candidate_id
                )
            await self.uow.commit()
        except Exception:
            await self.uow.rollback()
            raise
