"""Election result repository implementation using SQLAlchemy."""

from datetime import UTC, datetime
from decimal import Decimal

from pydantic import BaseModel as PydanticBaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from votecore.domain.entities.election_result import ElectionResult
from votecore.domain.repositories.election_result_repository import (
    ElectionResultRepository,
)
from votecore.domain.repositories.session_adapter import ISessionAdapter
from votecore.infrastructure.exceptions import DatabaseError
from votecore.infrastructure.persistence.base_repository_impl import BaseRepositoryImpl


class ElectionResultModel(PydanticBaseModel):
    """Election result database model."""

    id: int | None = None
    election_id: int
    total_votes: int = 0
    voter_turnout_percentage: Decimal = Decimal("0")
    winner_candidate_id: int | None = None
    remarks: str | None = None
    result_generated_at: datetime | None = None


_SELECT_RESULTS = """
    SELECT
        id,
        election_id,
        total_votes,
        voter_turnout_percentage,
        winner_candidate_id,
        remarks,
        result_generated_at
    FROM election_results
"""


class ElectionResultRepositoryImpl(
    BaseRepositoryImpl[ElectionResult], ElectionResultRepository
):
    """Election result repository implementation using SQLAlchemy."""

    def __init__(self, session: AsyncSession | ISessionAdapter):
        """Initialize repository with database session.

        Args:
            session: AsyncSession for database operations
        """
        super().__init__(
            session=session,
            entity_class=ElectionResult,
            model_class=ElectionResultModel,
        )

    async def get_by_election_id(self, election_id: int) -> ElectionResult | None:
        return await self._fetch_one(
            _SELECT_RESULTS + " WHERE election_id = :election_id",
            {"election_id": election_id},
            "get election result",
        )

    async def get_by_election_ids(
        self, election_ids: list[int]
    ) -> dict[int, ElectionResult]:
        if not election_ids:
            return {}
        placeholders = ", ".join(f":id_{i}" for i in range(len(election_ids)))
        params = {f"id_{i}": eid for i, eid in enumerate(election_ids)}
        results = await self._fetch_all(
            _SELECT_RESULTS + f" WHERE election_id IN ({placeholders})",
            params,
            "get election results",
        )
        return {result.election_id: result for result in results}

    async def upsert(self, entity: ElectionResult) -> ElectionResult:
        """Insert the result or overwrite the election's stored one."""
        now = datetime.now(UTC)
        result = await self._fetch_one(
            """
            INSERT INTO election_results (
                election_id, total_votes, voter_turnout_percentage,
                winner_candidate_id, remarks, result_generated_at,
                created_at, updated_at
            )
            VALUES (
                :election_id, :total_votes, :voter_turnout_percentage,
                :winner_candidate_id, :remarks, :result_generated_at,
                :created_at, :updated_at
            )
            ON CONFLICT (election_id) DO UPDATE SET
                total_votes = EXCLUDED.total_votes,
                voter_turnout_percentage = EXCLUDED.voter_turnout_percentage,
                winner_candidate_id = EXCLUDED.winner_candidate_id,
                remarks = EXCLUDED.remarks,
                result_generated_at = EXCLUDED.result_generated_at,
                updated_at = EXCLUDED.updated_at
            RETURNING
                id, election_id, total_votes, voter_turnout_percentage,
                winner_candidate_id, remarks, result_generated_at
            """,
            {
                "election_id": entity.election_id,
                "total_votes": entity.total_votes,
                "voter_turnout_percentage": Decimal(
                    str(entity.voter_turnout_percentage)
                ),
                "winner_candidate_id": entity.winner_candidate_id,
                "remarks": entity.remarks,
                "result_generated_at": entity.result_generated_at or now,
                "created_at": now,
                "updated_at": now,
            },
            "upsert election result",
        )
        if result is None:
            raise DatabaseError(
                "Failed to upsert election result",
                {"election_id": entity.election_id},
            )
        return result

    def _to_entity(self, model: ElectionResultModel) -> ElectionResult:
        return ElectionResult(
            id=model.id,
            election_id=model.election_id,
            total_votes=model.total_votes,
            voter_turnout_percentage=float(model.voter_turnout_percentage),
            winner_candidate_id=model.winner_candidate_id,
            remarks=model.remarks,
            result_generated_at=model.result_generated_at,
        )
