"""Election repository implementation using SQLAlchemy."""

from datetime import UTC, datetime

from pydantic import BaseModel as PydanticBaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from votecore.domain.entities.election import Election
from votecore.domain.repositories.election_repository import ElectionRepository
from votecore.domain.repositories.session_adapter import ISessionAdapter
from votecore.infrastructure.exceptions import DatabaseError
from votecore.infrastructure.persistence.base_repository_impl import BaseRepositoryImpl


class ElectionModel(PydanticBaseModel):
    """Election database model."""

    id: int
    title: str
    status: str
    total_candidates: int = 0
    total_voters: int | None = 0
    start_time: datetime | None = None
    end_time: datetime | None = None
    winner_candidate_id: int | None = None


_SELECT_ELECTIONS = """
    SELECT
        id,
        title,
        status,
        total_candidates,
        total_voters,
        start_time,
        end_time,
        winner_candidate_id
    FROM elections
"""


class ElectionRepositoryImpl(BaseRepositoryImpl[Election], ElectionRepository):
    """Election repository implementation using SQLAlchemy."""

    def __init__(self, session: AsyncSession | ISessionAdapter):
        """Initialize repository with database session.

        Args:
            session: AsyncSession for database operations
        """
        super().__init__(
            session=session,
            entity_class=Election,
            model_class=ElectionModel,
        )

    async def get_by_id(self, entity_id: int) -> Election | None:
        return await self._fetch_one(
            _SELECT_ELECTIONS + " WHERE id = :id",
            {"id": entity_id},
            "get election by ID",
        )

    async def get_completed(self) -> list[Election]:
        return await self._fetch_all(
            _SELECT_ELECTIONS
            + " WHERE status = :status ORDER BY end_time DESC NULLS LAST, id DESC",
            {"status": "COMPLETED"},
            "get completed elections",
        )

    async def adjust_candidate_count(self, election_id: int, delta: int) -> None:
        """Atomically add ``delta`` to total_candidates.

        Raises:
            DatabaseError: The election row does not exist
        """
        result = await self._execute(
            """
            UPDATE elections
            SET total_candidates = total_candidates + :delta,
                updated_at = :updated_at
            WHERE id = :id
            """,
            {"id": election_id, "delta": delta, "updated_at": datetime.now(UTC)},
            "adjust election candidate count",
        )
        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise DatabaseError(
                "Election disappeared while adjusting candidate count",
                {"election_id": election_id, "delta": delta},
            )

    async def set_winner(self, election_id: int, candidate_id: int) -> None:
        await self._execute(
            """
            UPDATE elections
            SET winner_candidate_id = :candidate_id,
                updated_at = :updated_at
            WHERE id = :id
            """,
            {
                "id": election_id,
                "candidate_id": candidate_id,
                "updated_at": datetime.now(UTC),
            },
            "set election winner",
        )

    async def count_votes(self, election_id: int) -> int:
        count = await self._scalar(
            "SELECT COUNT(*) FROM votes WHERE election_id = :election_id",
            {"election_id": election_id},
            "count votes",
        )
        return int(count or 0)

    async def count_registered_voters(self, election_id: int) -> int:
        count = await self._scalar(
            "SELECT COUNT(*) FROM election_voters WHERE election_id = :election_id",
            {"election_id": election_id},
            "count registered voters",
        )
        return int(count or 0)

    def _to_entity(self, model: ElectionModel) -> Election:
        """Convert database model to domain entity.

        Args:
            model: Database model

        Returns:
            Election entity
        """
        return Election(
            id=model.id,
            title=model.title,
            status=model.status,
            total_candidates=model.total_candidates,
            total_voters=model.total_voters or 0,
            start_time=model.start_time,
            end_time=model.end_time,
            winner_candidate_id=model.winner_candidate_id,
        )
