"""Candidate repository implementation using SQLAlchemy."""

from datetime import UTC, datetime

from pydantic import BaseModel as PydanticBaseModel
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from votecore.common.logging import get_logger
from votecore.domain.entities.candidate import Candidate, CandidateStatus, CandidateUser
from votecore.domain.exceptions import NotFoundError
from votecore.domain.repositories.candidate_repository import CandidateRepository
from votecore.domain.repositories.session_adapter import ISessionAdapter
from votecore.infrastructure.exceptions import DatabaseError, DuplicateEntityError
from votecore.infrastructure.persistence.base_repository_impl import BaseRepositoryImpl


logger = get_logger(__name__)

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
CANDIDACY_UNIQUE_CONSTRAINT = "uq_candidates_election_user"


def _sqlstate(error: IntegrityError) -> str | None:
    """SQLSTATE of the driver error behind an IntegrityError, if exposed."""
    orig = error.orig
    for source in (orig, getattr(orig, "__cause__", None)):
        if source is None:
            continue
        code = getattr(source, "sqlstate", None) or getattr(source, "pgcode", None)
        if isinstance(code, str):
            return code
    return None


class CandidateModel(PydanticBaseModel):
    """Candidate row joined with its user profile."""

    id: int
    election_id: int
    user_id: int
    party_name: str
    symbol: str
    manifesto: str | None = None
    age: int
    qualification: str
    total_votes: int = 0
    status: str
    registered_at: datetime | None = None
    user_fullname: str | None = None
    user_email: str | None = None
    user_profile_photo: str | None = None


# Shapes any "candidates"-like relation (table or CTE aliased as c) into
# CandidateModel columns.
_SELECT_FROM = """
    SELECT
        c.id,
        c.election_id,
        c.user_id,
        c.party_name,
        c.symbol,
        c.manifesto,
        c.age,
        c.qualification,
        c.total_votes,
        c.status,
        c.registered_at,
        u.fullname AS user_fullname,
        u.email AS user_email,
        u.profile_photo AS user_profile_photo
    FROM {source} c
    LEFT JOIN users u ON u.id = c.user_id
"""

_SELECT_CANDIDATES = _SELECT_FROM.format(source="candidates")


class CandidateRepositoryImpl(BaseRepositoryImpl[Candidate], CandidateRepository):
    """Candidate repository implementation using SQLAlchemy."""

    def __init__(self, session: AsyncSession | ISessionAdapter):
        """Initialize repository with database session.

        Args:
            session: AsyncSession for database operations
        """
        super().__init__(
            session=session,
            entity_class=Candidate,
            model_class=CandidateModel,
        )

    async def get_by_id(self, entity_id: int) -> Candidate | None:
        return await self._fetch_one(
            _SELECT_CANDIDATES + " WHERE c.id = :id",
            {"id": entity_id},
            "get candidate by ID",
        )

    async def get_by_election_and_user(
        self, election_id: int, user_id: int
    ) -> Candidate | None:
        return await self._fetch_one(
            _SELECT_CANDIDATES
            + " WHERE c.election_id = :election_id AND c.user_id = :user_id",
            {"election_id": election_id, "user_id": user_id},
            "get candidate by election and user",
        )

    async def get_by_election(
        self, election_id: int, status: CandidateStatus | None = None
    ) -> list[Candidate]:
        sql = _SELECT_CANDIDATES + " WHERE c.election_id = :election_id"
        params: dict[str, object] = {"election_id": election_id}
        if status is not None:
            sql += " AND c.status = :status"
            params["status"] = status.value
        sql += " ORDER BY c.registered_at DESC, c.id DESC"
        return await self._fetch_all(sql, params, "get candidates by election")

    async def get_approved_by_election(self, election_id: int) -> list[Candidate]:
        return await self._fetch_all(
            _SELECT_CANDIDATES
            + """
            WHERE c.election_id = :election_id AND c.status = :status
            ORDER BY c.total_votes DESC, c.registered_at ASC, c.id ASC
            """,
            {"election_id": election_id, "status": CandidateStatus.APPROVED.value},
            "get approved candidates",
        )

    async def get_by_user(self, user_id: int) -> list[Candidate]:
        return await self._fetch_all(
            _SELECT_CANDIDATES
            + " WHERE c.user_id = :user_id ORDER BY c.registered_at DESC, c.id DESC",
            {"user_id": user_id},
            "get candidates by user",
        )

    async def count_by_status(self, election_id: int) -> dict[CandidateStatus, int]:
        result = await self._execute(
            """
            SELECT status, COUNT(*) AS count
            FROM candidates
            WHERE election_id = :election_id
            GROUP BY status
            """,
            {"election_id": election_id},
            "count candidates by status",
        )
        counts: dict[CandidateStatus, int] = {}
        for row in result.fetchall():
            data = self._row_to_dict(row)
            try:
                status = CandidateStatus(data["status"])
            except ValueError:
                logger.warning(
                    "Unknown candidate status in storage",
                    election_id=election_id,
                    status=data["status"],
                )
                continue
            counts[status] = int(data["count"])
        return counts

    async def create(self, entity: Candidate) -> Candidate:
        """Insert a candidacy.

        Raises:
            DuplicateEntityError: The user already has a candidacy in the election
            NotFoundError: The referenced election or user row does not exist
            DatabaseError: Any other storage failure
        """
        sql = (
            """
            WITH inserted AS (
                INSERT INTO candidates (
                    election_id, user_id, party_name, symbol, manifesto,
                    age, qualification, total_votes, status,
                    registered_at, updated_at
                )
                VALUES (
                    :election_id, :user_id, :party_name, :symbol, :manifesto,
                    :age, :qualification, :total_votes, :status,
                    :registered_at, :updated_at
                )
                RETURNING *
            )
            """
            + _SELECT_FROM.format(source="inserted")
        )
        now = datetime.now(UTC)
        params = {
            "election_id": entity.election_id,
            "user_id": entity.user_id,
            "party_name": entity.party_name,
            "symbol": entity.symbol,
            "manifesto": entity.manifesto,
            "age": entity.age,
            "qualification": entity.qualification,
            "total_votes": entity.total_votes,
            "status": entity.status_value,
            "registered_at": entity.registered_at or now,
            "updated_at": now,
        }

        try:
            result = await self.session.execute(text(sql), params)
            row = result.first()
        except IntegrityError as e:
            keys = {"election_id": entity.election_id, "user_id": entity.user_id}
            sqlstate = _sqlstate(e)
            if sqlstate == UNIQUE_VIOLATION or (
                sqlstate is None and CANDIDACY_UNIQUE_CONSTRAINT in str(e.orig)
            ):
                logger.warning(f"Duplicate candidacy rejected by constraint: {e}")
                raise DuplicateEntityError(
                    "User is already registered as a candidate for this election",
                    keys,
                ) from e
            if sqlstate == FOREIGN_KEY_VIOLATION:
                logger.warning(f"Candidacy references a missing row: {e}")
                raise NotFoundError("Election or user not found", keys) from e
            logger.error(f"Integrity error creating candidate: {e}")
            raise DatabaseError(
                "Failed to create candidate", {**keys, "error": str(e)}
            ) from e
        except SQLAlchemyError as e:
            logger.error(f"Database error creating candidate: {e}")
            raise DatabaseError(
                "Failed to create candidate", {"entity": str(entity), "error": str(e)}
            ) from e

        if not row:
            raise DatabaseError("Failed to create candidate", {"entity": str(entity)})
        return self._dict_to_entity(self._row_to_dict(row))

    async def transition_status(
        self,
        candidate_id: int,
        from_status: CandidateStatus,
        to_status: CandidateStatus,
    ) -> Candidate | None:
        sql = (
            """
            WITH updated AS (
                UPDATE candidates
                SET status = :to_status,
                    updated_at = :updated_at
                WHERE id = :id AND status = :from_status
                RETURNING *
            )
            """
            + _SELECT_FROM.format(source="updated")
        )
        return await self._fetch_one(
            sql,
            {
                "id": candidate_id,
                "from_status": from_status.value,
                "to_status": to_status.value,
                "updated_at": datetime.now(UTC),
            },
            "transition candidate status",
        )

    async def update_pending(self, entity: Candidate) -> Candidate | None:
        sql = (
            """
            WITH updated AS (
                UPDATE candidates
                SET party_name = :party_name,
                    symbol = :symbol,
                    manifesto = :manifesto,
                    age = :age,
                    qualification = :qualification,
                    updated_at = :updated_at
                WHERE id = :id AND status = :pending
                RETURNING *
            )
            """
            + _SELECT_FROM.format(source="updated")
        )
        return await self._fetch_one(
            sql,
            {
                "id": entity.id,
                "party_name": entity.party_name,
                "symbol": entity.symbol,
                "manifesto": entity.manifesto,
                "age": entity.age,
                "qualification": entity.qualification,
                "pending": CandidateStatus.PENDING.value,
                "updated_at": datetime.now(UTC),
            },
            "update candidate",
        )

    async def delete_pending(self, candidate_id: int) -> bool:
        result = await self._execute(
            "DELETE FROM candidates WHERE id = :id AND status = :pending",
            {"id": candidate_id, "pending": CandidateStatus.PENDING.value},
            "delete candidate",
        )
        return result.rowcount > 0  # type: ignore[attr-defined]

    def _to_entity(self, model: CandidateModel) -> Candidate:
        """Convert a row model to a domain entity."""
        user = None
        if model.user_fullname is not None or model.user_email is not None:
            user = CandidateUser(
                user_id=model.user_id,
                fullname=model.user_fullname,
                email=model.user_email,
                profile_photo=model.user_profile_photo,
            )
        return Candidate(
            id=model.id,
            election_id=model.election_id,
            user_id=model.user_id,
            party_name=model.party_name,
            symbol=model.symbol,
            manifesto=model.manifesto,
            age=model.age,
            qualification=model.qualification,
            total_votes=model.total_votes,
            status=model.status,
            registered_at=model.registered_at,
            user=user,
        )
