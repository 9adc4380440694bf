"""Tests for CandidateRepositoryImpl."""

from datetime import UTC, datetime
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from tests.fixtures.entity_factories import create_candidate
from votecore.domain.entities.candidate import CandidateStatus
from votecore.domain.exceptions import ErrorKind, NotFoundError
from votecore.infrastructure.exceptions import DatabaseError, DuplicateEntityError
from votecore.infrastructure.persistence.candidate_repository_impl import (
    CandidateRepositoryImpl,
)


class _DriverError(Exception):
    """Stand-in for a DBAPI error carrying a PostgreSQL SQLSTATE."""

    def __init__(self, message: str, sqlstate: str | None = None):
        super().__init__(message)
        self.sqlstate = sqlstate


def _integrity_error(message: str, sqlstate: str | None = None) -> IntegrityError:
    return IntegrityError("INSERT", {}, _DriverError(message, sqlstate))


def _row(**overrides: Any) -> dict[str, Any]:
    row = {
        "id": 5,
        "election_id": 10,
        "user_id": 100,
        "party_name": "Green Party",
        "symbol": "Tree",
        "manifesto": "Clean air",
        "age": 42,
        "qualification": "MSc",
        "total_votes": 7,
        "status": "PENDING",
        "registered_at": datetime(2026, 1, 1, tzinfo=UTC),
        "user_fullname": "Alice Example",
        "user_email": "alice@example.com",
        "user_profile_photo": None,
    }
    row.update(overrides)
    return row


class TestCandidateRepositoryImpl:
    """Test cases for CandidateRepositoryImpl."""

    @pytest.fixture
    def mock_session(self) -> MagicMock:
        session = MagicMock(spec=AsyncSession)
        session.execute = AsyncMock()
        return session

    @pytest.fixture
    def repository(self, mock_session: MagicMock) -> CandidateRepositoryImpl:
        return CandidateRepositoryImpl(mock_session)

    def _returns_one(self, mock_session: MagicMock, row: dict[str, Any] | None):
        mock_result = MagicMock()
        mock_result.first.return_value = row
        mock_session.execute.return_value = mock_result

    def _returns_all(self, mock_session: MagicMock, rows: list[dict[str, Any]]):
        mock_result = MagicMock()
        mock_result.fetchall.return_value = rows
        mock_session.execute.return_value = mock_result

    @pytest.mark.asyncio
    async def test_get_by_id(
        self, repository: CandidateRepositoryImpl, mock_session: MagicMock
    ) -> None:
        self._returns_one(mock_session, _row())

        candidate = await repository.get_by_id(5)

        assert candidate is not None
        assert candidate.id == 5
        assert candidate.status is CandidateStatus.PENDING
        assert candidate.user is not None
        assert candidate.user.fullname == "Alice Example"
        assert mock_session.execute.call_args[0][1] == {"id": 5}

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(
        self, repository: CandidateRepositoryImpl, mock_session: MagicMock
    ) -> None:
        self._returns_one(mock_session, None)

        assert await repository.get_by_id(5) is None

    @pytest.mark.asyncio
    async def test_row_without_user(
        self, repository: CandidateRepositoryImpl, mock_session: MagicMock
    ) -> None:
        self._returns_one(
            mock_session, _row(user_fullname=None, user_email=None, manifesto=None)
        )

        candidate = await repository.get_by_id(5)

        assert candidate is not None
        assert candidate.user is None
        assert candidate.manifesto == ""

    @pytest.mark.asyncio
    async def test_get_by_election_filters_status(
        self, repository: CandidateRepositoryImpl, mock_session: MagicMock
    ) -> None:
        self._returns_all(mock_session, [_row(id=1), _row(id=2, user_id=101)])

        result = await repository.get_by_election(10, CandidateStatus.PENDING)

        assert [c.id for c in result] == [1, 2]
        sql = str(mock_session.execute.call_args[0][0])
        params = mock_session.execute.call_args[0][1]
        assert "c.status = :status" in sql
        assert params == {"election_id": 10, "status": "PENDING"}

    @pytest.mark.asyncio
    async def test_get_by_election_without_status(
        self, repository: CandidateRepositoryImpl, mock_session: MagicMock
    ) -> None:
        self._returns_all(mock_session, [])

        assert await repository.get_by_election(10) == []
        assert mock_session.execute.call_args[0][1] == {"election_id": 10}

    @pytest.mark.asyncio
    async def test_get_approved_orders_deterministically(
        self, repository: CandidateRepositoryImpl, mock_session: MagicMock
    ) -> None:
        self._returns_all(mock_session, [_row(status="APPROVED")])

        await repository.get_approved_by_election(10)

        sql = str(mock_session.execute.call_args[0][0])
        assert "ORDER BY c.total_votes DESC, c.registered_at ASC, c.id ASC" in sql

    @pytest.mark.asyncio
    async def test_count_by_status_skips_unknown(
        self, repository: CandidateRepositoryImpl, mock_session: MagicMock
    ) -> None:
        self._returns_all(
            mock_session,
            [
                {"status": "PENDING", "count": 2},
                {"status": "APPROVED", "count": 3},
                {"status": "WITHDRAWN", "count": 1},
            ],
        )

        counts = await repository.count_by_status(10)

        assert counts == {CandidateStatus.PENDING: 2, CandidateStatus.APPROVED: 3}

    @pytest.mark.asyncio
    async def test_create(
        self, repository: CandidateRepositoryImpl, mock_session: MagicMock
    ) -> None:
        self._returns_one(mock_session, _row(id=77, total_votes=0))

        created = await repository.create(create_candidate(id=None))

        assert created.id == 77
        params = mock_session.execute.call_args[0][1]
        assert params["status"] == "PENDING"
        assert params["election_id"] == 10
        assert "INSERT INTO candidates" in str(mock_session.execute.call_args[0][0])

    @pytest.mark.asyncio
    async def test_create_duplicate(
        self, repository: CandidateRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_session.execute.side_effect = _integrity_error(
            'duplicate key value violates unique constraint "uq_candidates_election_user"',
            sqlstate="23505",
        )

        with pytest.raises(DuplicateEntityError) as exc_info:
            await repository.create(create_candidate(id=None))

        assert exc_info.value.kind is ErrorKind.CONFLICT
        assert exc_info.value.details == {"election_id": 10, "user_id": 100}

    @pytest.mark.asyncio
    async def test_create_duplicate_matched_by_constraint_name(
        self, repository: CandidateRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_session.execute.side_effect = _integrity_error(
            'duplicate key value violates unique constraint "uq_candidates_election_user"'
        )

        with pytest.raises(DuplicateEntityError):
            await repository.create(create_candidate(id=None))

    @pytest.mark.asyncio
    async def test_create_missing_user_is_not_a_conflict(
        self, repository: CandidateRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_session.execute.side_effect = _integrity_error(
            'insert or update on table "candidates" violates foreign key '
            'constraint "candidates_user_id_fkey"',
            sqlstate="23503",
        )

        with pytest.raises(NotFoundError) as exc_info:
            await repository.create(create_candidate(id=None, user_id=999))

        assert exc_info.value.kind is ErrorKind.NOT_FOUND
        assert exc_info.value.kind is not ErrorKind.CONFLICT
        assert exc_info.value.details == {"election_id": 10, "user_id": 999}

    @pytest.mark.asyncio
    async def test_create_foreign_key_sqlstate_on_driver_cause(
        self, repository: CandidateRepositoryImpl, mock_session: MagicMock
    ) -> None:
        wrapper = Exception("ForeignKeyViolationError")
        wrapper.__cause__ = _DriverError("fk violation", sqlstate="23503")
        mock_session.execute.side_effect = IntegrityError("INSERT", {}, wrapper)

        with pytest.raises(NotFoundError):
            await repository.create(create_candidate(id=None))

    @pytest.mark.asyncio
    async def test_create_other_integrity_violation(
        self, repository: CandidateRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_session.execute.side_effect = _integrity_error(
            'new row for relation "candidates" violates check constraint '
            '"candidates_age_check"',
            sqlstate="23514",
        )

        with pytest.raises(DatabaseError) as exc_info:
            await repository.create(create_candidate(id=None))

        assert exc_info.value.kind is ErrorKind.INTERNAL

    @pytest.mark.asyncio
    async def test_create_database_error(
        self, repository: CandidateRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_session.execute.side_effect = OperationalError(
            "INSERT", {}, Exception("connection lost")
        )

        with pytest.raises(DatabaseError):
            await repository.create(create_candidate(id=None))

    @pytest.mark.asyncio
    async def test_transition_status_is_conditional(
        self, repository: CandidateRepositoryImpl, mock_session: MagicMock
    ) -> None:
        self._returns_one(mock_session, _row(status="APPROVED"))

        result = await repository.transition_status(
            5, CandidateStatus.PENDING, CandidateStatus.APPROVED
        )

        assert result is not None
        assert result.status is CandidateStatus.APPROVED
        sql = str(mock_session.execute.call_args[0][0])
        params = mock_session.execute.call_args[0][1]
        assert "WHERE id = :id AND status = :from_status" in sql
        assert params["from_status"] == "PENDING"
        assert params["to_status"] == "APPROVED"

    @pytest.mark.asyncio
    async def test_transition_status_lost_race(
        self, repository: CandidateRepositoryImpl, mock_session: MagicMock
    ) -> None:
        self._returns_one(mock_session, None)

        result = await repository.transition_status(
            5, CandidateStatus.PENDING, CandidateStatus.REJECTED
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_update_pending(
        self, repository: CandidateRepositoryImpl, mock_session: MagicMock
    ) -> None:
        self._returns_one(mock_session, _row(party_name="Blue Party"))

        result = await repository.update_pending(
            create_candidate(id=5, party_name="Blue Party")
        )

        assert result is not None
        assert result.party_name == "Blue Party"
        assert mock_session.execute.call_args[0][1]["pending"] == "PENDING"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(("rowcount", "expected"), [(1, True), (0, False)])
    async def test_delete_pending(
        self,
        repository: CandidateRepositoryImpl,
        mock_session: MagicMock,
        rowcount: int,
        expected: bool,
    ) -> None:
        mock_result = MagicMock()
        mock_result.rowcount = rowcount
        mock_session.execute.return_value = mock_result

        assert await repository.delete_pending(5) is expected

    @pytest.mark.asyncio
    async def test_read_error_wrapped(
        self, repository: CandidateRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_session.execute.side_effect = OperationalError(
            "SELECT", {}, Exception("timeout")
        )

        with pytest.raises(DatabaseError) as exc_info:
            await repository.get_by_user(100)

        assert exc_info.value.message == "Failed to get candidates by user"
