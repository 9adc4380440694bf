"""Tests for ElectionRepositoryImpl."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from sqlalchemy.ext.asyncio import AsyncSession

from votecore.domain.entities.election import ElectionStatus
from votecore.infrastructure.exceptions import DatabaseError
from votecore.infrastructure.persistence.election_repository_impl import (
    ElectionRepositoryImpl,
)


class TestElectionRepositoryImpl:
    """Test cases for ElectionRepositoryImpl."""

    @pytest.fixture
    def mock_session(self) -> MagicMock:
        session = MagicMock(spec=AsyncSession)
        session.execute = AsyncMock()
        return session

    @pytest.fixture
    def repository(self, mock_session: MagicMock) -> ElectionRepositoryImpl:
        return ElectionRepositoryImpl(mock_session)

    @pytest.mark.asyncio
    async def test_get_by_id(
        self, repository: ElectionRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_result = MagicMock()
        mock_result.first.return_value = {
            "id": 10,
            "title": "Board Election",
            "status": "COMPLETED",
            "total_candidates": 3,
            "total_voters": None,
            "start_time": None,
            "end_time": None,
            "winner_candidate_id": None,
        }
        mock_session.execute.return_value = mock_result

        election = await repository.get_by_id(10)

        assert election is not None
        assert election.status is ElectionStatus.COMPLETED
        assert election.total_voters == 0
        assert election.total_candidates == 3

    @pytest.mark.asyncio
    async def test_get_completed(
        self, repository: ElectionRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_result = MagicMock()
        mock_result.fetchall.return_value = []
        mock_session.execute.return_value = mock_result

        assert await repository.get_completed() == []
        sql = str(mock_session.execute.call_args[0][0])
        assert "ORDER BY end_time DESC NULLS LAST, id DESC" in sql
        assert mock_session.execute.call_args[0][1] == {"status": "COMPLETED"}

    @pytest.mark.asyncio
    async def test_adjust_candidate_count_is_relative(
        self, repository: ElectionRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_result = MagicMock()
        mock_result.rowcount = 1
        mock_session.execute.return_value = mock_result

        await repository.adjust_candidate_count(10, -1)

        sql = str(mock_session.execute.call_args[0][0])
        params = mock_session.execute.call_args[0][1]
        assert "total_candidates = total_candidates + :delta" in sql
        assert params["delta"] == -1
        assert params["id"] == 10

    @pytest.mark.asyncio
    async def test_adjust_candidate_count_missing_election(
        self, repository: ElectionRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_result = MagicMock()
        mock_result.rowcount = 0
        mock_session.execute.return_value = mock_result

        with pytest.raises(DatabaseError):
            await repository.adjust_candidate_count(10, 1)

    @pytest.mark.asyncio
    async def test_count_votes(
        self, repository: ElectionRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_result = MagicMock()
        mock_result.scalar.return_value = 42
        mock_session.execute.return_value = mock_result

        assert await repository.count_votes(10) == 42
        assert "FROM votes" in str(mock_session.execute.call_args[0][0])

    @pytest.mark.asyncio
    async def test_count_registered_voters_empty(
        self, repository: ElectionRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_result = MagicMock()
        mock_result.scalar.return_value = None
        mock_session.execute.return_value = mock_result

        assert await repository.count_registered_voters(10) == 0

    @pytest.mark.asyncio
    async def test_set_winner(
        self, repository: ElectionRepositoryImpl, mock_session: MagicMock
    ) -> None:
        await repository.set_winner(10, 3)

        params = mock_session.execute.call_args[0][1]
        assert params["id"] == 10
        assert params["candidate_id"] == 3
