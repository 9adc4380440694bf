"""Tests for ElectionAdminRepositoryImpl."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from votecore.infrastructure.exceptions import DatabaseError
from votecore.infrastructure.persistence.election_admin_repository_impl import (
    ElectionAdminRepositoryImpl,
)


class TestElectionAdminRepositoryImpl:
    @pytest.fixture
    def mock_session(self) -> MagicMock:
        session = MagicMock(spec=AsyncSession)
        session.execute = AsyncMock()
        return session

    @pytest.mark.asyncio
    @pytest.mark.parametrize(("row", "expected"), [((1,), True), (None, False)])
    async def test_is_admin(
        self, mock_session: MagicMock, row: tuple | None, expected: bool
    ) -> None:
        mock_result = MagicMock()
        mock_result.first.return_value = row
        mock_session.execute.return_value = mock_result

        repository = ElectionAdminRepositoryImpl(mock_session)

        assert await repository.is_admin(1, 10) is expected
        assert mock_session.execute.call_args[0][1] == {
            "user_id": 1,
            "election_id": 10,
        }

    @pytest.mark.asyncio
    async def test_is_admin_error(self, mock_session: MagicMock) -> None:
        mock_session.execute.side_effect = OperationalError(
            "SELECT", {}, Exception("down")
        )

        with pytest.raises(DatabaseError):
            await ElectionAdminRepositoryImpl(mock_session).is_admin(1, 10)
