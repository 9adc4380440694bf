"""SQLAlchemy AsyncSession adapter for ISessionAdapter.

This module provides an adapter to wrap SQLAlchemy's AsyncSession
so it can be used with the domain's ISessionAdapter interface.
"""

from typing import Any

from sqlalchemy.engine.result import Result
from sqlalchemy.ext.asyncio import AsyncSession

from votecore.domain.repositories.session_adapter import ISessionAdapter


class SQLAlchemySessionAdapter(ISessionAdapter):
    """Adapter that wraps AsyncSession to provide ISessionAdapter interface."""

    def __init__(self, async_session: AsyncSession):
        """Initialize with an async session.

        Args:
            async_session: Asynchronous SQLAlchemy session to wrap
        """
        self._session = async_session

    async def execute(
        self, statement: Any, params: dict[str, Any] | None = None
    ) -> Result[Any]:
        """Execute a statement asynchronously."""
        if params:
            return await self._session.execute(statement, params)
        return await self._session.execute(statement)

    async def commit(self) -> None:
        """Commit the current transaction."""
        await self._session.commit()

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        await self._session.rollback()

    async def flush(self) -> None:
        """Flush changes to database."""
        await self._session.flush()

    async def close(self) -> None:
        """Close the session."""
        await self._session.close()
