"""Election admin relation lookup using SQLAlchemy."""

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from votecore.common.logging import get_logger
from votecore.domain.repositories.election_admin_repository import (
    ElectionAdminRepository,
)
from votecore.domain.repositories.session_adapter import ISessionAdapter
from votecore.infrastructure.exceptions import DatabaseError


logger = get_logger(__name__)


class ElectionAdminRepositoryImpl(ElectionAdminRepository):
    """Reads the election_admins relation."""

    def __init__(self, session: AsyncSession | ISessionAdapter):
        self.session = session

    async def is_admin(self, user_id: int, election_id: int) -> bool:
        try:
            result = await self.session.execute(
                text("""
                    SELECT 1
                    FROM election_admins
                    WHERE user_id = :user_id AND election_id = :election_id
                    LIMIT 1
                """),
                {"user_id": user_id, "election_id": election_id},
            )
            return result.first() is not None
        except SQLAlchemyError as e:
            logger.error(f"Database error checking election admin: {e}")
            raise DatabaseError(
                "Failed to check election admin",
                {"user_id": user_id, "election_id": election_id, "error": str(e)},
            ) from e
