"""Base repository implementation for infrastructure layer."""

from typing import Any

from pydantic import BaseModel as PydanticBaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from votecore.common.logging import get_logger
from votecore.domain.entities.base import BaseEntity
from votecore.domain.repositories.session_adapter import ISessionAdapter
from votecore.infrastructure.exceptions import DatabaseError


logger = get_logger(__name__)


class BaseRepositoryImpl[T: BaseEntity]:
    """Base repository implementation over raw SQL.

    Rows are validated through a Pydantic row model and converted to domain
    entities. Repositories never commit: the unit of work that owns the
    session decides when the transaction ends.

    Type Parameters:
        T: Domain entity type that extends BaseEntity

    Attributes:
        session: Database session (AsyncSession or ISessionAdapter)
        entity_class: Domain entity class for type conversions
        model_class: Pydantic row model

    Note:
        Subclasses implement ``_to_entity()``.
    """

    def __init__(
        self,
        session: AsyncSession | ISessionAdapter,
        entity_class: type[T],
        model_class: type[PydanticBaseModel],
    ):
        self.session = session
        self.entity_class = entity_class
        self.model_class = model_class

    @staticmethod
    def _row_to_dict(row: Any) -> dict[str, Any]:
        """Convert a result row to a plain dict."""
        if hasattr(row, "_asdict"):
            return row._asdict()  # type: ignore[attr-defined]
        if hasattr(row, "_mapping"):
            return dict(row._mapping)  # type: ignore[attr-defined]
        return dict(row)

    def _dict_to_entity(self, data: dict[str, Any]) -> T:
        model = self.model_class(**data)
        return self._to_entity(model)

    async def _fetch_one(
        self, sql: str, params: dict[str, Any], operation: str
    ) -> T | None:
        try:
            result = await self.session.execute(text(sql), params)
            row = result.first()
        except SQLAlchemyError as e:
            logger.error(f"Database error: {operation}: {e}")
            raise DatabaseError(
                f"Failed to {operation}", {**params, "error": str(e)}
            ) from e
        return self._dict_to_entity(self._row_to_dict(row)) if row else None

    async def _fetch_all(
        self, sql: str, params: dict[str, Any], operation: str
    ) -> list[T]:
        try:
            result = await self.session.execute(text(sql), params)
            rows = result.fetchall()
        except SQLAlchemyError as e:
            logger.error(f"Database error: {operation}: {e}")
            raise DatabaseError(
                f"Failed to {operation}", {**params, "error": str(e)}
            ) from e
        return [self._dict_to_entity(self._row_to_dict(row)) for row in rows]

    async def _scalar(self, sql: str, params: dict[str, Any], operation: str) -> Any:
        try:
            result = await self.session.execute(text(sql), params)
            return result.scalar()
        except SQLAlchemyError as e:
            logger.error(f"Database error: {operation}: {e}")
            raise DatabaseError(
                f"Failed to {operation}", {**params, "error": str(e)}
            ) from e

    async def _execute(self, sql: str, params: dict[str, Any], operation: str) -> Any:
        try:
            return await self.session.execute(text(sql), params)
        except SQLAlchemyError as e:
            logger.error(f"Database error: {operation}: {e}")
            raise DatabaseError(
                f"Failed to {operation}", {**params, "error": str(e)}
            ) from e

    def _to_entity(self, model: Any) -> T:
        """Convert a row model to a domain entity."""
        raise NotImplementedError("Subclass must implement _to_entity")
