"""Base repository interface."""

from abc import ABC, abstractmethod

from votecore.domain.entities.base import BaseEntity


class BaseRepository[T: BaseEntity](ABC):
    """Generic CRUD interface shared by all repositories."""

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> T | None:
        """Get entity by ID."""
        pass

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Create a new entity and return it with its ID."""
        pass
