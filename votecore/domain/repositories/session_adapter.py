"""Session adapter port.

The domain defines the transactional surface it needs; infrastructure wraps
SQLAlchemy's AsyncSession to provide it.
"""

from abc import ABC, abstractmethod
from typing import Any


class ISessionAdapter(ABC):
    """Minimal async session interface used by repositories."""

    @abstractmethod
    async def execute(self, statement: Any, params: dict[str, Any] | None = None) -> Any:
        """Execute a statement."""
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Commit the current transaction."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Rollback the current transaction."""
        pass

    @abstractmethod
    async def flush(self) -> None:
        """Flush pending changes without committing."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close the session."""
        pass
