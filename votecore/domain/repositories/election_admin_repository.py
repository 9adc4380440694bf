"""Election admin relation interface."""

from abc import ABC, abstractmethod


class ElectionAdminRepository(ABC):
    """Lookup of the users allowed to administer an election."""

    @abstractmethod
    async def is_admin(self, user_id: int, election_id: int) -> bool:
        """Return whether ``user_id`` is an admin or creator of the election."""
        pass
