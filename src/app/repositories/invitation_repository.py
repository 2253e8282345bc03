from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: int) -> Optional[Invitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def delete_active(self, invitation_id: int) -> bool:
        """
        Delete the invitation only if it is still active.

        Returns True when a row was deleted. Of several transactions racing
        to consume the same invitation, at most one gets True.
        """
        pass
