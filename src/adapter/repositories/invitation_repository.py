from typing import Optional

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.invitation_repository import IInvitationRepository
from src.domain.entities import Invitation


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invitation_id: int) -> Optional[Invitation]:
        """Get invitation by ID"""
        stmt = select(Invitation).where(Invitation.id == invitation_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_active(self, invitation_id: int) -> bool:
        """Delete the invitation only if it is still active"""
        stmt = delete(Invitation).where(
            Invitation.id == invitation_id,
            Invitation.is_active == True,
        ).execution_options(synchronize_session=False)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
