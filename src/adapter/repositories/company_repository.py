from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.company_repository import ICompanyRepository
from src.domain.entities import Company


class CompanyRepository(ICompanyRepository):
    """Company repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, company_id: int) -> Optional[Company]:
        """Get company by ID"""
        stmt = select(Company).where(Company.id == company_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        """Check whether a company with this email exists"""
        stmt = select(Company.id).where(Company.email == email).limit(1)
        result = await self.session.exec(stmt)
        return result.first() is not None
