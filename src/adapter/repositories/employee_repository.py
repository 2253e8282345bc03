from typing import Optional

from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.employee_repository import IEmployeeRepository
from src.domain.entities import Employee


class EmployeeRepository(IEmployeeRepository):
    """Employee repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[Employee]:
        """Get employee by exact email address"""
        stmt = select(Employee).where(Employee.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(
        self, employee_id: int, with_company: bool = False
    ) -> Optional[Employee]:
        """Get employee by ID, optionally loading the owning company"""
        stmt = select(Employee).where(Employee.id == employee_id)
        if with_company:
            stmt = stmt.options(selectinload(Employee.company)).execution_options(
                populate_existing=True
            )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        """Check whether an employee with this email exists"""
        stmt = select(Employee.id).where(Employee.email == email).limit(1)
        result = await self.session.exec(stmt)
        return result.first() is not None

    async def create(self, employee: Employee) -> Employee:
        """Create a new employee"""
        self.session.add(employee)
        await self.session.flush()
        await self.session.refresh(employee)
        return employee

    async def delete(self, employee: Employee) -> None:
        """Delete an employee"""
        await self.session.delete(employee)
        await self.session.flush()
