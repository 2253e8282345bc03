from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import Employee


class IEmployeeRepository(ABC):
    """Employee repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Employee]:
        """Get employee by exact email address"""
        pass

    @abstractmethod
    async def get_by_id(
        self, employee_id: int, with_company: bool = False
    ) -> Optional[Employee]:
        """Get employee by ID, optionally loading the owning company"""
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check whether an employee with this email exists"""
        pass

    @abstractmethod
    async def create(self, employee: Employee) -> Employee:
        """Create a new employee"""
        pass

    @abstractmethod
    async def delete(self, employee: Employee) -> None:
        """Delete an employee"""
        pass
