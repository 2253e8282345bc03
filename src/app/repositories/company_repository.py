from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import Company


class ICompanyRepository(ABC):
    """Company repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, company_id: int) -> Optional[Company]:
        """Get company by ID"""
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check whether a company with this email exists"""
        pass
