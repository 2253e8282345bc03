from abc import ABC, abstractmethod

from src.app.repositories.company_repository import ICompanyRepository
from src.app.repositories.employee_repository import IEmployeeRepository
from src.app.repositories.invitation_repository import IInvitationRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    employees: IEmployeeRepository
    companies: ICompanyRepository
    invitations: IInvitationRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
