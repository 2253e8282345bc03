"""
Remove Employee Use Case

Deletes the caller's own employee account.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import CallerIdentity, RemoveResponse

logger = logging.getLogger(__name__)


class RemoveEmployeeUseCase:
    """Use case for deleting the caller's employee account"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: CallerIdentity) -> Result[RemoveResponse]:
        async with self.uow:
            employee = await self.uow.employees.get_by_id(identity.employee_id)
            if employee is None:
                return Return.err(Error("NOT_FOUND", "Account is not found"))

            await self.uow.employees.delete(employee)
            await self.uow.commit()

        logger.info(f"Employee {identity.employee_id} removed")

        return Return.ok(RemoveResponse(is_success=True))
