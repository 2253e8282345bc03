"""
Get Employee Info Use Case

Loads the calling employee's profile and company summary.
"""

import base64

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import CallerIdentity, EmployeeCompany, EmployeeInfoResponse


def _encode_image(image: bytes) -> str:
    return base64.b64encode(image or b"").decode("ascii")


class GetEmployeeInfoUseCase:
    """Use case for reading the caller's own employee record"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: CallerIdentity) -> Result[EmployeeInfoResponse]:
        async with self.uow:
            employee = await self.uow.employees.get_by_id(
                identity.employee_id, with_company=True
            )
            if employee is None:
                return Return.err(Error("NOT_FOUND", "Account is not found"))

            company = employee.company

            return Return.ok(
                EmployeeInfoResponse(
                    id=employee.id,
                    login=employee.login,
                    email=employee.email,
                    role=employee.role,
                    company_id=employee.company_id,
                    company=EmployeeCompany(
                        id=company.id,
                        login=company.login,
                        email=company.email,
                        role=company.role,
                        image=_encode_image(company.image),
                        description=company.description,
                    ),
                    image=_encode_image(employee.image),
                )
            )
