"""
Login Use Case

Authenticates an employee and issues a bearer token.
"""

from libs.result import Error, Result, Return
from config import ApplicationConfig
from src.api.utils.jwt import create_access_token
from src.app.services.credentials import verify_password_hash
from src.app.services.unit_of_work import UnitOfWork
from .dtos import LoginResponse


class LoginUseCase:
    """
    Use case for employee login and JWT issuance.

    Business Rules:
    - Employee is looked up by exact email
    - Password verified against the stored hash and salt in constant time
    - Token carries id, login, email and role claims
    """

    def __init__(self, uow: UnitOfWork, config=ApplicationConfig):
        self.uow = uow
        self.config = config

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: Employee email
            password: Plain text password

        Returns:
            Result with LoginResponse containing the bearer token, or Error
        """
        async with self.uow:
            employee = await self.uow.employees.get_by_email(email)

            # Not found and wrong password are reported differently; see DESIGN.md
            if employee is None:
                return Return.err(Error("NOT_FOUND", "Account not found"))

            if not verify_password_hash(
                password, employee.password_hash, employee.password_salt
            ):
                return Return.err(
                    Error("BAD_REQUEST", "Incorrect email or password")
                )

            claims = {
                "id": employee.id,
                "login": employee.login,
                "email": employee.email,
                "role": employee.role,
            }

        token = create_access_token(claims, self.config)

        return Return.ok(
            LoginResponse(is_success=True, token_type="Bearer", token=token)
        )
