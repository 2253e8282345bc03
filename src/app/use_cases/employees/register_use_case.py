"""
Register Employee Use Case

Redeems an invite token and creates the employee account it grants.
"""

import base64
import binascii
import logging
from typing import Optional

from libs.result import Error, Result, Return
from config import ApplicationConfig
from src.app.services.credentials import PasswordHashError, create_password_hash
from src.app.services.invite_protector import InviteDecodeError, unprotect
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Employee

from .dtos import RegisterEmployeeCommand, RegisterResponse

logger = logging.getLogger(__name__)


def decode_image(image: Optional[str]) -> bytes:
    """Decode an optional base64 image; missing or empty yields an empty blob"""
    if not image:
        return b""
    return base64.b64decode(image, validate=True)


class RegisterEmployeeUseCase:
    """
    Use case for registering an employee from an invitation.

    Business Rules:
    - Invite token must decrypt under the invite secret key
    - Email must not belong to an existing employee or company
    - Invitation must exist and be active
    - Company named in the invite must exist
    - Employee creation and invitation deletion commit together
    - Of concurrent redemptions of one invitation, at most one succeeds
    """

    def __init__(self, uow: UnitOfWork, config=ApplicationConfig):
        self.uow = uow
        self.config = config

    async def execute(
        self, command: RegisterEmployeeCommand
    ) -> Result[RegisterResponse]:
        """
        Execute register use case.

        Args:
            command: RegisterEmployeeCommand with login, invite, password, image

        Returns:
            Result with RegisterResponse, or Error
        """
        try:
            invite = unprotect(command.invite, self.config.INVITE_SECRET_KEY)
        except InviteDecodeError:
            return Return.err(Error("BAD_REQUEST", "Incorrect invite"))

        async with self.uow:
            # Employees and companies share one email namespace
            if await self.uow.employees.exists_by_email(invite.email):
                return Return.err(Error("BAD_REQUEST", "Account already exists"))

            if await self.uow.companies.exists_by_email(invite.email):
                return Return.err(Error("BAD_REQUEST", "Account already exists"))

            invitation = await self.uow.invitations.get_by_id(invite.id)
            if invitation is None or not invitation.is_active:
                return Return.err(
                    Error("NOT_FOUND", "Invitation not found or inactive")
                )

            try:
                password_hash, password_salt = create_password_hash(command.password)
            except PasswordHashError:
                return Return.err(Error("BAD_REQUEST", "Incorrect password"))

            try:
                image = decode_image(command.image)
            except (binascii.Error, ValueError):
                return Return.err(Error("BAD_REQUEST", "Incorrect image"))

            company = await self.uow.companies.get_by_id(invite.company_id)
            if company is None:
                return Return.err(Error("BAD_REQUEST", "Incorrect company"))

            employee = Employee(
                login=command.login,
                email=invite.email,
                image=image,
                password_hash=password_hash,
                password_salt=password_salt,
                role=invite.role.value,
                company_id=invite.company_id,
            )

            # Consume the invitation first: a concurrent redemption that lost
            # the race finds nothing to delete and never inserts an employee
            if not await self.uow.invitations.delete_active(invitation.id):
                await self.uow.rollback()
                logger.warning(f"Invitation {invite.id} was redeemed concurrently")
                return Return.err(
                    Error("NOT_FOUND", "Invitation not found or inactive")
                )

            await self.uow.employees.create(employee)

            await self.uow.commit()

        logger.info(f"Employee registered for company {invite.company_id}")

        return Return.ok(RegisterResponse(is_success=True))
