from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.employees import (
    CallerIdentity,
    EmployeeInfoResponse,
    GetEmployeeInfoUseCase,
    LoginResponse,
    LoginUseCase,
    RegisterEmployeeCommand,
    RegisterEmployeeUseCase,
    RegisterResponse,
    RemoveEmployeeUseCase,
    RemoveResponse,
)
from src.depends import get_unit_of_work, require_roles
from src.domain.entities import EmployeeRole

router = APIRouter(prefix="/employee", tags=["Employee"])

# Roles allowed on the self-service routes (info, remove)
ACCOUNT_ROLES = (EmployeeRole.Employee, EmployeeRole.Admin)


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Validates incoming login request.
    """

    email: EmailStr = Field(..., description="Employee email address")
    password: str = Field(..., description="Employee password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Employee Login

    Authenticates the employee and returns a bearer token.

    Raises:
        - 404 Not Found: No account with this email
        - 400 Bad Request: Wrong password
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    The invite is the opaque token handed out by the company.
    """

    login: str = Field(..., min_length=1, max_length=255, description="Display login")
    invite: str = Field(..., min_length=1, description="Invite token")
    password: str = Field(..., description="Account password")
    image: Optional[str] = Field(None, description="Base64 profile image")


@router.post(
    "/register", status_code=status.HTTP_200_OK, response_model=RegisterResponse
)
async def register(
    request: RegisterRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Employee Registration

    Redeems an invite token and creates the employee account.

    Raises:
        - 400 Bad Request: Incorrect invite, password, image or company;
          account already exists
        - 404 Not Found: Invitation not found or inactive
    """
    command = RegisterEmployeeCommand(
        login=request.login,
        invite=request.invite,
        password=request.password,
        image=request.image,
    )

    use_case = RegisterEmployeeUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/info", status_code=status.HTTP_200_OK, response_model=EmployeeInfoResponse)
async def info(
    identity: CallerIdentity = Depends(require_roles(*ACCOUNT_ROLES)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current Employee Info

    Raises:
        - 401 Unauthorized: Invalid or expired token
        - 403 Forbidden: Token role is not an employee role
        - 404 Not Found: Account no longer exists
    """
    use_case = GetEmployeeInfoUseCase(uow)
    result = await use_case.execute(identity)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/remove", status_code=status.HTTP_200_OK, response_model=RemoveResponse)
async def remove(
    identity: CallerIdentity = Depends(require_roles(*ACCOUNT_ROLES)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove Current Employee

    Raises:
        - 401 Unauthorized: Invalid or expired token
        - 403 Forbidden: Token role is not an employee role
        - 404 Not Found: Account no longer exists
    """
    use_case = RemoveEmployeeUseCase(uow)
    result = await use_case.execute(identity)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
