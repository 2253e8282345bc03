"""
Employee Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the employee account domain.
Provides type safety and clear contracts between layers.
"""

from typing import Optional
from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterEmployeeCommand(BaseModel):
    """Command to register an employee by redeeming an invite token"""

    login: str
    invite: str
    password: str
    image: Optional[str] = None  # base64


class CallerIdentity(BaseModel):
    """Authenticated caller, taken from a validated bearer token"""

    employee_id: int
    login: str
    email: str
    role: str


# ============================================================================
# Response DTOs
# ============================================================================


class LoginResponse(BaseModel):
    """Response for employee login use case"""

    is_success: bool
    token_type: str
    token: str


class RegisterResponse(BaseModel):
    """Response for employee registration use case"""

    is_success: bool


class EmployeeCompany(BaseModel):
    """Company summary nested in employee info"""

    id: int
    login: str
    email: str
    role: str
    image: str
    description: str


class EmployeeInfoResponse(BaseModel):
    """Response for employee info use case"""

    id: int
    login: str
    email: str
    role: str
    company_id: int
    company: EmployeeCompany
    image: str


class RemoveResponse(BaseModel):
    """Response for employee removal use case"""

    is_success: bool
