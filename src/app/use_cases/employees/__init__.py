"""
Employee Use Cases

Login, invitation-based registration and self-service account management.
"""

from .login_use_case import LoginUseCase
from .register_use_case import RegisterEmployeeUseCase
from .get_info_use_case import GetEmployeeInfoUseCase
from .remove_use_case import RemoveEmployeeUseCase
from .dtos import (
    RegisterEmployeeCommand,
    CallerIdentity,
    LoginResponse,
    RegisterResponse,
    EmployeeCompany,
    EmployeeInfoResponse,
    RemoveResponse,
)

__all__ = [
    # Use Cases
    "LoginUseCase",
    "RegisterEmployeeUseCase",
    "GetEmployeeInfoUseCase",
    "RemoveEmployeeUseCase",
    # DTOs - Commands
    "RegisterEmployeeCommand",
    "CallerIdentity",
    # DTOs - Responses
    "LoginResponse",
    "RegisterResponse",
    "EmployeeInfoResponse",
    "RemoveResponse",
    # DTOs - Nested Models
    "EmployeeCompany",
]
