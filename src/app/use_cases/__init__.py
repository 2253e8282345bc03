"""
Use Cases

Use cases are organized into domain folders:
- employees/: Login, registration by invitation, self-service account

Import from subdirectories for better organization.
"""

from .employees import (
    LoginUseCase,
    RegisterEmployeeUseCase,
    GetEmployeeInfoUseCase,
    RemoveEmployeeUseCase,
)

__all__ = [
    "LoginUseCase",
    "RegisterEmployeeUseCase",
    "GetEmployeeInfoUseCase",
    "RemoveEmployeeUseCase",
]
