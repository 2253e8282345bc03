"""
Employee Account Domain Enums

Enumeration types used across domain entities.
"""

from enum import Enum


class EmployeeRole(str, Enum):
    """Role granted to an employee by the invitation that onboarded them"""

    Employee = "Employee"
    Admin = "Admin"
