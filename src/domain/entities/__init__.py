"""
Employee Account Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import EmployeeRole

# Export all entities
from .company import Company
from .employee import Employee
from .invitation import Invitation

__all__ = [
    # Enums
    "EmployeeRole",
    # Entities
    "Company",
    "Employee",
    "Invitation",
]
