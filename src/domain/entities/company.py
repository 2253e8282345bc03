"""
Company Entity

An employer that issues invitations to its future employees.
"""

from typing import Optional, TYPE_CHECKING

from sqlalchemy import LargeBinary
from sqlmodel import Column, Field, Relationship, SQLModel

if TYPE_CHECKING:
    from .employee import Employee


class Company(SQLModel, table=True):
    """
    Company entity - the owning side of every employee.

    Business Rules:
    - Email shares one namespace with employee emails
    - Read-only for the employee account flows
    """

    __tablename__ = "companies"

    id: Optional[int] = Field(default=None, primary_key=True)
    login: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    role: str = Field(default="Company", max_length=50)
    image: bytes = Field(default=b"", sa_column=Column(LargeBinary, nullable=False))
    description: str = Field(default="")

    # Relationships
    employees: list["Employee"] = Relationship(back_populates="company")
