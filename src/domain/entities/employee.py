"""
Employee Entity

A person working for a company, onboarded through an invitation.
"""

from typing import Optional, TYPE_CHECKING

from sqlalchemy import LargeBinary
from sqlmodel import Column, Field, Relationship, SQLModel

if TYPE_CHECKING:
    from .company import Company


class Employee(SQLModel, table=True):
    """
    Employee entity - account created by redeeming an invitation.

    Business Rules:
    - Email must be unique across employees and companies together
    - Password stored as bcrypt hash plus its per-account salt
    - Role is copied from the redeemed invitation
    """

    __tablename__ = "employees"

    id: Optional[int] = Field(default=None, primary_key=True)
    login: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    role: str = Field(max_length=50)

    password_hash: bytes = Field(sa_column=Column(LargeBinary(60), nullable=False))
    password_salt: bytes = Field(sa_column=Column(LargeBinary(29), nullable=False))

    image: bytes = Field(default=b"", sa_column=Column(LargeBinary, nullable=False))

    company_id: int = Field(foreign_key="companies.id", nullable=False, index=True)

    # Relationships
    company: Optional["Company"] = Relationship(back_populates="employees")
