"""
Invitation Entity

One-time authorization for an email address to join a company.
"""

from typing import Optional

from sqlmodel import Field, Index, SQLModel


class Invitation(SQLModel, table=True):
    """
    Invitation entity - consumed by employee registration.

    Business Rules:
    - Created and deactivated outside this service
    - Only active invitations can be redeemed
    - Redemption deletes the row, so it can succeed at most once
    """

    __tablename__ = "invitations"

    id: Optional[int] = Field(default=None, primary_key=True)

    company_id: int = Field(foreign_key="companies.id", nullable=False, index=True)
    email: str = Field(max_length=255, nullable=False, index=True)

    role: str = Field(max_length=50, nullable=False)
    is_active: bool = Field(default=True)

    __table_args__ = (Index("idx_invitation_company_email", "company_id", "email"),)
