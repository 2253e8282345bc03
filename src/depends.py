from typing import Iterable

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import verify_jwt
from src.app.use_cases.employees import CallerIdentity
from src.domain.entities import EmployeeRole

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()

EMPLOYEE_ROLES = frozenset(role.value for role in EmployeeRole)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing id, login, email, role

    Raises:
        HTTPException: 401 if token is invalid or expired
    """
    token = credentials.credentials
    payload = verify_jwt(token)

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return payload


def identity_from_claims(
    payload: dict, allowed_roles: Iterable[str] = EMPLOYEE_ROLES
) -> CallerIdentity:
    """Build the caller identity from token claims, enforcing the role"""
    try:
        identity = CallerIdentity(
            employee_id=payload["id"],
            login=payload["login"],
            email=payload["email"],
            role=payload["role"],
        )
    except (KeyError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    if identity.role not in allowed_roles:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Insufficient role",
        )

    return identity


def require_roles(*roles: EmployeeRole):
    """Dependency factory resolving the caller identity if its role is one of roles"""
    allowed_roles = frozenset(role.value for role in roles)

    async def get_current_employee(
        payload: dict = Depends(get_current_user),
    ) -> CallerIdentity:
        return identity_from_claims(payload, allowed_roles)

    return get_current_employee
