import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Mock repositories
    uow.employees = MagicMock()
    uow.employees.get_by_email = AsyncMock()
    uow.employees.get_by_id = AsyncMock()
    uow.employees.exists_by_email = AsyncMock(return_value=False)
    uow.employees.create = AsyncMock(side_effect=lambda employee: employee)
    uow.employees.delete = AsyncMock()

    uow.companies = MagicMock()
    uow.companies.get_by_id = AsyncMock()
    uow.companies.exists_by_email = AsyncMock(return_value=False)

    uow.invitations = MagicMock()
    uow.invitations.get_by_id = AsyncMock()
    uow.invitations.delete_active = AsyncMock(return_value=True)

    return uow
