import base64

import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.entities import Employee, EmployeeRole, Invitation
from tests.integration.helpers import PASSWORD, invite_token, register


@pytest.mark.asyncio
async def test_successful_registration(client: AsyncClient, db_session, company):
    """Invite {id=7, a@b.com, company 3, Employee} creates the employee

    And invitation 7 no longer exists afterward
    """
    image = base64.b64encode(b"avatar").decode()
    response = await client.post(
        "/employee/register",
        json={
            "login": "newbie",
            "invite": invite_token(),
            "password": PASSWORD,
            "image": image,
        },
    )

    assert response.status_code == 200
    assert response.json() == {"is_success": True}

    result = await db_session.exec(select(Employee).where(Employee.email == "a@b.com"))
    employee = result.one()
    assert employee.login == "newbie"
    assert employee.company_id == 3
    assert employee.role == "Employee"
    assert employee.image == b"avatar"

    result = await db_session.exec(select(Invitation).where(Invitation.id == 7))
    assert result.one_or_none() is None


@pytest.mark.asyncio
@pytest.mark.parametrize("invite", ["garbage", "Zm9vYmFy", "gAAAAAB-tampered"])
async def test_register_invalid_invite(client: AsyncClient, company, invite):
    response = await client.post(
        "/employee/register",
        json={"login": "newbie", "invite": invite, "password": PASSWORD},
    )

    assert response.status_code == 400
    assert response.json()["error"] == {
        "code": "BAD_REQUEST",
        "message": "Incorrect invite",
    }


@pytest.mark.asyncio
async def test_register_twice_with_same_email(client: AsyncClient, db_session, company):
    db_session.add(
        Invitation(id=8, company_id=3, email="a@b.com", role="Employee", is_active=True)
    )
    await db_session.commit()

    first = await register(client, login="one")
    second = await register(client, login="two", invitation_id=8)

    assert first.status_code == 200
    assert second.status_code == 400
    assert second.json()["error"]["message"] == "Account already exists"


@pytest.mark.asyncio
async def test_register_with_company_email(client: AsyncClient, db_session, company):
    db_session.add(
        Invitation(id=9, company_id=3, email="hr@acme.com", role="Employee", is_active=True)
    )
    await db_session.commit()

    response = await register(client, invitation_id=9, email="hr@acme.com")

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Account already exists"


@pytest.mark.asyncio
async def test_register_inactive_invitation(client: AsyncClient, db_session, company):
    db_session.add(
        Invitation(id=10, company_id=3, email="c@d.com", role="Employee", is_active=False)
    )
    await db_session.commit()

    response = await register(client, invitation_id=10, email="c@d.com")

    assert response.status_code == 404
    assert response.json()["error"] == {
        "code": "NOT_FOUND",
        "message": "Invitation not found or inactive",
    }

    result = await db_session.exec(select(Employee).where(Employee.email == "c@d.com"))
    assert result.one_or_none() is None


@pytest.mark.asyncio
async def test_register_unknown_invitation(client: AsyncClient, company):
    response = await register(client, invitation_id=404)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_register_unknown_company(client: AsyncClient, db_session, company):
    db_session.add(
        Invitation(id=11, company_id=3, email="e@f.com", role="Employee", is_active=True)
    )
    await db_session.commit()

    response = await register(client, invitation_id=11, email="e@f.com", company_id=42)

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Incorrect company"

    # Invitation is untouched by the failed attempt
    result = await db_session.exec(select(Invitation).where(Invitation.id == 11))
    assert result.one_or_none() is not None


@pytest.mark.asyncio
async def test_register_empty_password(client: AsyncClient, db_session, company):
    response = await client.post(
        "/employee/register",
        json={"login": "newbie", "invite": invite_token(), "password": ""},
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Incorrect password"

    result = await db_session.exec(select(Invitation).where(Invitation.id == 7))
    assert result.one_or_none() is not None


@pytest.mark.asyncio
async def test_register_admin_invite(client: AsyncClient, db_session, company):
    response = await register(client, role=EmployeeRole.Admin)

    assert response.status_code == 200
    result = await db_session.exec(select(Employee).where(Employee.email == "a@b.com"))
    assert result.one().role == "Admin"
