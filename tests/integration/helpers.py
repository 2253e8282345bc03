from config import ApplicationConfig
from src.app.services.invite_protector import InvitePayload, protect
from src.domain.entities import EmployeeRole

PASSWORD = "SecurePass123!"


def invite_token(
    invitation_id: int = 7,
    email: str = "a@b.com",
    company_id: int = 3,
    role: EmployeeRole = EmployeeRole.Employee,
) -> str:
    payload = InvitePayload(id=invitation_id, email=email, company_id=company_id, role=role)
    return protect(payload, ApplicationConfig.INVITE_SECRET_KEY)


async def register(client, login: str = "newbie", **invite_fields):
    return await client.post(
        "/employee/register",
        json={"login": login, "invite": invite_token(**invite_fields), "password": PASSWORD},
    )


async def login_token(client, email: str = "a@b.com") -> str:
    response = await client.post(
        "/employee/login", json={"email": email, "password": PASSWORD}
    )
    assert response.status_code == 200
    return response.json()["token"]
