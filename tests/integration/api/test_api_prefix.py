import pytest
from httpx import ASGITransport, AsyncClient

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.app import create_app
from src.depends import get_unit_of_work
from tests.integration.helpers import PASSWORD


class PrefixedConfig(ApplicationConfig):
    API_PREFIX = "/api"


@pytest.mark.asyncio
async def test_employee_routes_mounted_under_api_prefix(db_session, company):
    app = create_app(PrefixedConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        prefixed = await ac.post(
            "/api/employee/login", json={"email": "nobody@acme.com", "password": PASSWORD}
        )
        bare = await ac.post(
            "/employee/login", json={"email": "nobody@acme.com", "password": PASSWORD}
        )
        health = await ac.get("/health")

    assert prefixed.status_code == 404
    assert prefixed.json()["error"]["message"] == "Account not found"
    assert bare.status_code == 404
    assert "error" not in bare.json()
    assert health.status_code == 200
