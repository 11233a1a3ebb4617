from fastapi.testclient import TestClient

from tennis_league.config import Settings
from tennis_league.main import create_app


def test_health_returns_ok(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.content == b'{"status":"ok"}'


def test_health_does_not_need_the_database():
    """The store is unreachable, but the liveness probe never touches it."""
    settings = Settings(
        connection_string="mongodb://unreachable.invalid:27017",
        database_name="tennis_league_test",
        server_selection_timeout_ms=100,
    )
    with TestClient(create_app(settings=settings)) as test_client:
        response = test_client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
