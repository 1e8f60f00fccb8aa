import json
from concurrent.futures import ThreadPoolExecutor

from fastapi.testclient import TestClient

from venue_dashboard.main import app


def test_health_live_and_ready_endpoints():
    client = TestClient(app)
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/health/live").json() == {"status": "live"}
    assert client.get("/health/ready").json() == {"status": "ready"}


def test_unhandled_exception_handler_returns_problem_json():
    @app.get("/_test/error")
    async def _test_error():
        raise RuntimeError("boom")

    client = TestClient(app, raise_server_exceptions=False)
    response = client.get("/_test/error")
    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/problem+json")
    body = response.json()
    assert body["title"] == "Internal Server Error"
    assert body["status"] == 500
    assert body["error_code"] == "INTERNAL_ERROR"


def test_concurrent_lookups_keep_their_own_correlation_ids(monkeypatch):
    async def _fake_lookup(self, mobile, correlation_id):  # noqa: ANN001
        body = {"membershipSummary": {"total": 1, "used": 0, "balance": 1, "isExpired": False}}
        body["history"] = {"mobile": mobile, "correlation_id": correlation_id}
        return 200, json.dumps(body)

    monkeypatch.setattr(
        "venue_dashboard.clients.membership_client.MembershipClient.lookup", _fake_lookup
    )
    client = TestClient(app)

    def _lookup(index: int) -> tuple[int, dict, str]:
        response = client.post(
            "/api/members/lookup",
            json={"mobile": f"08000000{index:02d}"},
            headers={"X-Correlation-Id": f"corr_{index}"},
        )
        return response.status_code, response.json(), response.headers["X-Correlation-Id"]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(_lookup, range(24)))

    for index, (status, body, header) in enumerate(results):
        assert status == 200
        assert header == f"corr_{index}"
        assert body["history"] == {"mobile": f"08000000{index:02d}", "correlation_id": f"corr_{index}"}


def test_health_ready_returns_503_when_draining():
    app.state.is_draining = True
    client = TestClient(app)
    response = client.get("/health/ready")
    app.state.is_draining = False

    assert response.status_code == 503
    assert response.json() == {"status": "draining"}


def test_metrics_endpoint_is_exposed():
    client = TestClient(app)
    client.get("/health")

    response = client.get("/metrics")

    assert response.status_code == 200
    assert "http_request" in response.text


def test_lifespan_builds_record_store_from_settings():
    with TestClient(app) as client:
        assert app.state.record_store is not None
        created = client.post(
            "/api/games",
            json={"title": "Azul", "category": "Abstract", "minPlayers": 2, "maxPlayers": 4},
        )
        listed = client.get("/api/games", params={"search": "azul"})

    assert created.status_code == 201
    assert [g["title"] for g in listed.json()] == ["Azul"]
    assert app.state.is_draining is True
    app.state.is_draining = False
