import pytest


@pytest.mark.unit
def test_ping_returns_success_envelope(app) -> None:
    client = app.test_client()

    response = client.get("/health/ping")

    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    assert payload["error"] is False
    assert payload["data"]["status"] == "ok"
    assert payload["data"]["version"] == app.config["APP_VERSION"]


@pytest.mark.unit
def test_response_carries_generated_request_id(app) -> None:
    client = app.test_client()

    response = client.get("/health/ping")

    assert response.headers["X-Request-ID"].startswith("req_")


@pytest.mark.unit
def test_incoming_request_id_is_propagated(app) -> None:
    client = app.test_client()

    response = client.get("/health/ping", headers={"X-Request-ID": "trace-123"})

    assert response.headers["X-Request-ID"] == "trace-123"


@pytest.mark.unit
def test_invalid_request_id_is_replaced(app) -> None:
    client = app.test_client()

    response = client.get("/health/ping", headers={"X-Request-ID": "bad id with spaces"})

    assert response.headers["X-Request-ID"].startswith("req_")


@pytest.mark.unit
def test_welcome_page_renders(app) -> None:
    response = app.test_client().get("/")

    assert response.status_code == 200
    assert app.config["APP_NAME"].encode() in response.data
