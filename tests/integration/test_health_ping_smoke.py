"""Integration smoke tests.

这些测试需要显式配置真实数据库（见 tests/integration/conftest.py），可在 CI/本地按需运行。
"""

import pytest


@pytest.mark.integration
def test_health_ping_returns_success_envelope(client):
    response = client.get("/health/ping")

    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    assert payload["message"] == "服务运行正常"
    assert payload["data"]["status"] == "ok"


@pytest.mark.integration
def test_find_owners_page_renders(client):
    response = client.get("/owners/find")

    assert response.status_code == 200


@pytest.mark.integration
def test_created_owner_is_found_by_last_name_prefix(client):
    response = client.post(
        "/owners/new",
        data={
            "firstName": "Joe",
            "lastName": "Bloggs",
            "address": "123 Caramel Street",
            "city": "London",
            "telephone": "01316761638",
        },
    )
    assert response.status_code == 302
    owner_path = response.headers["Location"]

    search = client.get("/owners", query_string={"lastName": "blo"})

    assert search.status_code == 302
    assert search.headers["Location"] == owner_path
