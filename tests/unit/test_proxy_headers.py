import pytest
from flask import request

from petclinic import create_app
from petclinic.constants import HttpHeaders
from petclinic.settings import Settings


def _scheme_client(app):
    @app.route("/_scheme")
    def current_scheme() -> str:
        return request.scheme

    return app.test_client()


@pytest.mark.unit
def test_forwarded_proto_from_trusted_proxy_sets_request_scheme(app) -> None:
    client = _scheme_client(app)

    response = client.get("/_scheme", headers={HttpHeaders.X_FORWARDED_PROTO: "https"})

    assert response.get_data(as_text=True) == "https"
    assert app.config["PREFERRED_URL_SCHEME"] == "http"


@pytest.mark.unit
def test_forwarded_proto_does_not_leak_into_next_request(app) -> None:
    client = _scheme_client(app)

    client.get("/_scheme", headers={HttpHeaders.X_FORWARDED_PROTO: "https"})
    response = client.get("/_scheme")

    assert response.get_data(as_text=True) == "http"


@pytest.mark.unit
def test_forwarded_headers_are_ignored_without_trusted_proxy(monkeypatch) -> None:
    monkeypatch.setenv("TRUSTED_PROXY_COUNT", "0")
    client = _scheme_client(create_app(settings=Settings.load()))

    response = client.get("/_scheme", headers={HttpHeaders.X_FORWARDED_PROTO: "https"})

    assert response.get_data(as_text=True) == "http"
