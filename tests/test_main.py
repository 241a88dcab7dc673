"""Tests for the FastAPI surface."""

import pytest
from fastapi.testclient import TestClient

from tedb import main as main_module
from tedb.cache import InMemoryCache
from tedb.main import app, get_service, run
from tedb.search import VatSearchService


@pytest.fixture
def client_for(fixed_today):
    def _client(transport):
        service = VatSearchService(transport=transport, cache=InMemoryCache(60), clock=lambda: fixed_today)
        app.dependency_overrides[get_service] = lambda: service
        return TestClient(app)

    yield _client
    app.dependency_overrides.clear()


def test_health(client_for, make_transport):
    """Health reports the configured upstream."""

    response = client_for(make_transport()).get("/health")
    assert response.status_code == 200
    assert "base_url" in response.json()


def test_vat_search_success(client_for, make_transport, payload_bytes):
    """A successful search returns the normalized result."""

    client = client_for(make_transport(payload_bytes))
    response = client.post(
        "/vat-search",
        json={"country_codes": ["ES"], "categories": ["foodstuffs"], "commodity_codes": ["33049900"]},
    )
    assert response.status_code == 200
    countries = [c["memberState"]["defaultCountryCode"] for c in response.json()["results"]]
    assert countries == ["ES", "FR"]


@pytest.mark.parametrize(
    "body, criteria, status",
    [
        (b"{}", {"country_codes": ["ES"]}, 404),
        (b'{"result": [], "errors": null}', {"country_codes": ["ES"]}, 404),
        (b'{"result": [], "errors": "down"}', {"country_codes": ["ES"]}, 502),
        (b"{}", {"country_codes": ["UK"]}, 400),
        (b"{}", {"commodity_codes": ["123"]}, 400),
        (b"{}", {"date_from": "2024/03/02", "date_to": "2024/03/01"}, 400),
    ],
)
def test_vat_search_error_statuses(client_for, make_transport, body, criteria, status):
    """Typed errors map to HTTP statuses."""

    response = client_for(make_transport(body)).post("/vat-search", json=criteria)
    assert response.status_code == status
    assert response.json()["detail"]


def test_cn_code_lookup(client_for, make_transport):
    """Known codes resolve, unknown ones are 404."""

    code_list = b'[{"id": 7, "code": "3304 99 00"}]'
    client = client_for(make_transport(code_lists={"codes/CN_CODE/3304.json": code_list}))

    assert client.get("/cn-codes/33049900").json() == {"code": "33049900", "id": 7}
    assert client.get("/cn-codes/33041000").status_code == 404
    assert client.get("/cn-codes/33").status_code == 400


def test_each_request_gets_its_own_service():
    """Services are per request while transport and cache are shared."""

    first, second = get_service(), get_service()
    assert first is not second
    assert first.transport is second.transport
    assert first._cache is second._cache


def test_run_starts_uvicorn(monkeypatch):
    """run() hands the app to uvicorn with the configured address."""

    calls = []
    monkeypatch.setattr(main_module.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

    run()

    (args, kwargs), = calls
    assert args == (app,)
    assert kwargs["host"] == main_module.settings.api_host
    assert kwargs["port"] == main_module.settings.api_port
