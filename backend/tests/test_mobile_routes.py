"""Testes das rotas /v1/mobile (seleção do membro exibido)."""
import pytest
from fastapi.testclient import TestClient

from main import app
from meetings_api.dependencies import get_show_state
from meetings_api.services.show_state import ShowStateStore

BODY = {"projectId": "p1", "teamId": "t1", "memberId": "ana@databriz.ru", "iteration": "Meetings\\Sprint 1"}


@pytest.fixture
def store():
    s = ShowStateStore()
    app.dependency_overrides[get_show_state] = lambda: s
    yield s
    app.dependency_overrides.clear()


@pytest.fixture
def http():
    return TestClient(app)


def test_nothing_selected_returns_404(http, store):
    r = http.get("/v1/mobile/control/show")
    assert r.status_code == 404
    assert r.json()["code"] == 404


def test_show_then_read_selection(http, store):
    r = http.post("/v1/mobile/control/show", json=BODY)
    assert r.status_code == 200
    assert r.json() == {"status": "OK"}
    assert store.current().member_id == "ana@databriz.ru"

    r = http.get("/v1/mobile/control/show")
    assert r.status_code == 200
    assert r.json() == BODY


def test_show_replaces_previous_selection(http, store):
    http.post("/v1/mobile/control/show", json=BODY)
    http.post("/v1/mobile/control/show", json={**BODY, "memberId": "ivan@databriz.ru"})
    assert store.current().member_id == "ivan@databriz.ru"


@pytest.mark.parametrize(
    "body",
    [
        {k: v for k, v in BODY.items() if k != "teamId"},
        {**BODY, "memberId": ""},
        {**BODY, "unexpected": 1},
    ],
)
def test_invalid_body_returns_400(http, store, body):
    r = http.post("/v1/mobile/control/show", json=body)
    assert r.status_code == 400
    assert r.json()["code"] == 400
    assert store.current() is None
