"""Tests for the Flask interface."""
from __future__ import annotations

import pytest

from flight_finder import SnapshotFetchError
from webapp import app

SNAPSHOT = (
    "Markdown Content:\n"
    "[### Cheap Flight](https://www.example.com/a)\n"
    "Fly for £199 only!\n"
    "[### Pricey Flight](https://example.com/b)\n"
    "Lisbon trip €350 economy\n"
)


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setitem(app.config, "SNAPSHOT_FETCHER", lambda config: SNAPSHOT)
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client


def test_index_renders_offers(client) -> None:
    response = client.get("/")

    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert "Manchester ✈ Lisbon" in body
    assert "Lowest snapshot fare" in body
    assert "Cheap Flight" in body
    assert "≈ £301 (mid-rate)" in body
    assert body.index("Cheap Flight") < body.index("Pricey Flight")


def test_index_renders_empty_state(client, monkeypatch) -> None:
    monkeypatch.setitem(app.config, "SNAPSHOT_FETCHER", lambda config: "no prices at all")

    body = client.get("/").get_data(as_text=True)

    assert "No live fares found" in body
    assert "No priced offers detected" in body
    assert "Expect roughly a 3 hour nonstop flight." in body


def test_api_returns_json(client) -> None:
    response = client.get("/api/offers")

    assert response.status_code == 200
    payload = response.get_json()
    assert [offer["title"] for offer in payload["offers"]] == ["Cheap Flight", "Pricey Flight"]
    assert payload["best_offer"]["url"] == "https://www.example.com/a"
    assert payload["summary"] == {}


def test_api_query_overrides_route(client) -> None:
    payload = client.get("/api/offers?origin=London&limit=1").get_json()

    assert payload["config"]["origin"] == "London"
    assert payload["config"]["destination"] == "Lisbon"
    assert len(payload["offers"]) == 1
    assert payload["total_offers"] == 2


def test_fetch_failure_returns_bad_gateway(client, monkeypatch) -> None:
    def _failing(config):
        raise SnapshotFetchError("Failed to fetch travel snapshot (503)", status_code=503)

    monkeypatch.setitem(app.config, "SNAPSHOT_FETCHER", _failing)

    api_response = client.get("/api/offers")
    assert api_response.status_code == 502
    assert api_response.get_json() == {"error": "Failed to fetch travel snapshot (503)"}

    page_response = client.get("/")
    assert page_response.status_code == 502
    assert "Failed to fetch travel snapshot (503)" in page_response.get_data(as_text=True)
