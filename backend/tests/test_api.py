"""
Tests for the declension HTTP API, with network sources swapped out
"""

import pytest
from fastapi.testclient import TestClient

from engines.declension import DeclensionResolver, IrregularSource, RuleBasedSource
from main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        app.state.resolver = DeclensionResolver([IrregularSource(), RuleBasedSource()])
        yield test_client


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_resolve_word(client):
    response = client.get("/api/declension/книга", params={"gender": "feminine", "translation": "book"})
    assert response.status_code == 200

    body = response.json()
    assert body["word"] == "книга"
    assert body["forms"]["singular"]["genitive"] == "книги"
    assert body["translation"] == "book"
    assert body["isFallback"] is True
    assert body["fromPrimarySource"] is False
    assert body["origin"] == "rules"
    assert "X-Correlation-ID" in response.headers


def test_resolve_irregular_word(client):
    body = client.get("/api/declension/человек").json()
    assert body["irregular"] is True
    assert body["isFallback"] is False
    assert body["forms"]["plural"]["nominative"] == "люди"
    assert body["sourceUrl"].startswith("https://ru.wiktionary.org/wiki/")


def test_invalid_metadata_is_rejected(client):
    response = client.get("/api/declension/стол", params={"gender": "plural"})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "E2000_VALIDATION_GENERIC"


def test_list_irregular(client):
    body = client.get("/api/declension/irregular").json()
    assert "время" in body["words"]
    assert len(body["declensions"]) == len(body["words"])
    assert all(d["irregular"] for d in body["declensions"])


def test_batch(client):
    response = client.post("/api/declension/batch", json={
        "words": ["время", "брат", " "],
        "metadata": {"брат": {"gender": "masculine", "animacy": "animate"}},
    })
    assert response.status_code == 200

    body = response.json()
    assert [r["word"] for r in body["results"]] == ["время", "брат"]
    assert body["results"][1]["forms"]["singular"]["accusative"] == "брата"
    assert body["fallbackCount"] == 1


def test_empty_batch(client):
    response = client.post("/api/declension/batch", json={"words": []})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "E2001_REQUIRED_FIELD_MISSING"


def test_oversized_batch(client):
    words = [f"слово{i}" for i in range(51)]
    response = client.post("/api/declension/batch", json={"words": words})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "E2003_OUT_OF_RANGE"


def test_clear_cache(client):
    client.get("/api/declension/стол")
    client.get("/api/declension/время")

    response = client.delete("/api/declension/cache")
    assert response.status_code == 200
    assert response.json() == {"cleared": 2}
    assert client.delete("/api/declension/cache").json() == {"cleared": 0}


def test_batch_metadata_keys_are_trimmed(client):
    response = client.post("/api/declension/batch", json={
        "words": [" брат"],
        "metadata": {" брат ": {"gender": "masculine", "animacy": "animate"}, "  ": {"gender": "feminine"}},
    })
    assert response.status_code == 200

    result = response.json()["results"][0]
    assert result["word"] == "брат"
    assert result["animacy"] == "animate"
    assert result["forms"]["singular"]["accusative"] == "брата"


def test_unknown_route_keeps_404(client):
    response = client.get("/nowhere")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "E9000_INTERNAL_GENERIC"
