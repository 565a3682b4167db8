"""
FastAPI endpoint tests for the Number Translator API.

Uses httpx + FastAPI TestClient: no real server needed.
"""

from __future__ import annotations

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from number_translator.config import Settings

client = TestClient(app)


@pytest.fixture(scope="module", autouse=True)
def _load_settings() -> None:
    """Initialise settings once for all API tests (bypasses lifespan)."""
    api._settings = Settings()
    yield  # type: ignore[misc]
    api._settings = None


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["lexicon_size"] == 32
        assert data["strict_characters"] is True


class TestTranslateEndpoint:
    def test_translates_valid_phrase(self) -> None:
        resp = client.post("/translate", json={"phrase": "two million three hundred thousand"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["is_valid"] is True
        assert data["value"] == 2_300_000
        assert data["error"] is None

    def test_negative_value(self) -> None:
        data = client.post("/translate", json={"phrase": "negative ten"}).json()
        assert data["value"] == -10

    def test_tokens_in_response(self) -> None:
        data = client.post("/translate", json={"phrase": "forty five"}).json()
        assert data["words"] == ["forty", "five"]
        assert [t["word_class"] for t in data["tokens"]] == ["HELPER", "BASIC"]

    def test_invalid_phrase_is_200_with_error(self) -> None:
        resp = client.post("/translate", json={"phrase": "ten ten"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["is_valid"] is False
        assert data["value"] is None
        assert data["error"]["code"] == "DUPLICATE_ADJACENT_CLASS"
        assert data["error"]["position"] == 1

    def test_scale_order_violation(self) -> None:
        data = client.post("/translate", json={"phrase": "one thousand two million"}).json()
        assert data["error"]["code"] == "SCALE_ORDER_VIOLATION"
        assert data["error"]["word"] == "million"

    def test_unknown_word_suggestion(self) -> None:
        data = client.post("/translate", json={"phrase": "fourty"}).json()
        assert data["error"]["code"] == "UNKNOWN_WORD"
        assert data["error"]["details"]["suggestion"] == "forty"


class TestBatchEndpoint:
    def test_mixed_batch(self) -> None:
        resp = client.post(
            "/translate/batch",
            json={"phrases": ["zero", "zero two", "one hundred twenty three"]},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["valid_count"] == 2
        assert data["invalid_count"] == 1
        assert [r["value"] for r in data["results"]] == [0, None, 123]
        assert data["results"][1]["error"]["code"] == "ZERO_MUST_BE_SOLE"

    def test_empty_batch_returns_422(self) -> None:
        resp = client.post("/translate/batch", json={"phrases": []})
        assert resp.status_code == 422


class TestRequestValidation:
    def test_empty_body_returns_422(self) -> None:
        resp = client.post("/translate", json={})
        assert resp.status_code == 422

    def test_missing_content_type_returns_422(self) -> None:
        resp = client.post("/translate")
        assert resp.status_code == 422

    def test_empty_phrase_is_reported_not_rejected(self) -> None:
        data = client.post("/translate", json={"phrase": ""}).json()
        assert data["error"]["code"] == "EMPTY_INPUT"

    def test_overlong_phrase_in_batch_returns_422(self) -> None:
        resp = client.post("/translate/batch", json={"phrases": ["one", "one " * 300]})
        assert resp.status_code == 422
