import logging

from fastapi.testclient import TestClient

import services.scoring_service as scoring_service
from core.settings import Settings
from main import app

client = TestClient(app)


def test_health_check():
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status_code"] == 200
    assert body["data"]["status"] == "healthy"
    assert "X-Process-Time" in response.headers


def test_request_timing_logs_method_and_status(caplog):
    with caplog.at_level(logging.INFO, logger="main"):
        response = client.get("/health")
    assert response.status_code == 200
    assert "GET /health -> 200" in caplog.text


def test_score_typing_route():
    response = client.post(
        "/v1/results/typing",
        json={
            "originalText": "the quick brown fox jumps",
            "typedText": "the quick brown fox",
            "minutes": 1,
            "backspaces": 2,
        },
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["contentType"] == "typing"
    assert data["metrics"]["words"] == 4
    assert data["metrics"]["mistakes"] == 0
    assert data["metrics"]["grossSpeed"] == "4"
    assert data["metrics"]["netSpeed"] == "4"
    assert data["metrics"]["missingWords"] == 0
    assert data["result"] == "Pass"
    assert data["analysis"]["summary"]["missing"] == 1
    assert data["analysis"]["alignedWords"][-1]["attempted"] is False


def test_score_shorthand_route():
    response = client.post(
        "/v1/results/shorthand",
        json={
            "originalText": "red car is fast",
            "typedText": "red bus is fast",
            "minutes": 5,
        },
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["metrics"]["mistakes"] == 1.0
    assert data["metrics"]["result"] == "Fail"
    assert data["analysis"]["alignedWords"][1]["status"] == "substitution"


def test_alignment_route():
    response = client.post(
        "/v1/results/alignment",
        json={"originalText": "co-operate", "typedText": "co–operate"},
    )
    assert response.status_code == 200
    words = response.json()["data"]["alignedWords"]
    assert len(words) == 1
    assert words[0]["status"] == "match"
    assert words[0]["isError"] is False


def test_score_typing_route_with_tiny_duration():
    response = client.post(
        "/v1/results/typing",
        json={"originalText": "a b c", "typedText": "a b c", "minutes": 1e-320},
    )
    assert response.status_code == 200
    metrics = response.json()["data"]["metrics"]
    assert metrics["grossSpeed"] == "Infinity"
    assert metrics["netSpeed"] == "Infinity"


def test_negative_minutes_rejected():
    response = client.post(
        "/v1/results/typing",
        json={"originalText": "a", "typedText": "a", "minutes": -1},
    )
    assert response.status_code == 422
    body = response.json()
    assert body["status_code"] == 422
    assert body["data"] is None
    assert "minutes" in body["detail"]


def test_oversized_submission_returns_413(monkeypatch):
    settings = Settings(app_title="test", max_words=2, log_level="INFO", cors_allow_origins=["*"])
    monkeypatch.setattr(scoring_service, "get_settings", lambda: settings)

    response = client.post(
        "/v1/results/shorthand",
        json={"originalText": "a b c", "typedText": "a b c", "minutes": 1},
    )
    assert response.status_code == 413
    body = response.json()
    assert body["data"] is None
    assert body["detail"].startswith("Input too large")
