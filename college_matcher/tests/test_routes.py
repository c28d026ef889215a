"""
Tests for the college matcher API routes.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from college_matcher.ai import explainer as explainer_module
from college_matcher.ai.safety_rules import FALLBACK_INSIGHTS
from college_matcher.routes import router, get_athlete_store


class _BrokenStore:
    async def get_athlete(self, athlete_id):
        raise RuntimeError("database unavailable")

    async def get_latest_combine_metrics(self, athlete_id):
        return None

    async def get_recruiting_preferences(self, athlete_id):
        return None


@pytest.fixture
def client(store):
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_athlete_store] = lambda: store
    return TestClient(app)


def test_health(client):
    response = client.get("/api/college-matcher/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_match_response_shape(client):
    response = client.get("/api/college-matcher/1")
    body = response.json()

    assert response.status_code == 200
    assert body["divisionRecommendation"] == "D1"
    assert body["matchScore"] == 100
    assert "insights" not in body

    top = body["matchedSchools"][0]
    assert top["name"] == "Stanford University"
    assert set(top) == {
        "id", "name", "division", "region", "programs", "location",
        "academicMatch", "athleticMatch", "overallMatch",
    }
    assert top["overallMatch"] == 100


def test_query_filters(client):
    response = client.get(
        "/api/college-matcher/2",
        params={"region": "West", "preferredMajor": "Computer", "maxDistance": 250},
    )
    schools = response.json()["matchedSchools"]

    assert response.status_code == 200
    assert schools[0]["name"] == "Stanford University"
    assert schools[0]["overallMatch"] == 50


def test_use_ai_adds_insights(client, monkeypatch):
    monkeypatch.setattr(explainer_module.explainer, "client", None)

    response = client.get("/api/college-matcher/1", params={"useAI": "true"})

    assert response.status_code == 200
    assert response.json()["insights"] == FALLBACK_INSIGHTS


def test_unknown_athlete_is_404(client):
    response = client.get("/api/college-matcher/99")

    assert response.status_code == 404
    assert response.json()["detail"] == "Athlete 99 not found"


def test_missing_metrics_is_412(client):
    response = client.get("/api/college-matcher/3")

    assert response.status_code == 412
    assert response.json()["detail"] == "No combine metrics found for athlete 3"


def test_unexpected_error_is_500():
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_athlete_store] = lambda: _BrokenStore()

    response = TestClient(app).get("/api/college-matcher/1")

    assert response.status_code == 500
    assert response.json() == {"error": "database unavailable"}


def test_colleges_by_division(client):
    response = client.get("/api/colleges/division/D2")

    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == [
        "Grand Valley State",
        "Slippery Rock University",
    ]


def test_college_search(client):
    response = client.get("/api/colleges/search", params={"q": "iowa"})

    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["Iowa Western CC"]

    by_location = client.get("/api/colleges/search", params={"q": ", IA"}).json()
    assert [c["id"] for c in by_location] == [10, 11]


def test_college_search_needs_two_characters(client):
    assert client.get("/api/colleges/search", params={"q": "a"}).status_code == 400


def test_college_by_id(client):
    response = client.get("/api/colleges/5")

    assert response.status_code == 200
    assert response.json()["name"] == "Stanford University"
    assert client.get("/api/colleges/500").status_code == 404


def test_athlete_profile_in_response(client):
    body = client.get("/api/college-matcher/1").json()

    assert body["athleteProfile"] == {
        "academicStrength": 100,
        "athleticStrength": 85,
        "positionRanking": "Top-tier prospect (Top 5%)",
    }
