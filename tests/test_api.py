import pytest
from fastapi.testclient import TestClient

from proximate.errors import ListingStoreError
from proximate.main import app
from proximate.seed_listings import SEED_LISTINGS
from proximate.store import InMemoryListingStore, get_listing_store

class BrokenStore:
    def find(self, query, limit):
        raise ListingStoreError("database unavailable")

@pytest.fixture
def client():
    store = InMemoryListingStore(SEED_LISTINGS)
    app.dependency_overrides[get_listing_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()

def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}

def test_intelligent_search(client):
    r = client.post("/api/search/intelligent", json={"query": "2 bedroom house with parking under $1200"})
    assert r.status_code == 200
    body = r.json()

    assert body["success"] is True
    assert body["classification"]["housingType"] == "house"
    assert body["classification"]["intent"] == "search"
    assert body["searchFilters"]["priceRange"]["max"] == 1200
    assert body["searchFilters"]["parking"] is True
    assert body["totalResults"] == len(body["results"]) == 1
    result = body["results"][0]
    assert result["id"] == "modern-apartment-near-campus"
    assert result["relevanceIndicators"]["bedroomMatch"] is True
    assert result["address"] == "123 Main St"
    assert len(result["images"]) <= 8
    assert "timestamp" in body

def test_request_id_is_propagated(client):
    r = client.post("/api/search/intelligent", json={"query": "studio"}, headers={"x-request-id": "abc-123"})
    assert r.headers["X-Request-ID"] == "abc-123"

def test_empty_query_is_rejected(client):
    r = client.post("/api/search/intelligent", json={"query": ""})
    assert r.status_code == 422
    assert r.json()["error"] == "VALIDATION_ERROR"

def test_voice_search(client):
    r = client.post("/api/search/voice", json={"transcript": "studio near campus", "confidence": 0.5})
    assert r.status_code == 200
    body = r.json()

    assert body["transcript"] == "studio near campus"
    assert body["voiceConfidence"] == 0.5
    assert body["classification"]["confidence"] == pytest.approx(0.425)
    assert body["classification"]["extractedEntities"][1]["value"]["isNearCampus"] is True

def test_voice_search_default_confidence(client):
    r = client.post("/api/search/voice", json={"transcript": "2 bedroom"})
    assert r.status_code == 200
    assert r.json()["voiceConfidence"] == 0.8

def test_voice_confidence_out_of_range(client):
    r = client.post("/api/search/voice", json={"transcript": "2 bedroom", "confidence": 1.5})
    assert r.status_code == 422

def test_suggestions(client):
    r = client.get("/api/search/suggestions", params={"q": "furnished"})
    assert r.status_code == 200
    assert r.json() == {
        "suggestions": ["furnished studio near campus", "furnished room for rent"],
        "query": "furnished",
    }
    assert client.get("/api/search/suggestions", params={"q": "f"}).json()["suggestions"] == []

def test_store_failure_maps_to_502(client):
    app.dependency_overrides[get_listing_store] = lambda: BrokenStore()
    r = client.post("/api/search/intelligent", json={"query": "2 bedroom"})
    assert r.status_code == 502
    assert r.json()["error"] == "LISTING_STORE_ERROR"

def test_decimal_distance_reaches_the_query(client):
    r = client.post("/api/search/intelligent", json={"query": "apartment within 1.5 miles of campus"})
    assert r.status_code == 200
    body = r.json()

    assert body["searchFilters"]["distanceToCampus"] == 1.5
    assert all(res["distanceToCampus"] <= 1.5 for res in body["results"])

def test_cors_headers_use_configured_origins(client):
    r = client.get("/health", headers={"Origin": "https://example.com"})
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] in ("*", "https://example.com")

    pre = client.options(
        "/api/search/intelligent",
        headers={"Origin": "https://example.com", "Access-Control-Request-Method": "POST"},
    )
    assert pre.status_code == 200
    assert "access-control-allow-origin" in pre.headers
