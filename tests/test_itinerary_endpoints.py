import json
import logging

from conftest import make_itinerary

PARIS = {"city": "Paris", "budget": "$1000", "days": 3}


def test_health(client_factory):
    client, _ = client_factory()
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_generate_returns_itinerary(client_factory, itinerary_json):
    client, fake = client_factory(itinerary_json)

    resp = client.post("/generate", json=PARIS)

    assert resp.status_code == 200
    data = resp.json()
    assert data["city"] == "Paris"
    assert data["total_days"] == 3
    assert len(data["itinerary"]) == 3
    assert set(data["itinerary"][0]) == {"day", "title", "summary", "attractions", "dining"}
    assert set(data["itinerary"][0]["dining"][0]) == {"name", "meal", "estimated_cost_usd"}
    assert len(fake.prompts) == 1


def test_invalid_input_is_400_without_model_call(client_factory):
    client, fake = client_factory()

    resp = client.post("/generate", json={"city": "", "budget": "$1000", "days": 3})

    assert resp.status_code == 400
    assert resp.json() == {
        "error": "Invalid input.",
        "details": {"formErrors": [], "fieldErrors": {"city": ["City cannot be empty."]}},
    }
    assert fake.prompts == []


def test_multiple_invalid_fields_are_all_reported(client_factory):
    client, _ = client_factory()
    resp = client.post("/generate", json={"city": "", "budget": "$100", "days": 0})

    assert resp.status_code == 400
    assert set(resp.json()["details"]["fieldErrors"]) == {"city", "days"}


def test_malformed_json_body_is_400(client_factory):
    client, fake = client_factory()
    resp = client.post("/generate", content=b"{not json", headers={"Content-Type": "application/json"})

    assert resp.status_code == 400
    assert resp.json()["details"]["formErrors"] == ["Request body must be valid JSON."]
    assert fake.prompts == []


def test_prose_reply_is_502_and_raw_text_only_logged(client_factory, caplog):
    prose = "I'd love to help you plan Paris! Day one: the Eiffel Tower."
    client, _ = client_factory(prose)

    with caplog.at_level(logging.ERROR):
        resp = client.post("/generate", json=PARIS)

    assert resp.status_code == 502
    assert resp.json() == {"error": "The AI returned an invalid response format. Please try again."}
    assert prose not in resp.text
    assert prose in caplog.text


def test_upstream_failure_is_generic_500(client_factory):
    client, _ = client_factory(PermissionError("API key not valid"))

    resp = client.post("/generate", json=PARIS)

    assert resp.status_code == 500
    assert resp.json() == {"error": "An internal server error occurred."}
    assert "API key" not in resp.text


def test_unexpected_error_is_generic_500(client_factory, monkeypatch):
    from itinerary_planner.services.itinerary_service import ItineraryGenerator

    async def boom(self, req):
        raise KeyError("surprise")

    monkeypatch.setattr(ItineraryGenerator, "generate", boom)
    client, _ = client_factory(raise_server_exceptions=False)

    resp = client.post("/generate", json=PARIS)

    assert resp.status_code == 500
    assert resp.json() == {"error": "An internal server error occurred."}


def test_permissive_generator_echoes_model_day_count(client_factory):
    data = make_itinerary()
    data["total_days"] = 4
    client, _ = client_factory(json.dumps(data), strict=False)

    resp = client.post("/generate", json=PARIS)

    assert resp.status_code == 200
    assert resp.json()["total_days"] == 4
