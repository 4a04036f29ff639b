import json
from contextlib import asynccontextmanager
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient
from langchain_core.runnables import RunnableLambda

from itinerary_planner.api.itinerary_router import get_generator
from itinerary_planner.main import app
from itinerary_planner.services.itinerary_service import ItineraryGenerator


class FakeGemini:
    """
    Stand-in for the Gemini chat model. Records every prompt it receives
    and answers with the next queued response (or raises it, if it is an exception).
    """

    def __init__(self, *responses):
        self.responses = list(responses)
        self.prompts: List[str] = []

    def _respond(self, prompt: Any) -> str:
        self.prompts.append(prompt if isinstance(prompt, str) else prompt.to_string())
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def as_runnable(self) -> RunnableLambda:
        return RunnableLambda(self._respond)


def make_day(day: int, attractions: int = 5, dining: int = 2) -> Dict[str, Any]:
    return {
        "day": day,
        "title": f"Day {day} highlights",
        "summary": "Museums in the morning, a river walk in the evening.",
        "attractions": [f"Attraction {day}.{i}" for i in range(1, attractions + 1)],
        "dining": [
            {"name": f"Bistro {day}.{i}", "meal": "Lunch", "estimated_cost_usd": "$15-25"}
            for i in range(1, dining + 1)
        ],
    }


def make_itinerary(city: str = "Paris", budget: str = "$1000", days: int = 3) -> Dict[str, Any]:
    return {
        "city": city,
        "budget": budget,
        "total_days": days,
        "itinerary": [make_day(d) for d in range(1, days + 1)],
    }


@pytest.fixture
def itinerary_json() -> str:
    return json.dumps(make_itinerary())


@asynccontextmanager
async def _no_lifespan(_app):
    # Skip building the real Gemini client
    yield


@pytest.fixture
def client_factory(monkeypatch):
    """
    Build a TestClient whose generator talks to a FakeGemini.
    Usage: client, fake = client_factory("model reply", ...)
    """
    monkeypatch.setattr(app.router, "lifespan_context", _no_lifespan, raising=True)
    clients = []

    def _make(*responses, strict: bool = True, raise_server_exceptions: bool = True):
        fake = FakeGemini(*responses)
        generator = ItineraryGenerator(fake.as_runnable(), strict=strict)
        app.dependency_overrides[get_generator] = lambda: generator
        c = TestClient(app, raise_server_exceptions=raise_server_exceptions)
        c.__enter__()
        clients.append(c)
        return c, fake

    yield _make

    for c in clients:
        c.__exit__(None, None, None)
    app.dependency_overrides.clear()
