import json
from datetime import date
from decimal import Decimal

import pytest

from travel_ai.core.config_loader import Settings
from travel_ai.models.chat_models import ChatChoice, ChatMessage, ChatResponse
from travel_ai.models.itinerary_models import (
    Activity,
    Hotel,
    ItineraryDetails,
    ItineraryResponse,
    Restaurant,
)
from travel_ai.models.travel_models import TravelRequest


TOKYO_CONTENT = {
    "Destination": "Tokyo",
    "TravelDates": ["2025-06-01", "2025-06-10"],
    "Itinerary": {
        "Hotels": [{"Name": "Hotel A", "Rating": 4.5, "EstimatedCost": 150}],
        "Activities": [{"Name": "Sightseeing", "Time": "10:00 AM", "EstimatedCost": 50}],
        "Restaurants": [{"Name": "Sushi Bar", "Cuisine": "Japanese", "EstimatedCost": 100}],
        "TotalEstimatedCost": 300,
    },
}


def chat_response(content) -> ChatResponse:
    return ChatResponse(choices=[ChatChoice(message=ChatMessage(role="assistant", content=content))])


class FakeChatEndpoint:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    async def get_completion(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response


class FakeAgent:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    async def get_itinerary_from_ai(self, request):
        self.calls.append(request)
        if self.error is not None:
            raise self.error
        return self.response


class FakeRepository:
    def __init__(self, error=None):
        self.error = error
        self.records = []

    async def add_record(self, record):
        if self.error is not None:
            raise self.error
        record.id = len(self.records) + 1
        self.records.append(record)

    async def list_records(self):
        return list(self.records)


@pytest.fixture
def config():
    return Settings(openai_model="gpt-4o", openai_temperature=0.7, openai_max_tokens=500)


@pytest.fixture
def tokyo_request():
    return TravelRequest(
        destination="Tokyo",
        travel_dates=[date(2025, 6, 1), date(2025, 6, 10)],
        budget=Decimal("2000"),
        interests=["history", "food", "adventure"],
    )


@pytest.fixture
def tokyo_content():
    return json.loads(json.dumps(TOKYO_CONTENT))


@pytest.fixture
def tokyo_response():
    return ItineraryResponse(
        destination="Tokyo",
        travel_dates=[date(2025, 6, 1), date(2025, 6, 10)],
        itinerary=ItineraryDetails(
            hotels=[Hotel(name="Hotel A", rating=4.5, estimated_cost=Decimal("150"))],
            activities=[Activity(name="Sightseeing", time="10:00 AM", estimated_cost=Decimal("50"))],
            restaurants=[Restaurant(name="Sushi Bar", cuisine="Japanese", estimated_cost=Decimal("100"))],
            total_estimated_cost=Decimal("300"),
        ),
    )
