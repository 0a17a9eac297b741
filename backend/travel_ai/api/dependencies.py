# backend/travel_ai/api/dependencies.py

from functools import lru_cache

from travel_ai.agents.itinerary_agent import ItineraryAgent
from travel_ai.agents.itinerary_orchestrator import ItineraryOrchestrator
from travel_ai.core.config_loader import settings
from travel_ai.core.llm import OpenAIChatEndpoint
from travel_ai.db.itinerary_repository import ItineraryRepository
from travel_ai.utils.prompt_builder import PromptBuilder


# Process-wide singletons, wired by hand. Tests swap them through
# app.dependency_overrides.

@lru_cache
def get_repository() -> ItineraryRepository:
    return ItineraryRepository(settings.DB_PATH)


@lru_cache
def get_chat_endpoint() -> OpenAIChatEndpoint:
    return OpenAIChatEndpoint(settings)


@lru_cache
def get_orchestrator() -> ItineraryOrchestrator:
    agent = ItineraryAgent(get_chat_endpoint(), PromptBuilder(), settings)
    return ItineraryOrchestrator(agent, get_repository())
