# backend/travel_ai/agents/itinerary_orchestrator.py

import json
from typing import Protocol

from travel_ai.core.logger import get_logger
from travel_ai.db.itinerary_repository import ItineraryStore
from travel_ai.models.itinerary_models import ItineraryRecord, ItineraryResponse
from travel_ai.models.travel_models import TravelRequest
from travel_ai.utils.time_utils import utc_now


logger = get_logger("itinerary_orchestrator")


class ItineraryProvider(Protocol):
    async def get_itinerary_from_ai(self, request: TravelRequest) -> ItineraryResponse:
        ...


class ItineraryOrchestrator:

    def __init__(self, ai_agent: ItineraryProvider, repository: ItineraryStore):
        if ai_agent is None:
            raise ValueError("ai_agent is required.")
        if repository is None:
            raise ValueError("repository is required.")
        self.ai_agent = ai_agent
        self.repository = repository

    # -----------------------------------------------------------
    # Generate → record → persist
    # -----------------------------------------------------------
    async def generate_itinerary(self, request: TravelRequest) -> ItineraryResponse:
        """
        Generates an itinerary through the AI agent and stores one record of
        the round-trip. Failures are logged and re-raised as they are.
        """
        logger.info(f"Starting itinerary generation for destination: {request.destination}")

        try:
            itinerary_response = await self.ai_agent.get_itinerary_from_ai(request)

            if list(itinerary_response.travel_dates) != list(request.travel_dates):
                # The record keeps the requested dates either way.
                logger.warning(
                    f"AI travel dates {[d.isoformat() for d in itinerary_response.travel_dates]} "
                    f"differ from requested {[d.isoformat() for d in request.travel_dates]}"
                )

            record = self.build_record(request, itinerary_response)
            await self.repository.add_record(record)

            logger.info(f"Itinerary generation completed successfully for destination: {request.destination}")
            return itinerary_response

        except Exception as e:
            logger.error(
                f"Error generating itinerary for request: {request!r}: {e}",
                exc_info=True,
            )
            raise

    @staticmethod
    def build_record(request: TravelRequest, itinerary_response: ItineraryResponse) -> ItineraryRecord:
        return ItineraryRecord(
            destination=itinerary_response.destination,
            start_date=request.travel_dates[0],
            end_date=request.travel_dates[1],
            budget=request.budget,
            interests=json.dumps(list(request.interests)),
            itinerary_json=itinerary_response.itinerary.model_dump_json(by_alias=True),
            created_at=utc_now(),
        )
