# backend/travel_ai/api/routes_itinerary.py

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from travel_ai.agents.itinerary_orchestrator import ItineraryOrchestrator
from travel_ai.api.dependencies import get_orchestrator, get_repository
from travel_ai.core.logger import get_logger
from travel_ai.db.itinerary_repository import ItineraryStore
from travel_ai.models.itinerary_models import ItineraryResponse
from travel_ai.models.travel_models import TravelRequest

router = APIRouter(prefix="/api/itinerary", tags=["itinerary"])
logger = get_logger("routes_itinerary")

GENERIC_ERROR_MESSAGE = "An error occurred while processing your request. Please try again later."


@router.post("/generate", response_model=ItineraryResponse)
async def generate(
    request: TravelRequest,
    orchestrator: ItineraryOrchestrator = Depends(get_orchestrator),
):
    """
    Generates a travel itinerary from the user's destination, dates,
    budget and interests.
    """
    try:
        return await orchestrator.generate_itinerary(request)
    except Exception as e:
        logger.error(f"Error occurred while generating itinerary for request: {request!r}: {e}")
        return JSONResponse(status_code=500, content={"Message": GENERIC_ERROR_MESSAGE})


@router.get("")
async def list_itineraries(repository: ItineraryStore = Depends(get_repository)):
    records = await repository.list_records()
    return {"items": [r.model_dump(mode="json") for r in records]}
