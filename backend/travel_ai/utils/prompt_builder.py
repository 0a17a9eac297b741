# backend/travel_ai/utils/prompt_builder.py

from typing import Optional

from travel_ai.models.travel_models import TravelRequest


SYSTEM_PROMPT = (
    "You are a travel itinerary generator. "
    "Respond only with valid JSON that conforms to the given schema."
)


class PromptBuilder:
    """Turns a validated travel request into the user prompt for the LLM."""

    def build_prompt(self, request: Optional[TravelRequest]) -> str:
        if request is None:
            raise ValueError("request is required.")

        dates = request.travel_dates
        if dates is None or len(dates) != 2:
            raise ValueError("TravelDates must contain exactly two dates.")

        start, end = dates
        interests = ", ".join(request.interests)

        prompt = f"""
Generate a travel itinerary for {request.destination}
from {start:%Y-%m-%d} to {end:%Y-%m-%d}
with a budget of {request.budget:f} and interests in {interests}.
Return a valid JSON object that exactly follows the provided schema, and include only
the start and end dates in the 'TravelDates' array. Do not include any extra text or commentary.
"""
        return prompt.strip()
