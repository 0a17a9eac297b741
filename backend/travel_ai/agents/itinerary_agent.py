# backend/travel_ai/agents/itinerary_agent.py

import json
from typing import Any, Optional

from pydantic import ValidationError

from travel_ai.core.config_loader import Settings, settings
from travel_ai.core.errors import AIResponseError, AIResponseKind, ItineraryGenerationError
from travel_ai.core.llm import ChatEndpoint
from travel_ai.core.logger import get_logger
from travel_ai.models.chat_models import ChatMessage, ChatRequest, ChatResponse
from travel_ai.models.itinerary_models import ItineraryResponse
from travel_ai.models.itinerary_schema import build_itinerary_schema_format
from travel_ai.models.travel_models import TravelRequest
from travel_ai.utils.prompt_builder import SYSTEM_PROMPT, PromptBuilder


logger = get_logger("itinerary_agent")


class ItineraryAgent:
    """
    Asks the chat endpoint for an itinerary and holds the answer to the
    output schema contract.

    Every failure after the preconditions leaves this class as an
    ItineraryGenerationError chained to what actually went wrong.
    """

    def __init__(
        self,
        chat_endpoint: ChatEndpoint,
        prompt_builder: Optional[PromptBuilder] = None,
        config: Settings = settings,
    ):
        if chat_endpoint is None:
            raise ValueError("chat_endpoint is required.")
        self.chat_endpoint = chat_endpoint
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.config = config

    # -----------------------------
    # Request assembly
    # -----------------------------
    def build_chat_request(self, request: TravelRequest) -> ChatRequest:
        prompt = self.prompt_builder.build_prompt(request)
        logger.info(f"Sending prompt to OpenAI: {prompt}")

        return ChatRequest(
            messages=[
                ChatMessage(role="system", content=SYSTEM_PROMPT),
                ChatMessage(role="user", content=prompt),
            ],
            model=self.config.openai_model,
            temperature=self.config.openai_temperature,
            max_tokens=self.config.openai_max_tokens,
            json_schema=build_itinerary_schema_format(),
        )

    # -----------------------------
    # Main entry
    # -----------------------------
    async def get_itinerary_from_ai(self, request: Optional[TravelRequest]) -> ItineraryResponse:
        if request is None:
            raise ValueError("request is required.")
        if request.travel_dates is None or len(request.travel_dates) != 2:
            raise ValueError("Request must contain exactly two travel dates.")

        chat_request = self.build_chat_request(request)
        logger.info("Sending chat request to OpenAI.")

        try:
            chat_response = await self.chat_endpoint.get_completion(chat_request)
            return self._parse_response(chat_response)
        except Exception as e:
            logger.error(
                f"Error during call to OpenAI chat endpoint "
                f"(model={chat_request.model}, destination={request.destination}): {e}",
                exc_info=True,
            )
            raise ItineraryGenerationError(cause=e) from e

    # -----------------------------
    # Response validation
    # -----------------------------
    def _parse_response(self, chat_response: Optional[ChatResponse]) -> ItineraryResponse:
        if chat_response is None or not chat_response.choices:
            logger.error("No response received from OpenAI chat endpoint.")
            raise AIResponseError(AIResponseKind.NO_CHOICES, "AI service failed to generate a response.")

        content = self._extract_text(chat_response.choices[0].message.content)
        if not content:
            logger.error("The AI response text was empty or null.")
            raise AIResponseError(AIResponseKind.EMPTY_CONTENT, "AI service returned an empty itinerary.")

        logger.info(f"Received response from OpenAI: {content}")

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to deserialize AI response as JSON. Raw response: {content[:500]}")
            raise AIResponseError(AIResponseKind.UNPARSABLE, "Failed to parse AI itinerary response.") from e

        if data is None:
            logger.error(f"Deserialization of the AI response returned null. Raw response: {content[:500]}")
            raise AIResponseError(AIResponseKind.NULL_RESULT, "Deserialization returned null.")

        try:
            return ItineraryResponse.model_validate(data)
        except ValidationError as e:
            logger.error(f"AI response does not match the itinerary schema: {e}. Raw response: {content[:500]}")
            raise AIResponseError(AIResponseKind.UNPARSABLE, "Failed to parse AI itinerary response.") from e

    @staticmethod
    def _extract_text(content: Any) -> str:
        """Plain strings are trimmed; any other JSON value is serialized back to text."""
        if content is None:
            return ""
        if isinstance(content, str):
            return content.strip()
        return json.dumps(content).strip()
