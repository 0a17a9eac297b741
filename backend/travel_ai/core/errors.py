# backend/travel_ai/core/errors.py

from enum import Enum
from typing import Optional


class TravelAIError(Exception):
    """Base class for errors raised by the itinerary service."""


class AIResponseKind(str, Enum):
    NO_CHOICES = "no_choices"
    EMPTY_CONTENT = "empty_content"
    UNPARSABLE = "unparsable"
    NULL_RESULT = "null_result"


class AIResponseError(TravelAIError):
    """The chat completion came back but broke the itinerary contract."""

    def __init__(self, kind: AIResponseKind, message: str):
        super().__init__(message)
        self.kind = kind


class ItineraryGenerationError(TravelAIError):
    """
    Single outward failure of the AI integration.

    Wraps contract violations and transport errors alike; the original
    error is chained as ``__cause__`` and also exposed as ``cause``.
    """

    DEFAULT_MESSAGE = "An error occurred while generating the itinerary. Please try again later."

    def __init__(self, message: str = DEFAULT_MESSAGE, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
