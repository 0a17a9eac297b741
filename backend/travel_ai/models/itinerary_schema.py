# backend/travel_ai/models/itinerary_schema.py

import copy
from typing import Any, Dict

from travel_ai.models.chat_models import JsonSchemaFormat


ITINERARY_SCHEMA_NAME = "itinerary_response"


def _strict_object(properties: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": properties,
        "required": list(properties.keys()),
        "additionalProperties": False,
    }


def _array_of(item: Dict[str, Any]) -> Dict[str, Any]:
    return {"type": "array", "items": item}


_STRING = {"type": "string"}
_NUMBER = {"type": "number"}


# Must stay in step with ItineraryResponse in itinerary_models.py.
ITINERARY_SCHEMA: Dict[str, Any] = _strict_object({
    "Destination": _STRING,
    "TravelDates": _array_of(_STRING),
    "Itinerary": _strict_object({
        "Hotels": _array_of(_strict_object({
            "Name": _STRING,
            "Rating": _NUMBER,
            "EstimatedCost": _NUMBER,
        })),
        "Activities": _array_of(_strict_object({
            "Name": _STRING,
            "Time": _STRING,
            "EstimatedCost": _NUMBER,
        })),
        "Restaurants": _array_of(_strict_object({
            "Name": _STRING,
            "Cuisine": _STRING,
            "EstimatedCost": _NUMBER,
        })),
        "TotalEstimatedCost": _NUMBER,
    }),
})


def build_itinerary_schema_format() -> JsonSchemaFormat:
    """Strict ``itinerary_response`` schema, as sent with every chat request."""
    return JsonSchemaFormat(
        name=ITINERARY_SCHEMA_NAME,
        schema=copy.deepcopy(ITINERARY_SCHEMA),
        strict=True,
    )
