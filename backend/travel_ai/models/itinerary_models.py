# backend/travel_ai/models/itinerary_models.py

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, ConfigDict, PlainSerializer, field_validator
from pydantic.alias_generators import to_pascal


# Costs stay exact in python, go out as JSON numbers.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


def _json_string(value: Any) -> Any:
    if not isinstance(value, str):
        raise ValueError("Input should be a JSON string.")
    return value


def _json_number(value: Any) -> Any:
    # bool is an int subclass; "4.5" and true are not numbers here.
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise ValueError("Input should be a JSON number.")
    return value


class _ContractModel(BaseModel):
    """
    Shapes of the AI output contract: PascalCase on the wire,
    unknown properties rejected, every property required.

    Values are not coerced across JSON types: strings stay strings and
    numbers stay numbers, matching the schema sent to the model.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="forbid",
    )


# ------------------------------------------------------------
#  Itinerary components
# ------------------------------------------------------------
class Hotel(_ContractModel):
    name: str
    rating: float
    estimated_cost: Money

    _check_strings = field_validator("name", mode="before")(_json_string)
    _check_numbers = field_validator("rating", "estimated_cost", mode="before")(_json_number)


class Activity(_ContractModel):
    name: str
    time: str
    estimated_cost: Money

    _check_strings = field_validator("name", "time", mode="before")(_json_string)
    _check_numbers = field_validator("estimated_cost", mode="before")(_json_number)


class Restaurant(_ContractModel):
    name: str
    cuisine: str
    estimated_cost: Money

    _check_strings = field_validator("name", "cuisine", mode="before")(_json_string)
    _check_numbers = field_validator("estimated_cost", mode="before")(_json_number)


class ItineraryDetails(_ContractModel):
    hotels: List[Hotel]
    activities: List[Activity]
    restaurants: List[Restaurant]
    total_estimated_cost: Money

    _check_numbers = field_validator("total_estimated_cost", mode="before")(_json_number)


# ------------------------------------------------------------
#  Full AI itinerary response
# ------------------------------------------------------------
class ItineraryResponse(_ContractModel):
    destination: str
    travel_dates: List[date]
    itinerary: ItineraryDetails

    _check_strings = field_validator("destination", mode="before")(_json_string)

    @field_validator("travel_dates", mode="before")
    @classmethod
    def _date_strings(cls, v: Any) -> Any:
        # Rejects epoch numbers, which pydantic would otherwise read as dates.
        if isinstance(v, list) and not all(isinstance(d, (str, date)) for d in v):
            raise ValueError("TravelDates must contain ISO date strings.")
        return v

    @field_validator("travel_dates")
    @classmethod
    def _ordered_pair(cls, v: List[date]) -> List[date]:
        if len(v) != 2:
            raise ValueError("TravelDates must contain exactly two dates.")
        if v[0] >= v[1]:
            raise ValueError("The start date must be earlier than the end date.")
        return v


# ------------------------------------------------------------
#  Persisted record
# ------------------------------------------------------------
class ItineraryRecord(BaseModel):
    id: Optional[int] = None     # assigned by the store
    destination: str
    start_date: date
    end_date: date
    budget: Decimal              # exact; JSON listing renders it as a string
    interests: str               # JSON array text
    itinerary_json: str          # JSON object text, contract key names
    created_at: datetime
