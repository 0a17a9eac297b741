# backend/travel_ai/models/travel_models.py

from datetime import date
from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


# ============================================================
# Travel request (input schema)
# ============================================================
class TravelRequest(BaseModel):
    """
    Inbound trip request. Wire names are camelCase (``travelDates``),
    python names are accepted too.
    """

    destination: str
    travel_dates: List[date]
    budget: Decimal
    interests: List[str]

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # -------------------- Validators --------------------
    @field_validator("destination")
    @classmethod
    def _destination_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Destination is required.")
        return v

    @field_validator("travel_dates")
    @classmethod
    def _start_before_end(cls, v: List[date]) -> List[date]:
        if len(v) != 2:
            raise ValueError("TravelDates must contain exactly two dates: a start date and an end date.")
        if v[0] >= v[1]:
            raise ValueError("The start date must be earlier than the end date.")
        return v

    @field_validator("budget")
    @classmethod
    def _budget_positive(cls, v: Decimal) -> Decimal:
        if v <= 0:
            raise ValueError("Budget must be greater than zero.")
        return v

    @field_validator("interests")
    @classmethod
    def _interests_required(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("At least one interest is required.")
        if any(not i.strip() for i in v):
            raise ValueError("Interests must not contain blank entries.")
        return [i.strip() for i in v]

    @property
    def start_date(self) -> date:
        return self.travel_dates[0]

    @property
    def end_date(self) -> date:
        return self.travel_dates[1]
