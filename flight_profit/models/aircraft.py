"""Aircraft model."""

from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from ..config import CLASS_TYPES
from ..utils import is_numeric, parse_count, parse_number

CLASS_CAPACITY_FIELDS = {
    "economy": "economy_seats",
    "business": "business_seats",
    "first": "first_class_seats",
}


class Aircraft(BaseModel):
    """
    Represents an aircraft type with its running cost, range and seating.

    Seating is either a single ``total_seats`` figure or three class-specific
    capacities. When the class capacities are given the aircraft is
    class-aware and its total capacity is their sum.
    """

    type: str
    running_cost_per_seat_per_100km: Optional[float] = None
    max_flight_range: Optional[float] = None
    total_seats: Optional[int] = None
    economy_seats: Optional[int] = None
    business_seats: Optional[int] = None
    first_class_seats: Optional[int] = None
    class_aware: bool = False

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "type": "A321",
                "running_cost_per_seat_per_100km": 8.0,
                "max_flight_range": 5600.0,
                "economy_seats": 160,
                "business_seats": 20,
                "first_class_seats": 0,
                "class_aware": True,
            }
        },
    )

    @model_validator(mode="before")
    @classmethod
    def _detect_variant(cls, data):
        if isinstance(data, dict) and "class_aware" not in data:
            data = dict(data)
            data["class_aware"] = any(
                field in data for field in CLASS_CAPACITY_FIELDS.values()
            )
        return data

    @field_validator("type", mode="before")
    @classmethod
    def _strip_type(cls, value):
        return str(value).strip()

    @field_validator("running_cost_per_seat_per_100km", mode="before")
    @classmethod
    def _parse_running_cost(cls, value):
        # Source values may carry a currency symbol, e.g. "£5.00"
        return parse_number(value, strip_symbols=True)

    @field_validator("max_flight_range", mode="before")
    @classmethod
    def _parse_range(cls, value):
        return parse_number(value)

    @field_validator(
        "total_seats", "economy_seats", "business_seats", "first_class_seats", mode="before"
    )
    @classmethod
    def _parse_seats(cls, value):
        return parse_count(value)

    @field_validator(
        "running_cost_per_seat_per_100km",
        "max_flight_range",
        "total_seats",
        "economy_seats",
        "business_seats",
        "first_class_seats",
    )
    @classmethod
    def _non_negative(cls, value):
        if value is not None and value < 0:
            raise ValueError("value must not be negative")
        return value

    def class_capacity(self) -> Dict[str, Optional[int]]:
        """Capacity per fare class (class-aware aircraft only)."""
        return {
            class_type: getattr(self, CLASS_CAPACITY_FIELDS[class_type])
            for class_type in CLASS_TYPES
        }

    def capacity_fields(self) -> List[Tuple[str, Optional[int]]]:
        """Capacity values with the field names used in diagnostics."""
        if not self.class_aware:
            return [("total seats", self.total_seats)]
        return [
            ("economy seats", self.economy_seats),
            ("business seats", self.business_seats),
            ("first class seats", self.first_class_seats),
        ]

    @property
    def total_capacity(self) -> Optional[int]:
        """Total seats, or the sum of class capacities for class-aware aircraft."""
        if not self.class_aware:
            return self.total_seats
        capacities = list(self.class_capacity().values())
        if not all(is_numeric(capacity) for capacity in capacities):
            return None
        return sum(capacities)
