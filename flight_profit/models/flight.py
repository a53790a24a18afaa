"""Flight request model."""

from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict, field_validator

from ..config import CLASS_TYPES, UK_AIRPORTS
from ..utils import parse_count, parse_number


class FlightRequest(BaseModel):
    """Represents a booking for one flight from a UK airport to an overseas airport."""

    uk_airport: str
    overseas_airport: str
    aircraft_type: str
    # None marks a seat count or price that was not numeric in the source
    economy_seats: Optional[int] = 0
    business_seats: Optional[int] = 0
    first_class_seats: Optional[int] = 0
    economy_price: Optional[float] = 0.0
    business_price: Optional[float] = 0.0
    first_class_price: Optional[float] = 0.0

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "uk_airport": "MAN",
                "overseas_airport": "JFK",
                "aircraft_type": "A321",
                "economy_seats": 150,
                "business_seats": 20,
                "first_class_seats": 0,
                "economy_price": 250.0,
                "business_price": 900.0,
                "first_class_price": 0.0,
            }
        },
    )

    @field_validator("uk_airport", mode="before")
    @classmethod
    def _check_uk_airport(cls, value):
        code = str(value).strip().upper()
        if code not in UK_AIRPORTS:
            raise ValueError(
                f"Invalid UK airport code: {value}. Available codes: {', '.join(UK_AIRPORTS)}"
            )
        return code

    @field_validator("overseas_airport", "aircraft_type", mode="before")
    @classmethod
    def _strip_text(cls, value):
        return str(value).strip()

    @field_validator("economy_seats", "business_seats", "first_class_seats", mode="before")
    @classmethod
    def _parse_seats(cls, value):
        return parse_count(value)

    @field_validator("economy_price", "business_price", "first_class_price", mode="before")
    @classmethod
    def _parse_price(cls, value):
        return parse_number(value)

    @field_validator(
        "economy_seats",
        "business_seats",
        "first_class_seats",
        "economy_price",
        "business_price",
        "first_class_price",
    )
    @classmethod
    def _non_negative(cls, value):
        if value is not None and value < 0:
            raise ValueError("seat counts and prices must not be negative")
        return value

    @property
    def seats(self) -> Dict[str, Optional[int]]:
        """Booked seats per fare class."""
        return {
            "economy": self.economy_seats,
            "business": self.business_seats,
            "first": self.first_class_seats,
        }

    @property
    def prices(self) -> Dict[str, Optional[float]]:
        """Ticket price per fare class."""
        return {
            "economy": self.economy_price,
            "business": self.business_price,
            "first": self.first_class_price,
        }

    @property
    def total_booked_seats(self) -> Optional[int]:
        """Sum of booked seats across fare classes, or None if any count is not numeric."""
        counts = [self.seats[class_type] for class_type in CLASS_TYPES]
        if any(count is None for count in counts):
            return None
        return sum(counts)

    def has_numeric_fares(self) -> bool:
        """Check that every seat count and price is a number."""
        values = list(self.seats.values()) + list(self.prices.values())
        return all(value is not None for value in values)

    @property
    def route(self) -> str:
        """Human-readable route prefix used in diagnostics."""
        return f"Flight from {self.uk_airport} to {self.overseas_airport} by {self.aircraft_type}"

    def matches(self, uk_airport: str, overseas_airport: str, aircraft_type: str) -> bool:
        """Check whether this booking is for the given route and aircraft (case-insensitive)."""
        return (
            self.uk_airport == uk_airport.strip().upper()
            and self.overseas_airport.upper() == overseas_airport.strip().upper()
            and self.aircraft_type.upper() == aircraft_type.strip().upper()
        )

    def with_seats(
        self,
        economy_seats: Optional[int] = None,
        business_seats: Optional[int] = None,
        first_class_seats: Optional[int] = None,
    ) -> "FlightRequest":
        """
        Copy this booking with some seat counts replaced.

        Args:
            economy_seats: New economy count, or None to keep the current one
            business_seats: New business count, or None to keep the current one
            first_class_seats: New first class count, or None to keep the current one

        Returns:
            A new, validated FlightRequest
        """
        data = self.model_dump()
        if economy_seats is not None:
            data["economy_seats"] = economy_seats
        if business_seats is not None:
            data["business_seats"] = business_seats
        if first_class_seats is not None:
            data["first_class_seats"] = first_class_seats
        return FlightRequest(**data)
