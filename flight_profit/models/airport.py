"""Airport model."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator

from ..utils import parse_number


class Airport(BaseModel):
    """Represents an overseas airport with its distances from the UK origins."""

    code: str
    name: str
    distance_from_primary: Optional[float] = None  # km from MAN
    distance_from_secondary: Optional[float] = None  # km from the other UK origin

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "code": "JFK",
                "name": "John F Kennedy International",
                "distance_from_primary": 5553.0,
                "distance_from_secondary": 5536.0,
            }
        },
    )

    @field_validator("code", "name", mode="before")
    @classmethod
    def _strip_text(cls, value):
        return str(value).strip()

    @field_validator("distance_from_primary", "distance_from_secondary", mode="before")
    @classmethod
    def _parse_distance(cls, value):
        return parse_number(value)

    @field_validator("distance_from_primary", "distance_from_secondary")
    @classmethod
    def _non_negative(cls, value):
        if value is not None and value < 0:
            raise ValueError("distance must not be negative")
        return value

    def distance_from(self, uk_airport: str, primary_uk_airport: str = "MAN") -> Optional[float]:
        """
        Distance from a UK origin.

        Args:
            uk_airport: UK origin code of the booking
            primary_uk_airport: Origin that uses the first distance column

        Returns:
            Distance in km, or None if the source value was not numeric
        """
        if uk_airport.upper() == primary_uk_airport.upper():
            return self.distance_from_primary
        return self.distance_from_secondary
