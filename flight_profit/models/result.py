"""Calculation result and error models."""

import math
from decimal import Decimal
from enum import Enum
from typing import List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, computed_field


class ErrorKind(str, Enum):
    """Machine-distinguishable failure kinds."""

    UNKNOWN_AIRPORT = "UNKNOWN_AIRPORT"
    UNKNOWN_AIRCRAFT = "UNKNOWN_AIRCRAFT"
    INVALID_NUMERIC_DATA = "INVALID_NUMERIC_DATA"
    RANGE_EXCEEDED = "RANGE_EXCEEDED"
    CLASS_UNAVAILABLE = "CLASS_UNAVAILABLE"
    OVERBOOKING = "OVERBOOKING"


class CalculationResult(BaseModel):
    """Successful outcome of a flight profit calculation."""

    uk_airport: str
    overseas_airport: str
    aircraft_type: str
    economy_seats: int
    business_seats: int
    first_class_seats: int
    distance: float
    income: Decimal
    cost: Decimal
    profit: Decimal
    profit_margin: Optional[Decimal] = None  # None when income is zero or too small
    break_even_seats: Optional[int] = None
    load_factor: Optional[Decimal] = None
    co2_emissions: Decimal

    model_config = ConfigDict(frozen=True)

    def is_success(self) -> bool:
        return True


class CalculationError(BaseModel):
    """Base for every failure the pipeline can return."""

    kind: ErrorKind
    uk_airport: str
    overseas_airport: str
    aircraft_type: str

    model_config = ConfigDict(frozen=True)

    def is_success(self) -> bool:
        return False

    def describe(self) -> str:
        return f"calculation failed ({self.kind.value})"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        route = f"Flight from {self.uk_airport} to {self.overseas_airport} by {self.aircraft_type}"
        return f"{route}: {self.describe()}"


def _km(value: float) -> str:
    return f"{value:.15g}"


def _number(value: Optional[float]) -> str:
    """Render a numeric value; None stands for a value that was not a number."""
    if value is None:
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return f"{value:.15g}"


class UnknownAirport(CalculationError):
    """Overseas airport code not found in the airport table."""

    kind: Literal[ErrorKind.UNKNOWN_AIRPORT] = ErrorKind.UNKNOWN_AIRPORT
    valid_codes: List[str]

    def describe(self) -> str:
        return (
            f"Invalid overseas airport code: {self.overseas_airport}. "
            f"Available codes: {', '.join(self.valid_codes)}"
        )


class UnknownAircraft(CalculationError):
    """Aircraft type not found in the aircraft table."""

    kind: Literal[ErrorKind.UNKNOWN_AIRCRAFT] = ErrorKind.UNKNOWN_AIRCRAFT
    valid_types: List[str]

    def describe(self) -> str:
        return (
            f"Invalid aircraft type: {self.aircraft_type}. "
            f"Available aircraft types: {', '.join(self.valid_types)}"
        )


class InvalidNumericData(CalculationError):
    """A reference or computed value is not a finite number."""

    kind: Literal[ErrorKind.INVALID_NUMERIC_DATA] = ErrorKind.INVALID_NUMERIC_DATA
    field: str
    value: Optional[float] = None

    def describe(self) -> str:
        return f"Invalid {self.field} value: {_number(self.value)}"


class RangeExceeded(CalculationError):
    """Route distance is beyond the aircraft's maximum range."""

    kind: Literal[ErrorKind.RANGE_EXCEEDED] = ErrorKind.RANGE_EXCEEDED
    distance: float
    max_range: float

    def describe(self) -> str:
        return (
            f"Flight distance ({_km(self.distance)} km) exceeds maximum flight range "
            f"of the aircraft ({_km(self.max_range)} km)."
        )


class ClassUnavailable(CalculationError):
    """Seats were booked in a class the aircraft does not have."""

    kind: Literal[ErrorKind.CLASS_UNAVAILABLE] = ErrorKind.CLASS_UNAVAILABLE
    seat_class: str

    def describe(self) -> str:
        label = "first-class" if self.seat_class == "first" else self.seat_class
        return f"{self.aircraft_type} does not have {label} seats."


class OverbookingError(CalculationError):
    """More seats booked than available, for one class or in total."""

    kind: Literal[ErrorKind.OVERBOOKING] = ErrorKind.OVERBOOKING
    scope: str  # "economy", "business", "first" or "total"
    requested: int
    available: int

    def describe(self) -> str:
        if self.scope == "total":
            return (
                f"Overbooking error for total seats: {self.requested} seats booked "
                f"but aircraft only has {self.available} total seats."
            )
        return (
            f"Overbooking error for {self.scope} class: {self.requested} seats booked "
            f"but aircraft only has {self.available} {self.scope} class seats."
        )


CalculationOutcome = Union[CalculationResult, CalculationError]
