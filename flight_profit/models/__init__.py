"""Flight profit models package."""

from .airport import Airport
from .aircraft import Aircraft
from .flight import FlightRequest
from .result import (
    CalculationError,
    CalculationOutcome,
    CalculationResult,
    ClassUnavailable,
    ErrorKind,
    InvalidNumericData,
    OverbookingError,
    RangeExceeded,
    UnknownAircraft,
    UnknownAirport,
)

__all__ = [
    "Airport",
    "Aircraft",
    "FlightRequest",
    "CalculationError",
    "CalculationOutcome",
    "CalculationResult",
    "ClassUnavailable",
    "ErrorKind",
    "InvalidNumericData",
    "OverbookingError",
    "RangeExceeded",
    "UnknownAircraft",
    "UnknownAirport",
]
