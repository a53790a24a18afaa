"""Flight profit calculation engine."""

from .calculator import BatchReport, FlightProfitCalculator, find_flight
from .config import Config
from .lookup import NotFound, ReferenceTable, resolve
from .validator import Validator

__all__ = [
    "BatchReport",
    "Config",
    "FlightProfitCalculator",
    "NotFound",
    "ReferenceTable",
    "Validator",
    "find_flight",
    "resolve",
]
