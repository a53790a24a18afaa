"""Flight profit calculation engine."""

import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence, Union

from pydantic import BaseModel

from .config import Config
from .cost_calculator import compute_economics
from .lookup import ReferenceTable
from .models.aircraft import Aircraft
from .models.airport import Airport
from .models.flight import FlightRequest
from .models.result import CalculationError, CalculationOutcome, CalculationResult
from .utils import sum_money
from .validator import Validator

logger = logging.getLogger(__name__)


class BatchReport(BaseModel):
    """Outcomes of a batch run, in request order."""

    outcomes: List[CalculationOutcome]

    @property
    def results(self) -> List[CalculationResult]:
        return [o for o in self.outcomes if isinstance(o, CalculationResult)]

    @property
    def errors(self) -> List[CalculationError]:
        return [o for o in self.outcomes if isinstance(o, CalculationError)]

    def is_valid(self) -> bool:
        """Check if every request succeeded."""
        return len(self.errors) == 0

    def error_counts(self) -> Dict[str, int]:
        """Number of failures per error kind."""
        return dict(Counter(error.kind.value for error in self.errors))

    @property
    def total_income(self) -> Decimal:
        return sum_money(r.income for r in self.results)

    @property
    def total_cost(self) -> Decimal:
        return sum_money(r.cost for r in self.results)

    @property
    def total_profit(self) -> Decimal:
        return sum_money(r.profit for r in self.results)

    @property
    def total_co2_emissions(self) -> Decimal:
        return sum_money(r.co2_emissions for r in self.results)


class FlightProfitCalculator:
    """Validates bookings against reference data and computes their economics."""

    def __init__(
        self,
        airports: Union[ReferenceTable[Airport], Iterable[Airport]],
        aircraft: Union[ReferenceTable[Aircraft], Iterable[Aircraft]],
        config: Optional[Config] = None,
    ):
        """
        Initialize calculator.

        Args:
            airports: Airport records or a table keyed by code
            aircraft: Aircraft records or a table keyed by type
            config: Settings, read from the environment when omitted
        """
        self.config = config or Config()
        if not isinstance(airports, ReferenceTable):
            airports = ReferenceTable(airports, "code")
        if not isinstance(aircraft, ReferenceTable):
            aircraft = ReferenceTable(aircraft, "type")
        self.airports = airports
        self.aircraft = aircraft
        self.validator = Validator(airports, aircraft, self.config.PRIMARY_UK_AIRPORT)

    def calculate(self, request: FlightRequest) -> CalculationOutcome:
        """
        Calculate the outcome of one booking.

        Args:
            request: Booking to price

        Returns:
            CalculationResult, or the first CalculationError found
        """
        context = self.validator.validate(request)
        if isinstance(context, CalculationError):
            return context

        return compute_economics(
            request,
            context.aircraft,
            context.distance,
            context.income,
            context.total_cost,
        )

    def calculate_batch(
        self, requests: Sequence[FlightRequest], max_workers: Optional[int] = None
    ) -> BatchReport:
        """
        Calculate every booking; a failed booking never stops the batch.

        Args:
            requests: Bookings to price
            max_workers: Thread count, defaults to Config.BATCH_MAX_WORKERS

        Returns:
            BatchReport with outcomes in request order
        """
        workers = max_workers or self.config.BATCH_MAX_WORKERS

        if workers > 1:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                outcomes = list(executor.map(self.calculate, requests))
        else:
            outcomes = [self.calculate(request) for request in requests]

        report = BatchReport(outcomes=outcomes)
        logger.info(
            f"Calculated {len(outcomes)} flights: "
            f"{len(report.results)} valid, {len(report.errors)} invalid"
        )
        for error in report.errors:
            logger.debug(f"Invalid flight: {error.message}")
        return report


def find_flight(
    requests: Iterable[FlightRequest],
    uk_airport: str,
    overseas_airport: str,
    aircraft_type: str,
) -> Optional[FlightRequest]:
    """
    Find the first booking for a route and aircraft, ignoring case.

    Args:
        requests: Bookings to search
        uk_airport: UK origin code
        overseas_airport: Overseas airport code
        aircraft_type: Aircraft type

    Returns:
        Matching FlightRequest or None
    """
    for request in requests:
        if request.matches(uk_airport, overseas_airport, aircraft_type):
            return request
    return None
