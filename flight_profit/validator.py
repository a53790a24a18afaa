"""Validator module: the ordered, fail-fast validation pipeline."""

import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Type, Union

from .config import CLASS_TYPES, TOTAL_SCOPE
from .cost_calculator import calculate_income, calculate_total_cost
from .lookup import NotFound, ReferenceTable
from .models.aircraft import Aircraft
from .models.airport import Airport
from .models.flight import FlightRequest
from .models.result import (
    CalculationError,
    ClassUnavailable,
    InvalidNumericData,
    OverbookingError,
    RangeExceeded,
    UnknownAircraft,
    UnknownAirport,
)
from .utils import is_numeric

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationContext:
    """
    State threaded through the pipeline.

    Every check receives the context produced by the previous one, so a
    field set by an earlier step is always valid for the later ones.
    """

    request: FlightRequest
    airports: ReferenceTable[Airport]
    aircraft_table: ReferenceTable[Aircraft]
    primary_uk_airport: str = "MAN"
    airport: Optional[Airport] = None
    aircraft: Optional[Aircraft] = None
    distance: Optional[float] = None
    income: Optional[float] = None
    total_cost: Optional[float] = None


CheckOutcome = Union[ValidationContext, CalculationError]
Check = Callable[[ValidationContext], CheckOutcome]


def _fail(error_type: Type[CalculationError], ctx: ValidationContext, **details) -> CalculationError:
    request = ctx.request
    return error_type(
        uk_airport=request.uk_airport,
        overseas_airport=request.overseas_airport,
        aircraft_type=request.aircraft_type,
        **details,
    )


def resolve_airport(ctx: ValidationContext) -> CheckOutcome:
    airport = ctx.airports.resolve(ctx.request.overseas_airport)
    if isinstance(airport, NotFound):
        return _fail(UnknownAirport, ctx, valid_codes=airport.valid_keys)
    return replace(ctx, airport=airport)


def resolve_aircraft(ctx: ValidationContext) -> CheckOutcome:
    aircraft = ctx.aircraft_table.resolve(ctx.request.aircraft_type)
    if isinstance(aircraft, NotFound):
        return _fail(UnknownAircraft, ctx, valid_types=aircraft.valid_keys)
    return replace(ctx, aircraft=aircraft)


def select_distance(ctx: ValidationContext) -> CheckOutcome:
    """Pick the airport distance column matching the booking's UK origin."""
    distance = ctx.airport.distance_from(ctx.request.uk_airport, ctx.primary_uk_airport)
    return replace(ctx, distance=distance)


def check_numeric_data(ctx: ValidationContext) -> CheckOutcome:
    """Reject the first reference value that is not a finite number."""
    aircraft = ctx.aircraft
    fields = [
        ("distance", ctx.distance),
        ("running cost", aircraft.running_cost_per_seat_per_100km),
        ("max flight range", aircraft.max_flight_range),
    ]
    fields.extend(aircraft.capacity_fields())

    for name, value in fields:
        if not is_numeric(value):
            return _fail(InvalidNumericData, ctx, field=name, value=value)
    return ctx


def check_range(ctx: ValidationContext) -> CheckOutcome:
    max_range = ctx.aircraft.max_flight_range
    if ctx.distance > max_range:
        return _fail(RangeExceeded, ctx, distance=ctx.distance, max_range=max_range)
    return ctx


def check_class_availability(ctx: ValidationContext) -> CheckOutcome:
    """Class-aware aircraft: no bookings in a class with zero capacity."""
    if not ctx.aircraft.class_aware:
        return ctx

    capacity = ctx.aircraft.class_capacity()
    booked = ctx.request.seats
    for class_type in CLASS_TYPES:
        # Non-numeric bookings are reported by the income check
        if booked[class_type] is None:
            continue
        if booked[class_type] > 0 and capacity[class_type] == 0:
            return _fail(ClassUnavailable, ctx, seat_class=class_type)
    return ctx


def check_class_overbooking(ctx: ValidationContext) -> CheckOutcome:
    """Class-aware aircraft: report the first class booked beyond its capacity."""
    if not ctx.aircraft.class_aware:
        return ctx

    capacity = ctx.aircraft.class_capacity()
    booked = ctx.request.seats
    for class_type in CLASS_TYPES:
        if booked[class_type] is None:
            continue
        if booked[class_type] > capacity[class_type]:
            return _fail(
                OverbookingError,
                ctx,
                scope=class_type,
                requested=booked[class_type],
                available=capacity[class_type],
            )
    return ctx


def check_total_overbooking(ctx: ValidationContext) -> CheckOutcome:
    total_booked = ctx.request.total_booked_seats
    total_capacity = ctx.aircraft.total_capacity
    if total_booked is not None and total_booked > total_capacity:
        return _fail(
            OverbookingError,
            ctx,
            scope=TOTAL_SCOPE,
            requested=total_booked,
            available=total_capacity,
        )
    return ctx


def check_income(ctx: ValidationContext) -> CheckOutcome:
    if not ctx.request.has_numeric_fares():
        return _fail(InvalidNumericData, ctx, field="income", value=None)
    income = calculate_income(ctx.request.seats, ctx.request.prices)
    if not is_numeric(income):
        return _fail(InvalidNumericData, ctx, field="income", value=income)
    return replace(ctx, income=income)


def check_total_cost(ctx: ValidationContext) -> CheckOutcome:
    total_cost = calculate_total_cost(
        ctx.aircraft.running_cost_per_seat_per_100km,
        ctx.distance,
        ctx.request.total_booked_seats,
    )
    if not is_numeric(total_cost):
        return _fail(InvalidNumericData, ctx, field="total cost", value=total_cost)
    return replace(ctx, total_cost=total_cost)


# Order matters: later checks rely on values validated by earlier ones
PIPELINE: List[Check] = [
    resolve_airport,
    resolve_aircraft,
    select_distance,
    check_numeric_data,
    check_range,
    check_class_availability,
    check_class_overbooking,
    check_total_overbooking,
    check_income,
    check_total_cost,
]


class Validator:
    """Runs the validation pipeline for booking requests."""

    def __init__(
        self,
        airports: ReferenceTable[Airport],
        aircraft: ReferenceTable[Aircraft],
        primary_uk_airport: str = "MAN",
        checks: Optional[List[Check]] = None,
    ):
        """
        Initialize validator.

        Args:
            airports: Airport table keyed by code
            aircraft: Aircraft table keyed by type
            primary_uk_airport: Origin that uses the airport's first distance
            checks: Pipeline to run, defaults to PIPELINE
        """
        self.airports = airports
        self.aircraft = aircraft
        self.primary_uk_airport = primary_uk_airport.upper()
        self.checks = list(checks) if checks is not None else list(PIPELINE)

    def validate(self, request: FlightRequest) -> CheckOutcome:
        """
        Run every check in order, stopping at the first failure.

        Args:
            request: Booking to validate

        Returns:
            The completed ValidationContext, or the first CalculationError
        """
        outcome: CheckOutcome = ValidationContext(
            request=request,
            airports=self.airports,
            aircraft_table=self.aircraft,
            primary_uk_airport=self.primary_uk_airport,
        )
        for check in self.checks:
            outcome = check(outcome)
            if isinstance(outcome, CalculationError):
                logger.debug(f"{check.__name__} rejected request: {outcome.message}")
                return outcome
        return outcome
