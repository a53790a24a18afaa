"""Cost calculator module for flight income, cost, profit and emissions."""

import logging
import math
from decimal import Decimal, localcontext
from typing import Dict, Optional

from .config import CLASS_TYPES, CO2_PER_SEAT_PER_KM
from .models.aircraft import Aircraft
from .models.flight import FlightRequest
from .models.result import CalculationResult
from .utils import round_money, sum_money

logger = logging.getLogger(__name__)


def calculate_cost_per_seat(running_cost_per_seat_per_100km: float, distance: float) -> float:
    """
    Calculate the running cost of one seat over the route.

    Args:
        running_cost_per_seat_per_100km: Aircraft cost rate
        distance: Route distance in km

    Returns:
        Cost per seat
    """
    return running_cost_per_seat_per_100km * (distance / 100)


def calculate_total_cost(
    running_cost_per_seat_per_100km: float, distance: float, total_booked_seats: int
) -> float:
    """
    Calculate the running cost of every booked seat.

    Args:
        running_cost_per_seat_per_100km: Aircraft cost rate
        distance: Route distance in km
        total_booked_seats: Seats booked across all classes

    Returns:
        Total cost
    """
    cost_per_seat = calculate_cost_per_seat(running_cost_per_seat_per_100km, distance)
    return cost_per_seat * total_booked_seats


def calculate_income(seats: Dict[str, int], prices: Dict[str, float]) -> float:
    """
    Calculate ticket income.

    Args:
        seats: Booked seats per class
        prices: Ticket price per class

    Returns:
        Sum of seats times price over every class
    """
    total_income = 0.0

    for class_type in CLASS_TYPES:
        total_income += seats.get(class_type, 0) * prices.get(class_type, 0.0)

    return total_income


def calculate_profit_margin(profit: float, income: float) -> Optional[Decimal]:
    """Profit as a percentage of income; None when income is zero or too small to divide by."""
    if income == 0:
        return None
    margin = (profit / income) * 100
    if not math.isfinite(margin):
        return None
    return round_money(margin)


def calculate_load_factor(total_booked_seats: int, total_capacity: int) -> Optional[Decimal]:
    """Booked seats as a percentage of capacity; None for a zero-capacity aircraft."""
    if total_capacity == 0:
        return None
    return round_money((total_booked_seats / total_capacity) * 100)


def calculate_break_even_seats(total_cost: float, prices: Dict[str, float]) -> Optional[int]:
    """
    Seats that must be sold at the average fare to cover the total cost.

    The average fare is the plain mean of the class prices, not weighted by
    seats booked.

    Args:
        total_cost: Total running cost
        prices: Ticket price per class

    Returns:
        Seats rounded up, or None when every price is zero or the
        average fare is too small to divide by
    """
    average_fare = sum(prices.get(class_type, 0.0) for class_type in CLASS_TYPES) / len(CLASS_TYPES)
    if average_fare == 0:
        return None
    seats = total_cost / average_fare
    if not math.isfinite(seats):
        return None
    return math.ceil(seats)


def calculate_co2_emissions(distance: float, total_booked_seats: int) -> Decimal:
    """CO2 in kg for the booked seats over the route."""
    with localcontext() as ctx:
        ctx.prec = 50
        emissions = Decimal(distance) * total_booked_seats * Decimal(str(CO2_PER_SEAT_PER_KM))
    return round_money(emissions)


def compute_economics(
    request: FlightRequest,
    aircraft: Aircraft,
    distance: float,
    income: float,
    total_cost: float,
) -> CalculationResult:
    """
    Compute every derived metric for a validated booking.

    Args:
        request: Validated booking
        aircraft: Resolved aircraft
        distance: Route distance in km
        income: Ticket income
        total_cost: Total running cost

    Returns:
        CalculationResult with 2-place currency and percentage values
    """
    total_booked = request.total_booked_seats
    profit = income - total_cost

    rounded_income = round_money(income)
    rounded_cost = round_money(total_cost)

    profit_margin = calculate_profit_margin(profit, income)
    if profit_margin is None:
        logger.warning(f"{request.route}: income too small, profit margin undefined")

    return CalculationResult(
        uk_airport=request.uk_airport,
        overseas_airport=request.overseas_airport,
        aircraft_type=request.aircraft_type,
        economy_seats=request.economy_seats,
        business_seats=request.business_seats,
        first_class_seats=request.first_class_seats,
        distance=distance,
        income=rounded_income,
        cost=rounded_cost,
        profit=sum_money([rounded_income, rounded_cost.copy_negate()]),
        profit_margin=profit_margin,
        break_even_seats=calculate_break_even_seats(total_cost, request.prices),
        load_factor=calculate_load_factor(total_booked, aircraft.total_capacity),
        co2_emissions=calculate_co2_emissions(distance, total_booked),
    )
