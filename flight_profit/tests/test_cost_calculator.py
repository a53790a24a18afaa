"""Tests for cost calculator module."""

from decimal import Decimal

from flight_profit.cost_calculator import (
    calculate_break_even_seats,
    calculate_co2_emissions,
    calculate_cost_per_seat,
    calculate_income,
    calculate_load_factor,
    calculate_profit_margin,
    calculate_total_cost,
    compute_economics,
)
from flight_profit.models.aircraft import Aircraft
from flight_profit.models.flight import FlightRequest


def test_calculate_cost_per_seat():
    assert calculate_cost_per_seat(5.0, 5000) == 250.0


def test_calculate_total_cost():
    """Test total cost calculation."""
    cost = calculate_total_cost(5.0, 5000, 150)

    expected = 5.0 * (5000 / 100) * 150
    assert cost == expected == 37500.0


def test_calculate_income():
    """Test income calculation across classes."""
    seats = {"economy": 100, "business": 10, "first": 2}
    prices = {"economy": 250.0, "business": 1000.0, "first": 3000.0}

    assert calculate_income(seats, prices) == 100 * 250.0 + 10 * 1000.0 + 2 * 3000.0


def test_calculate_profit_margin():
    assert calculate_profit_margin(-7500.0, 30000.0) == Decimal("-25.00")
    assert calculate_profit_margin(-9000.0, 35000.0) == Decimal("-25.71")


def test_profit_margin_undefined_without_income():
    assert calculate_profit_margin(-2500.0, 0.0) is None


def test_calculate_load_factor():
    assert calculate_load_factor(150, 150) == Decimal("100.00")
    assert calculate_load_factor(110, 180) == Decimal("61.11")
    assert calculate_load_factor(0, 0) is None


def test_break_even_uses_unweighted_average_fare():
    """Average of 100, 200, 300 is 200 regardless of seats booked."""
    prices = {"economy": 100.0, "business": 200.0, "first": 300.0}

    assert calculate_break_even_seats(37500.0, prices) == 188


def test_break_even_exact_division():
    prices = {"economy": 300.0, "business": 300.0, "first": 300.0}

    assert calculate_break_even_seats(37500.0, prices) == 125


def test_break_even_without_fares():
    prices = {"economy": 0.0, "business": 0.0, "first": 0.0}

    assert calculate_break_even_seats(100.0, prices) is None


def test_calculate_co2_emissions():
    assert calculate_co2_emissions(5000, 150) == Decimal("86250.00")
    assert calculate_co2_emissions(400, 170) == Decimal("7820.00")


def test_compute_economics_two_place_values():
    request = FlightRequest(
        uk_airport="MAN",
        overseas_airport="JFK",
        aircraft_type="A321",
        economy_seats=100,
        business_seats=10,
        economy_price=250,
        business_price=1000,
    )
    aircraft = Aircraft(
        type="A321",
        running_cost_per_seat_per_100km=8,
        max_flight_range=5600,
        economy_seats=160,
        business_seats=20,
        first_class_seats=0,
    )

    result = compute_economics(request, aircraft, 5000.0, 35000.0, 44000.0)

    assert result.is_success()
    assert result.income == Decimal("35000.00")
    assert result.cost == Decimal("44000.00")
    assert result.profit == Decimal("-9000.00")
    assert result.profit_margin == Decimal("-25.71")
    assert result.load_factor == Decimal("61.11")
    assert result.co2_emissions == Decimal("63250.00")
    assert str(result.income) == "35000.00"
