"""Tests for validator module."""

import pytest

from flight_profit.lookup import ReferenceTable
from flight_profit.models.aircraft import Aircraft
from flight_profit.models.flight import FlightRequest
from flight_profit.models.result import (
    ClassUnavailable,
    ErrorKind,
    InvalidNumericData,
    OverbookingError,
    RangeExceeded,
    UnknownAircraft,
    UnknownAirport,
)
from flight_profit.validator import PIPELINE, ValidationContext, Validator


def _request(**overrides):
    data = {
        "uk_airport": "MAN",
        "overseas_airport": "JFK",
        "aircraft_type": "A320",
        "economy_seats": 100,
        "economy_price": 200.0,
    }
    data.update(overrides)
    return FlightRequest(**data)


@pytest.fixture
def validator(airport_table, aircraft_table):
    return Validator(airport_table, aircraft_table)


def test_validator_initialization(airport_table, aircraft_table):
    """Test validator initialization."""
    validator = Validator(airport_table, aircraft_table, primary_uk_airport="man")

    assert validator.airports is airport_table
    assert validator.aircraft is aircraft_table
    assert validator.primary_uk_airport == "MAN"
    assert validator.checks == PIPELINE


def test_valid_request_yields_context(validator):
    context = validator.validate(_request())

    assert isinstance(context, ValidationContext)
    assert context.airport.code == "JFK"
    assert context.aircraft.type == "A320"
    assert context.distance == 5000
    assert context.income == 20000.0
    assert context.total_cost == 25000.0


def test_secondary_origin_uses_second_distance(validator):
    context = validator.validate(_request(uk_airport="LHR"))

    assert context.distance == 5500


def test_unknown_airport(validator):
    error = validator.validate(_request(overseas_airport="XYZ"))

    assert isinstance(error, UnknownAirport)
    assert error.valid_codes == ["JFK", "ORY", "CAI"]
    assert "Available codes: JFK, ORY, CAI" in error.message


def test_unknown_aircraft_lists_valid_types(validator):
    error = validator.validate(_request(aircraft_type="B900"))

    assert isinstance(error, UnknownAircraft)
    assert error.kind == ErrorKind.UNKNOWN_AIRCRAFT
    assert error.valid_types == ["A320", "A321", "B737"]


def test_airport_checked_before_aircraft(validator):
    error = validator.validate(_request(overseas_airport="XYZ", aircraft_type="B900"))

    assert isinstance(error, UnknownAirport)


def test_non_numeric_distance(validator):
    error = validator.validate(_request(overseas_airport="CAI", uk_airport="LGW"))

    assert isinstance(error, InvalidNumericData)
    assert error.field == "distance"


def test_non_numeric_aircraft_fields(airport_table):
    aircraft = ReferenceTable(
        [
            Aircraft(type="X1", running_cost_per_seat_per_100km="free", max_flight_range=6000, total_seats=150),
            Aircraft(type="X2", running_cost_per_seat_per_100km=5, max_flight_range=6000, total_seats="many"),
            Aircraft(
                type="X3",
                running_cost_per_seat_per_100km=5,
                max_flight_range=6000,
                economy_seats=100,
                business_seats="?",
                first_class_seats=0,
            ),
        ],
        "type",
    )
    validator = Validator(airport_table, aircraft)

    assert validator.validate(_request(aircraft_type="X1")).field == "running cost"
    assert validator.validate(_request(aircraft_type="X2")).field == "total seats"
    assert validator.validate(_request(aircraft_type="X3")).field == "business seats"


def test_range_exceeded_regardless_of_seats(validator):
    error = validator.validate(_request(aircraft_type="B737", economy_seats=999))

    assert isinstance(error, RangeExceeded)
    assert error.distance == 5000
    assert error.max_range == 4000


def test_class_unavailable(validator):
    error = validator.validate(
        _request(aircraft_type="A321", economy_seats=10, first_class_seats=1, first_class_price=2000)
    )

    assert isinstance(error, ClassUnavailable)
    assert error.seat_class == "first"
    assert error.message.endswith("A321 does not have first-class seats.")


def test_first_overbooked_class_reported(validator):
    """Economy is reported before business; errors are not aggregated."""
    error = validator.validate(
        _request(aircraft_type="A321", economy_seats=161, business_seats=21, business_price=900)
    )

    assert isinstance(error, OverbookingError)
    assert error.scope == "economy"
    assert error.requested == 161
    assert error.available == 160


def test_business_overbooking(validator):
    error = validator.validate(
        _request(aircraft_type="A321", economy_seats=10, business_seats=25, business_price=900)
    )

    assert isinstance(error, OverbookingError)
    assert error.scope == "business"
    assert "25 seats booked but aircraft only has 20 business class seats" in error.message


def test_total_overbooking(validator):
    error = validator.validate(_request(economy_seats=100, business_seats=51))

    assert isinstance(error, OverbookingError)
    assert error.scope == "total"
    assert error.requested == 151
    assert error.available == 150


def test_infinite_income(validator):
    error = validator.validate(_request(economy_price=float("inf")))

    assert isinstance(error, InvalidNumericData)
    assert error.field == "income"


def test_infinite_total_cost(airport_table):
    aircraft = ReferenceTable(
        [Aircraft(type="A320", running_cost_per_seat_per_100km=1e308, max_flight_range=6000, total_seats=150)],
        "type",
    )
    error = Validator(airport_table, aircraft).validate(_request())

    assert isinstance(error, InvalidNumericData)
    assert error.field == "total cost"


def test_custom_pipeline_stops_at_first_failure(airport_table, aircraft_table):
    calls = []

    def record(ctx):
        calls.append("record")
        return ctx

    validator = Validator(airport_table, aircraft_table, checks=[PIPELINE[0], record])
    validator.validate(_request(overseas_airport="XYZ"))

    assert calls == []


@pytest.mark.parametrize("aircraft_type", ["A320", "A321"])
def test_non_numeric_booking_reported_as_income(validator, aircraft_type):
    for overrides in ({"economy_price": "abc"}, {"economy_seats": "lots"}, {"business_seats": None}):
        error = validator.validate(_request(aircraft_type=aircraft_type, **overrides))

        assert isinstance(error, InvalidNumericData)
        assert error.field == "income"
        assert error.message.endswith("Invalid income value: NaN")
