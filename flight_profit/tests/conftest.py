"""Shared fixtures for the flight profit tests."""

import pytest

from flight_profit.config import Config
from flight_profit.lookup import ReferenceTable
from flight_profit.models.aircraft import Aircraft
from flight_profit.models.airport import Airport


@pytest.fixture
def config():
    """Settings with the default primary origin."""
    return Config(PRIMARY_UK_AIRPORT="MAN", BATCH_MAX_WORKERS=1)


@pytest.fixture
def sample_airports():
    """Create sample airports for testing."""
    return [
        Airport(code="JFK", name="John F Kennedy", distance_from_primary=5000, distance_from_secondary=5500),
        Airport(code="ORY", name="Paris Orly", distance_from_primary=750, distance_from_secondary=400),
        Airport(code="CAI", name="Cairo International", distance_from_primary=3800, distance_from_secondary="n/a"),
    ]


@pytest.fixture
def sample_aircraft():
    """Create sample aircraft for testing."""
    return [
        Aircraft(type="A320", running_cost_per_seat_per_100km="£5.00", max_flight_range=6000, total_seats=150),
        Aircraft(
            type="A321",
            running_cost_per_seat_per_100km=8.0,
            max_flight_range=5600,
            economy_seats=160,
            business_seats=20,
            first_class_seats=0,
        ),
        Aircraft(type="B737", running_cost_per_seat_per_100km=4.0, max_flight_range=4000, total_seats=180),
    ]


@pytest.fixture
def airport_table(sample_airports):
    return ReferenceTable(sample_airports, "code")


@pytest.fixture
def aircraft_table(sample_aircraft):
    return ReferenceTable(sample_aircraft, "type")
