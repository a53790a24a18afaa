"""Data loader module: turns already-parsed tables into typed records."""

import logging
from typing import Any, List, Sequence, Tuple, Union

import pandas as pd
from pydantic import BaseModel, ValidationError

from .models.aircraft import Aircraft
from .models.airport import Airport
from .models.flight import FlightRequest

logger = logging.getLogger(__name__)

TableLike = Union[pd.DataFrame, Sequence[Sequence[Any]]]

AIRPORT_COLUMNS = ["code", "name", "distance_from_primary", "distance_from_secondary"]
AIRCRAFT_TOTAL_COLUMNS = ["type", "running_cost_per_seat_per_100km", "max_flight_range", "total_seats"]
AIRCRAFT_CLASS_COLUMNS = [
    "type",
    "running_cost_per_seat_per_100km",
    "max_flight_range",
    "economy_seats",
    "business_seats",
    "first_class_seats",
]
FLIGHT_COLUMNS = [
    "uk_airport",
    "overseas_airport",
    "aircraft_type",
    "economy_seats",
    "business_seats",
    "first_class_seats",
    "economy_price",
    "business_price",
    "first_class_price",
]


def _to_frame(table: TableLike) -> pd.DataFrame:
    """
    Wrap positional rows in a DataFrame.

    Args:
        table: DataFrame, or rows of already-split values

    Returns:
        DataFrame with positional columns
    """
    if isinstance(table, pd.DataFrame):
        return table
    return pd.DataFrame([list(row) for row in table])


def _clean(value: Any) -> Any:
    """Trim strings, map blanks and missing cells to None, unwrap numpy scalars."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        return value or None
    if pd.isna(value):
        return None
    if hasattr(value, "item"):
        return value.item()
    return value


def _rows(frame: pd.DataFrame, columns: List[str]) -> List[dict]:
    """Name the leading positional columns of each row, skipping blank rows."""
    records = []
    for _, row in frame.iterrows():
        values = [_clean(value) for value in row.tolist()[: len(columns)]]
        if all(value is None for value in values):
            continue
        values += [None] * (len(columns) - len(values))
        records.append(dict(zip(columns, values)))
    return records


def load_airports(table: TableLike) -> List[Airport]:
    """
    Build Airport records from rows of (code, name, distance from MAN,
    distance from the secondary UK origin).

    Args:
        table: DataFrame or positional rows

    Returns:
        List of Airport records in row order
    """
    frame = _to_frame(table)
    if not frame.empty and frame.shape[1] < len(AIRPORT_COLUMNS):
        raise ValueError(f"Airport rows need {len(AIRPORT_COLUMNS)} columns, got {frame.shape[1]}")

    airports = [Airport(**record) for record in _rows(frame, AIRPORT_COLUMNS)]
    logger.info(f"Successfully loaded {len(airports)} airports")
    return airports


def load_aircraft(table: TableLike) -> List[Aircraft]:
    """
    Build Aircraft records.

    Rows with four columns give a total seat count; rows with six columns
    give economy, business and first class capacities.

    Args:
        table: DataFrame or positional rows

    Returns:
        List of Aircraft records in row order
    """
    frame = _to_frame(table)
    if frame.empty:
        logger.info("Successfully loaded 0 aircraft types")
        return []

    if frame.shape[1] >= len(AIRCRAFT_CLASS_COLUMNS):
        columns = AIRCRAFT_CLASS_COLUMNS
    elif frame.shape[1] == len(AIRCRAFT_TOTAL_COLUMNS):
        columns = AIRCRAFT_TOTAL_COLUMNS
    else:
        raise ValueError(f"Aircraft rows need 4 or 6 columns, got {frame.shape[1]}")

    class_aware = columns is AIRCRAFT_CLASS_COLUMNS
    aircraft = [Aircraft(class_aware=class_aware, **record) for record in _rows(frame, columns)]
    for item in aircraft:
        logger.debug(f"Loaded aircraft type {item.type}: capacity {item.total_capacity}")
    logger.info(f"Successfully loaded {len(aircraft)} aircraft types")
    return aircraft


class RejectedRow(BaseModel):
    """A booking row that could not become a FlightRequest."""

    row: int
    record: dict
    reason: str


def load_flight_requests_with_rejections(
    table: TableLike,
) -> Tuple[List[FlightRequest], List[RejectedRow]]:
    """
    Build FlightRequest records from rows of (uk airport, overseas airport,
    aircraft type, economy/business/first seats, economy/business/first prices).

    Non-numeric seat counts and prices load as None and are reported per
    flight by the calculator. Rows that still fail (negative values, an
    unknown UK origin) are skipped and returned as rejections, so one bad
    row never loses the rest of the table.

    Args:
        table: DataFrame or positional rows

    Returns:
        Tuple of (requests in row order, rejected rows)
    """
    frame = _to_frame(table)
    if not frame.empty and frame.shape[1] < len(FLIGHT_COLUMNS):
        raise ValueError(f"Flight rows need {len(FLIGHT_COLUMNS)} columns, got {frame.shape[1]}")

    requests = []
    rejected = []
    for index, record in enumerate(_rows(frame, FLIGHT_COLUMNS), start=1):
        try:
            requests.append(FlightRequest(**record))
        except ValidationError as e:
            reason = "; ".join(error["msg"] for error in e.errors())
            logger.warning(f"Skipping flight row {index}: {reason}")
            rejected.append(RejectedRow(row=index, record=record, reason=reason))

    logger.info(f"Successfully loaded {len(requests)} flight requests")
    return requests, rejected


def load_flight_requests(table: TableLike) -> List[FlightRequest]:
    """
    Build FlightRequest records, skipping rows that fail validation.

    Args:
        table: DataFrame or positional rows

    Returns:
        List of FlightRequest records in row order
    """
    requests, _ = load_flight_requests_with_rejections(table)
    return requests
