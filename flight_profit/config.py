"""Configuration module for constants and settings."""

from typing import Optional
from pydantic_settings import BaseSettings


# Fare classes in declaration order; per-class checks run in this order
CLASS_TYPES = ["economy", "business", "first"]

# UK origins a booking may depart from
UK_AIRPORTS = ["MAN", "LHR", "LGW"]

# Overbooking scope for the whole aircraft
TOTAL_SCOPE = "total"

# kg of CO2 per seat per km
CO2_PER_SEAT_PER_KM = 0.115


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    # Origin whose distance is the airport's first distance column
    PRIMARY_UK_AIRPORT: str = "MAN"

    # Batch processing
    BATCH_MAX_WORKERS: int = 1

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }
