"""Configuration."""

from labor_series.config.settings import (
    Settings,
    DEFAULT_REFERENCE_YEAR,
    DEFAULT_INFLATION_RATE,
    DEFAULT_MIN_AGE,
    DEFAULT_MAX_AGE,
)

__all__ = [
    "Settings",
    "DEFAULT_REFERENCE_YEAR",
    "DEFAULT_INFLATION_RATE",
    "DEFAULT_MIN_AGE",
    "DEFAULT_MAX_AGE",
]
