"""Data models."""

from labor_series.models.labor_data import (
    Indicator,
    Dimension,
    Frequency,
    ValueBasis,
    DataSource,
    Observation,
    SeriesPoint,
    FetchedSeries,
    Unavailable,
    FetchOutcome,
    SeriesQuery,
    QueryResult,
)

__all__ = [
    "Indicator",
    "Dimension",
    "Frequency",
    "ValueBasis",
    "DataSource",
    "Observation",
    "SeriesPoint",
    "FetchedSeries",
    "Unavailable",
    "FetchOutcome",
    "SeriesQuery",
    "QueryResult",
]
