"""Spanish labor market time series, official or synthesized."""

from labor_series.indicators import SeriesResolver, resolve, resolve_sync
from labor_series.models import (
    Indicator,
    Dimension,
    Frequency,
    ValueBasis,
    Observation,
    SeriesQuery,
    QueryResult,
)

__all__ = [
    "SeriesResolver",
    "resolve",
    "resolve_sync",
    "Indicator",
    "Dimension",
    "Frequency",
    "ValueBasis",
    "Observation",
    "SeriesQuery",
    "QueryResult",
]
