"""Series synthesis, adjustment and query resolution."""

from labor_series.indicators.resolver import SeriesResolver, resolve, resolve_sync
from labor_series.indicators.synthetic import simulate
from labor_series.indicators.inflation import InflationAdjuster
from labor_series.indicators.events import LABOR_MARKET_EVENTS, events_in_range

__all__ = [
    "SeriesResolver",
    "resolve",
    "resolve_sync",
    "simulate",
    "InflationAdjuster",
    "LABOR_MARKET_EVENTS",
    "events_in_range",
]
