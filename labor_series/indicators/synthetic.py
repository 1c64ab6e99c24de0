"""Deterministic synthetic labor market model.

Used when the statistics service cannot be reached. Values are built from:
1. A reference-year level per indicator (2024 by default)
2. A historical trend shaped on the Spanish business cycle
3. A per-category variance multiplier
4. A quarterly seasonal term (rates only)
5. A small sinusoidal noise factor seeded from the inputs

No randomness is involved, so the same inputs always give the same value.
"""

import math
from types import MappingProxyType

from labor_series.config import (
    DEFAULT_REFERENCE_YEAR,
    DEFAULT_MIN_AGE,
    DEFAULT_MAX_AGE,
)
from labor_series.indicators.inflation import InflationAdjuster
from labor_series.models import Indicator, ValueBasis


REFERENCE_LEVELS = MappingProxyType({
    Indicator.UNEMPLOYMENT_RATE: 11.6,
    Indicator.LABOR_FORCE_RATE: 58.5,
    Indicator.EMPLOYMENT_RATE: 51.5,
    Indicator.MONTHLY_WAGE: 2385.6,
})

# (unemployment multiplier, multiplier for every other indicator)
# High unemployment goes with lower wages and participation.
_VARIANCE_BY_CATEGORY = {
    "Andalusia": (1.6, 0.88),
    "Madrid": (0.8, 1.18),
    "Higher Education": (0.6, 1.35),
    "16-24": (2.5, 0.4),
}

CATEGORY_VARIANCE = MappingProxyType({
    (indicator, category): unemployment if indicator is Indicator.UNEMPLOYMENT_RATE else other
    for category, (unemployment, other) in _VARIANCE_BY_CATEGORY.items()
    for indicator in Indicator
})

SEASONAL_AMPLITUDE = 0.3
NOISE_AMPLITUDE = 0.02

RATE_FLOOR = 0.5
RATE_CEILING = 100.0
WAGE_FLOOR = 300.0

_AGE_MIDPOINT = (DEFAULT_MIN_AGE + DEFAULT_MAX_AGE) / 2


def variance_multiplier(indicator: Indicator, category: str) -> float:
    """Calibrated multiplier for a category; 1.0 when it is unremarkable."""
    return CATEGORY_VARIANCE.get((indicator, category), 1.0)


def noise_seed(indicator: Indicator, category: str) -> int:
    return len(category) + len(indicator.value)


def trend_offset(
    indicator: Indicator, year: int, reference_year: int = DEFAULT_REFERENCE_YEAR
) -> float:
    """Additive offset from the reference-year level for a given year."""
    if indicator is Indicator.UNEMPLOYMENT_RATE:
        if year < 2008:
            return -4.0
        if year < 2013:
            # crisis build-up
            return (year - 2008) * 3.0
        return max(0.0, 15 - (year - 2013) * 1.4)

    if indicator is Indicator.MONTHLY_WAGE:
        trend = -(reference_year - year) * 45.0
        if year > 2021:
            trend += (year - 2021) * 40.0
        return trend

    return 0.0


def seasonal_term(indicator: Indicator, quarter: int) -> float:
    if indicator.is_wage:
        return 0.0
    return math.sin(quarter * 1.5) * SEASONAL_AMPLITUDE


def age_bias_for(indicator: Indicator, min_age: int, max_age: int) -> float:
    """
    Multiplicative bias for an age window.

    Neutral (1.0) for the default working-age window. Younger windows push
    unemployment up and wages down; older windows the opposite. Participation
    and employment fall away from prime age in either direction.
    """
    distance = (max_age + min_age) / 2 - _AGE_MIDPOINT
    if indicator is Indicator.UNEMPLOYMENT_RATE:
        bias = 1 - 0.02 * distance
    elif indicator is Indicator.MONTHLY_WAGE:
        bias = 1 + 0.01 * distance
    else:
        bias = 1 - 0.01 * abs(distance)
    return min(1.5, max(0.5, bias))


def simulate(
    indicator: Indicator,
    category: str,
    year: int,
    quarter: int,
    value_basis: ValueBasis = ValueBasis.NOMINAL,
    age_bias: float = 1.0,
    prices: InflationAdjuster | None = None,
    reference_year: int = DEFAULT_REFERENCE_YEAR,
) -> float:
    """
    Synthesize one value.

    Args:
        indicator: Metric to simulate
        category: Category label from the catalog
        year: Calendar year
        quarter: Quarter number, 1-4
        value_basis: CONSTANT deflates wages to reference-year prices
        age_bias: Multiplier from ``age_bias_for``
        prices: Deflator for constant wages, defaults to the simulated
            2.8% a year back from ``reference_year``
        reference_year: Year the reference levels and the wage trend are
            anchored on

    Returns:
        Value rounded to two decimals
    """
    base = REFERENCE_LEVELS[indicator] + trend_offset(indicator, year, reference_year)
    noise = math.sin(year + quarter + noise_seed(indicator, category)) * NOISE_AMPLITUDE + 1

    value = (
        base * variance_multiplier(indicator, category) * noise * age_bias
        + seasonal_term(indicator, quarter)
    )

    if indicator.is_wage:
        if value_basis is ValueBasis.CONSTANT:
            if prices is None:
                prices = InflationAdjuster.simulated(reference_year=reference_year)
            value = prices.adjust(value, year)
        value = max(WAGE_FLOOR, value)
    else:
        value = min(RATE_CEILING, max(RATE_FLOOR, value))

    return round(value, 2)
