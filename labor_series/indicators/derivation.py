"""Estimate category series from the national Total series.

Used when a category has no official series but the Total series was
fetched. Anchoring on observed Total data keeps the macro trend real even
though the category split is approximate.
"""

import math

from labor_series.indicators.inflation import InflationAdjuster
from labor_series.indicators.synthetic import noise_seed, variance_multiplier
from labor_series.models import FetchedSeries, Indicator, Observation


DERIVATION_NOISE_AMPLITUDE = 0.03


def derivation_factor(indicator: Indicator, category: str, year: int) -> float:
    """Scale applied to a Total value for one category and year."""
    noise = math.sin(year + noise_seed(indicator, category)) * DERIVATION_NOISE_AMPLITUDE + 1
    return variance_multiplier(indicator, category) * noise


def derive_from_total(
    total: FetchedSeries,
    indicator: Indicator,
    category: str,
    prices: InflationAdjuster | None = None,
) -> list[Observation]:
    """
    Scale every quarterly Total observation into a category estimate.

    Periods are copied from the Total series unchanged. With ``prices`` the
    estimate is deflated before it is rounded.
    """
    prices = prices or InflationAdjuster.identity()
    return [
        Observation(
            period=point.period,
            year=point.year,
            category=category,
            value=round(
                prices.adjust(
                    point.value * derivation_factor(indicator, category, point.year),
                    point.year,
                ),
                2,
            ),
        )
        for point in total.quarterly_points
    ]
