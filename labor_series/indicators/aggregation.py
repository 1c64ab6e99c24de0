"""Collapse quarterly observations into annual ones."""

import pandas as pd

from labor_series.models import Observation


def to_annual(observations: list[Observation]) -> list[Observation]:
    """
    Average observations per (year, category).

    Each group becomes one observation whose period is the bare year and
    whose value is the group mean rounded to two decimals. Category order of
    first appearance is preserved within each year.
    """
    if not observations:
        return []

    df = pd.DataFrame(
        {
            "year": [o.year for o in observations],
            "category": [o.category for o in observations],
            "value": [o.value for o in observations],
        }
    )
    means = df.groupby(["year", "category"], sort=False)["value"].mean()

    return [
        Observation(
            period=str(year),
            year=int(year),
            category=category,
            value=round(float(value), 2),
        )
        for (year, category), value in means.items()
    ]
