"""Category lists and INE series identifiers."""

from labor_series.models import Indicator, Dimension


TOTAL = "Total"

# Regional unemployment series (EPA, by autonomous community)
REGION_SERIES: dict[str, str] = {
    "Andalusia": "3982",
    "Aragon": "3983",
    "Canary Islands": "3987",
    "Castile and León": "3989",
    "Catalonia": "3990",
    "Valencia": "3991",
    "Galicia": "3993",
    "Madrid": "3996",
    "Murcia": "3997",
    "Basque Country": "4000",
}

# National aggregate series per indicator
TOTAL_SERIES: dict[Indicator, str] = {
    Indicator.UNEMPLOYMENT_RATE: "3885",
    Indicator.LABOR_FORCE_RATE: "3882",
    Indicator.EMPLOYMENT_RATE: "3884",
    Indicator.MONTHLY_WAGE: "25547",
}

PRICE_INDEX_SERIES_ID = "50902"  # CPI general index

CATEGORIES: dict[Dimension, tuple[str, ...]] = {
    Dimension.REGION: (TOTAL, *REGION_SERIES),
    Dimension.EDUCATION: (
        TOTAL,
        "Primary",
        "Secondary",
        "Vocational Training",
        "Higher Education",
    ),
    Dimension.AGE_GROUP: (TOTAL, "16-24", "25-54", "55+"),
    Dimension.GENDER: (TOTAL, "Male", "Female"),
}


def categories_for(dimension: Dimension) -> list[str]:
    """Ordered category labels for a dimension, always starting with Total."""
    return list(CATEGORIES.get(dimension, (TOTAL,)))


def default_selection(dimension: Dimension, count: int = 3) -> list[str]:
    """Categories pre-selected by consumers when nothing is chosen yet."""
    return categories_for(dimension)[:max(count, 0)]


def series_id_for(
    indicator: Indicator, category: str, dimension: Dimension | None = None
) -> str | None:
    """
    Upstream series ID for an (indicator, category) pair.

    Returns None when no official series exists; callers fall back to
    derivation or simulation.
    """
    if category == TOTAL:
        return TOTAL_SERIES.get(indicator)
    if indicator is Indicator.UNEMPLOYMENT_RATE and dimension in (None, Dimension.REGION):
        return REGION_SERIES.get(category)
    return None
