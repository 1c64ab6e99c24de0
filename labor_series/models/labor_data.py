"""Data models for labor market series."""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Literal

import pandas as pd

from labor_series.config import DEFAULT_MIN_AGE, DEFAULT_MAX_AGE


class Indicator(Enum):
    """Economic metric being measured."""
    UNEMPLOYMENT_RATE = "Unemployment Rate"
    LABOR_FORCE_RATE = "Labor Force Rate"
    EMPLOYMENT_RATE = "Employment Rate"
    MONTHLY_WAGE = "Monthly Wage"

    @property
    def is_wage(self) -> bool:
        return self is Indicator.MONTHLY_WAGE


class Dimension(Enum):
    """Population breakdown axis."""
    REGION = "Autonomous Community"
    EDUCATION = "Education Level"
    AGE_GROUP = "Age Group"
    GENDER = "Gender"


class Frequency(Enum):
    QUARTERLY = "Quarterly"
    ANNUAL = "Annual"


class ValueBasis(Enum):
    """Nominal or constant-currency values (wages only)."""
    NOMINAL = "Nominal"
    CONSTANT = "Constant"


DataSource = Literal["official", "simulated"]


@dataclass(frozen=True)
class Observation:
    """Single value for one category in one period."""

    period: str  # "2013" or "2013Q2"
    year: int
    category: str
    value: float


@dataclass(frozen=True)
class SeriesPoint:
    """Single entry parsed from an upstream series."""

    year: int
    quarter: int | None  # None for annual or monthly labels
    value: float
    month: int | None = None

    @property
    def period(self) -> str:
        if self.quarter is None:
            return str(self.year)
        return f"{self.year}Q{self.quarter}"


@dataclass(frozen=True)
class FetchedSeries:
    """A series successfully retrieved from the statistics service."""

    series_id: str
    points: tuple[SeriesPoint, ...]

    @property
    def quarterly_points(self) -> tuple[SeriesPoint, ...]:
        return tuple(p for p in self.points if p.quarter is not None)


@dataclass(frozen=True)
class Unavailable:
    """Marker for a series that could not be retrieved."""

    series_id: str
    reason: str


FetchOutcome = FetchedSeries | Unavailable


@dataclass(frozen=True)
class SeriesQuery:
    """Immutable request for one indicator broken down by one dimension."""

    indicator: Indicator
    dimension: Dimension
    frequency: Frequency
    start_year: int
    end_year: int
    min_age: int = DEFAULT_MIN_AGE
    max_age: int = DEFAULT_MAX_AGE
    value_basis: ValueBasis = ValueBasis.NOMINAL
    categories: tuple[str, ...] | None = None  # None selects the whole catalog

    @property
    def wants_constant_wages(self) -> bool:
        return self.indicator.is_wage and self.value_basis is ValueBasis.CONSTANT

    def includes_year(self, year: int) -> bool:
        return self.start_year <= year <= self.end_year

    @property
    def years(self) -> range:
        return range(self.start_year, self.end_year + 1)


@dataclass(frozen=True)
class QueryResult:
    """Observations for a query plus their overall provenance."""

    observations: tuple[Observation, ...]
    source: DataSource
    query: SeriesQuery | None = field(default=None, compare=False)

    @property
    def categories(self) -> list[str]:
        """Categories in the order they first appear."""
        return list(dict.fromkeys(o.category for o in self.observations))

    @property
    def periods(self) -> list[str]:
        return list(dict.fromkeys(o.period for o in self.observations))

    def to_records(self) -> list[dict]:
        return [asdict(o) for o in self.observations]

    def to_frame(self) -> pd.DataFrame:
        """Long-format DataFrame with period, year, category and value columns."""
        if not self.observations:
            return pd.DataFrame(columns=["period", "year", "category", "value"])
        return pd.DataFrame(self.to_records())

    def pivot(self) -> pd.DataFrame:
        """
        Wide DataFrame indexed by period with one column per category.

        This is the row shape chart layers plot; missing cells are NaN.
        """
        df = self.to_frame()
        if df.empty:
            return pd.DataFrame(index=pd.Index([], name="period"))
        wide = df.pivot(index="period", columns="category", values="value")
        wide = wide.reindex(index=self.periods, columns=self.categories)
        wide.columns.name = None
        return wide
