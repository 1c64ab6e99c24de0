"""Convert nominal wages into constant (reference-year) prices."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from labor_series.config import DEFAULT_REFERENCE_YEAR, DEFAULT_INFLATION_RATE
from labor_series.models import FetchedSeries


@dataclass(frozen=True)
class InflationAdjuster:
    """
    Deflates values to reference-period prices.

    Build it with one of the constructors:
    - ``from_index``: ratio of the latest price index value to the observation
      year's average index value
    - ``simulated``: compound a constant annual rate back from the reference
      year
    - ``identity``: leave values unchanged
    """

    mode: str = "identity"
    reference_value: float = 100.0
    annual_index: Mapping[int, float] = field(default_factory=dict)
    rate: float = 0.0
    reference_year: int = DEFAULT_REFERENCE_YEAR

    @classmethod
    def identity(cls) -> "InflationAdjuster":
        return cls()

    @classmethod
    def simulated(
        cls,
        rate: float = DEFAULT_INFLATION_RATE,
        reference_year: int = DEFAULT_REFERENCE_YEAR,
    ) -> "InflationAdjuster":
        return cls(mode="simulated", rate=rate, reference_year=reference_year)

    @classmethod
    def from_index(cls, series: FetchedSeries) -> "InflationAdjuster":
        """
        Build an adjuster from a price index series.

        Monthly or quarterly index entries are averaged per year. The
        reference value is the most recent entry of the series by year, then
        quarter or month, whatever order the service lists them in.
        """
        if not series.points:
            return cls.identity()

        by_year: dict[int, list[float]] = {}
        for point in series.points:
            by_year.setdefault(point.year, []).append(point.value)
        annual = {year: sum(values) / len(values) for year, values in by_year.items()}

        latest = max(series.points, key=lambda p: (p.year, p.quarter or 0, p.month or 0))
        return cls(
            mode="index",
            reference_value=latest.value,
            annual_index=MappingProxyType(annual),
            reference_year=latest.year,
        )

    @property
    def is_identity(self) -> bool:
        return self.mode == "identity"

    def ratio(self, year: int) -> float:
        """Multiplier turning a nominal value from ``year`` into a real one."""
        if self.mode == "simulated":
            return (1 + self.rate) ** (self.reference_year - year)
        if self.mode == "index":
            historical = self.annual_index.get(year)
            if not historical:
                return 1.0
            return self.reference_value / historical
        return 1.0

    def adjust(self, value: float, year: int) -> float:
        return value * self.ratio(year)
