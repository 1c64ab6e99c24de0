"""Labor market episodes to highlight alongside a series."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LaborMarketEvent:
    name: str
    start: str  # quarterly period, e.g. "2008Q2"
    end: str

    def bounds(self, quarterly: bool) -> tuple[str, str]:
        """Start and end expressed in quarterly or annual periods."""
        if quarterly:
            return self.start, self.end
        return self.start[:4], self.end[:4]


LABOR_MARKET_EVENTS: tuple[LaborMarketEvent, ...] = (
    LaborMarketEvent("Great Recession", "2008Q2", "2013Q4"),
    LaborMarketEvent("COVID-19", "2020Q1", "2021Q2"),
)


def events_in_range(periods: list[str]) -> list[tuple[LaborMarketEvent, str, str]]:
    """
    Events overlapping the span covered by ``periods``.

    Granularity is taken from the first period. Each match comes back with
    its bounds in that granularity.
    """
    if not periods:
        return []

    ordered = sorted(periods)
    first, last = ordered[0], ordered[-1]
    quarterly = "Q" in first

    matches = []
    for event in LABOR_MARKET_EVENTS:
        start, end = event.bounds(quarterly)
        if start <= last and end >= first:
            matches.append((event, start, end))
    return matches
