"""Resolve series queries into observations, official or simulated."""

import asyncio
import logging

from labor_series.config import Settings
from labor_series.data.catalog import (
    TOTAL,
    PRICE_INDEX_SERIES_ID,
    categories_for,
    series_id_for,
)
from labor_series.data.ine_fetcher import IneFetcher
from labor_series.indicators.aggregation import to_annual
from labor_series.indicators.derivation import derive_from_total
from labor_series.indicators.events import events_in_range
from labor_series.indicators.inflation import InflationAdjuster
from labor_series.indicators.synthetic import age_bias_for, simulate
from labor_series.models import (
    Dimension,
    FetchedSeries,
    Frequency,
    Indicator,
    Observation,
    QueryResult,
    SeriesQuery,
    ValueBasis,
)


logger = logging.getLogger(__name__)


def observations_from_series(
    series: FetchedSeries, category: str, prices: InflationAdjuster | None = None
) -> list[Observation]:
    """Quarterly entries of an official series, deflated by ``prices`` if given."""
    prices = prices or InflationAdjuster.identity()
    return [
        Observation(
            period=point.period,
            year=point.year,
            category=category,
            value=round(prices.adjust(point.value, point.year), 2),
        )
        for point in series.quarterly_points
    ]


class SeriesResolver:
    """
    Builds a result for a query, falling back tier by tier.

    1. Official category series, when one is mapped and reachable
    2. Category estimate derived from the official Total series
    3. Synthetic model, when the Total series is unreachable

    The Total series alone decides whether the result is tagged official or
    simulated. Every fetch is attempted once; there are no retries.
    """

    def __init__(
        self, settings: Settings | None = None, fetcher: IneFetcher | None = None
    ) -> None:
        self.settings = settings or Settings()
        self.settings.validate()
        self.fetcher = fetcher or IneFetcher(self.settings)

    async def close(self) -> None:
        await self.fetcher.close()

    async def __aenter__(self) -> "SeriesResolver":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    def selected_categories(self, query: SeriesQuery) -> list[str]:
        """Catalog categories for the query, narrowed to its selection."""
        catalog = categories_for(query.dimension)
        if query.categories is None:
            return catalog

        wanted = set(query.categories)
        unknown = wanted.difference(catalog)
        if unknown:
            logger.debug(f"Ignoring categories not in {query.dimension.value}: {sorted(unknown)}")
        return [c for c in catalog if c in wanted]

    async def resolve(self, query: SeriesQuery) -> QueryResult:
        categories = self.selected_categories(query)

        total = await self.fetcher.fetch_series(series_id_for(query.indicator, TOTAL))
        official = isinstance(total, FetchedSeries) and bool(total.quarterly_points)
        if isinstance(total, FetchedSeries) and not official:
            logger.warning(f"Total series {total.series_id} has no quarterly entries, simulating")
        source = "official" if official else "simulated"
        logger.info(
            f"{query.indicator.value} by {query.dimension.value}: "
            f"{len(categories)} categories, {source} data"
        )

        if official:
            prices = await self._price_adjuster(query)
            slots = await asyncio.gather(
                *(
                    self._official_category(query, category, total, prices)
                    for category in categories
                )
            )
        else:
            slots = [self._simulated_category(query, category) for category in categories]

        observations = [
            o for slot in slots for o in slot if query.includes_year(o.year)
        ]

        if query.frequency is Frequency.ANNUAL:
            observations = to_annual(observations)

        observations.sort(key=lambda o: o.period)
        return QueryResult(observations=tuple(observations), source=source, query=query)

    async def _price_adjuster(self, query: SeriesQuery) -> InflationAdjuster:
        if not query.wants_constant_wages:
            return InflationAdjuster.identity()

        index = await self.fetcher.fetch_series(PRICE_INDEX_SERIES_ID)
        if isinstance(index, FetchedSeries):
            return InflationAdjuster.from_index(index)

        logger.warning("Price index unavailable, constant wages left at nominal values")
        return InflationAdjuster.identity()

    async def _official_category(
        self,
        query: SeriesQuery,
        category: str,
        total: FetchedSeries,
        prices: InflationAdjuster,
    ) -> list[Observation]:
        if category == TOTAL:
            return observations_from_series(total, category, prices)

        series_id = series_id_for(query.indicator, category, query.dimension)
        if series_id is not None:
            series = await self.fetcher.fetch_series(series_id)
            if isinstance(series, FetchedSeries) and series.quarterly_points:
                return observations_from_series(series, category, prices)
            logger.info(f"  {category}: series {series_id} unavailable, deriving from Total")

        return derive_from_total(total, query.indicator, category, prices)

    def _simulated_category(self, query: SeriesQuery, category: str) -> list[Observation]:
        age_bias = age_bias_for(query.indicator, query.min_age, query.max_age)
        prices = InflationAdjuster.simulated(
            rate=self.settings.simulated_inflation_rate,
            reference_year=self.settings.reference_year,
        )
        return [
            Observation(
                period=f"{year}Q{quarter}",
                year=year,
                category=category,
                value=simulate(
                    query.indicator,
                    category,
                    year,
                    quarter,
                    query.value_basis,
                    age_bias=age_bias,
                    prices=prices,
                    reference_year=self.settings.reference_year,
                ),
            )
            for year in query.years
            for quarter in range(1, 5)
        ]


async def resolve(query: SeriesQuery, settings: Settings | None = None) -> QueryResult:
    """Resolve one query with a short-lived resolver."""
    async with SeriesResolver(settings) as resolver:
        return await resolver.resolve(query)


def resolve_sync(query: SeriesQuery, settings: Settings | None = None) -> QueryResult:
    """Blocking wrapper around ``resolve`` for scripts."""
    return asyncio.run(resolve(query, settings))


INDICATOR_CHOICES = {
    "unemployment": Indicator.UNEMPLOYMENT_RATE,
    "participation": Indicator.LABOR_FORCE_RATE,
    "employment": Indicator.EMPLOYMENT_RATE,
    "wage": Indicator.MONTHLY_WAGE,
}

DIMENSION_CHOICES = {
    "region": Dimension.REGION,
    "education": Dimension.EDUCATION,
    "age": Dimension.AGE_GROUP,
    "gender": Dimension.GENDER,
}


def main() -> None:
    """CLI entry point for resolving a series."""
    import argparse
    import json
    import sys

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Spanish labor market series")
    parser.add_argument("--indicator", choices=INDICATOR_CHOICES, default="unemployment")
    parser.add_argument("--dimension", choices=DIMENSION_CHOICES, default="region")
    parser.add_argument("--frequency", choices=["quarterly", "annual"], default="quarterly")
    parser.add_argument("--start", type=int, default=2005, help="First year (inclusive)")
    parser.add_argument("--end", type=int, default=2024, help="Last year (inclusive)")
    parser.add_argument("--min-age", type=int, default=16)
    parser.add_argument("--max-age", type=int, default=64)
    parser.add_argument(
        "--category",
        action="append",
        help="Limit to a category (repeatable)",
    )
    parser.add_argument(
        "--constant",
        action="store_true",
        help="Wages in constant reference-year prices",
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Skip the statistics service and simulate",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON records")
    args = parser.parse_args()

    query = SeriesQuery(
        indicator=INDICATOR_CHOICES[args.indicator],
        dimension=DIMENSION_CHOICES[args.dimension],
        frequency=Frequency.ANNUAL if args.frequency == "annual" else Frequency.QUARTERLY,
        start_year=args.start,
        end_year=args.end,
        min_age=args.min_age,
        max_age=args.max_age,
        value_basis=ValueBasis.CONSTANT if args.constant else ValueBasis.NOMINAL,
        categories=tuple(args.category) if args.category else None,
    )

    try:
        settings = Settings()
        if args.offline:
            settings.offline = True
        result = resolve_sync(query, settings)
    except ValueError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)

    events = events_in_range(result.periods)

    if args.json:
        payload = {
            "source": result.source,
            "observations": result.to_records(),
            "events": [
                {"name": event.name, "start": start, "end": end}
                for event, start, end in events
            ],
        }
        print(json.dumps(payload, indent=2))
        return

    print(f"\n{query.indicator.value} by {query.dimension.value} ({result.source} data)")
    print("-" * 70)
    if not result.observations:
        print("No observations in range.")
        return
    print(result.pivot().to_string())

    if events:
        print("\nLabor market episodes in range:")
    for event, start, end in events:
        print(f"  {event.name}: {start} to {end}")


if __name__ == "__main__":
    main()
