"""Shared fixtures: a fake INE service behind httpx.MockTransport."""

import asyncio

import httpx
import pytest

from labor_series.config import Settings
from labor_series.data import IneFetcher


BASE_URL = "https://ine.test/wapi/v1/json/es/serie"


def quarterly_payload(values_by_year: dict[int, list[float]]) -> dict:
    """INE-shaped body, newest entry first like the real service."""
    data = []
    for year, values in values_by_year.items():
        for quarter, value in enumerate(values, start=1):
            data.append(
                {"Anyo": year, "Valor": value, "NombrePeriodo": f"Trimestre {quarter}"}
            )
    data.sort(key=lambda d: (d["Anyo"], d["NombrePeriodo"]), reverse=True)
    return {"Nombre": "test series", "COD": "TEST", "Data": data}


def flat_index_payload(years: range, value: float = 100.0) -> dict:
    months = ["Enero", "Abril", "Julio", "Octubre"]
    return {
        "Data": [
            {"Anyo": year, "Valor": value, "NombrePeriodo": month}
            for year in years
            for month in months
        ]
    }


class FakeIne:
    """
    Routes series IDs to canned responses.

    A route value can be a dict (JSON body), an int (status code) or an
    exception class to raise. Unknown IDs answer 404. IDs listed in
    ``delays`` wait that many seconds before answering.
    """

    def __init__(
        self, routes: dict | None = None, delays: dict[str, float] | None = None
    ) -> None:
        self.routes = dict(routes or {})
        self.delays = dict(delays or {})
        self.requests: list[httpx.Request] = []

    @property
    def requested_ids(self) -> list[str]:
        return [r.url.path.rsplit("/", 1)[-1] for r in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        series_id = request.url.path.rsplit("/", 1)[-1]
        route = self.routes.get(series_id, 404)

        if isinstance(route, type) and issubclass(route, Exception):
            raise route("simulated failure", request=request)
        if isinstance(route, int):
            return httpx.Response(route, json={"error": "nope"})
        if isinstance(route, (bytes, str)):
            return httpx.Response(200, content=route)
        return httpx.Response(200, json=route)

    async def async_handler(self, request: httpx.Request) -> httpx.Response:
        delay = self.delays.get(request.url.path.rsplit("/", 1)[-1])
        if delay:
            await asyncio.sleep(delay)
        return self.handler(request)

    def fetcher(self, settings: Settings) -> IneFetcher:
        client = httpx.AsyncClient(transport=httpx.MockTransport(self.async_handler))
        return IneFetcher(settings, client=client)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        ine_base_url=BASE_URL,
        request_timeout=1.0,
        last_n=100,
        reference_year=2024,
        simulated_inflation_rate=0.028,
        offline=False,
    )


@pytest.fixture
def fake_ine() -> FakeIne:
    return FakeIne()
