"""INE JSON API fetcher.

Single attempt per series with a hard timeout. Every failure is reported as
an ``Unavailable`` value instead of an exception so callers can pick a
fallback.
"""

import asyncio
import logging
import re

import httpx

from labor_series.config import Settings
from labor_series.models import FetchedSeries, FetchOutcome, SeriesPoint, Unavailable


logger = logging.getLogger(__name__)

# "Trimestre 2", "T2", "2 Trimestre", "Q2"
_QUARTER_PATTERNS = (
    re.compile(r"trimestre\s*([1-4])\b", re.IGNORECASE),
    re.compile(r"\b([1-4])\s*(?:º\s*)?trimestre", re.IGNORECASE),
    re.compile(r"^\s*[TQ]\s*([1-4])\s*$", re.IGNORECASE),
)


def parse_quarter(label: str | None) -> int | None:
    """Extract the quarter number from an INE period label, if any."""
    if not label:
        return None
    for pattern in _QUARTER_PATTERNS:
        match = pattern.search(label)
        if match:
            return int(match.group(1))
    return None


_MONTHS = {
    name: number
    for number, name in enumerate(
        (
            "enero", "febrero", "marzo", "abril", "mayo", "junio", "julio",
            "agosto", "septiembre", "octubre", "noviembre", "diciembre",
        ),
        start=1,
    )
}


def parse_month(label: str | None) -> int | None:
    """Month number for a Spanish month label such as "Diciembre"."""
    words = (label or "").split()
    if not words:
        return None
    return _MONTHS.get(words[0].lower())


def parse_payload(series_id: str, payload: object) -> FetchOutcome:
    """Turn a decoded INE response body into a series."""
    if not isinstance(payload, dict):
        return Unavailable(series_id, "payload is not an object")

    entries = payload.get("Data")
    if not isinstance(entries, list):
        return Unavailable(series_id, "payload has no Data list")

    points = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        year = entry.get("Anyo")
        value = entry.get("Valor")
        # bool is an int subclass and never a valid year or value
        if isinstance(year, bool) or not isinstance(year, int):
            logger.debug(f"  {series_id}: skipping entry without year: {entry}")
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            logger.debug(f"  {series_id}: skipping {year} entry without value")
            continue
        points.append(
            SeriesPoint(
                year=year,
                quarter=parse_quarter(entry.get("NombrePeriodo")),
                value=float(value),
                month=parse_month(entry.get("NombrePeriodo")),
            )
        )

    if not points:
        return Unavailable(series_id, "payload contains no usable observations")

    return FetchedSeries(series_id=series_id, points=tuple(points))


class IneFetcher:
    """Fetches series from the INE statistics service."""

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.settings.request_timeout)
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close HTTP client if this fetcher created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "IneFetcher":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    def series_url(self, series_id: str) -> str:
        return f"{self.settings.ine_base_url}/{series_id}"

    async def fetch_series(self, series_id: str) -> FetchOutcome:
        """
        Fetch one series.

        Args:
            series_id: INE numeric series identifier

        Returns:
            FetchedSeries on success, Unavailable on any failure
        """
        if self.settings.offline:
            return Unavailable(series_id, "offline mode")

        logger.info(f"Fetching INE series {series_id}...")
        try:
            # httpx timeouts cover each phase separately, wait_for bounds the whole call
            response = await asyncio.wait_for(
                self.client.get(
                    self.series_url(series_id),
                    params={"nult": self.settings.last_n},
                    timeout=self.settings.request_timeout,
                ),
                timeout=self.settings.request_timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except (httpx.TimeoutException, asyncio.TimeoutError):
            return self._unavailable(series_id, "timed out")
        except httpx.HTTPStatusError as e:
            return self._unavailable(series_id, f"HTTP {e.response.status_code}")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return self._unavailable(series_id, f"transport error: {e}")
        except ValueError as e:
            return self._unavailable(series_id, f"malformed body: {e}")

        outcome = parse_payload(series_id, payload)
        if isinstance(outcome, Unavailable):
            logger.warning(f"  Series {series_id} unusable: {outcome.reason}")
        else:
            logger.info(f"  Got {len(outcome.points)} observations for {series_id}")
        return outcome

    def _unavailable(self, series_id: str, reason: str) -> Unavailable:
        logger.warning(f"  Series {series_id} unavailable: {reason}")
        return Unavailable(series_id, reason)
