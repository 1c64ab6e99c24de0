import pytest

from labor_series.data.ine_fetcher import parse_payload
from labor_series.indicators.inflation import InflationAdjuster
from labor_series.models import FetchedSeries, SeriesPoint


def _index(entries):
    return FetchedSeries("50902", tuple(SeriesPoint(y, q, v) for y, q, v in entries))


def test_identity_is_noop():
    adjuster = InflationAdjuster.identity()

    assert adjuster.is_identity
    assert adjuster.ratio(2015) == 1.0
    assert adjuster.adjust(1650.42, 2015) == 1650.42


def test_simulated_mode_compounds_rate():
    adjuster = InflationAdjuster.simulated(rate=0.028, reference_year=2024)

    assert adjuster.ratio(2024) == 1.0
    assert adjuster.adjust(1000.0, 2014) == pytest.approx(1000.0 * 1.028 ** 10)


def test_index_mode_uses_latest_over_year_average():
    adjuster = InflationAdjuster.from_index(
        _index([(2024, None, 115.0), (2020, None, 99.0), (2020, None, 101.0)])
    )

    assert adjuster.ratio(2020) == pytest.approx(115.0 / 100.0)
    assert adjuster.adjust(2000.0, 2020) == pytest.approx(2300.0)


def test_index_mode_latest_uses_quarter_ordering():
    adjuster = InflationAdjuster.from_index(
        _index([(2023, 1, 110.0), (2023, 4, 112.0), (2022, 4, 100.0)])
    )

    assert adjuster.reference_value == 112.0
    assert adjuster.ratio(2022) == pytest.approx(1.12)


def test_index_mode_latest_uses_month_when_listed_oldest_first():
    months = ["Enero", "Febrero", "Marzo", "Octubre", "Noviembre", "Diciembre"]
    payload = {
        "Data": [{"Anyo": 2015, "Valor": 100.0, "NombrePeriodo": "Junio"}]
        + [
            {"Anyo": 2024, "Valor": 110.0 + i, "NombrePeriodo": month}
            for i, month in enumerate(months)
        ]
    }

    adjuster = InflationAdjuster.from_index(parse_payload("50902", payload))

    assert adjuster.reference_year == 2024
    assert adjuster.reference_value == 115.0
    assert adjuster.ratio(2015) == pytest.approx(1.15)


def test_index_mode_latest_month_ignores_listing_order():
    payload = {
        "Data": [
            {"Anyo": 2024, "Valor": 121.0, "NombrePeriodo": "Diciembre"},
            {"Anyo": 2024, "Valor": 118.0, "NombrePeriodo": "Enero"},
        ]
    }
    reversed_payload = {"Data": list(reversed(payload["Data"]))}

    newest_first = InflationAdjuster.from_index(parse_payload("50902", payload))
    oldest_first = InflationAdjuster.from_index(parse_payload("50902", reversed_payload))

    assert newest_first.reference_value == oldest_first.reference_value == 121.0


def test_missing_index_year_is_one_to_one():
    adjuster = InflationAdjuster.from_index(_index([(2024, None, 115.0)]))

    assert adjuster.ratio(1999) == 1.0
    assert adjuster.adjust(1234.5, 1999) == 1234.5


def test_flat_index_reproduces_nominal_values():
    adjuster = InflationAdjuster.from_index(
        _index([(year, None, 100.0) for year in range(2010, 2025)])
    )

    for year in range(2010, 2025):
        assert adjuster.adjust(1500.0 + year / 100, year) == 1500.0 + year / 100
