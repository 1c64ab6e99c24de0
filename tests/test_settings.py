import pytest

from labor_series.config import Settings


def test_defaults(monkeypatch):
    for name in ("INE_BASE_URL", "INE_TIMEOUT", "INE_LAST_N", "LABOR_SERIES_OFFLINE"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.ine_base_url == "https://servicios.ine.es/wapi/v1/json/es/serie"
    assert settings.request_timeout == 3.0
    assert settings.last_n == 100
    assert settings.offline is False
    settings.validate()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("INE_BASE_URL", "http://localhost:8080/serie/")
    monkeypatch.setenv("INE_TIMEOUT", "1.5")
    monkeypatch.setenv("LABOR_SERIES_OFFLINE", "true")

    settings = Settings()

    assert settings.ine_base_url == "http://localhost:8080/serie"
    assert settings.request_timeout == 1.5
    assert settings.offline is True


@pytest.mark.parametrize(
    "field, value",
    [("request_timeout", 0), ("last_n", -1), ("simulated_inflation_rate", -0.01)],
)
def test_validate_rejects_bad_values(field, value):
    settings = Settings()
    setattr(settings, field, value)

    with pytest.raises(ValueError):
        settings.validate()
