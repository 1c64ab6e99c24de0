"""Configuration settings for the labor series engine."""

from dataclasses import dataclass, field
import os

from dotenv import load_dotenv


load_dotenv()


DEFAULT_REFERENCE_YEAR = 2024
DEFAULT_INFLATION_RATE = 0.028  # simulated annual CPI growth

# Working-age window the age bias is neutral for
DEFAULT_MIN_AGE = 16
DEFAULT_MAX_AGE = 64


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes")


@dataclass
class Settings:
    """Application settings."""

    ine_base_url: str = field(
        default_factory=lambda: os.getenv(
            "INE_BASE_URL", "https://servicios.ine.es/wapi/v1/json/es/serie"
        )
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.getenv("INE_TIMEOUT", "3.0"))
    )
    last_n: int = field(default_factory=lambda: int(os.getenv("INE_LAST_N", "100")))
    reference_year: int = field(
        default_factory=lambda: int(
            os.getenv("REFERENCE_YEAR", str(DEFAULT_REFERENCE_YEAR))
        )
    )
    simulated_inflation_rate: float = field(
        default_factory=lambda: float(
            os.getenv("SIMULATED_INFLATION_RATE", str(DEFAULT_INFLATION_RATE))
        )
    )
    offline: bool = field(default_factory=lambda: _env_flag("LABOR_SERIES_OFFLINE"))

    def __post_init__(self) -> None:
        self.ine_base_url = self.ine_base_url.rstrip("/")

    def validate(self) -> None:
        """Validate settings."""
        if self.request_timeout <= 0:
            raise ValueError(
                f"INE_TIMEOUT must be positive, got {self.request_timeout}"
            )
        if self.last_n <= 0:
            raise ValueError(f"INE_LAST_N must be positive, got {self.last_n}")
        if self.simulated_inflation_rate < 0:
            raise ValueError(
                "SIMULATED_INFLATION_RATE cannot be negative, "
                f"got {self.simulated_inflation_rate}"
            )
