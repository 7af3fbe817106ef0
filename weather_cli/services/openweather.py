import logging
from dataclasses import dataclass
from numbers import Real

from ..config import OPENWEATHER_BASE_URL
from .http import get_json

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"


@dataclass
class WeatherReport:
    city: str
    current_temp: float
    temp_max: float
    # read from weather[0], not from "main" – see DESIGN.md
    temp_min: float
    wind_speed: float
    condition_label: str


def _dig(data, *path):
    """Walk nested dicts/lists; None as soon as a step is missing."""
    for step in path:
        try:
            data = data[step]
        except (KeyError, IndexError, TypeError):
            return None
    return data


def _as_float(value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        return 0.0
    return float(value)


def _as_str(value) -> str:
    return value if isinstance(value, str) else UNKNOWN


class WeatherClient:
    """Wraps the OpenWeatherMap current-weather endpoint."""

    def __init__(self, base_url: str = OPENWEATHER_BASE_URL):
        self.base_url = base_url.rstrip("/")

    def fetch_raw(self, api_key: str, latitude: float, longitude: float, units: str) -> dict:
        logger.info("Getting current conditions for %s, %s...", latitude, longitude)
        return get_json(
            f"{self.base_url}/weather",
            params={"lat": latitude, "lon": longitude, "appid": api_key, "units": units},
        )

    @staticmethod
    def extract(data) -> WeatherReport:
        """
        Pull the displayed fields out of a raw payload.

        Missing or mistyped fields become 0.0 (numbers) or "Unknown"
        (strings); extraction itself never fails.
        """
        return WeatherReport(
            city=_as_str(_dig(data, "name")),
            current_temp=_as_float(_dig(data, "main", "temp")),
            temp_max=_as_float(_dig(data, "main", "temp_max")),
            temp_min=_as_float(_dig(data, "weather", 0, "temp_min")),
            wind_speed=_as_float(_dig(data, "wind", "speed")),
            condition_label=_as_str(_dig(data, "weather", 0, "main")),
        )

    def fetch(self, api_key: str, latitude: float, longitude: float, units: str) -> WeatherReport:
        """Fetch and extract in one go; NetworkError/ParseError propagate."""
        return self.extract(self.fetch_raw(api_key, latitude, longitude, units))
