import logging
from numbers import Real
from typing import Tuple

from ..config import OPENWEATHER_BASE_URL
from ..errors import FieldMissingError
from .http import get_json

logger = logging.getLogger(__name__)


class Geocoder:
    """Resolve a ZIP code to (lat, lon) through OpenWeatherMap."""

    def __init__(self, base_url: str = OPENWEATHER_BASE_URL):
        self.base_url = base_url.rstrip("/")

    def resolve(self, zip_code: str, api_key: str) -> Tuple[float, float]:
        """Return (lat, lon) for ``zip_code`` using the weather endpoint."""
        logger.info("Resolving lat/long for zip %s...", zip_code)
        data = get_json(
            f"{self.base_url}/weather",
            params={"zip": zip_code, "appid": api_key},
        )
        coord = data.get("coord") if isinstance(data, dict) else None
        if not isinstance(coord, dict):
            raise FieldMissingError("response has no 'coord' object")
        return self._number(coord, "lat"), self._number(coord, "lon")

    @staticmethod
    def _number(coord: dict, key: str) -> float:
        value = coord.get(key)
        if isinstance(value, bool) or not isinstance(value, Real):
            raise FieldMissingError(f"response field 'coord.{key}' is missing or not numeric")
        return float(value)
