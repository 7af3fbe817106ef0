"""
services package – wrappers around the OpenWeatherMap API.

    from weather_cli.services import Geocoder, WeatherClient
"""

from .geocoder    import Geocoder                      # noqa: F401
from .openweather import WeatherClient, WeatherReport  # noqa: F401

__all__ = [
    "Geocoder",
    "WeatherClient",
    "WeatherReport",
]
