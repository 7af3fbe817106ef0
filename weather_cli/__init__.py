"""
weather_cli package – a tiny CLI tool that prints the current weather
as a block of ASCII art.

Public entry points
-------------------
* `weather_cli.main` – the command-line driver (`python -m weather_cli`)
* Settings: `Config`, `ConfigStore`
* Service classes:
    - `Geocoder`
    - `WeatherClient`
* Presentation: `render`
* Errors: `WeatherCLIError` and its subclasses

    >>> from weather_cli import ConfigStore, WeatherClient, render
"""

__all__ = [
    "VERSION",
    # Settings
    "Config",
    "ConfigStore",
    # Services
    "Geocoder",
    "WeatherClient",
    "WeatherReport",
    # Presentation
    "render",
    # Errors
    "WeatherCLIError",
    "ParseError",
    "NetworkError",
    "FieldMissingError",
]

VERSION = "0.1.0"


from .errors import (  # noqa: F401,E402
    FieldMissingError,
    NetworkError,
    ParseError,
    WeatherCLIError,
)
from .store import Config, ConfigStore  # noqa: F401,E402
from .services import Geocoder, WeatherClient, WeatherReport  # noqa: F401,E402
from .presenter import render  # noqa: F401,E402
