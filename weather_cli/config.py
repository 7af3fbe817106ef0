"""
Static settings shared by the whole package.

Nothing here touches the filesystem or the network; the user's own
settings (API key, coordinates, units) live in ``config.yaml`` and are
handled by :mod:`weather_cli.store`.
"""

import logging
import sys

# ----------------------------------------------------------------------
# Files & endpoints
# ----------------------------------------------------------------------
CONFIG_PATH = "config.yaml"

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
USER_AGENT = {"User-Agent": "ascii-weather/0.1"}

# ----------------------------------------------------------------------
# Unit systems understood by OpenWeatherMap ("standard" is Kelvin)
# ----------------------------------------------------------------------
DEFAULT_UNITS = "imperial"
KNOWN_UNITS = ("imperial", "metric", "standard")


class Colours:
    """ANSI escape sequences for terminal output."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    RESET = "\033[0m"


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-15s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger once; DEBUG when ``verbose`` else WARNING."""
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
        logger.addHandler(handler)

    # requests logs every connection at DEBUG through urllib3
    logging.getLogger("urllib3").setLevel(logging.WARNING)
