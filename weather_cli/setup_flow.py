"""
Interactive setup: walk the user through the editable settings.

Each prompt shows the current value; an empty answer keeps it.
"""

import logging
import sys
from typing import Callable, Optional

from .config import Colours, KNOWN_UNITS
from .errors import WeatherCLIError
from .services.geocoder import Geocoder
from .store import Config

logger = logging.getLogger(__name__)


def keep_or_replace(current: str, raw_input: str) -> str:
    """Return the trimmed input, or ``current`` when the input is blank."""
    value = raw_input.strip()
    return value if value else current


def read_line(label: str, read: Optional[Callable[[str], str]] = None) -> str:
    """Read one answer; end of input counts as a blank line."""
    read = read or input
    try:
        return read(label)
    except EOFError:
        return ""


def prompt(label: str, current: str, read: Optional[Callable[[str], str]] = None) -> str:
    return keep_or_replace(current, read_line(f"{label} [{current}]: ", read))


def run_setup(config: Config, geocoder: Geocoder, read: Optional[Callable[[str], str]] = None) -> Config:
    """
    Update ``config`` in place from user answers and return it.

    A failed ZIP lookup is reported and leaves the coordinates as they
    were; saving is left to the caller.
    """
    config.api_key = prompt("API key", config.api_key, read)
    config.units = prompt(f"Units ({'/'.join(KNOWN_UNITS)})", config.units, read)

    zip_code = keep_or_replace("", read_line("ZIP code (blank to keep current location): ", read))
    if not zip_code:
        return config

    try:
        lat, lon = geocoder.resolve(zip_code, config.api_key)
    except WeatherCLIError as exc:
        logger.info("Geocoding %s failed: %s", zip_code, exc)
        print(f"{Colours.RED}Error: could not resolve ZIP {zip_code}: {exc}{Colours.RESET}", file=sys.stderr)
        return config

    config.latitude, config.longitude = lat, lon
    print(f"Coordinates: {lat:.4f}, {lon:.4f}")
    return config
