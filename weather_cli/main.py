import argparse
import sys
from typing import List, Optional

from . import VERSION
from .config import CONFIG_PATH, Colours, setup_logging
from .errors import WeatherCLIError
from .presenter import render
from .services.geocoder import Geocoder
from .services.openweather import WeatherClient
from .setup_flow import run_setup
from .store import ConfigStore


def error(message: str) -> None:
    """Print a red error line to stderr."""
    print(f"{Colours.RED}Error: {message}{Colours.RESET}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ascii-weather",
        description="Show the current weather as a small ASCII-art report.",
    )
    parser.add_argument("-s", "--setup", action="store_true", help="run interactive setup and exit")
    parser.add_argument("-z", "--zip", metavar="ZIP", help="use this ZIP code instead of the stored location")
    parser.add_argument("--config", default=CONFIG_PATH, metavar="PATH", help="config file (default: %(default)s)")
    parser.add_argument("--strict", action="store_true", help="exit non-zero when a lookup fails")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    geocoder = Geocoder()
    weather_client = WeatherClient()

    # ------------------------------------------------------------------
    # 1️⃣ Load settings (created with defaults on first run)
    # ------------------------------------------------------------------
    store = ConfigStore(args.config)
    if store.exists():
        print("Config file found, loading...")
    else:
        print("Config file not found, creating default...")
    config = store.load_or_create()
    print(f"Loaded config: {config}")

    # ------------------------------------------------------------------
    # 2️⃣ Interactive setup
    # ------------------------------------------------------------------
    if args.setup:
        print("Starting setup. Press Enter to keep a value.")
        run_setup(config, geocoder)
        store.save(config)
        print(f"{Colours.GREEN}Saved settings to {store.path}{Colours.RESET}")
        return 0

    if not config.api_key:
        print("No API key configured. Run with --setup to add one.")
        return 0

    # ------------------------------------------------------------------
    # 3️⃣ Where are we looking? (a --zip override is not persisted)
    # ------------------------------------------------------------------
    lat, lon = config.latitude, config.longitude
    if args.zip:
        try:
            lat, lon = geocoder.resolve(args.zip, config.api_key)
        except WeatherCLIError as exc:
            error(f"could not resolve ZIP {args.zip}: {exc}")
            if args.strict:
                return 1
            print(f"Using stored coordinates {lat:.4f}, {lon:.4f}")

    # ------------------------------------------------------------------
    # 4️⃣ Fetch and draw
    # ------------------------------------------------------------------
    try:
        report = weather_client.fetch(config.api_key, lat, lon, config.units)
    except WeatherCLIError as exc:
        error(f"could not fetch weather: {exc}")
        return 1 if args.strict else 0

    print(render(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
