import logging
import os
from dataclasses import asdict, dataclass
from numbers import Real

import yaml

from .config import CONFIG_PATH, DEFAULT_UNITS
from .errors import ParseError

logger = logging.getLogger(__name__)


class ConfigDumper(yaml.SafeDumper):
    """SafeDumper that writes an empty string as "" rather than ''."""


def _represent_str(dumper, value):
    style = '"' if value == "" else None
    return dumper.represent_scalar("tag:yaml.org,2002:str", value, style=style)


ConfigDumper.add_representer(str, _represent_str)


@dataclass
class Config:
    """The persisted user settings – always all four fields."""

    api_key: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    units: str = DEFAULT_UNITS

    @classmethod
    def from_dict(cls, data) -> "Config":
        """Build a Config from a parsed YAML document, rejecting bad shapes."""
        if not isinstance(data, dict):
            raise ParseError("config file must contain a mapping of settings")

        missing = [name for name in ("api_key", "latitude", "longitude", "units") if name not in data]
        if missing:
            raise ParseError(f"config file is missing field(s): {', '.join(missing)}")

        for name in ("api_key", "units"):
            if not isinstance(data[name], str):
                raise ParseError(f"config field '{name}' must be a string")
        for name in ("latitude", "longitude"):
            value = data[name]
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ParseError(f"config field '{name}' must be a number")

        return cls(
            api_key=data["api_key"],
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            units=data["units"],
        )

    def to_dict(self) -> dict:
        return asdict(self)


class ConfigStore:
    """Read, create and overwrite the YAML config file at a single path."""

    def __init__(self, path: str = CONFIG_PATH):
        self.path = path

    def exists(self) -> bool:
        return os.path.exists(self.path)

    # ------------------------------------------------------------------
    # Load (or create on first run)
    # ------------------------------------------------------------------
    def load_or_create(self) -> Config:
        """
        Return the Config stored at ``self.path``.

        When no file exists yet the defaults are written there first, so
        the next run finds a file to edit. A malformed file raises
        :class:`ParseError`; it is never silently replaced.
        """
        if self.exists():
            logger.debug("Reading config from %s", self.path)
            try:
                with open(self.path, "r", encoding="utf-8") as fh:
                    data = yaml.safe_load(fh.read())
            except (UnicodeDecodeError, yaml.YAMLError) as exc:
                raise ParseError(f"could not parse {self.path}: {exc}") from exc
            return Config.from_dict(data)

        logger.info("No config at %s, writing defaults", self.path)
        config = Config()
        self.save(config)
        return config

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------
    def save(self, config: Config) -> None:
        """Overwrite the file with ``config``; OSError propagates."""
        text = yaml.dump(config.to_dict(), Dumper=ConfigDumper, sort_keys=False, default_flow_style=False)
        with open(self.path, "w", encoding="utf-8") as fh:
            fh.write(text)
        logger.debug("Wrote config to %s", self.path)
