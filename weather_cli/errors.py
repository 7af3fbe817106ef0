"""Exceptions raised by the config store and the API services."""


class WeatherCLIError(Exception):
    """Base class for every error this package raises on purpose."""


class ParseError(WeatherCLIError):
    """Config file or API response could not be parsed."""


class NetworkError(WeatherCLIError):
    """An HTTP request failed or returned a non-2xx status."""


class FieldMissingError(WeatherCLIError):
    """An expected JSON field is absent or has the wrong type."""
