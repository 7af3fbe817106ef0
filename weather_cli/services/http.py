import logging

import requests

from ..config import USER_AGENT
from ..errors import NetworkError, ParseError

logger = logging.getLogger(__name__)


def get_json(url: str, params: dict):
    """GET ``url`` and return the decoded JSON body."""
    try:
        resp = requests.get(url, params=params, headers=USER_AGENT)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise NetworkError(f"request to {url} failed: {exc}") from exc

    try:
        data = resp.json()
    except ValueError as exc:
        raise ParseError(f"response from {url} is not valid JSON") from exc

    logger.debug("GET %s -> %s", url, data)
    return data
