"""
Transport for the Clickatell HTTP API.

The parser never talks to the network; an API object hands it whatever text
a Transport returns. HttpTransport is the real implementation, and tests
substitute their own Transport.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

import requests

from .exceptions import TransportError

logger = logging.getLogger(__name__)

API_HOST = "http://api.clickatell.com"


def get_url(path: str) -> str:
    """
    Build the full URL for an API path.

    Args:
        path: API path such as "http/sendmsg" or "/http/sendmsg"

    Returns:
        str: Absolute URL on the API host
    """
    return f"{API_HOST}/{path.lstrip('/')}"


class Transport(ABC):
    """Performs one API call and returns the raw response body"""

    @abstractmethod
    def call(self, endpoint: str, parameters: Dict[str, str]) -> str:
        ...


class HttpTransport(Transport):
    """Transport that issues GET requests with requests"""

    def __init__(self, timeout: float = 30, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self._session = session

    def call(self, endpoint: str, parameters: Dict[str, str]) -> str:
        url = get_url(endpoint)
        # Parameters carry credentials, so only the names are logged
        logger.debug(f"Calling {url} with parameters {sorted(parameters)}")

        get = self._session.get if self._session is not None else requests.get
        try:
            response = get(url, params=parameters, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise TransportError(f"Failed to call {endpoint}: {e}")

        # The gateway sends UTF-8 without declaring a charset
        response.encoding = "utf-8"
        logger.debug(f"Response from {url}: {response.text!r}")
        return response.text
