"""
Exceptions for the Clickatell client.

Parsing problems and network problems raise; gateway ``ERR:`` replies are
raised by the parser and turned into error envelopes by the result wrapper.
"""

from typing import Optional


class ClickatellError(Exception):
    """Base exception for all Clickatell client errors."""
    pass


class MalformedResponseError(ClickatellError):
    """Raised when a gateway response is missing a required marker."""

    def __init__(self, message: str, raw: str = ""):
        super().__init__(message)
        self.raw = raw


class GatewayError(ClickatellError):
    """Raised when the gateway answers with an ``ERR:`` line."""

    def __init__(self, code: Optional[str], message: str):
        super().__init__(f"{code}: {message}" if code else message)
        self.code = code
        self.message = message


class TransportError(ClickatellError):
    """Raised when the HTTP call to the gateway fails."""
    pass


class ConfigError(ClickatellError, ValueError):
    """Raised when the client configuration is invalid."""
    pass
