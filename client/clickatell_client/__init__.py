"""
Clickatell Client

A Python client library for the Clickatell HTTP SMS API.
"""

from .config import ClickatellConfig
from .diagnostic import UNKNOWN_ERROR, get_error, get_gateway_error
from .exceptions import (
    ClickatellError,
    ConfigError,
    GatewayError,
    MalformedResponseError,
    TransportError,
)
from .http_api import HttpApi
from .results import (
    BalanceResult,
    GatewayErrorResult,
    MessageChargeResult,
    QueryResult,
    RecipientResult,
    ResultEnvelope,
    RouteCoverageResult,
)
from .transport import API_HOST, HttpTransport, Transport, get_url

__all__ = [
    'ClickatellConfig',
    'HttpApi',
    'Transport',
    'HttpTransport',
    'get_url',
    'API_HOST',
    'get_error',
    'get_gateway_error',
    'UNKNOWN_ERROR',
    'ResultEnvelope',
    'RecipientResult',
    'BalanceResult',
    'QueryResult',
    'RouteCoverageResult',
    'MessageChargeResult',
    'GatewayErrorResult',
    'ClickatellError',
    'MalformedResponseError',
    'GatewayError',
    'TransportError',
    'ConfigError',
]

__version__ = "0.1.0"
