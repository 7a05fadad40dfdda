"""
Result types returned by the Clickatell client.

Every API call returns a ResultEnvelope. Its ``to_dict()`` produces the
shape callers consume:

    {"result": {"response": ...}}   on success
    {"result": {"error": {...}}}    when the gateway answered with ERR:
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple, Union

from .exceptions import GatewayError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecipientResult:
    """Send confirmation for one destination number"""
    to: str
    api_msg_id: Optional[str]
    error: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"to": self.to, "apiMsgId": self.api_msg_id, "error": self.error}


@dataclass(frozen=True)
class BalanceResult:
    balance: float

    def to_dict(self) -> Dict[str, Any]:
        return {"balance": self.balance}


@dataclass(frozen=True)
class QueryResult:
    """Status of a previously sent message"""
    api_msg_id: str
    status: str
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "apiMsgId": self.api_msg_id,
            "status": self.status,
            "description": self.description,
        }


@dataclass(frozen=True)
class RouteCoverageResult:
    charge: float
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {"charge": self.charge, "description": self.description}


@dataclass(frozen=True)
class MessageChargeResult:
    api_msg_id: str
    status: str
    description: str
    charge: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "apiMsgId": self.api_msg_id,
            "status": self.status,
            "description": self.description,
            "charge": self.charge,
        }


@dataclass(frozen=True)
class GatewayErrorResult:
    """Error reported by the gateway itself"""
    code: Optional[str]
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message}


SendResult = Tuple[RecipientResult, ...]

Response = Union[
    SendResult,
    BalanceResult,
    QueryResult,
    RouteCoverageResult,
    MessageChargeResult,
]


@dataclass(frozen=True)
class ResultEnvelope:
    """Uniform wrapper around a parsed response or a gateway error"""
    response: Optional[Response] = None
    error: Optional[GatewayErrorResult] = None

    def __post_init__(self):
        if (self.response is None) == (self.error is None):
            raise ValueError("ResultEnvelope needs exactly one of response or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        if self.error is not None:
            return {"result": {"error": self.error.to_dict()}}
        if isinstance(self.response, tuple):
            body: Any = [item.to_dict() for item in self.response]
        else:
            body = self.response.to_dict()
        return {"result": {"response": body}}


def wrap_response(parse: Callable[..., Response], *args) -> ResultEnvelope:
    """
    Run a parser and wrap its outcome in a ResultEnvelope.

    Gateway errors become error envelopes. MalformedResponseError is not
    caught and reaches the caller.

    Args:
        parse: One of the functions in clickatell_client.parser
        *args: Arguments for the parser (raw text, and recipients for sends)

    Returns:
        ResultEnvelope: Success or error envelope
    """
    try:
        response = parse(*args)
    except GatewayError as e:
        logger.warning(f"Gateway returned error {e.code}: {e.message}")
        return ResultEnvelope(error=GatewayErrorResult(code=e.code, message=e.message))
    return ResultEnvelope(response=response)
