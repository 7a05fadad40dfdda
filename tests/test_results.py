import pytest

from clickatell_client.exceptions import MalformedResponseError
from clickatell_client.parser import parse_balance
from clickatell_client.results import (
    BalanceResult,
    GatewayErrorResult,
    ResultEnvelope,
    wrap_response,
)


def test_envelope_requires_response_or_error():
    with pytest.raises(ValueError):
        ResultEnvelope()


def test_envelope_rejects_response_and_error_together():
    with pytest.raises(ValueError):
        ResultEnvelope(
            response=BalanceResult(balance=1.0),
            error=GatewayErrorResult(code="001", message="Authentication failed"),
        )


def test_wrap_response_success():
    envelope = wrap_response(parse_balance, "Credit: 3")

    assert envelope.ok is True
    assert envelope.to_dict() == {"result": {"response": {"balance": 3.0}}}


def test_wrap_response_gateway_error():
    envelope = wrap_response(parse_balance, "ERR: 301")

    assert envelope.ok is False
    assert envelope.to_dict()["result"]["error"] == {"code": "301", "message": "No credit left"}


def test_wrap_response_lets_malformed_response_through():
    with pytest.raises(MalformedResponseError):
        wrap_response(parse_balance, "nothing useful")
