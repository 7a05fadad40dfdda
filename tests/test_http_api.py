import pytest

from clickatell_client.config import ClickatellConfig
from clickatell_client.diagnostic import get_error
from clickatell_client.exceptions import MalformedResponseError
from clickatell_client.http_api import HttpApi
from clickatell_client.transport import Transport


class FakeTransport(Transport):
    """Returns a canned body and records every call"""

    def __init__(self, body: str):
        self.body = body
        self.calls = []

    def call(self, endpoint, parameters):
        self.calls.append((endpoint, dict(parameters)))
        return self.body


def make_api(body: str, **config_overrides):
    data = {"user": "user", "password": "secret", "api_id": "3412345"}
    data.update(config_overrides)
    transport = FakeTransport(body)
    return HttpApi(ClickatellConfig(data=data), transport=transport), transport


def test_send_message():
    api, transport = make_api("ID: 1234567890")

    result = api.send_message([12345], "My Message", "", True, {"delivery_time": 10}).to_dict()

    assert result["result"]["response"][0]["apiMsgId"] == "1234567890"
    assert result["result"]["response"][0]["error"] is False
    assert len(transport.calls) == 1

    endpoint, params = transport.calls[0]
    assert endpoint == "http/sendmsg"
    assert params["to"] == "12345"
    assert params["text"] == "My Message"
    assert params["callback"] == "7"
    assert params["delivery_time"] == "10"
    assert params["user"] == "user"
    assert params["password"] == "secret"
    assert params["api_id"] == "3412345"
    assert "from" not in params


def test_send_message_multi():
    to = [12345, 123456]
    api, transport = make_api("ID: 1234567890 To:12345\nID:1234567890 To:123456")

    result = api.send_message(to, "My Message").to_dict()
    response = result["result"]["response"]

    assert transport.calls[0][1]["to"] == "12345,123456"
    assert response[0]["apiMsgId"] == "1234567890"
    assert response[0]["to"] == "12345"
    assert response[0]["error"] is False
    assert response[1]["apiMsgId"] == "1234567890"
    assert response[1]["to"] == "123456"
    assert response[1]["error"] is False


def test_send_message_uses_configured_sender():
    api, transport = make_api("ID: abc", **{"from": "MyCompany"})

    api.send_message(["27721234567"], "Hello", callback=False)

    params = transport.calls[0][1]
    assert params["from"] == "MyCompany"
    assert params["mo"] == "1"
    assert "callback" not in params


def test_send_message_requires_recipients():
    api, transport = make_api("ID: abc")

    with pytest.raises(ValueError):
        api.send_message([], "Hello")
    assert transport.calls == []


def test_send_message_gateway_error_envelope():
    api, _ = make_api("ERR: 001, Authentication failed")

    envelope = api.send_message(["27721234567"], "Hello")

    assert envelope.ok is False
    assert envelope.to_dict() == {
        "result": {"error": {"code": "001", "message": "Authentication failed"}}
    }


def test_get_balance():
    api, transport = make_api("Credit: 5")

    result = api.get_balance().to_dict()

    assert transport.calls[0][0] == "http/getbalance"
    assert result["result"]["response"]["balance"] == 5.0
    assert isinstance(result["result"]["response"]["balance"], float)


def test_get_balance_malformed_response_propagates():
    api, _ = make_api("<html>Service unavailable</html>")

    with pytest.raises(MalformedResponseError):
        api.get_balance()


def test_query_message():
    api, transport = make_api("ID: 1234567890 Status: 001")

    result = api.query_message("1234567890").to_dict()
    response = result["result"]["response"]

    assert transport.calls[0] == (
        "http/querymsg",
        {"user": "user", "password": "secret", "api_id": "3412345", "apimsgid": "1234567890"},
    )
    assert response["apiMsgId"] == "1234567890"
    assert response["status"] == "001"
    assert response["description"] == get_error("001")


def test_route_coverage():
    api, transport = make_api("OK: My Message Charge: 1")

    result = api.route_coverage("27721234567").to_dict()

    assert transport.calls[0][0] == "utils/routeCoverage"
    assert transport.calls[0][1]["msisdn"] == "27721234567"
    assert result["result"]["response"]["charge"] == 1.0
    assert result["result"]["response"]["description"] == "My Message"


def test_message_charge():
    api, transport = make_api("apiMsgId: 1234567890 charge: 1 status: 001")

    result = api.get_message_charge("1234567890").to_dict()
    response = result["result"]["response"]

    assert transport.calls[0][0] == "http/getmsgcharge"
    assert response["apiMsgId"] == "1234567890"
    assert response["status"] == "001"
    assert response["description"] == get_error("001")
    assert response["charge"] == 1.0


def test_stop_message():
    api, transport = make_api("ID: 1234567890 Status: 006")

    envelope = api.stop_message("1234567890")

    assert transport.calls[0][0] == "http/delmsg"
    assert envelope.response.status == "006"


def test_gateway_errors_are_wrapped_for_every_operation():
    api, _ = make_api("ERR: 002, Unknown username or password")

    envelopes = [
        api.get_balance(),
        api.query_message("abc"),
        api.route_coverage("27721234567"),
        api.get_message_charge("abc"),
        api.stop_message("abc"),
    ]

    for envelope in envelopes:
        assert envelope.to_dict()["result"]["error"]["code"] == "002"
