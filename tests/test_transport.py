from unittest.mock import MagicMock, patch

import pytest
import requests

from clickatell_client.exceptions import TransportError
from clickatell_client.transport import HttpTransport, get_url


@pytest.mark.parametrize("path, expected", [
    ("http/sendmsg", "http://api.clickatell.com/http/sendmsg"),
    ("/http/sendmsg", "http://api.clickatell.com/http/sendmsg"),
    ("http/getbalance", "http://api.clickatell.com/http/getbalance"),
    ("http/getmsgcharge", "http://api.clickatell.com/http/getmsgcharge"),
])
def test_get_url(path, expected):
    assert get_url(path) == expected


def test_call_returns_response_text():
    mock_response = MagicMock()
    mock_response.text = "Credit: 5"
    mock_response.raise_for_status = MagicMock()

    with patch("clickatell_client.transport.requests.get", return_value=mock_response) as mock_get:
        body = HttpTransport(timeout=5).call("http/getbalance", {"user": "u"})

    assert body == "Credit: 5"
    mock_get.assert_called_once_with(
        "http://api.clickatell.com/http/getbalance", params={"user": "u"}, timeout=5
    )


def test_call_uses_session_when_given():
    session = MagicMock()
    session.get.return_value.text = "ID: abc"

    body = HttpTransport(session=session).call("/http/sendmsg", {})

    assert body == "ID: abc"
    session.get.assert_called_once_with(
        "http://api.clickatell.com/http/sendmsg", params={}, timeout=30
    )


def test_call_wraps_request_errors():
    with patch(
        "clickatell_client.transport.requests.get",
        side_effect=requests.exceptions.ConnectionError("connection refused"),
    ):
        with pytest.raises(TransportError) as excinfo:
            HttpTransport().call("http/getbalance", {})

    assert "connection refused" in str(excinfo.value)


def test_call_wraps_http_status_errors():
    mock_response = MagicMock()
    mock_response.raise_for_status.side_effect = requests.exceptions.HTTPError("500 Server Error")

    with patch("clickatell_client.transport.requests.get", return_value=mock_response):
        with pytest.raises(TransportError):
            HttpTransport().call("http/getbalance", {})


def test_call_decodes_body_as_utf8():
    response = requests.Response()
    response.status_code = 200
    response.headers["Content-Type"] = "text/plain"
    response._content = "OK: Couverture réseau Charge: 1".encode("utf-8")

    with patch("clickatell_client.transport.requests.get", return_value=response):
        body = HttpTransport().call("utils/routeCoverage", {})

    assert body == "OK: Couverture réseau Charge: 1"
