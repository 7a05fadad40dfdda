from clickatell_client.diagnostic import (
    GATEWAY_ERRORS,
    MESSAGE_STATUS,
    UNKNOWN_ERROR,
    get_error,
    get_gateway_error,
)


def test_known_status_codes():
    assert get_error("001").startswith("Message unknown")
    assert get_error("004").startswith("Received by recipient")
    assert get_error("012").startswith("Out of credit")


def test_unknown_status_code_returns_sentinel():
    assert get_error("013") == UNKNOWN_ERROR
    assert get_error("") == UNKNOWN_ERROR


def test_leading_zeros_are_significant():
    assert get_error("1") == UNKNOWN_ERROR


def test_gateway_error_codes():
    assert get_gateway_error("001") == "Authentication failed"
    assert get_gateway_error("114") == "Cannot route message"
    assert get_gateway_error("999") == UNKNOWN_ERROR


def test_tables_use_three_digit_codes():
    for code in list(MESSAGE_STATUS) + list(GATEWAY_ERRORS):
        assert len(code) == 3 and code.isdigit()
