"""
Response parsing for the Clickatell HTTP API.

The gateway answers every call with a short plain-text body made of
``Marker: value`` tokens, for example::

    ID: 7b3f0c... To: 27721234567
    Credit: 52.5
    ID: 7b3f0c... Status: 004
    OK: This prefix is currently supported. Charge: 0.8
    apiMsgId: 7b3f0c... charge: 1.0 status: 004
    ERR: 114, Cannot route message

Each parse function turns one body into one result record. They hold no
state and do no I/O, so the same text always gives an equal result.
"""

import logging
import re
from typing import List, Optional, Sequence, Union

from .diagnostic import UNKNOWN_ERROR, get_error, get_gateway_error
from .exceptions import GatewayError, MalformedResponseError
from .results import (
    BalanceResult,
    MessageChargeResult,
    QueryResult,
    RecipientResult,
    RouteCoverageResult,
    SendResult,
)

logger = logging.getLogger(__name__)

# Token markers. A token runs from the marker to the next whitespace.
ID_RE = re.compile(r"\bID:[ \t]*(\S+)")
TO_RE = re.compile(r"\bTo:[ \t]*(\S+)")
STATUS_RE = re.compile(r"\bStatus:[ \t]*(\S+)")
CREDIT_RE = re.compile(r"\bCredit:[ \t]*(\S+)")
COVERAGE_RE = re.compile(r"\bOK:[ \t]*(.*?)[ \t]*\bCharge:[ \t]*(\S+)", re.DOTALL)
ERR_RE = re.compile(r"\bERR:[ \t]*(?:(\d{3})\b,?)?[ \t]*([^\n]*)")
NON_DIGIT_RE = re.compile(r"\D+")

# getmsgcharge uses lower camel case markers
CHARGE_MSG_ID_RE = re.compile(r"\bapiMsgId:[ \t]*(\S+)", re.IGNORECASE)
CHARGE_RE = re.compile(r"\bcharge:[ \t]*(\S+)", re.IGNORECASE)
CHARGE_STATUS_RE = re.compile(r"\bstatus:[ \t]*(\S+)", re.IGNORECASE)


def raise_for_gateway_error(text: str) -> None:
    """
    Raise GatewayError if the text holds an ``ERR:`` line.

    The line may carry a 3-digit code, a message, or both. A bare code is
    described from the gateway error table.

    Args:
        text: Raw response body

    Raises:
        GatewayError: If an ``ERR:`` marker is present
    """
    match = ERR_RE.search(text)
    if match is None:
        return

    code, message = match.group(1), match.group(2).strip()
    if not message:
        message = get_gateway_error(code) if code else UNKNOWN_ERROR
    raise GatewayError(code, message)


def _require(pattern: re.Pattern, text: str, operation: str, marker: str) -> re.Match:
    match = pattern.search(text)
    if match is None:
        raise_for_gateway_error(text)
        logger.error(f"Malformed {operation} response, missing '{marker}': {text!r}")
        raise MalformedResponseError(
            f"Malformed {operation} response: missing '{marker}'", raw=text
        )
    return match


def _to_float(token: str, operation: str, marker: str, text: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise MalformedResponseError(
            f"Malformed {operation} response: '{marker}' is not a number ({token!r})",
            raw=text,
        )


def parse_balance(text: str) -> BalanceResult:
    """Parse a getbalance reply such as ``Credit: 5``."""
    match = _require(CREDIT_RE, text, "balance", "Credit:")
    balance = _to_float(match.group(1), "balance", "Credit:", text)
    logger.debug(f"Parsed balance: {balance}")
    return BalanceResult(balance=balance)


def _parse_status(text: str, operation: str) -> QueryResult:
    api_msg_id = _require(ID_RE, text, operation, "ID:").group(1)
    status = _require(STATUS_RE, text, operation, "Status:").group(1)
    logger.debug(f"Parsed {operation}: id={api_msg_id} status={status}")
    return QueryResult(api_msg_id=api_msg_id, status=status, description=get_error(status))


def parse_query(text: str) -> QueryResult:
    """Parse a querymsg reply such as ``ID: 123 Status: 004``."""
    return _parse_status(text, "query")


def parse_stop_message(text: str) -> QueryResult:
    """Parse a delmsg reply, which has the same shape as a query reply."""
    return _parse_status(text, "stop message")


def parse_route_coverage(text: str) -> RouteCoverageResult:
    """Parse a routeCoverage reply such as ``OK: Supported Charge: 0.8``."""
    match = _require(COVERAGE_RE, text, "route coverage", "OK: ... Charge:")
    description = match.group(1).strip()
    charge = _to_float(match.group(2), "route coverage", "Charge:", text)
    logger.debug(f"Parsed route coverage: charge={charge}")
    return RouteCoverageResult(charge=charge, description=description)


def parse_message_charge(text: str) -> MessageChargeResult:
    """Parse a getmsgcharge reply: ``apiMsgId: 123 charge: 1 status: 004``."""
    api_msg_id = _require(CHARGE_MSG_ID_RE, text, "message charge", "apiMsgId:").group(1)
    charge_token = _require(CHARGE_RE, text, "message charge", "charge:").group(1)
    status = _require(CHARGE_STATUS_RE, text, "message charge", "status:").group(1)
    charge = _to_float(charge_token, "message charge", "charge:", text)
    logger.debug(f"Parsed message charge: id={api_msg_id} charge={charge} status={status}")
    return MessageChargeResult(
        api_msg_id=api_msg_id,
        status=status,
        description=get_error(status),
        charge=charge,
    )


def _normalize_number(number: str) -> str:
    """Digits only, without an international ``00`` prefix."""
    digits = NON_DIGIT_RE.sub("", number)
    if digits.startswith("00"):
        digits = digits[2:]
    return digits


def _take_by_number(pool: List[str], to: str) -> Optional[str]:
    """Remove and return the segment whose ``To:`` names this recipient."""
    wanted = _normalize_number(to)
    for index, segment in enumerate(pool):
        match = TO_RE.search(segment)
        if match and _normalize_number(match.group(1)) == wanted:
            return pool.pop(index)
    return None


def _recipient_result(to: str, segment: Optional[str]) -> RecipientResult:
    if segment is None:
        logger.warning(f"No send confirmation returned for recipient {to}")
        return RecipientResult(to=to, api_msg_id=None, error=True)

    match = ID_RE.search(segment)
    if match is None:
        logger.warning(f"Send failed for recipient {to}: {segment}")
        return RecipientResult(to=to, api_msg_id=None, error=True)

    return RecipientResult(to=to, api_msg_id=match.group(1), error=False)


def parse_send(text: str, recipients: Sequence[Union[str, int]]) -> SendResult:
    """
    Parse a sendmsg reply into one result per requested recipient.

    The gateway writes one line per recipient. A single-recipient reply is
    just ``ID: <id>``; multi-recipient replies add ``To: <number>`` to each
    line. Results always follow the order of ``recipients``: lines are
    matched by their ``To:`` number first, and any lines left over are
    handed to the remaining recipients by position.
    A recipient without an ``ID:`` line is marked as errored.

    Args:
        text: Raw response body
        recipients: Destination numbers in the order they were requested

    Returns:
        SendResult: Tuple of RecipientResult, one per recipient

    Raises:
        GatewayError: The whole call was rejected with ``ERR:``
        MalformedResponseError: Neither ``ID:`` nor ``ERR:`` is present
    """
    if not ID_RE.search(text) and not TO_RE.search(text):
        raise_for_gateway_error(text)
        logger.error(f"Malformed send response, missing 'ID:': {text!r}")
        raise MalformedResponseError("Malformed send response: missing 'ID:'", raw=text)

    pool = [line.strip() for line in text.splitlines() if line.strip()]
    numbers = [str(recipient) for recipient in recipients]
    segments = [_take_by_number(pool, to) for to in numbers]

    # Lines left over go to the unmatched recipients in order
    for index, segment in enumerate(segments):
        if segment is None and pool:
            segments[index] = pool.pop(0)

    results = [_recipient_result(to, segment) for to, segment in zip(numbers, segments)]

    if pool:
        logger.warning(f"Ignoring {len(pool)} unmatched send confirmation line(s)")

    failed = sum(1 for result in results if result.error)
    logger.debug(f"Parsed send response: {len(results)} recipient(s), {failed} failed")
    return tuple(results)
