"""
Clickatell HTTP API client

Each operation makes one call through the transport, parses the plain-text
reply and returns a ResultEnvelope.
"""

import logging
from typing import Dict, Optional, Sequence, Union

from .config import ClickatellConfig
from .logging_config import log_api_event
from .parser import (
    parse_balance,
    parse_message_charge,
    parse_query,
    parse_route_coverage,
    parse_send,
    parse_stop_message,
)
from .results import ResultEnvelope, wrap_response
from .transport import HttpTransport, Transport

logger = logging.getLogger(__name__)

# Ask the gateway to report intermediate and final statuses
CALLBACK_ALL = "7"


class HttpApi:
    """Client for the Clickatell HTTP API"""

    def __init__(self, config: ClickatellConfig, transport: Optional[Transport] = None):
        self.config = config
        self.transport = transport or HttpTransport(timeout=config.timeout)

    def _call(self, endpoint: str, parameters: Optional[Dict[str, str]] = None) -> str:
        args = self.config.credentials()
        args.update(parameters or {})
        return self.transport.call(endpoint, args)

    def _log(self, operation: str, envelope: ResultEnvelope, **fields):
        if envelope.ok:
            log_api_event(operation, success=True, **fields)
        else:
            log_api_event(operation, success=False, error=envelope.error.message, **fields)

    def send_message(
        self,
        to: Sequence[Union[str, int]],
        message: str,
        sender: str = "",
        callback: bool = True,
        extra: Optional[Dict[str, str]] = None,
    ) -> ResultEnvelope:
        """
        Send a message to one or more recipients.

        Args:
            to: Destination numbers
            message: Message text
            sender: Sender ID; defaults to the "from" value in the config
            callback: Request delivery status callbacks
            extra: Additional sendmsg parameters (e.g. delivery_time)

        Returns:
            ResultEnvelope: One RecipientResult per number, in the order given
        """
        recipients = [str(number) for number in to]
        if not recipients:
            raise ValueError("At least one recipient is required")
        if not message:
            raise ValueError("Message text is required")

        args = {"to": ",".join(recipients), "text": message}

        sender = sender or self.config.sender
        if sender:
            args["from"] = sender
            args["mo"] = "1"

        if callback:
            args["callback"] = CALLBACK_ALL

        if extra:
            args.update({key: str(value) for key, value in extra.items()})

        logger.info(f"Sending message to {len(recipients)} recipient(s)")
        raw = self._call("http/sendmsg", args)
        envelope = wrap_response(parse_send, raw, recipients)

        if envelope.ok:
            for result in envelope.response:
                log_api_event(
                    "sendmsg",
                    success=not result.error,
                    api_msg_id=result.api_msg_id,
                    to_number=result.to,
                    error="no confirmation" if result.error else None,
                )
        else:
            self._log("sendmsg", envelope)
        return envelope

    def get_balance(self) -> ResultEnvelope:
        """Get the account balance"""
        envelope = wrap_response(parse_balance, self._call("http/getbalance"))
        self._log("getbalance", envelope)
        return envelope

    def query_message(self, api_msg_id: str) -> ResultEnvelope:
        """Get the delivery status of a sent message"""
        raw = self._call("http/querymsg", {"apimsgid": api_msg_id})
        envelope = wrap_response(parse_query, raw)
        self._log("querymsg", envelope, api_msg_id=api_msg_id)
        return envelope

    def route_coverage(self, msisdn: str) -> ResultEnvelope:
        """Check whether a number can be reached and what it costs"""
        raw = self._call("utils/routeCoverage", {"msisdn": str(msisdn)})
        envelope = wrap_response(parse_route_coverage, raw)
        self._log("routeCoverage", envelope, to_number=str(msisdn))
        return envelope

    def get_message_charge(self, api_msg_id: str) -> ResultEnvelope:
        """Get the charge and status of a sent message"""
        raw = self._call("http/getmsgcharge", {"apimsgid": api_msg_id})
        envelope = wrap_response(parse_message_charge, raw)
        self._log("getmsgcharge", envelope, api_msg_id=api_msg_id)
        return envelope

    def stop_message(self, api_msg_id: str) -> ResultEnvelope:
        """Stop delivery of a queued message"""
        raw = self._call("http/delmsg", {"apimsgid": api_msg_id})
        envelope = wrap_response(parse_stop_message, raw)
        self._log("delmsg", envelope, api_msg_id=api_msg_id)
        return envelope
