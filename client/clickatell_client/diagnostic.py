"""
Clickatell status and error code descriptions.

Message status codes are returned by querymsg, getmsgcharge and delmsg.
Error codes follow the ``ERR:`` prefix of a failed call.
"""

from typing import Dict

UNKNOWN_ERROR = "An unknown error occurred."

MESSAGE_STATUS: Dict[str, str] = {
    "001": "Message unknown. The delivering network did not recognise the message type or content.",
    "002": "Message queued. The message could not be delivered and has been queued for attempted redelivery.",
    "003": "Delivered to gateway. Delivered to the upstream gateway or network (delivered to the recipient).",
    "004": "Received by recipient. Confirmation of receipt on the handset of the recipient.",
    "005": "Error with message. There was an error with the message, probably caused by the content of the message itself.",
    "006": "User cancelled message delivery. The message was terminated by a user (stop message command) or by our staff.",
    "007": "Error delivering message. An error occurred delivering the message to the handset.",
    "008": "OK. Message received by gateway.",
    "009": "Routing error. The routing gateway or network has had an error routing the message.",
    "010": "Message expired. Message has expired before we were able to deliver it to the upstream gateway. No charge applies.",
    "011": "Message queued for later delivery. Message has been queued at the gateway for delivery at a later time (delayed delivery).",
    "012": "Out of credit. The message cannot be delivered due to a lack of funds in your account. Please re-purchase credits.",
    "014": "Maximum MT limit exceeded. The allowable amount for MT messaging has been exceeded.",
}

GATEWAY_ERRORS: Dict[str, str] = {
    "001": "Authentication failed",
    "002": "Unknown username or password",
    "003": "Session ID expired",
    "004": "Account frozen",
    "005": "Missing session ID",
    "007": "IP Lockdown violation",
    "101": "Invalid or missing parameters",
    "102": "Invalid user data header",
    "103": "Unknown API message ID",
    "104": "Unknown client message ID",
    "105": "Invalid destination address",
    "106": "Invalid source address",
    "107": "Empty message",
    "108": "Invalid or missing API ID",
    "109": "Missing message ID",
    "110": "Error with email message",
    "111": "Invalid protocol",
    "112": "Invalid message type",
    "113": "Maximum message parts exceeded",
    "114": "Cannot route message",
    "115": "Message expired",
    "116": "Invalid Unicode data",
    "120": "Invalid delivery time",
    "121": "Destination mobile number blocked",
    "122": "Destination mobile opted out",
    "123": "Invalid Sender ID",
    "128": "Number delisted",
    "130": "Maximum MT limit exceeded",
    "201": "Invalid batch ID",
    "202": "No batch template",
    "301": "No credit left",
    "901": "Internal error",
}


def get_error(code: str) -> str:
    """
    Describe a message status code.

    Args:
        code: 3-digit status code as returned by the gateway (e.g. "001")

    Returns:
        str: The status description, or UNKNOWN_ERROR for an unlisted code
    """
    return MESSAGE_STATUS.get(code, UNKNOWN_ERROR)


def get_gateway_error(code: str) -> str:
    """Describe an ``ERR:`` error code, or return UNKNOWN_ERROR."""
    return GATEWAY_ERRORS.get(code, UNKNOWN_ERROR)
