"""
Logging configuration for the Clickatell client

Log records from every module of the package, gateway call events included,
go to one handler: stderr by default or a rotating file. stdout is left
for command output.
"""

import logging
import logging.handlers
import os
import sys
from datetime import datetime, timezone

PACKAGE_LOGGER = 'clickatell_client'
EVENT_LOGGER = f'{PACKAGE_LOGGER}.events'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level


def setup_logging(log_level=None, log_file=None):
    """
    Configure the client's loggers.

    Only the package logger is touched, so an application embedding the
    library keeps its own root configuration.

    Args:
        log_level: Level name; defaults to LOG_LEVEL or WARNING
        log_file: Rotating log file path; defaults to LOG_FILE, else stderr

    Returns:
        The configured package logger
    """
    level = _resolve_level(log_level or os.environ.get('LOG_LEVEL', 'WARNING'))
    log_file = log_file or os.environ.get('LOG_FILE')

    if log_file:
        handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS
        )
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for previous in list(package_logger.handlers):
        package_logger.removeHandler(previous)
        previous.close()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False

    package_logger.debug(f"Logging to {log_file or 'stderr'} at {logging.getLevelName(level)}")
    return package_logger


def log_api_event(operation, success=True, api_msg_id=None, to_number=None, error=None):
    """
    Log a gateway call with structured information.

    Args:
        operation: API operation (e.g., 'sendmsg', 'getbalance')
        success: Whether the gateway accepted the call
        api_msg_id: Clickatell message ID
        to_number: Recipient phone number
        error: Error message if applicable
    """
    logger = logging.getLogger(EVENT_LOGGER)

    log_data = {
        'operation': operation,
        'success': success,
        'timestamp': datetime.now(timezone.utc).isoformat(),
    }

    if api_msg_id:
        log_data['api_msg_id'] = api_msg_id
    if to_number:
        log_data['to_number'] = to_number
    if error:
        log_data['error'] = error

    # Format as key=value pairs for easy parsing
    log_message = ' '.join([f"{k}={v}" for k, v in log_data.items()])

    if success:
        logger.info(f"API: {log_message}")
    else:
        logger.warning(f"API: {log_message}")
