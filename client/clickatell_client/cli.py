import argparse
import json
import os
import sys
from typing import Callable

from .config import ClickatellConfig, get_default_config_dir
from .exceptions import ClickatellError
from .http_api import HttpApi
from .logging_config import setup_logging
from .results import ResultEnvelope


def print_envelope(envelope: ResultEnvelope, verbose: bool, summary: Callable) -> int:
    """Print a result and return the exit code for it"""
    if verbose:
        print(json.dumps(envelope.to_dict(), indent=2))
    elif envelope.ok:
        print(summary(envelope.response))

    if not envelope.ok:
        error = envelope.error
        code = f" {error.code}" if error.code else ""
        print(f"Gateway error{code}: {error.message}", file=sys.stderr)
        return 1
    return 0


def summarize_send(response) -> str:
    lines = []
    for result in response:
        if result.error:
            lines.append(f"{result.to}: failed")
        else:
            lines.append(f"{result.to}: sent (Message ID: {result.api_msg_id})")
    return "\n".join(lines)


def run_api_command(args: argparse.Namespace, action: Callable, summary: Callable) -> int:
    try:
        config = ClickatellConfig(args.config)
        envelope = action(HttpApi(config))
        return print_envelope(envelope, args.verbose, summary)
    except (ClickatellError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_send(args: argparse.Namespace) -> int:
    """Send an SMS message"""
    return run_api_command(
        args,
        lambda api: api.send_message(args.to, args.message, sender=args.sender or "",
                                     callback=not args.no_callback),
        summarize_send,
    )


def cmd_balance(args: argparse.Namespace) -> int:
    return run_api_command(
        args,
        lambda api: api.get_balance(),
        lambda response: f"Balance: {response.balance}",
    )


def cmd_query(args: argparse.Namespace) -> int:
    return run_api_command(
        args,
        lambda api: api.query_message(args.api_msg_id),
        lambda response: f"{response.api_msg_id}: {response.status} {response.description}",
    )


def cmd_coverage(args: argparse.Namespace) -> int:
    return run_api_command(
        args,
        lambda api: api.route_coverage(args.msisdn),
        lambda response: f"{response.description} (charge: {response.charge})",
    )


def cmd_charge(args: argparse.Namespace) -> int:
    return run_api_command(
        args,
        lambda api: api.get_message_charge(args.api_msg_id),
        lambda response: (f"{response.api_msg_id}: charge {response.charge}, "
                          f"{response.status} {response.description}"),
    )


def cmd_stop(args: argparse.Namespace) -> int:
    return run_api_command(
        args,
        lambda api: api.stop_message(args.api_msg_id),
        lambda response: f"{response.api_msg_id}: {response.status} {response.description}",
    )


def cmd_init(args: argparse.Namespace) -> int:
    """Initialize the client - creates config directory and config file"""
    config_dir = args.config_dir or get_default_config_dir()
    config_path = os.path.join(config_dir, "config.json")

    print(f"Initializing Clickatell client in: {config_dir}")

    try:
        os.makedirs(config_dir, exist_ok=True)
    except OSError as e:
        print(f"Failed to create config directory: {e}", file=sys.stderr)
        return 1

    if os.path.exists(config_path) and not args.force:
        print("Files already exist: config.json")
        print("Use --force to overwrite existing files")
        return 1

    config_data = {
        "user": args.user,
        "password": args.password,
        "api_id": args.api_id,
        "from": args.sender,
        "timeout": args.timeout,
    }

    # Remove None values
    config_data = {k: v for k, v in config_data.items() if v is not None}

    try:
        with open(config_path, 'w') as f:
            json.dump(config_data, f, indent=2)
        os.chmod(config_path, 0o600)
    except OSError as e:
        print(f"Failed to create config file: {e}", file=sys.stderr)
        return 1

    print(f"Created config file: {config_path}")
    return 0


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default=None, help="Config file path (default: CLICKATELL_CONFIG or config directory)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Print the full JSON result (default: False)")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="clickatell-cli", description="Clickatell HTTP API client utilities")
    p.add_argument("--log-level", default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                   type=str.upper, help="Logging level (default: LOG_LEVEL or WARNING)")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_init = sub.add_parser("init", help="Create a config file", description="Create a config file holding Clickatell API credentials.")
    p_init.add_argument("--config-dir", help="Config directory (default: XDG_CONFIG_HOME/clickatell or ~/.config/clickatell)")
    p_init.add_argument("--user", required=True, help="Clickatell username")
    p_init.add_argument("--password", required=True, help="Clickatell password")
    p_init.add_argument("--api-id", required=True, help="HTTP API ID")
    p_init.add_argument("--from", dest="sender", help="Default sender ID")
    p_init.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds (default: 30)")
    p_init.add_argument("--force", action="store_true", help="Overwrite existing files")
    p_init.set_defaults(func=cmd_init)

    p_send = sub.add_parser("send", help="Send an SMS message", description="Send an SMS message to one or more phone numbers.")
    p_send.add_argument("message", help="Message to send")
    p_send.add_argument("--to", action="append", required=True, help="Recipient phone number (repeat for several)")
    p_send.add_argument("--from", dest="sender", help="Sender ID (overrides config)")
    p_send.add_argument("--no-callback", action="store_true", help="Do not request delivery callbacks")
    add_common_arguments(p_send)
    p_send.set_defaults(func=cmd_send)

    p_balance = sub.add_parser("balance", help="Show account balance")
    add_common_arguments(p_balance)
    p_balance.set_defaults(func=cmd_balance)

    p_query = sub.add_parser("query", help="Show delivery status of a message")
    p_query.add_argument("api_msg_id", help="Clickatell message ID")
    add_common_arguments(p_query)
    p_query.set_defaults(func=cmd_query)

    p_coverage = sub.add_parser("coverage", help="Check route coverage for a number")
    p_coverage.add_argument("msisdn", help="Phone number in international format")
    add_common_arguments(p_coverage)
    p_coverage.set_defaults(func=cmd_coverage)

    p_charge = sub.add_parser("charge", help="Show the charge of a message")
    p_charge.add_argument("api_msg_id", help="Clickatell message ID")
    add_common_arguments(p_charge)
    p_charge.set_defaults(func=cmd_charge)

    p_stop = sub.add_parser("stop", help="Stop delivery of a queued message")
    p_stop.add_argument("api_msg_id", help="Clickatell message ID")
    add_common_arguments(p_stop)
    p_stop.set_defaults(func=cmd_stop)

    return p


def main(argv=None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(log_level=args.log_level)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
