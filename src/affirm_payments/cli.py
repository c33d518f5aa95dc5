"""
Command-line interface for calling the Affirm charges API.
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any, Dict, Iterable, Sequence, Tuple

from .api import (
    ConfigurationError,
    PaymentClient,
    ResponseError,
    ValidationError,
    create_payment_client,
    load_client_config,
)

_OPTIONAL_ARGUMENTS: Dict[str, Tuple[str, ...]] = {
    "authorize": ("order_id",),
    "capture": ("order_id", "shipping_carrier", "shipping_confirmation"),
    "read": ("limit", "before", "after"),
    "void": (),
    "refund": ("amount",),
}


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    return {key: value for key, value in pairs}


def _collect_optional_data(args: argparse.Namespace) -> dict[str, Any]:
    optional_data: dict[str, Any] = {}
    for name in _OPTIONAL_ARGUMENTS[args.command]:
        value = getattr(args, name, None)
        if value is not None:
            optional_data[name] = value
    return optional_data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="affirm-payments",
        description="Authorize, capture, read, void or refund an Affirm charge",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing AFFIRM_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    environment = parser.add_mutually_exclusive_group()
    environment.add_argument(
        "--sandbox",
        dest="is_sandbox",
        action="store_const",
        const=True,
        help="Send requests to the Affirm sandbox",
    )
    environment.add_argument(
        "--live",
        dest="is_sandbox",
        action="store_const",
        const=False,
        help="Send requests to the live Affirm API",
    )
    parser.set_defaults(is_sandbox=None)

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True

    authorize = commands.add_parser("authorize", help="Authorize a completed checkout")
    authorize.add_argument("checkout_token")
    authorize.add_argument("--order-id")

    capture = commands.add_parser("capture", help="Capture an authorized charge")
    capture.add_argument("charge_id")
    capture.add_argument("--order-id")
    capture.add_argument("--shipping-carrier")
    capture.add_argument("--shipping-confirmation")

    read = commands.add_parser("read", help="Show the details of a charge")
    read.add_argument("charge_id")
    read.add_argument("--limit", type=int)
    read.add_argument("--before")
    read.add_argument("--after")

    void = commands.add_parser("void", help="Void an uncaptured charge")
    void.add_argument("charge_id")

    refund = commands.add_parser("refund", help="Refund a captured charge")
    refund.add_argument("charge_id")
    refund.add_argument("--amount", type=int, help="Amount to refund in cents")

    return parser


def _dispatch(client: PaymentClient, args: argparse.Namespace) -> dict[str, Any]:
    optional_data = _collect_optional_data(args)
    if args.command == "authorize":
        return client.authorize(args.checkout_token, optional_data)
    if args.command == "capture":
        return client.capture(args.charge_id, optional_data)
    if args.command == "read":
        return client.read(args.charge_id, optional_data)
    if args.command == "void":
        return client.void(args.charge_id)
    return client.refund(args.charge_id, optional_data)


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    overrides = _collect_overrides(args.set or ())

    try:
        config = load_client_config(
            env_file=args.env_file,
            overrides=overrides,
            is_sandbox=args.is_sandbox,
        )
    except (ConfigurationError, ValueError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_payment_client(config=config)

    try:
        result = _dispatch(client, args)
    except ValidationError as exc:
        logging.error("Invalid %s request: %s", args.command, exc)
        return 1
    except ResponseError as exc:
        logging.error("Affirm %s request failed: %s", args.command, exc)
        return 1

    print(json.dumps(result, indent=2, sort_keys=True))
    return 0
