"""
Authorize a checkout, capture it and optionally refund part of it using the
public API.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from affirm_payments import (
    ConfigurationError,
    ResponseError,
    ValidationError,
    create_payment_client,
    load_client_config,
)


def _present(**values: object) -> dict[str, object]:
    return {key: value for key, value in values.items() if value is not None}


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run an Affirm charge through its lifecycle")
    parser.add_argument("checkout_token", help="Checkout token returned by Affirm.js")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing AFFIRM_* settings",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument("--order-id", help="Merchant order identifier")
    parser.add_argument("--shipping-carrier", help="Carrier used to ship the order")
    parser.add_argument(
        "--shipping-confirmation",
        help="Tracking number for the shipment",
    )
    parser.add_argument(
        "--refund-amount",
        type=int,
        help="Refund this many cents after capturing",
    )
    parser.add_argument(
        "--void",
        action="store_true",
        help="Void the authorization instead of capturing it",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        config = load_client_config(env_file=args.env_file)
    except ConfigurationError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_payment_client(config=config)
    logging.info("Using Affirm API at %s", config.base_url)

    try:
        charge = client.authorize(args.checkout_token, _present(order_id=args.order_id))
        charge_id = charge["id"]
        logging.info("Authorized charge %s", charge_id)

        if args.void:
            result = client.void(charge_id)
            logging.info("Voided charge %s", charge_id)
        else:
            result = client.capture(
                charge_id,
                _present(
                    order_id=args.order_id,
                    shipping_carrier=args.shipping_carrier,
                    shipping_confirmation=args.shipping_confirmation,
                ),
            )
            logging.info("Captured charge %s", charge_id)
            if args.refund_amount:
                result = client.refund(charge_id, {"amount": args.refund_amount})
                logging.info("Refunded %s cents on charge %s", args.refund_amount, charge_id)
    except (ValidationError, ResponseError) as exc:
        logging.error("Charge lifecycle failed: %s", exc)
        return 1

    print(json.dumps(result, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
