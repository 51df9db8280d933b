"""Operator CLI for the estate verification adapter."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import List, Optional

from deployments.registry import UnknownNetworkError, get_deployment, list_deployments
from estate_adapter.adapter import EstateDataAdapter
from estate_adapter.config import AdapterConfig
from estate_adapter.encoding import (
    PayloadDecodeError,
    decode_estate_payload,
    encode_estate_record,
    payload_from_hex,
    to_hex,
)
from estate_adapter.errors import EstateAdapterError
from estate_adapter.transport import Fetcher, UrllibFetcher
from fulfillment.builder import FulfillmentError, build_fulfillment_payload
from fulfillment.simulator import SimulationError, simulate

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="estate-adapter")
    parser.add_argument("--verbose", "-v", action="store_true")
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode")
    encode_parser.add_argument("--user-id", required=True)
    encode_parser.add_argument("--api-key")
    encode_parser.add_argument("--base-url")
    encode_parser.add_argument("--verifying-operator")
    encode_parser.add_argument("--timeout", type=float)
    encode_parser.set_defaults(func=_encode)

    decode_parser = subparsers.add_parser("decode")
    decode_parser.add_argument("--payload", required=True)
    decode_parser.set_defaults(func=_decode)

    deployments_parser = subparsers.add_parser("deployments")
    deployments_sub = deployments_parser.add_subparsers(dest="deployments_command", required=True)
    deployments_list = deployments_sub.add_parser("list")
    deployments_list.set_defaults(func=_deployments_list)
    deployments_show = deployments_sub.add_parser("show")
    deployments_show.add_argument("--network", required=True)
    deployments_show.set_defaults(func=_deployments_show)

    fulfill_parser = subparsers.add_parser("fulfill")
    fulfill_parser.add_argument("--network", required=True)
    fulfill_parser.add_argument("--request-id", required=True)
    fulfill_parser.add_argument("--payload", required=True)
    fulfill_parser.add_argument("--error", default="")
    fulfill_parser.set_defaults(func=_fulfill)

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        return args.func(args)
    except (
        ValueError,
        EstateAdapterError,
        PayloadDecodeError,
        FulfillmentError,
        SimulationError,
        UnknownNetworkError,
    ) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2


def _encode(args: argparse.Namespace) -> int:
    config = AdapterConfig.from_env(
        api_key=args.api_key,
        base_url=args.base_url,
        verifying_operator=args.verifying_operator,
        timeout_s=args.timeout,
    )
    adapter = EstateDataAdapter(config, fetcher=_make_fetcher())
    record = adapter.fetch_record(args.user_id)
    payload = encode_estate_record(record)
    print(
        json.dumps(
            {"user_id": args.user_id, "record": record.to_dict(), "payload": to_hex(payload)},
            indent=2,
        )
    )
    return 0


def _decode(args: argparse.Namespace) -> int:
    raw = sys.stdin.read() if args.payload == "-" else args.payload
    record = decode_estate_payload(payload_from_hex(raw))
    print(json.dumps({"record": record.to_dict()}, indent=2))
    return 0


def _deployments_list(args: argparse.Namespace) -> int:
    print(json.dumps([deployment.to_dict() for deployment in list_deployments()], indent=2))
    return 0


def _deployments_show(args: argparse.Namespace) -> int:
    deployment = get_deployment(args.network)
    print(json.dumps(deployment.to_dict(), indent=2))
    return 0


def _fulfill(args: argparse.Namespace) -> int:
    deployment = get_deployment(args.network)
    response = payload_from_hex(args.payload)
    payload = build_fulfillment_payload(
        deployment,
        args.request_id,
        response,
        err=args.error.encode("utf-8"),
    )
    dry_run = simulate(payload)
    output = {
        "payload": asdict(payload),
        "dry_run": dry_run.to_dict(),
    }
    print(json.dumps(output, indent=2))
    return 0


def _make_fetcher() -> Fetcher:
    return UrllibFetcher()


def _configure_logging(verbose: bool) -> None:
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


if __name__ == "__main__":
    raise SystemExit(main())
