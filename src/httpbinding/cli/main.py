# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpbinding CLI."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from ..binding import HttpBinding
from ..config import HttpSettings, load_http_settings
from ..errors import BindingError, TransportError, error_category_to_reason
from ..http import create_default_http_client
from ..log import setup_logging
from ..models import InvokeResponse, ReadResponse

CLI_TEXT_TRUNCATION_BYTES = 4096


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("url", help="Target endpoint URL")
    parser.add_argument("--user", help="Basic-auth username")
    parser.add_argument("--password", help="Basic-auth password")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of raw body / status line",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Override the per-call timeout in seconds",
    )
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Call an HTTP endpoint through the httpbinding adapter")
    parser.add_argument("--log-level", help="Logging level (default: $HTTPBINDING_LOG_LEVEL or WARNING)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    read_parser = subparsers.add_parser("read", help="GET the endpoint once and print the body")
    _add_common_arguments(read_parser)

    invoke_parser = subparsers.add_parser("invoke", help="Send a payload with the configured method")
    _add_common_arguments(invoke_parser)
    invoke_parser.add_argument("--method", default="POST", help="HTTP method for invoke (default: POST)")
    payload = invoke_parser.add_mutually_exclusive_group()
    payload.add_argument("--data", help="Request body as a string")
    payload.add_argument("--data-file", type=Path, help="Read the request body from a file")
    return parser


def _truncate_text_bytes(text: str, max_bytes: int) -> str:
    raw = text.encode("utf-8")
    if len(raw) <= max_bytes:
        return text
    suffix = "...[truncated]"
    suffix_bytes = suffix.encode("utf-8")
    keep = max_bytes - len(suffix_bytes)
    if keep <= 0:
        return suffix_bytes[:max_bytes].decode("utf-8", errors="ignore")
    prefix = raw[:keep].decode("utf-8", errors="ignore")
    return prefix + suffix


def _print_json(data: ReadResponse | InvokeResponse | dict[str, Any]) -> None:
    payload = data.to_dict() if hasattr(data, "to_dict") else data
    if isinstance(payload.get("data"), str):
        payload["data"] = _truncate_text_bytes(payload["data"], CLI_TEXT_TRUNCATION_BYTES)
    json.dump(payload, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _properties_from_args(args: argparse.Namespace) -> dict[str, str]:
    properties = {"url": args.url}
    if getattr(args, "method", None):
        properties["method"] = args.method
    if args.user is not None:
        properties["user"] = args.user
    if args.password is not None:
        properties["password"] = args.password
    return properties


def _settings_from_args(args: argparse.Namespace) -> HttpSettings:
    settings = load_http_settings()
    if args.ignore_ssl_errors:
        settings.verify_ssl = False
    if args.timeout is not None and args.timeout > 0:
        if args.command == "read":
            settings.read_timeout = args.timeout
        else:
            settings.invoke_timeout = args.timeout
    return settings


def _payload_from_args(args: argparse.Namespace) -> bytes:
    if args.data_file is not None:
        return args.data_file.read_bytes()
    if args.data is not None:
        return args.data.encode("utf-8")
    return b""


def _run(binding: HttpBinding, args: argparse.Namespace, payload: bytes) -> None:
    if args.command == "read":

        def _emit(response: ReadResponse) -> None:
            if args.json:
                _print_json(response)
            else:
                sys.stdout.buffer.write(response.data)
                sys.stdout.flush()

        binding.read(_emit)
        return

    result = binding.invoke(payload)
    if args.json:
        _print_json(result)
    else:
        print(result.status)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    payload = b""
    if args.command == "invoke":
        try:
            payload = _payload_from_args(args)
        except OSError as exc:
            parser.error(f"cannot read --data-file: {exc}")

    settings = _settings_from_args(args)
    http_client = create_default_http_client(settings)

    try:
        with HttpBinding(http_client=http_client, settings=settings) as binding:
            binding.init(_properties_from_args(args))
            _run(binding, args, payload)
    except TransportError as exc:
        print(f"[httpbinding] {error_category_to_reason(exc.category)}: {exc}", file=sys.stderr)
        return 1
    except BindingError as exc:
        print(f"[httpbinding] {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
