
"""CLI entrypoint for the real-time server."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from callr_rt.config import load_settings
from callr_rt.log import setup_logging
from callr_rt.protocol.commands import COMMAND_PARAMS, STANDARD_COMMANDS
from callr_rt.protocol.errors import RealtimeError
from callr_rt.protocol.models import CALL_EVENT_FIELDS, CommandObject
from callr_rt.protocol.version import PROTOCOL_VERSION
from callr_rt.registry import load_apps, resolve_app
from callr_rt.runtime.server import RealtimeServer


def _read_request(args: argparse.Namespace) -> bytes:
    if args.request is not None:
        return args.request.encode("utf-8")
    if args.request_file == "-":
        return sys.stdin.buffer.read()
    return Path(args.request_file).read_bytes()


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="callr-rt")
    parser.add_argument("--log-level", default=None, help="Overrides CALLR_RT_LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list-commands")
    subparsers.add_parser("list-apps")
    subparsers.add_parser("schema")
    handle_parser = subparsers.add_parser("handle")
    handle_parser.add_argument("--app", required=True, help="Bundled app id or module:attribute")
    source = handle_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--request", help="JSON request body")
    source.add_argument("--request-file", help="File holding the request body, '-' for stdin")

    args = parser.parse_args(argv)

    settings = load_settings(log_level=args.log_level)
    setup_logging(settings.log_level)

    if args.command == "list-commands":
        print(json.dumps(STANDARD_COMMANDS, indent=2))
        return 0

    if args.command == "list-apps":
        print(json.dumps(sorted(load_apps().keys()), indent=2))
        return 0

    if args.command == "schema":
        schema = {
            "protocol_version": PROTOCOL_VERSION,
            "call_event_fields": list(CALL_EVENT_FIELDS),
            "command_object_fields": list(CommandObject.model_fields),
            "commands": {name: list(params) for name, params in COMMAND_PARAMS.items()},
        }
        print(json.dumps(schema, indent=2))
        return 0

    try:
        callback = resolve_app(args.app)
        raw_body = _read_request(args)
    except (ImportError, LookupError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    server = RealtimeServer(settings)
    try:
        response = server.handle(raw_body, callback)
    except RealtimeError as exc:
        print(f"{exc.code}: {exc.message}", file=sys.stderr)
        return 1

    print(f"HTTP/1.1 {response.status}")
    for name, value in response.headers:
        print(f"{name}: {value}")
    print()
    print(response.body.decode("utf-8"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
