"""
CLI for the feature flag service.

Commands:
  serve                     Run the Flask development server.
  list                      List all flags.
  get KEY [--context JSON]  Show one flag.
  enabled KEY               Boolean view of a flag.
  refresh                   Re-stamp all flags.
  assign [--flag KEY] (--user-id ID | --attr k=v ...)
                            Assignment for a user id or attribute set.

Remote commands talk to --base-url (default: $BASE_URL or http://localhost:3000)
through sdk.FlagsClient and print JSON.

Usage:
  python -m cli enabled feature-new-ui
  python -m cli assign --flag feature-new-ui --attr country=US --attr plan=free
"""

from __future__ import annotations
import argparse
import json
import os
import sys
from typing import Any, Dict, List

DEFAULT_BASE_URL = "http://localhost:3000"


def _client(args: argparse.Namespace):
    from sdk.client import FlagsClient  # lazy: serve doesn't need requests

    return FlagsClient(base_url=args.base_url, application_id=args.application_id)


def _print(obj: Any) -> None:
    print(json.dumps(obj, indent=2, ensure_ascii=False))


def _parse_attrs(pairs: List[str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for pair in pairs:
        k, sep, v = pair.partition("=")
        if not sep or not k:
            raise ValueError(f"attribute must look like key=value: {pair!r}")
        out[k] = v
    return out


def cmd_serve(args: argparse.Namespace) -> int:
    from app import create_app

    app = create_app()
    s = app.container.settings  # type: ignore[attr-defined]
    app.run(host=args.host or s.HOST, port=args.port or s.PORT)
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    _print(_client(args).list_flags())
    return 0


def cmd_get(args: argparse.Namespace) -> int:
    context = json.loads(args.context) if args.context else None
    _print(_client(args).get_flag(args.key, context=context))
    return 0


def cmd_enabled(args: argparse.Namespace) -> int:
    _print({"key": args.key, "enabled": _client(args).is_enabled(args.key)})
    return 0


def cmd_refresh(args: argparse.Namespace) -> int:
    _print(_client(args).refresh())
    return 0


def cmd_assign(args: argparse.Namespace) -> int:
    attrs = _parse_attrs(args.attr) if args.attr else None
    _print(_client(args).assign(user_id=args.user_id, user_attributes=attrs, flag_key=args.flag))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="flagctl",
        description="Operational CLI for the feature flag service"
    )
    sub = p.add_subparsers(dest="command", required=True)

    remote = argparse.ArgumentParser(add_help=False)
    remote.add_argument("--base-url", default=os.environ.get("BASE_URL", DEFAULT_BASE_URL))
    remote.add_argument("--application-id", default=None)

    sp = sub.add_parser("serve", help="Run the development server")
    sp.add_argument("--host", default=None)
    sp.add_argument("--port", type=int, default=None)
    sp.set_defaults(func=cmd_serve)

    sp = sub.add_parser("list", parents=[remote], help="List all flags")
    sp.set_defaults(func=cmd_list)

    sp = sub.add_parser("get", parents=[remote], help="Show one flag")
    sp.add_argument("key")
    sp.add_argument("--context", default=None, help="JSON context, e.g. '{\"userId\": \"u1\"}'")
    sp.set_defaults(func=cmd_get)

    sp = sub.add_parser("enabled", parents=[remote], help="Check whether a flag is on")
    sp.add_argument("key")
    sp.set_defaults(func=cmd_enabled)

    sp = sub.add_parser("refresh", parents=[remote], help="Refresh all flags")
    sp.set_defaults(func=cmd_refresh)

    sp = sub.add_parser("assign", parents=[remote], help="Assignment for a user")
    sp.add_argument("--flag", default=None, help="Flag key (omit for the default variation)")
    who = sp.add_mutually_exclusive_group(required=True)
    who.add_argument("--user-id", default=None)
    who.add_argument("--attr", action="append", metavar="KEY=VALUE")
    sp.set_defaults(func=cmd_assign)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
