"""Command-line access to any resource method.

Usage (after pip install):
    fmp company get_profile AAPL
    fmp market get_historical_prices AAPL 2024-01-02 2024-03-28
    fmp financials get_income_statement MSFT --param period=quarter --param limit=4
    fmp search screen_stocks --json
    fmp insider                  # list the methods of a resource
"""

from __future__ import annotations

import argparse
import inspect
import json
import logging
import re
import sys
from typing import Any

from tabulate import tabulate

from fmp_sdk.config import get_settings
from fmp_sdk.errors import FMPError
from fmp_sdk.fmp import FMP
from fmp_sdk.resources.base import BaseResource

_INT_RE = re.compile(r"-?(0|[1-9]\d*)")


def _coerce(value: str) -> Any:
    """CLI string -> int/bool where unambiguous. Zero-padded CIKs stay strings."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if _INT_RE.fullmatch(value):
        return int(value)
    return value


def _parse_params(pairs: list[str]) -> dict[str, Any]:
    params: dict[str, Any] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise ValueError(f"--param expects key=value, got {pair!r}")
        params[name.replace("-", "_")] = _coerce(value)
    return params


def _public_methods(resource: BaseResource) -> list[str]:
    return sorted(
        name for name, _ in inspect.getmembers(resource, inspect.ismethod)
        if not name.startswith("_")
    )


def _resolve_method(resource: BaseResource, name: str) -> Any:
    for candidate in (name, f"get_{name}"):
        method = getattr(resource, candidate, None)
        if not candidate.startswith("_") and inspect.ismethod(method):
            return method
    return None


def render(result: Any, max_rows: int) -> str:
    """Tabulate a decoded response for the terminal."""
    if isinstance(result, dict) and isinstance(result.get("historical"), list):
        result = result["historical"]

    if isinstance(result, list):
        if not result:
            return "(no results)"
        if not all(isinstance(row, dict) for row in result):
            return "\n".join(str(row) for row in result[:max_rows])
        shown = result[:max_rows]
        text = tabulate(shown, headers="keys", tablefmt="simple")
        if len(result) > max_rows:
            text += f"\n... {len(result) - max_rows} more rows (use --json for everything)"
        return text

    if isinstance(result, dict):
        return tabulate(result.items(), headers=["Field", "Value"], tablefmt="simple")

    return str(result)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fmp", description="Query the Financial Modeling Prep API"
    )
    parser.add_argument("resource", help="Resource name, e.g. company, market, financials")
    parser.add_argument("method", nargs="?", help="Method name, e.g. get_profile (get_ prefix optional)")
    parser.add_argument("args", nargs="*", help="Positional arguments for the method, passed as strings")
    parser.add_argument(
        "--param", "-p", action="append", default=[], metavar="KEY=VALUE",
        help="Keyword argument for the method (repeatable)",
    )
    parser.add_argument("--api-key", default=None, help="API key (default: config or FMP_API_KEY)")
    parser.add_argument("--json", action="store_true", help="Print raw JSON")
    parser.add_argument("--cache", action="store_true", help="Enable the in-memory response cache")
    parser.add_argument("--max-rows", type=int, default=None, help="Rows to tabulate")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    settings = get_settings()
    max_rows = args.max_rows or settings.display.max_rows

    try:
        kwargs = _parse_params(args.param)
        positional = list(args.args)  # symbols like "1" must stay strings
        with FMP(args.api_key, cache=True if args.cache else None) as fmp:
            resource = getattr(fmp, args.resource, None)
            if not isinstance(resource, BaseResource):
                print(f"ERROR: unknown resource {args.resource!r}", file=sys.stderr)
                return 1

            if args.method is None:
                print("\n".join(_public_methods(resource)))
                return 0

            method = _resolve_method(resource, args.method)
            if method is None:
                print(
                    f"ERROR: {args.resource} has no method {args.method!r} "
                    f"(run 'fmp {args.resource}' to list them)",
                    file=sys.stderr,
                )
                return 1

            result = method(*positional, **kwargs)
    except (FMPError, ValueError, TypeError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result, indent=2, default=str))
    else:
        print(render(result, max_rows))
    return 0


if __name__ == "__main__":
    sys.exit(main())
