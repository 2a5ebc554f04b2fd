"""CLI entry point: reads status codes, prints status lines and a summary."""

import sys
from typing import List

from .config import build_resolver, load_config
from .errors import StatusTextConfigError
from .stats import ResolveStats
from .status_line import reason_phrase, status_line


def _parse_codes(tokens: List[str]) -> List[int]:
    codes: List[int] = []
    for token in tokens:
        try:
            codes.append(int(token))
        except ValueError:
            print(f"statustext: not a status code: {token!r}", file=sys.stderr)
            sys.exit(1)
    return codes


def main() -> None:
    tokens = sys.argv[1:] or sys.stdin.read().split()
    if not tokens:
        print("statustext: no status codes provided", file=sys.stderr)
        sys.exit(1)
    codes = _parse_codes(tokens)

    try:
        resolver = build_resolver(load_config())
    except StatusTextConfigError as exc:
        print(f"statustext: {exc}", file=sys.stderr)
        sys.exit(1)

    run_stats = ResolveStats()
    overrides = resolver.global_overrides()
    for code in codes:
        try:
            print(status_line(code, resolver=resolver))
        except ValueError as exc:
            print(f"statustext: {exc}", file=sys.stderr)
            sys.exit(1)
        run_stats.record(code, reason_phrase(code, resolver), code in overrides)
    for line in run_stats.format_summary():
        print(line)
