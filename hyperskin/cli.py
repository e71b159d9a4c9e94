"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Argument handling shared by the `bin/hyperskin-*.py` scripts.

Exit codes used by every script:
    0   Success
    1   Usage / bad args
    2   File read/write or other runtime error
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, NoReturn

from hyperskin.context import Context, parse_debug_specs
from hyperskin.store import SettingsStore

SUCCESS_EXIT_CODE = 0
USAGE_EXIT_CODE = 1
ERROR_EXIT_CODE = 2


class UsageParser(argparse.ArgumentParser):
    """ArgumentParser that exits with USAGE_EXIT_CODE on bad arguments."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(USAGE_EXIT_CODE, f"{self.prog}: error: {message}\n")


def build_parser(description: str, epilog: str | None = None) -> UsageParser:
    parser = UsageParser(description=description, epilog=epilog)
    parser.add_argument('--store', type=Path, default=None,
                        help="Settings store file (default: $HYPERSKIN_HOME/hyperskin-config.json or the platform data dir)")
    parser.add_argument('--color', '-c', dest='color', choices=['auto', 'always', 'never'], default='auto',
                        help='Colorize debug output (auto|always|never)')
    #
    # --debug <value>, repeatable:
    #
    #   - a positive integer: sets/updates the debug level (higher = more verbose)
    #   - target=NAME: only show messages of one category (wt, hyper, mcp, claude, themes, registry)
    #
    parser.add_argument('--debug', '-d', nargs='?', const='1', action='append', dest='debug',
                        help="Enable debug. Use level (integer), or a key=value filter like \"target=NAME or level=N\".")
    return parser


def context_from_args(args: argparse.Namespace) -> Context:
    kwargs: dict[str, Any] = {'color': args.color}
    if args.debug:
        kwargs['debug_level'], kwargs['debug_target'] = parse_debug_specs(args.debug)
    if args.store is not None:
        kwargs['store'] = SettingsStore(args.store)
    return Context.from_environ(**kwargs)


def fail(message: str) -> int:
    sys.stderr.write(f"Error: {message}\n")
    return ERROR_EXIT_CODE


def print_json(value: Any, indent: int = 2) -> None:
    print(json.dumps(value, indent=indent, ensure_ascii=False))


def load_json_arg(value: str) -> Any:
    """Parse `value` as JSON, or read JSON from the file it names ('-' is stdin)."""
    if value == '-':
        return json.loads(sys.stdin.read())
    path = Path(value)
    if path.exists():
        return json.loads(path.read_text(encoding='utf-8'))
    return json.loads(value)


def parse_scalar(value: str) -> Any:
    """Interpret a command-line value as JSON when it parses, else as a string."""
    try:
        return json.loads(value)
    except ValueError:
        return value
