#!/usr/bin/env python3
"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Remove comments and trailing commas from JSONC read from stdin and write strict JSON to stdout.

Usage:
    ./bin/hyperskin-strip-comments.py [--squeeze] [--check] < settings.json

Examples:
    ./bin/hyperskin-strip-comments.py < "$LOCALAPPDATA/Packages/Microsoft.WindowsTerminal_8wekyb3d8bbwe/LocalState/settings.json" > tmp.json
    ./bin/hyperskin-strip-comments.py --check < settings.json

Behavior:
    - Removes single-line `//` and block `/* ... */` comments while respecting quoted string literals.
    - Drops commas that directly precede `}` or `]`.
    - `--squeeze` removes lines left empty by full-line comments.
    - `--check` parses the result as strict JSON and fails if it is invalid.
    - Prints cleaned JSON to stdout; does not modify input files.

Inputs / Outputs:
    stdin:  JSONC text encoded as UTF-8
    stdout: JSON text encoded as UTF-8

Exit codes:
    0   Success
    1   Usage / bad args
    2   Invalid JSON after stripping (with --check) or other runtime error
"""
from __future__ import annotations

import json
import re
import sys
from typing import List

from hyperskin.cli import SUCCESS_EXIT_CODE, UsageParser, fail
from hyperskin.jsonc import strip_comments


def main(argv: List[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = UsageParser(
        description="Remove comments from JSONC read from stdin and write strict JSON to stdout.",
        epilog="Example: %(prog)s < settings.json > tmp.json",
    )
    parser.add_argument('--squeeze', action='store_true', help="Remove blank lines left behind by comments")
    parser.add_argument('--check', action='store_true', help="Fail unless the output parses as strict JSON")
    args = parser.parse_args(argv)

    json_string = strip_comments(sys.stdin.read())
    if args.squeeze:
        json_string = re.sub(r'(?m)^[ \t]*\n+', '', json_string).strip()

    if args.check:
        try:
            json.loads(json_string)
        except json.JSONDecodeError as e:
            return fail(f"invalid JSON after stripping comments: {e}")

    print(json_string)
    return SUCCESS_EXIT_CODE


if __name__ == "__main__":
    raise SystemExit(main())
