#!/usr/bin/env python3
"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Read and edit Claude's `~/.claude/settings.json`.

Usage:
    ./bin/hyperskin-claude.py [--path FILE] [--debug [N]] COMMAND [ARGS]

Commands:
    read              Print the settings as JSON.
    get KEY           Print one setting.
    set KEY VALUE     Set one top-level setting; VALUE is parsed as JSON when possible.
    remove KEY        Remove one top-level setting.
    models            Print the model ids accepted by `model`.
    model NAME        Set the model used for subagents.

Examples:
    ./bin/hyperskin-claude.py set includeCoAuthoredBy false
    ./bin/hyperskin-claude.py model claude-sonnet-4-6

Behavior:
    - Writes merge one level deep over the existing file; nested values are replaced whole.

Exit codes:
    0   Success
    1   Usage / bad args
    2   Unknown key or model, file read/write or other runtime error
"""
from __future__ import annotations

import sys
from typing import List

from hyperskin.cli import SUCCESS_EXIT_CODE, build_parser, context_from_args, fail, parse_scalar, print_json
from hyperskin.registry import ClaudeSettings


def main(argv: List[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser(
        description="Read and edit Claude settings.json.",
        epilog="Example: %(prog)s model claude-sonnet-4-6",
    )
    parser.add_argument('--path', '-p', default=None, help="settings file (default: ~/.claude/settings.json)")
    sub = parser.add_subparsers(dest='command', required=True)
    sub.add_parser('read', help="Print the settings")
    get = sub.add_parser('get', help="Print one setting")
    get.add_argument('key')
    set_ = sub.add_parser('set', help="Set one setting")
    set_.add_argument('key')
    set_.add_argument('value')
    remove = sub.add_parser('remove', help="Remove one setting")
    remove.add_argument('key')
    sub.add_parser('models', help="Print known model ids")
    model = sub.add_parser('model', help="Set the subagent model")
    model.add_argument('name')
    args = parser.parse_args(argv)

    ctx = context_from_args(args)
    settings = ClaudeSettings(args.path, ctx)

    try:
        if args.command == 'read':
            print_json(settings.read())
        elif args.command == 'get':
            print_json(settings.get(args.key))
        elif args.command == 'set':
            settings.write({args.key: parse_scalar(args.value)})
        elif args.command == 'remove':
            settings.remove(args.key)
        elif args.command == 'models':
            for name in settings.available_models():
                print(name)
        elif args.command == 'model':
            settings.update_subagent_model(args.name)
            print(f"Subagent model set to {args.name}")
    except (OSError, ValueError) as e:
        return fail(str(e))
    return SUCCESS_EXIT_CODE


if __name__ == "__main__":
    raise SystemExit(main())
