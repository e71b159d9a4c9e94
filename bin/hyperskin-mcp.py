#!/usr/bin/env python3
"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Manage MCP servers in Claude's `claude_desktop_config.json`.

Usage:
    ./bin/hyperskin-mcp.py [--path FILE] [--debug [N]] COMMAND [ARGS]

Commands:
    list                                    Print every server as JSON.
    add NAME COMMAND [ARG ...] [--env K=V] [--disabled]
    remove NAME
    update NAME [--name NEW] [--command CMD] [--args ARG ...] [--env K=V ...]
    toggle NAME on|off

Examples:
    ./bin/hyperskin-mcp.py add filesystem npx -- -y @modelcontextprotocol/server-filesystem /tmp
    ./bin/hyperskin-mcp.py update filesystem --name fs
    ./bin/hyperskin-mcp.py toggle fs off

Behavior:
    - `add` fails when NAME already exists; `remove`, `update` and `toggle` fail when it does not.
    - Renaming with `update --name` moves the entry to the end of the file.
    - Output is JSON with 2-space indentation; other top-level keys are kept.

Exit codes:
    0   Success
    1   Usage / bad args
    2   Unknown/duplicate server, file read/write or other runtime error
"""
from __future__ import annotations

import sys
from dataclasses import asdict
from typing import Any, List

from hyperskin.cli import SUCCESS_EXIT_CODE, build_parser, context_from_args, fail, print_json
from hyperskin.registry import McpRegistry, McpServer


def parse_env(pairs: List[str] | None) -> dict[str, str] | None:
    if pairs is None:
        return None
    env = {}
    for pair in pairs:
        if '=' not in pair:
            raise ValueError(f"--env expects KEY=VALUE, got '{pair}'")
        k, v = pair.split('=', 1)
        env[k] = v
    return env


def main(argv: List[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser(
        description="Manage MCP servers in claude_desktop_config.json.",
        epilog="Example: %(prog)s toggle filesystem off",
    )
    parser.add_argument('--path', '-p', default=None, help="MCP config file (default: ~/.claude/claude_desktop_config.json)")
    sub = parser.add_subparsers(dest='command', required=True)
    sub.add_parser('list', help="Print every server")
    add = sub.add_parser('add', help="Add a server")
    add.add_argument('name')
    add.add_argument('server_command', metavar='COMMAND')
    add.add_argument('server_args', metavar='ARG', nargs='*')
    add.add_argument('--env', action='append', default=None, metavar='K=V')
    add.add_argument('--disabled', action='store_true')
    remove = sub.add_parser('remove', help="Remove a server")
    remove.add_argument('name')
    update = sub.add_parser('update', help="Change a server")
    update.add_argument('name')
    update.add_argument('--name', dest='new_name', default=None)
    update.add_argument('--command', dest='server_command', default=None)
    update.add_argument('--args', dest='server_args', nargs='*', default=None)
    update.add_argument('--env', action='append', default=None, metavar='K=V')
    toggle = sub.add_parser('toggle', help="Enable or disable a server")
    toggle.add_argument('name')
    toggle.add_argument('state', choices=['on', 'off'])
    args = parser.parse_args(argv)

    ctx = context_from_args(args)
    registry = McpRegistry(args.path, ctx)

    try:
        if args.command == 'list':
            print_json([asdict(server) for server in registry.list()])
        elif args.command == 'add':
            registry.add(McpServer(
                name=args.name,
                command=args.server_command,
                args=list(args.server_args),
                env=parse_env(args.env),
                enabled=not args.disabled,
            ))
            print(f"Added MCP server '{args.name}'")
        elif args.command == 'remove':
            registry.remove(args.name)
            print(f"Removed MCP server '{args.name}'")
        elif args.command == 'update':
            changes: dict[str, Any] = {}
            if args.new_name:
                changes['name'] = args.new_name
            if args.server_command is not None:
                changes['command'] = args.server_command
            if args.server_args is not None:
                changes['args'] = list(args.server_args)
            if args.env is not None:
                changes['env'] = parse_env(args.env)
            server = registry.update(args.name, **changes)
            print_json(asdict(server))
        elif args.command == 'toggle':
            registry.toggle(args.name, args.state == 'on')
            print(f"MCP server '{args.name}' {'enabled' if args.state == 'on' else 'disabled'}")
    except (OSError, ValueError) as e:
        return fail(str(e))
    return SUCCESS_EXIT_CODE


if __name__ == "__main__":
    raise SystemExit(main())
