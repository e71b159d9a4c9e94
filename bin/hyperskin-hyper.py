#!/usr/bin/env python3
"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Inspect and edit Hyper's `.hyper.js`.

Usage:
    ./bin/hyperskin-hyper.py [--path FILE] [--debug [N]] COMMAND [ARGS]

Commands:
    path                  Print the .hyper.js location in use.
    set-path FILE         Remember FILE as the .hyper.js location.
    read                  Print the complete (defaults-filled) config as JSON.
    render                Print the config as it would be written to .hyper.js.
    write CONFIG          Replace .hyper.js with CONFIG (JSON, a JSON file, or '-').
    set KEY VALUE         Set `config.KEY` (dots for nesting, e.g. colors.red);
                          VALUE is parsed as JSON when possible.
    plugins [NAME ...]    Print the plugin list, or replace it with NAMEs in load order.

Examples:
    ./bin/hyperskin-hyper.py read
    ./bin/hyperskin-hyper.py set fontSize 16
    ./bin/hyperskin-hyper.py set colors.red "'#ff0000'"
    ./bin/hyperskin-hyper.py plugins hyper-snazzy hypercwd

Behavior:
    - Reading never fails: a missing or unreadable file yields the defaults.
    - Writing replaces the whole file with `module.exports = { ... };`.

Exit codes:
    0   Success
    1   Usage / bad args
    2   File read/write or other runtime error
"""
from __future__ import annotations

import sys
from typing import Any, List

from hyperskin.cli import (
    SUCCESS_EXIT_CODE,
    build_parser,
    context_from_args,
    fail,
    load_json_arg,
    parse_scalar,
    print_json,
)
from hyperskin.hyper_config import (
    find_hyper_config_path,
    read_hyper_config,
    render_hyper_config,
    update_hyper_config,
    write_hyper_config,
)


def nested_overlay(dotted_key: str, value: Any) -> dict[str, Any]:
    """Turn `colors.red`, v into {'config': {'colors': {'red': v}}}."""
    overlay: Any = value
    for part in reversed(dotted_key.split('.')):
        overlay = {part: overlay}
    return {'config': overlay}


def main(argv: List[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser(
        description="Inspect and edit Hyper's .hyper.js.",
        epilog="Example: %(prog)s set fontSize 16",
    )
    parser.add_argument('--path', '-p', default=None, help=".hyper.js to use instead of the configured one")
    sub = parser.add_subparsers(dest='command', required=True)
    sub.add_parser('path', help="Print the .hyper.js location in use")
    set_path = sub.add_parser('set-path', help="Remember a .hyper.js location")
    set_path.add_argument('file')
    sub.add_parser('read', help="Print the config as JSON")
    sub.add_parser('render', help="Print the config as JavaScript")
    write = sub.add_parser('write', help="Replace .hyper.js with a JSON config")
    write.add_argument('config', help="Config JSON, a file containing it, or '-' for stdin")
    set_ = sub.add_parser('set', help="Set one config value")
    set_.add_argument('key')
    set_.add_argument('value')
    plugins = sub.add_parser('plugins', help="Print or replace the plugin list")
    plugins.add_argument('names', nargs='*')
    args = parser.parse_args(argv)

    ctx = context_from_args(args)
    path = args.path

    try:
        if args.command == 'path':
            print(path or find_hyper_config_path(ctx))
        elif args.command == 'set-path':
            ctx.store.set_path('hyperConfigPath', args.file)
            print(args.file)
        elif args.command == 'read':
            print_json(read_hyper_config(path, ctx))
        elif args.command == 'render':
            sys.stdout.write(render_hyper_config(read_hyper_config(path, ctx)))
        elif args.command == 'write':
            config = load_json_arg(args.config)
            if not isinstance(config, dict):
                return fail("config must be a JSON object")
            write_hyper_config(config, path, ctx)
        elif args.command == 'set':
            update_hyper_config(nested_overlay(args.key, parse_scalar(args.value)), path, ctx)
        elif args.command == 'plugins':
            if args.names:
                config = update_hyper_config({'plugins': list(args.names)}, path, ctx)
            else:
                config = read_hyper_config(path, ctx)
            print_json(config['plugins'])
    except (OSError, ValueError) as e:
        return fail(str(e))
    return SUCCESS_EXIT_CODE


if __name__ == "__main__":
    raise SystemExit(main())
