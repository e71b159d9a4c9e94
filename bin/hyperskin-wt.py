#!/usr/bin/env python3
"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Inspect and edit Windows Terminal `settings.json`.

Usage:
    ./bin/hyperskin-wt.py [--path FILE] [--debug [N]] COMMAND [ARGS]

Commands:
    path                        Print the settings.json location in use.
    set-path FILE               Remember FILE as the settings.json location.
    read                        Print globals, profiles, schemes and actions as JSON.
    write CONFIG                Merge CONFIG (JSON in the `read` layout, a file, or '-') into settings.json.
    profiles                    Print the profile list as JSON.
    schemes                     Print the color schemes as JSON.
    add-scheme SCHEME           Add (or replace by name) a color scheme; SCHEME is JSON, a file, or '-'.
    remove-scheme NAME          Remove the color scheme NAME (unknown names are ignored).
    set-global KEY VALUE        Set a whitelisted global setting; VALUE is parsed as JSON when possible.
    history on|off [--size N]   Set historySize on every profile (off resets to 9001).

Examples:
    ./bin/hyperskin-wt.py schemes
    ./bin/hyperskin-wt.py add-scheme my-scheme.json
    ./bin/hyperskin-wt.py set-global copyOnSelect true
    ./bin/hyperskin-wt.py history on --size 50000

Behavior:
    - Reads JSONC; a file that does not parse is reported and left untouched.
    - Writes keep every top-level key hyperskin does not own, but comments are lost.

Exit codes:
    0   Success
    1   Usage / bad args
    2   File read/write, parse or other runtime error
"""
from __future__ import annotations

import sys
from typing import List

from hyperskin.cli import (
    SUCCESS_EXIT_CODE,
    build_parser,
    context_from_args,
    fail,
    load_json_arg,
    parse_scalar,
    print_json,
)
from hyperskin.defaults import DEFAULT_HISTORY_SIZE, WT_GLOBAL_KEYS
from hyperskin.wt_config import (
    WtConfig,
    add_scheme,
    find_wt_settings_path,
    list_profiles,
    list_schemes,
    read_wt_config,
    remove_scheme,
    set_persistent_history,
    write_wt_config,
)


def main(argv: List[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser(
        description="Inspect and edit Windows Terminal settings.json (JSONC).",
        epilog="Example: %(prog)s add-scheme my-scheme.json",
    )
    parser.add_argument('--path', '-p', default=None, help="settings.json to use instead of the detected one")
    sub = parser.add_subparsers(dest='command', required=True)
    sub.add_parser('path', help="Print the settings.json location in use")
    set_path = sub.add_parser('set-path', help="Remember a settings.json location")
    set_path.add_argument('file')
    sub.add_parser('read', help="Print the managed parts of settings.json")
    write = sub.add_parser('write', help="Merge a config in the `read` layout into settings.json")
    write.add_argument('config', help="Config JSON, a file containing it, or '-' for stdin")
    sub.add_parser('profiles', help="Print the profile list")
    sub.add_parser('schemes', help="Print the color schemes")
    add = sub.add_parser('add-scheme', help="Add or replace a color scheme")
    add.add_argument('scheme', help="Scheme JSON, a file containing it, or '-' for stdin")
    remove = sub.add_parser('remove-scheme', help="Remove a color scheme by name")
    remove.add_argument('name')
    set_global = sub.add_parser('set-global', help="Set a whitelisted global setting")
    set_global.add_argument('key', choices=WT_GLOBAL_KEYS)
    set_global.add_argument('value')
    history = sub.add_parser('history', help="Enable or disable persistent history")
    history.add_argument('state', choices=['on', 'off'])
    history.add_argument('--size', type=int, default=None, help="historySize when enabling (default: stored setting)")
    args = parser.parse_args(argv)

    ctx = context_from_args(args)
    path = args.path

    try:
        if args.command == 'path':
            print(path or find_wt_settings_path(ctx))
        elif args.command == 'set-path':
            ctx.store.set_path('wtSettingsPath', args.file)
            print(args.file)
        elif args.command == 'read':
            print_json(read_wt_config(path, ctx).to_dict())
        elif args.command == 'write':
            data = load_json_arg(args.config)
            if not isinstance(data, dict):
                return fail("config must be a JSON object")
            print(write_wt_config(WtConfig.from_dict(data), path, ctx))
        elif args.command == 'profiles':
            print_json(list_profiles(path, ctx))
        elif args.command == 'schemes':
            print_json(list_schemes(path, ctx))
        elif args.command == 'add-scheme':
            scheme = load_json_arg(args.scheme)
            add_scheme(scheme, path, ctx)
            print(f"Added color scheme '{scheme.get('name')}'")
        elif args.command == 'remove-scheme':
            remove_scheme(args.name, path, ctx)
            print(f"Removed color scheme '{args.name}'")
        elif args.command == 'set-global':
            config = read_wt_config(path, ctx)
            config.globals[args.key] = parse_scalar(args.value)
            write_wt_config(config, path, ctx)
        elif args.command == 'history':
            enabled = args.state == 'on'
            settings = ctx.settings()
            requested = args.size if args.size is not None else settings.get('historySize', DEFAULT_HISTORY_SIZE)
            size = set_persistent_history(enabled, requested, path, ctx)
            if ctx.store is not None:
                ctx.store.set('settings', {**settings, 'persistentHistory': enabled, 'historySize': requested})
            print(f"historySize set to {size} on all profiles")
    except (OSError, ValueError) as e:
        return fail(str(e))
    return SUCCESS_EXIT_CODE


if __name__ == "__main__":
    raise SystemExit(main())
