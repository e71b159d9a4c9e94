#!/usr/bin/env python3
"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Manage theme presets and apply them to Windows Terminal or Hyper.

Usage:
    ./bin/hyperskin-theme.py [--store FILE] [--debug [N]] COMMAND [ARGS]

Commands:
    list                        Print stored presets as JSON.
    builtins                    Print the shipped presets as JSON.
    export ID [--output FILE]   Print a stored or built-in preset, or write it to FILE.
    import PRESET               Store PRESET (JSON, a file, or '-') under a new id.
    save PRESET                 Insert or update (by name, ignoring case) a preset.
    delete ID                   Delete a preset (built-ins cannot be deleted).
    apply ID TARGET [--path F]  Apply a preset (stored first, then built-in); TARGET is
                                windows-terminal or hyper.

Examples:
    ./bin/hyperskin-theme.py export builtin-dracula --output dracula.json
    ./bin/hyperskin-theme.py import dracula.json
    ./bin/hyperskin-theme.py apply 6f0c... windows-terminal

Exit codes:
    0   Success
    1   Usage / bad args
    2   Unknown theme, incomplete preset, file read/write or other runtime error
"""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import List

from hyperskin.cli import SUCCESS_EXIT_CODE, build_parser, context_from_args, fail, load_json_arg, print_json
from hyperskin.themes import (
    TARGETS,
    apply_theme,
    delete_theme,
    export_theme,
    import_theme,
    list_builtin_themes,
    list_themes,
    save_theme,
)


def main(argv: List[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser(
        description="Manage theme presets and apply them to terminal configs.",
        epilog="Example: %(prog)s apply ID hyper",
    )
    sub = parser.add_subparsers(dest='command', required=True)
    sub.add_parser('list', help="Print stored presets")
    sub.add_parser('builtins', help="Print the shipped presets")
    export = sub.add_parser('export', help="Print or save a preset")
    export.add_argument('id')
    export.add_argument('--output', '-o', default=None, help="File to write instead of stdout")
    imp = sub.add_parser('import', help="Import a preset under a new id")
    imp.add_argument('preset')
    save = sub.add_parser('save', help="Insert or update a preset by name")
    save.add_argument('preset')
    delete = sub.add_parser('delete', help="Delete a preset")
    delete.add_argument('id')
    apply = sub.add_parser('apply', help="Apply a preset to a terminal")
    apply.add_argument('id')
    apply.add_argument('target', choices=TARGETS)
    apply.add_argument('--path', '-p', default=None, help="Config file to edit instead of the detected one")
    args = parser.parse_args(argv)

    ctx = context_from_args(args)

    try:
        if args.command == 'list':
            print_json(list_themes(ctx))
        elif args.command == 'builtins':
            print_json(list_builtin_themes(ctx))
        elif args.command == 'export':
            theme = export_theme(ctx, args.id)
            if args.output:
                Path(args.output).write_text(json.dumps(theme, indent=2, ensure_ascii=False) + '\n', encoding='utf-8')
                print(f"Exported theme {args.id} to {args.output}")
            else:
                print_json(theme)
        elif args.command == 'import':
            print_json(import_theme(ctx, load_json_arg(args.preset)))
        elif args.command == 'save':
            print_json(save_theme(ctx, load_json_arg(args.preset)))
        elif args.command == 'delete':
            delete_theme(ctx, args.id)
        elif args.command == 'apply':
            apply_theme(ctx, args.id, args.target, args.path)
            print(f"Applied theme {args.id} to {args.target}")
    except (OSError, ValueError) as e:
        return fail(str(e))
    return SUCCESS_EXIT_CODE


if __name__ == "__main__":
    raise SystemExit(main())
