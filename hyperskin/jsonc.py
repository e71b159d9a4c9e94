"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Turn JSONC text into strict JSON text.

Behavior:
    - Removes single-line `//` and block `/* ... */` comments while respecting
      double-quoted string literals and their backslash escapes.
    - Drops a comma when the next significant character (after whitespace and
      comments) is `}` or `]`.
    - Never raises. An unterminated block comment consumes the rest of the
      input; strict JSON parsing afterwards is the real validation step.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def _skip_insignificant(text: str, i: int) -> int:
    """Return the index of the next character that is not whitespace or comment."""
    n = len(text)
    while i < n:
        ch = text[i]
        if ch.isspace():
            i += 1
            continue
        nxt = text[i + 1] if i + 1 < n else ''
        if ch == '/' and nxt == '/':
            i += 2
            while i < n and text[i] != '\n':
                i += 1
            continue
        if ch == '/' and nxt == '*':
            end = text.find('*/', i + 2)
            i = n if end == -1 else end + 2
            continue
        break
    return i


def strip_comments(jsonc_string: str) -> str:
    """Return `jsonc_string` with comments and trailing commas removed.

    Single-line comments stop before their newline, so line numbers in a
    later `json.JSONDecodeError` still point at the original source.
    """
    out = []
    i = 0
    n = len(jsonc_string)
    in_string = False
    escape_next = False

    while i < n:
        ch = jsonc_string[i]

        if in_string:
            out.append(ch)
            if escape_next:
                escape_next = False
            elif ch == '\\':
                escape_next = True
            elif ch == '"':
                in_string = False
            i += 1
            continue

        # not in a string
        if ch == '"':
            in_string = True
            out.append(ch)
            i += 1
            continue

        if ch == '/' and i + 1 < n:
            nxt = jsonc_string[i + 1]
            if nxt == '/':
                # single-line comment: skip until end of line, keep the newline
                i += 2
                while i < n and jsonc_string[i] != '\n':
                    i += 1
                continue
            if nxt == '*':
                # block comment: no nesting, unterminated runs to end of input
                end = jsonc_string.find('*/', i + 2)
                i = n if end == -1 else end + 2
                continue

        if ch == ',':
            j = _skip_insignificant(jsonc_string, i + 1)
            if j < n and jsonc_string[j] in '}]':
                i += 1
                continue

        out.append(ch)
        i += 1

    return ''.join(out)


def loads_jsonc(jsonc_string: str) -> Any:
    """Parse JSONC text; `json.JSONDecodeError` propagates to the caller."""
    return json.loads(strip_comments(jsonc_string))


def read_jsonc(path: Path) -> Any:
    return loads_jsonc(Path(path).read_text(encoding='utf-8'))
