"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Read and write Hyper's `.hyper.js`.

Behavior:
    - The file is script text, not data. Only the object literal on the
      right-hand side of the first `module.exports =` is looked at; any helper
      code before it is ignored.
    - The literal is parsed as JSON5 data (unquoted keys, single-quoted
      strings, comments, trailing commas). Nothing in the file is executed,
      so the file cannot reach the filesystem, network or process.
    - Parsing runs on a worker thread bounded by EVALUATION_TIMEOUT seconds.
    - Reading never raises: a missing file, a missing or non-literal export,
      a parse error, a timeout or a non-object result all produce a fresh copy
      of DEFAULT_HYPER_CONFIG. A successful read is deep-merged over the
      defaults so every field is present.
    - Writing replaces the whole file with `module.exports = <literal>;`.
"""
from __future__ import annotations

import copy
import math
import re
from concurrent import futures
from pathlib import Path
from typing import Any, Mapping

import json5

from hyperskin.context import Context
from hyperskin.defaults import DEFAULT_HYPER_CONFIG
from hyperskin.merge import deep_merge

EVALUATION_TIMEOUT = 2.0

EXPORTS_RE = re.compile(r'module\.exports\s*=\s*')
IDENTIFIER_RE = re.compile(r'^[a-zA-Z_$][a-zA-Z0-9_$]*$')

INDENT = '  '

OPENERS = {'{': '}', '[': ']'}


def default_hyper_config() -> dict[str, Any]:
    return copy.deepcopy(DEFAULT_HYPER_CONFIG)


def find_hyper_config_path(context: Context | None = None) -> Path:
    """Configured `hyperConfigPath` when it exists, else ~/.hyper.js."""
    context = context or Context()
    configured = context.configured_path('hyperConfigPath')
    if configured is not None:
        return configured
    return context.default_hyper_config_path()


def find_literal_bounds(text: str, start: int = 0) -> tuple[int, int]:
    """
    Find the bracketed literal beginning at the first significant character
    at or after `start`. Returns (index_of_opener, index_after_closer).
    Raises ValueError if the expression is not a bracketed literal or is
    unbalanced.
    """
    i = start
    n = len(text)

    # skip whitespace and comments before the literal
    while i < n:
        next2 = text[i:i + 2]
        if text[i].isspace():
            i += 1
        elif next2 == '//':
            while i < n and text[i] != '\n':
                i += 1
        elif next2 == '/*':
            end = text.find('*/', i + 2)
            i = n if end == -1 else end + 2
        else:
            break

    if i >= n or text[i] not in OPENERS:
        raise ValueError("module.exports is not assigned an object or array literal")

    first = i
    stack = []
    in_string = False
    string_char = ''
    esc = False
    in_line_comment = False
    in_block_comment = False

    while i < n:
        ch = text[i]
        next2 = text[i:i + 2]
        if in_line_comment:
            if ch == '\n':
                in_line_comment = False
            i += 1
            continue
        if in_block_comment:
            if next2 == '*/':
                in_block_comment = False
                i += 2
            else:
                i += 1
            continue
        if in_string:
            if esc:
                esc = False
            elif ch == '\\':
                esc = True
            elif ch == string_char:
                in_string = False
            i += 1
            continue
        # not in string/comment
        if next2 == '//':
            in_line_comment = True
            i += 2
            continue
        if next2 == '/*':
            in_block_comment = True
            i += 2
            continue
        if ch in ('"', "'", '`'):
            in_string = True
            string_char = ch
            i += 1
            continue
        if ch in OPENERS:
            stack.append(OPENERS[ch])
        elif ch in ('}', ']'):
            if not stack or stack.pop() != ch:
                raise ValueError(f"unbalanced '{ch}' at offset {i}")
            if not stack:
                return first, i + 1
        i += 1

    raise ValueError("exported literal is not closed before end of file")


def extract_exports_literal(source: str) -> str:
    """Return the literal text assigned by the first `module.exports =`."""
    match = EXPORTS_RE.search(source)
    if match is None:
        raise ValueError("no module.exports assignment found")
    first, end = find_literal_bounds(source, match.end())
    return source[first:end]


def evaluate_literal(source: str) -> Any:
    """Parse the exported literal of `.hyper.js` source text as data."""
    return json5.loads(extract_exports_literal(source))


def evaluate_with_timeout(source: str, timeout: float = EVALUATION_TIMEOUT) -> Any:
    """Run `evaluate_literal` on a worker thread, abandoning it after `timeout`.

    Raises concurrent.futures.TimeoutError when the deadline passes; a late
    result is discarded.
    """
    executor = futures.ThreadPoolExecutor(max_workers=1, thread_name_prefix='hyperskin-eval')
    try:
        future = executor.submit(evaluate_literal, source)
        return future.result(timeout=timeout)
    finally:
        executor.shutdown(wait=False, cancel_futures=True)


def read_hyper_config(
    path: Path | str | None = None,
    context: Context | None = None,
    timeout: float = EVALUATION_TIMEOUT,
) -> dict[str, Any]:
    """Read `.hyper.js` into a complete config dict; never raises."""
    context = context or Context()
    config_path = Path(path) if path else find_hyper_config_path(context)

    if not config_path.exists():
        context.debug_echo(1, 'hyper', f"{config_path} does not exist, using defaults")
        return default_hyper_config()

    try:
        raw = config_path.read_text(encoding='utf-8')
        parsed = evaluate_with_timeout(raw, timeout)
    except futures.TimeoutError:
        context.debug_echo(1, 'hyper', f"{config_path}: evaluation exceeded {timeout}s, using defaults")
        return default_hyper_config()
    except Exception as e:
        context.debug_echo(1, 'hyper', f"{config_path}: {e}, using defaults")
        return default_hyper_config()

    if not isinstance(parsed, Mapping):
        context.debug_echo(1, 'hyper', f"{config_path}: exported value is not an object, using defaults")
        return default_hyper_config()

    context.debug_echo(2, 'hyper', f"read {config_path}: keys={list(parsed)}")
    return deep_merge(DEFAULT_HYPER_CONFIG, parsed)


def quote_js_string(value: str) -> str:
    escaped = (
        value.replace('\\', '\\\\')
        .replace("'", "\\'")
        .replace('\n', '\\n')
        .replace('\r', '\\r')
        .replace('\t', '\\t')
    )
    return f"'{escaped}'"


def _format_number(value: int | float) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return 'NaN'
        if math.isinf(value):
            return 'Infinity' if value > 0 else '-Infinity'
    return repr(value)


def serialize_js(value: Any, indent: int = 0) -> str:
    """Render plain data as JavaScript source.

    Keys that are valid identifiers are left unquoted, strings use single
    quotes and nesting is indented two spaces per level. The output depends
    only on `value` (dict insertion order is kept).
    """
    pad = INDENT * indent
    pad_inner = INDENT * (indent + 1)

    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (int, float)):
        return _format_number(value)
    if isinstance(value, str):
        return quote_js_string(value)
    if isinstance(value, (list, tuple)):
        if not value:
            return '[]'
        items = [f"{pad_inner}{serialize_js(item, indent + 1)}" for item in value]
        return '[\n' + ',\n'.join(items) + '\n' + pad + ']'
    if isinstance(value, Mapping):
        if not value:
            return '{}'
        entries = []
        for key, item in value.items():
            key = str(key)
            safe_key = key if IDENTIFIER_RE.match(key) else quote_js_string(key)
            entries.append(f"{pad_inner}{safe_key}: {serialize_js(item, indent + 1)}")
        return '{\n' + ',\n'.join(entries) + '\n' + pad + '}'
    return str(value)


def render_hyper_config(config: Mapping[str, Any]) -> str:
    return f"module.exports = {serialize_js(config, 0)};\n"


def write_hyper_config(
    config: Mapping[str, Any],
    path: Path | str | None = None,
    context: Context | None = None,
) -> Path:
    """Overwrite `.hyper.js` with `config` and return the path written."""
    context = context or Context()
    config_path = Path(path) if path else find_hyper_config_path(context)
    config_path.write_text(render_hyper_config(config), encoding='utf-8')
    context.debug_echo(1, 'hyper', f"wrote {config_path}")
    return config_path


def update_hyper_config(
    overlay: Mapping[str, Any],
    path: Path | str | None = None,
    context: Context | None = None,
) -> dict[str, Any]:
    """Deep-merge `overlay` over the current config, write it, and return it."""
    context = context or Context()
    merged = deep_merge(read_hyper_config(path, context), overlay)
    write_hyper_config(merged, path, context)
    return merged
