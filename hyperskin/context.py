"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Explicit runtime context: where files live and where diagnostics go.

A `Context` is built once by the caller (a CLI script, a test, an embedding
application) and passed to every reader/writer. Nothing in hyperskin keeps
module-level mutable state.
"""
from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, TextIO

from hyperskin.store import SettingsStore

STORE_FILE_NAME = 'hyperskin-config.json'
BUILTIN_THEMES_DIR_NAME = 'builtin_themes'


def _color_enabled(color: str, stream: TextIO) -> bool:
    if color == 'never':
        return False
    if color == 'always':
        return True
    try:
        # auto (default)
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def debug_color(text: str, level: int) -> str:
    # simple level -> color mapping
    colors = {
        1: '\x1b[33m',
        2: '\x1b[36m',
        3: '\x1b[35m',
        4: '\x1b[34m',
    }
    code = colors.get(level, '\x1b[37m')
    return f"{code}{text}\x1b[0m"


def parse_debug_specs(specs: list[str | None] | None) -> tuple[int, str | None]:
    """Fold repeated `--debug` values into (level, target category).

    Each spec is a positive integer level, `level=N`, or `target=NAME`
    (alias `category=NAME`). A bare `--debug` means level 1.
    """
    if not specs:
        return 0, None
    max_level = 0
    target = None
    for spec in specs:
        if spec is None:
            spec = '1'
        spec = str(spec).strip()
        if re.fullmatch(r'\d+', spec):
            max_level = max(max_level, int(spec))
            continue
        if '=' in spec:
            k, v = spec.split('=', 1)
            k = k.strip().lower()
            v = v.strip().strip('"').strip("'")
            if k in ('target', 'category'):
                target = v
            elif k == 'level' and re.fullmatch(r'\d+', v):
                max_level = max(max_level, int(v))
    if max_level == 0:
        max_level = 1
    return max_level, target


@dataclass
class Context:
    """Resolved locations plus the debug sink for one hyperskin session."""

    home: Path = field(default_factory=Path.home)
    environ: Mapping[str, str] = field(default_factory=lambda: os.environ)
    store: SettingsStore | None = None
    debug_level: int = 0
    debug_target: str | None = None
    color: str = 'auto'
    stream: TextIO = field(default_factory=lambda: sys.stderr)
    themes_dir: Path | None = None

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None, **kwargs: Any) -> 'Context':
        """Build a context from the process environment.

        `HYPERSKIN_DEBUG` supplies the default debug level and the settings
        store is opened from `store_path()` unless one is passed in.
        """
        environ = os.environ if environ is None else environ
        if 'debug_level' not in kwargs:
            raw = environ.get('HYPERSKIN_DEBUG', '').strip()
            kwargs['debug_level'] = int(raw) if raw.isdigit() else 0
        ctx = cls(environ=environ, **kwargs)
        if ctx.store is None:
            ctx.store = SettingsStore(ctx.store_path())
        return ctx

    def debug_echo(self, level: int, category: str, msg: str) -> None:
        """Emit a filtered, leveled debug message to the context stream.

        Messages are emitted when `level` <= `debug_level` and the category
        filter (if set) matches.
        """
        if self.debug_level <= 0 or level > self.debug_level:
            return
        if self.debug_target and self.debug_target != 'all' and category != self.debug_target:
            return
        out = f"[DEBUG:{level}:{category}] {msg}"
        if _color_enabled(self.color, self.stream):
            out = debug_color(out, level)
        self.stream.write(out + '\n')

    def settings(self) -> dict[str, Any]:
        """Return the app settings slot, or an empty dict without a store."""
        if self.store is None:
            return {}
        return self.store.get('settings')

    def configured_path(self, name: str) -> Path | None:
        """Return the store override `name` when it is set and exists on disk."""
        value = self.settings().get(name)
        if value and Path(value).exists():
            return Path(value)
        return None

    def claude_dir(self) -> Path:
        return self.home / '.claude'

    def claude_settings_path(self) -> Path:
        return self.claude_dir() / 'settings.json'

    def mcp_config_path(self) -> Path:
        return self.claude_dir() / 'claude_desktop_config.json'

    def default_hyper_config_path(self) -> Path:
        return self.home / '.hyper.js'

    def local_app_data(self) -> Path:
        value = self.environ.get('LOCALAPPDATA')
        if value:
            return Path(value)
        return self.home / 'AppData' / 'Local'

    def user_data_dir(self) -> Path:
        """hyperskin's own data directory.

        `HYPERSKIN_HOME` wins; otherwise %APPDATA%/hyperskin on Windows,
        ~/Library/Application Support/hyperskin on macOS and
        ~/.config/hyperskin elsewhere.
        """
        override = self.environ.get('HYPERSKIN_HOME')
        if override:
            return Path(override)
        if sys.platform == 'win32':
            appdata = self.environ.get('APPDATA')
            base = Path(appdata) if appdata else self.home / 'AppData' / 'Roaming'
            return base / 'hyperskin'
        if sys.platform == 'darwin':
            return self.home / 'Library' / 'Application Support' / 'hyperskin'
        return self.home / '.config' / 'hyperskin'

    def store_path(self) -> Path:
        return self.user_data_dir() / STORE_FILE_NAME

    def builtin_themes_dir(self) -> Path:
        """Directory of the shipped `*.json` theme presets."""
        if self.themes_dir is not None:
            return Path(self.themes_dir)
        return Path(__file__).parent / BUILTIN_THEMES_DIR_NAME
