"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Small synchronous key/value store for hyperskin's own settings.

The store is one JSON object with a fixed set of named slots (`settings`,
`projects`, `claudeInstances`, `themePresets`). Every `get` re-reads the file
and fills in defaults, so callers always see complete values.
"""
from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

from hyperskin.defaults import DEFAULT_STORE
from hyperskin.merge import deep_merge, is_plain_object


class SettingsStore:
    def __init__(self, path: Path, defaults: dict[str, Any] | None = None):
        self.path = Path(path)
        self.defaults = DEFAULT_STORE if defaults is None else defaults

    def _load(self) -> dict[str, Any]:
        try:
            data = json.loads(self.path.read_text(encoding='utf-8'))
        except (OSError, ValueError):
            # missing or unreadable store: behave as a fresh install
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, slot: str) -> Any:
        if slot not in self.defaults:
            raise KeyError(f"unknown store slot '{slot}'")
        default = self.defaults[slot]
        value = self._load().get(slot, default)
        if is_plain_object(default) and is_plain_object(value):
            return deep_merge(default, value)
        if isinstance(default, list) and not isinstance(value, list):
            return []
        return copy.deepcopy(value)

    def set(self, slot: str, value: Any) -> None:
        if slot not in self.defaults:
            raise KeyError(f"unknown store slot '{slot}'")
        data = self._load()
        data[slot] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2) + '\n', encoding='utf-8')

    def set_path(self, name: str, value: str | Path) -> None:
        """Record a configured file location such as `wtSettingsPath`."""
        settings = self.get('settings')
        settings[name] = str(value)
        self.set('settings', settings)
