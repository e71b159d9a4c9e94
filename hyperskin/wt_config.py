"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Read and write Windows Terminal `settings.json` (JSONC).

Behavior:
    - Reading strips comments and trailing commas, parses strict JSON and
      copies a whitelisted subset into a `WtConfig`. A parse failure is raised
      to the caller; a hand-edited settings file is never silently reset.
    - Writing re-reads the file on disk, overwrites only the fields hyperskin
      owns and keeps every other top-level key as it was. Comments do not
      survive a write: the output is strict JSON with 4-space indentation.
    - An empty `actions` list on write means "leave actions alone", not
      "remove all actions".
    - Read-merge-write is not atomic. Two overlapping writers race and the
      last one wins.
"""
from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Iterable, List, Mapping

from hyperskin.context import Context
from hyperskin.defaults import (
    DEFAULT_WT_PROFILE,
    WT_GLOBAL_KEYS,
    WT_PACKAGE_NAMES,
)
from hyperskin.jsonc import loads_jsonc


@dataclass
class WtColorScheme:
    """One complete Windows Terminal color scheme; every field is required."""

    name: str
    background: str
    foreground: str
    cursorColor: str
    selectionBackground: str
    black: str
    red: str
    green: str
    yellow: str
    blue: str
    purple: str
    cyan: str
    white: str
    brightBlack: str
    brightRed: str
    brightGreen: str
    brightYellow: str
    brightBlue: str
    brightPurple: str
    brightCyan: str
    brightWhite: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'WtColorScheme':
        """Build a scheme, raising ValueError for missing or non-string fields.

        Keys that are not scheme fields are ignored.
        """
        missing = []
        invalid = []
        values = {}
        for f in fields(cls):
            if f.name not in data:
                missing.append(f.name)
                continue
            value = data[f.name]
            if not isinstance(value, str):
                invalid.append(f.name)
                continue
            values[f.name] = value
        if missing:
            raise ValueError(f"color scheme is missing field(s): {', '.join(missing)}")
        if invalid:
            raise ValueError(f"color scheme field(s) must be strings: {', '.join(invalid)}")
        return cls(**values)

    def to_dict(self) -> dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class WtProfiles:
    defaults: dict[str, Any] = field(default_factory=dict)
    list: List[dict[str, Any]] = field(default_factory=list)


@dataclass
class WtConfig:
    """The parts of settings.json hyperskin reads and writes.

    `schemes` and `actions` hold the raw JSON objects from the file; schemes
    are validated with `WtColorScheme` when they are added.
    """

    globals: dict[str, Any] = field(default_factory=dict)
    profiles: WtProfiles = field(default_factory=WtProfiles)
    schemes: List[dict[str, Any]] = field(default_factory=list)
    actions: List[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            'globals': copy.deepcopy(self.globals),
            'profiles': {
                'defaults': copy.deepcopy(self.profiles.defaults),
                'list': copy.deepcopy(self.profiles.list),
            },
            'schemes': copy.deepcopy(self.schemes),
            'actions': copy.deepcopy(self.actions),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'WtConfig':
        """Inverse of `to_dict`; missing sections default to empty.

        Raises ValueError when a section or list entry is not a JSON object.
        """
        def objects(values: Any, where: str) -> List[dict[str, Any]]:
            result = []
            for index, value in enumerate(values or []):
                if not isinstance(value, Mapping):
                    raise ValueError(f"{where}[{index}] is not a JSON object")
                result.append(copy.deepcopy(dict(value)))
            return result

        profiles = data.get('profiles') or {}
        for where, value in (('globals', data.get('globals')), ('profiles', profiles)):
            if value is not None and not isinstance(value, Mapping):
                raise ValueError(f"{where} is not a JSON object")
        return cls(
            globals=copy.deepcopy(dict(data.get('globals') or {})),
            profiles=WtProfiles(
                defaults=copy.deepcopy(dict(profiles.get('defaults') or {})),
                list=objects(profiles.get('list'), 'profiles.list'),
            ),
            schemes=objects(data.get('schemes'), 'schemes'),
            actions=objects(data.get('actions'), 'actions'),
        )


def wt_settings_candidates(context: Context) -> list[Path]:
    """Stable, preview and canary settings.json locations, in lookup order."""
    local = context.local_app_data()
    return [local / 'Packages' / name / 'LocalState' / 'settings.json' for name in WT_PACKAGE_NAMES]


def find_wt_settings_path(context: Context | None = None) -> Path:
    """Return the settings.json to use.

    A configured `wtSettingsPath` wins when the file exists. Otherwise the
    first existing channel install is used. When nothing exists the stable
    path is returned anyway; callers must handle a path whose file is absent.
    """
    context = context or Context()
    configured = context.configured_path('wtSettingsPath')
    if configured is not None:
        context.debug_echo(2, 'wt', f"using configured settings path {configured}")
        return configured
    candidates = wt_settings_candidates(context)
    for candidate in candidates:
        if candidate.exists():
            context.debug_echo(2, 'wt', f"found settings at {candidate}")
            return candidate
    context.debug_echo(1, 'wt', f"no settings.json found, defaulting to {candidates[0]}")
    return candidates[0]


def parse_wt_settings(parsed: Mapping[str, Any]) -> WtConfig:
    """Extract the owned subset of an already-parsed settings document."""
    globals_ = {key: copy.deepcopy(parsed[key]) for key in WT_GLOBAL_KEYS if key in parsed}

    profiles = parsed.get('profiles') or {}
    if not isinstance(profiles, Mapping):
        # legacy layout: "profiles" is a bare list
        profiles = {'list': profiles}
    defaults = copy.deepcopy(profiles.get('defaults') or {})
    profile_list = []
    for index, raw in enumerate(profiles.get('list') or []):
        if not isinstance(raw, Mapping):
            raise ValueError(f"profiles.list[{index}] is not a JSON object")
        entry = copy.deepcopy(dict(raw))
        if 'name' not in entry:
            entry['name'] = 'Unnamed'
        profile_list.append(entry)

    schemes = copy.deepcopy(parsed.get('schemes') or [])
    actions = parsed.get('actions')
    if actions is None:
        actions = parsed.get('keybindings')
    actions = copy.deepcopy(actions or [])

    return WtConfig(
        globals=globals_,
        profiles=WtProfiles(defaults=defaults, list=profile_list),
        schemes=schemes,
        actions=actions,
    )


def read_wt_config(path: Path | str | None = None, context: Context | None = None) -> WtConfig:
    """Read settings.json into a fresh `WtConfig`.

    Raises OSError when the file cannot be read and json.JSONDecodeError when
    it is not valid JSONC.
    """
    context = context or Context()
    settings_path = Path(path) if path else find_wt_settings_path(context)
    raw = settings_path.read_text(encoding='utf-8')
    parsed = loads_jsonc(raw)
    if not isinstance(parsed, Mapping):
        raise ValueError(f"{settings_path}: top-level JSON value is not an object")
    config = parse_wt_settings(parsed)
    context.debug_echo(
        1, 'wt',
        f"read {settings_path}: {len(config.profiles.list)} profile(s), "
        f"{len(config.schemes)} scheme(s), {len(config.actions)} action(s)",
    )
    return config


def _read_existing(settings_path: Path, context: Context) -> dict[str, Any]:
    """Current document on disk, or {} when it is absent or unparseable."""
    try:
        existing = loads_jsonc(settings_path.read_text(encoding='utf-8'))
    except FileNotFoundError:
        context.debug_echo(1, 'wt', f"{settings_path} does not exist, starting fresh")
        return {}
    except ValueError as e:
        context.debug_echo(1, 'wt', f"{settings_path} is not valid JSONC ({e}), starting fresh")
        return {}
    return existing if isinstance(existing, dict) else {}


def merge_wt_settings(existing: dict[str, Any], config: WtConfig) -> dict[str, Any]:
    """Merge the owned fields of `config` into the document `existing` in place."""
    for key in WT_GLOBAL_KEYS:
        if key in config.globals:
            existing[key] = copy.deepcopy(config.globals[key])

    profiles = existing.get('profiles')
    if not isinstance(profiles, dict):
        profiles = {}
        existing['profiles'] = profiles
    current_defaults = profiles.get('defaults')
    if not isinstance(current_defaults, dict):
        current_defaults = {}
    profiles['defaults'] = {**current_defaults, **copy.deepcopy(config.profiles.defaults)}
    profiles['list'] = copy.deepcopy(config.profiles.list)

    existing['schemes'] = copy.deepcopy(config.schemes)

    if config.actions:
        existing['actions'] = copy.deepcopy(config.actions)

    return existing


def dumps_wt_settings(document: Mapping[str, Any]) -> str:
    return json.dumps(document, indent=4, ensure_ascii=False) + '\n'


def write_wt_config(config: WtConfig, path: Path | str | None = None, context: Context | None = None) -> Path:
    """Merge `config` into settings.json on disk and return the path written."""
    context = context or Context()
    settings_path = Path(path) if path else find_wt_settings_path(context)
    existing = _read_existing(settings_path, context)
    merged = merge_wt_settings(existing, config)
    settings_path.write_text(dumps_wt_settings(merged), encoding='utf-8')
    context.debug_echo(1, 'wt', f"wrote {settings_path}")
    return settings_path


def list_profiles(path: Path | str | None = None, context: Context | None = None) -> list[dict[str, Any]]:
    return read_wt_config(path, context).profiles.list


def list_schemes(path: Path | str | None = None, context: Context | None = None) -> list[dict[str, Any]]:
    return read_wt_config(path, context).schemes


def replace_scheme(schemes: Iterable[Mapping[str, Any]], scheme: WtColorScheme) -> list[dict[str, Any]]:
    """Drop every scheme named like `scheme` and append `scheme`."""
    kept = [dict(s) for s in schemes if s.get('name') != scheme.name]
    kept.append(scheme.to_dict())
    return kept


def add_scheme(
    scheme: WtColorScheme | Mapping[str, Any],
    path: Path | str | None = None,
    context: Context | None = None,
) -> None:
    """Add a color scheme, replacing any existing scheme with the same name."""
    if not isinstance(scheme, WtColorScheme):
        scheme = WtColorScheme.from_dict(scheme)
    context = context or Context()
    config = read_wt_config(path, context)
    config.schemes = replace_scheme(config.schemes, scheme)
    write_wt_config(config, path, context)


def remove_scheme(name: str, path: Path | str | None = None, context: Context | None = None) -> None:
    """Remove the scheme called `name`; an unknown name is not an error."""
    context = context or Context()
    config = read_wt_config(path, context)
    config.schemes = [s for s in config.schemes if s.get('name') != name]
    write_wt_config(config, path, context)


def set_persistent_history(
    enabled: bool,
    history_size: int,
    path: Path | str | None = None,
    context: Context | None = None,
) -> int:
    """Set `historySize` on profile defaults and on every listed profile.

    Disabling resets to the default profile historySize and ignores
    `history_size`.
    Returns the size that was written.
    """
    context = context or Context()
    config = read_wt_config(path, context)
    size = history_size if enabled else DEFAULT_WT_PROFILE['historySize']
    config.profiles.defaults['historySize'] = size
    for profile in config.profiles.list:
        profile['historySize'] = size
    write_wt_config(config, path, context)
    return size
