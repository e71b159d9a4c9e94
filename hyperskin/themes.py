"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Theme presets kept in the settings store and applied to terminal configs.

A preset is a dict with `id`, `name`, `description`, `builtin`, `source`,
`createdAt`, `updatedAt` and optional `wtScheme` (a complete Windows Terminal
color scheme) and `hyperConfig` (a partial Hyper `config` section).

Built-in presets are read from `*.json` files in the context's built-in
themes directory on every call. They are never written to the store, and
they are looked up only after the stored presets.
"""
from __future__ import annotations

import copy
import datetime as dt
import json
import uuid
from pathlib import Path
from typing import Any, Mapping

from hyperskin.context import Context
from hyperskin.errors import ThemeError
from hyperskin.hyper_config import read_hyper_config, write_hyper_config
from hyperskin.wt_config import WtColorScheme, add_scheme

TARGETS = ('windows-terminal', 'hyper')


def utc_now() -> str:
    return dt.datetime.now(dt.timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _require_store(context: Context):
    if context.store is None:
        raise ThemeError("theme presets need a settings store")
    return context.store


def list_themes(context: Context) -> list[dict[str, Any]]:
    return _require_store(context).get('themePresets')


def list_builtin_themes(context: Context) -> list[dict[str, Any]]:
    """Presets shipped as JSON files, sorted by name.

    Files that cannot be read or do not hold a JSON object are skipped.
    """
    themes_dir = context.builtin_themes_dir()
    if not themes_dir.is_dir():
        context.debug_echo(2, 'themes', f"no built-in themes directory at {themes_dir}")
        return []
    themes = []
    for path in sorted(themes_dir.glob('*.json')):
        try:
            theme = json.loads(path.read_text(encoding='utf-8'))
        except (OSError, ValueError) as e:
            context.debug_echo(1, 'themes', f"skipping {path.name}: {e}")
            continue
        if not isinstance(theme, dict):
            context.debug_echo(1, 'themes', f"skipping {path.name}: not a JSON object")
            continue
        theme['builtin'] = True
        theme['source'] = 'builtin'
        theme.setdefault('id', 'builtin-' + path.stem)
        themes.append(theme)
    return sorted(themes, key=lambda t: str(t.get('name', '')).casefold())


def find_theme(context: Context, theme_id: str) -> dict[str, Any]:
    """Stored presets first, then built-ins."""
    for theme in list_themes(context):
        if theme.get('id') == theme_id:
            return theme
    for theme in list_builtin_themes(context):
        if theme.get('id') == theme_id:
            return theme
    raise ThemeError(f'Theme with id "{theme_id}" not found')


def save_theme(context: Context, theme: Mapping[str, Any]) -> dict[str, Any]:
    """Insert or update a preset.

    A preset whose name matches an existing one (ignoring case) replaces it
    in place and keeps the existing id and createdAt.
    """
    store = _require_store(context)
    themes = store.get('themePresets')
    now = utc_now()
    name = str(theme.get('name', '')).lower()
    index = next((i for i, t in enumerate(themes) if str(t.get('name', '')).lower() == name), -1)

    saved = copy.deepcopy(dict(theme))
    if index >= 0:
        saved['id'] = themes[index]['id']
        saved['createdAt'] = themes[index].get('createdAt', now)
        themes[index] = saved
    else:
        saved['id'] = str(uuid.uuid4())
        saved['createdAt'] = now
        themes.append(saved)
    saved['updatedAt'] = now
    store.set('themePresets', themes)
    context.debug_echo(1, 'themes', f"saved theme '{saved.get('name')}' ({saved['id']})")
    return saved


def delete_theme(context: Context, theme_id: str) -> None:
    """Delete a preset; unknown ids are ignored, built-ins are refused."""
    store = _require_store(context)
    themes = store.get('themePresets')
    builtin_ids = {t.get('id') for t in themes if t.get('builtin')}
    builtin_ids.update(t['id'] for t in list_builtin_themes(context))
    if theme_id in builtin_ids:
        raise ThemeError('Cannot delete built-in themes')
    store.set('themePresets', [t for t in themes if t.get('id') != theme_id])


def export_theme(context: Context, theme_id: str) -> dict[str, Any]:
    """Return a copy of a stored or built-in preset, ready to be imported elsewhere."""
    return copy.deepcopy(find_theme(context, theme_id))


def import_theme(context: Context, data: Mapping[str, Any]) -> dict[str, Any]:
    """Store a copy of `data` under a fresh id as a user theme."""
    store = _require_store(context)
    now = utc_now()
    imported = copy.deepcopy(dict(data))
    imported.update({
        'id': str(uuid.uuid4()),
        'builtin': False,
        'source': 'user',
        'createdAt': now,
        'updatedAt': now,
    })
    if imported.get('wtScheme') is not None:
        # reject incomplete schemes before they reach the store
        WtColorScheme.from_dict(imported['wtScheme'])
    themes = store.get('themePresets')
    themes.append(imported)
    store.set('themePresets', themes)
    return imported


def apply_theme(
    context: Context,
    theme_id: str,
    target: str,
    path: Path | str | None = None,
) -> None:
    """Apply preset `theme_id` to `target` ('windows-terminal' or 'hyper').

    Windows Terminal gets the preset's scheme added (replacing a scheme of
    the same name). Hyper gets `hyperConfig` shallow-merged over its
    `config` section and the whole file rewritten.
    """
    if target not in TARGETS:
        raise ThemeError(f"unknown target '{target}', expected one of: {', '.join(TARGETS)}")
    theme = find_theme(context, theme_id)

    if target == 'windows-terminal':
        if not theme.get('wtScheme'):
            raise ThemeError('Theme does not have a Windows Terminal color scheme')
        add_scheme(theme['wtScheme'], path, context)
        return

    if not theme.get('hyperConfig'):
        raise ThemeError('Theme does not have Hyper configuration')
    config = read_hyper_config(path, context)
    config['config'] = {**config['config'], **copy.deepcopy(theme['hyperConfig'])}
    write_hyper_config(config, path, context)
