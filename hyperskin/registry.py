"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Read-mutate-write reconcilers for flat JSON registries.

Two files are handled:
    - the Claude MCP server config (`claude_desktop_config.json`), a JSON
      object whose `mcpServers` member maps server name -> launch settings;
    - Claude's `settings.json`, an opaque flat bag of settings.

Behavior:
    - Every operation opens, reads, writes and closes the file within the
      call. Nothing is cached between calls and nothing is locked.
    - A missing file reads as an empty registry. A file that is not valid
      JSON raises json.JSONDecodeError from `list`, `get` and `read`; the
      mutating operations start over from an empty object instead, the same
      as the Windows Terminal writer.
    - An MCP entry that is not a JSON object raises ValueError.
    - `add` raises DuplicateNameError for an existing name; `remove`,
      `update` and `toggle` raise NotFoundError for an unknown name.
    - Renaming through `update` deletes the old key and inserts the new key
      in the same write, so the entry moves to the end of the map.
"""
from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from hyperskin.context import Context
from hyperskin.defaults import CLAUDE_MODELS
from hyperskin.errors import DuplicateNameError, NotFoundError


def read_json_object(path: Path) -> dict[str, Any]:
    """Parse `path` as a JSON object; a missing file reads as {}."""
    try:
        raw = path.read_text(encoding='utf-8')
    except FileNotFoundError:
        return {}
    parsed = json.loads(raw)
    return parsed if isinstance(parsed, dict) else {}


def read_json_object_for_write(path: Path, context: Context) -> dict[str, Any]:
    """Like `read_json_object`, but an unparseable file reads as {}."""
    try:
        return read_json_object(path)
    except ValueError as e:
        context.debug_echo(1, 'registry', f"{path} is not valid JSON ({e}), starting fresh")
        return {}


def write_json_object(path: Path, payload: Mapping[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + '\n', encoding='utf-8')


@dataclass
class McpServer:
    name: str
    command: str
    args: list[str] = field(default_factory=list)
    env: dict[str, str] | None = None
    enabled: bool = True

    @classmethod
    def from_entry(cls, name: str, entry: Mapping[str, Any]) -> 'McpServer':
        if not isinstance(entry, Mapping):
            raise ValueError(f'MCP server "{name}" entry is not a JSON object')
        return cls(
            name=name,
            command=entry.get('command', ''),
            args=list(entry.get('args') or []),
            env=copy.deepcopy(entry.get('env')),
            enabled=not entry.get('disabled', False),
        )

    def to_entry(self) -> dict[str, Any]:
        """On-disk form; `enabled` is stored inverted as `disabled`."""
        entry: dict[str, Any] = {'command': self.command, 'args': list(self.args)}
        if self.env is not None:
            entry['env'] = dict(self.env)
        entry['disabled'] = not self.enabled
        return entry


class McpRegistry:
    """MCP servers keyed by name in `claude_desktop_config.json`."""

    kind = 'MCP server'

    def __init__(self, path: Path | str | None = None, context: Context | None = None):
        self.context = context or Context()
        self.path = Path(path) if path else self.context.mcp_config_path()

    def _servers(self, config: dict[str, Any]) -> dict[str, Any]:
        servers = config.get('mcpServers')
        if not isinstance(servers, dict):
            servers = {}
            config['mcpServers'] = servers
        return servers

    def _load(self) -> dict[str, Any]:
        return read_json_object(self.path)

    def _load_for_write(self) -> dict[str, Any]:
        return read_json_object_for_write(self.path, self.context)

    def _save(self, config: dict[str, Any]) -> None:
        write_json_object(self.path, config)
        self.context.debug_echo(1, 'mcp', f"wrote {self.path}")

    def list(self) -> list[McpServer]:
        servers = self._load().get('mcpServers') or {}
        return [McpServer.from_entry(name, entry) for name, entry in servers.items()]

    def get(self, name: str) -> McpServer:
        servers = self._load().get('mcpServers') or {}
        if name not in servers:
            raise NotFoundError(name, self.kind)
        return McpServer.from_entry(name, servers[name])

    def add(self, server: McpServer) -> None:
        config = self._load_for_write()
        servers = self._servers(config)
        if server.name in servers:
            raise DuplicateNameError(server.name, self.kind)
        servers[server.name] = server.to_entry()
        self._save(config)

    def remove(self, name: str) -> None:
        config = self._load_for_write()
        servers = self._servers(config)
        if name not in servers:
            raise NotFoundError(name, self.kind)
        del servers[name]
        self._save(config)

    def update(self, server_name: str, **changes: Any) -> McpServer:
        """Apply `changes` (name, command, args, env, enabled) to `server_name`.

        Fields not passed (or passed as None, except `env`) keep their value.
        A new `name` deletes the old entry and inserts the new one; renaming
        onto another existing server raises DuplicateNameError.
        """
        unknown = set(changes) - {'name', 'command', 'args', 'env', 'enabled'}
        if unknown:
            raise TypeError(f"unknown MCP server field(s): {', '.join(sorted(unknown))}")

        config = self._load_for_write()
        servers = self._servers(config)
        if server_name not in servers:
            raise NotFoundError(server_name, self.kind)

        current = McpServer.from_entry(server_name, servers[server_name])
        new_name = changes.get('name') or server_name
        updated = McpServer(
            name=new_name,
            command=changes['command'] if changes.get('command') is not None else current.command,
            args=changes['args'] if changes.get('args') is not None else current.args,
            env=changes['env'] if 'env' in changes else current.env,
            enabled=changes['enabled'] if changes.get('enabled') is not None else current.enabled,
        )

        if new_name != server_name:
            if new_name in servers:
                raise DuplicateNameError(new_name, self.kind)
            del servers[server_name]
        servers[new_name] = updated.to_entry()
        self._save(config)
        return updated

    def toggle(self, name: str, enabled: bool) -> None:
        config = self._load_for_write()
        servers = self._servers(config)
        if name not in servers:
            raise NotFoundError(name, self.kind)
        if not isinstance(servers[name], dict):
            raise ValueError(f'MCP server "{name}" entry is not a JSON object')
        servers[name]['disabled'] = not enabled
        self._save(config)


class ClaudeSettings:
    """Claude's `settings.json`, treated as a flat bag of values."""

    kind = 'Setting'

    def __init__(self, path: Path | str | None = None, context: Context | None = None):
        self.context = context or Context()
        self.path = Path(path) if path else self.context.claude_settings_path()

    def read(self) -> dict[str, Any]:
        return read_json_object(self.path)

    def get(self, key: str) -> Any:
        settings = self.read()
        if key not in settings:
            raise NotFoundError(key, self.kind)
        return settings[key]

    def write(self, settings: Mapping[str, Any]) -> dict[str, Any]:
        """Shallow-merge `settings` over the file and return the result.

        Only the top level is merged; nested values are replaced whole.
        """
        existing = read_json_object_for_write(self.path, self.context)
        merged = {**existing, **copy.deepcopy(dict(settings))}
        write_json_object(self.path, merged)
        self.context.debug_echo(1, 'claude', f"wrote {self.path}: {sorted(settings)}")
        return merged

    def remove(self, key: str) -> None:
        settings = self.read()
        if key not in settings:
            raise NotFoundError(key, self.kind)
        del settings[key]
        write_json_object(self.path, settings)
        self.context.debug_echo(1, 'claude', f"removed '{key}' from {self.path}")

    @staticmethod
    def available_models() -> list[str]:
        return list(CLAUDE_MODELS)

    def update_subagent_model(self, model: str) -> None:
        models = self.available_models()
        if model not in models:
            raise ValueError(f"Invalid model: {model}. Available models: {', '.join(models)}")
        self.write({'model': model})
