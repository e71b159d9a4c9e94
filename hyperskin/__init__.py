"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Read, edit and write developer terminal configuration files.

Windows Terminal `settings.json` (JSONC), Hyper `.hyper.js` (a JavaScript
object literal), the Claude MCP server registry and Claude settings are
loaded into plain Python structures, mutated by callers, and written back
without disturbing the parts of each file this package does not own.
"""
from __future__ import annotations

from hyperskin.context import Context
from hyperskin.errors import (
    DuplicateNameError,
    HyperskinError,
    NotFoundError,
    RegistryError,
    ThemeError,
)
from hyperskin.hyper_config import read_hyper_config, serialize_js, write_hyper_config
from hyperskin.jsonc import loads_jsonc, strip_comments
from hyperskin.merge import deep_merge
from hyperskin.registry import ClaudeSettings, McpRegistry, McpServer
from hyperskin.wt_config import WtColorScheme, WtConfig, read_wt_config, write_wt_config

__version__ = "0.3.0"

__all__ = [
    "ClaudeSettings",
    "Context",
    "DuplicateNameError",
    "HyperskinError",
    "McpRegistry",
    "McpServer",
    "NotFoundError",
    "RegistryError",
    "ThemeError",
    "WtColorScheme",
    "WtConfig",
    "deep_merge",
    "loads_jsonc",
    "read_hyper_config",
    "read_wt_config",
    "serialize_js",
    "strip_comments",
    "write_hyper_config",
    "write_wt_config",
]
