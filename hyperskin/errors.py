"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Exceptions raised by hyperskin.

Registry errors carry the quoted name in their message so calling code can
show them to the user as-is, e.g. `MCP server "fs" already exists`.
"""
from __future__ import annotations


class HyperskinError(Exception):
    """Base class for hyperskin errors."""


class RegistryError(HyperskinError, ValueError):
    """A registry reconciler refused a mutation."""

    def __init__(self, kind: str, name: str, reason: str):
        self.kind = kind
        self.name = name
        super().__init__(f'{kind} "{name}" {reason}')


class DuplicateNameError(RegistryError):
    def __init__(self, name: str, kind: str = "Entry"):
        super().__init__(kind, name, "already exists")


class NotFoundError(RegistryError):
    def __init__(self, name: str, kind: str = "Entry"):
        super().__init__(kind, name, "not found")


class ThemeError(HyperskinError, ValueError):
    """A theme preset could not be saved, deleted or applied."""
