"""Exceptions raised by the engine."""

from __future__ import annotations


class OfflineError(RuntimeError):
    pass


class OfflineConfigError(OfflineError, ValueError):
    """Invalid configuration; raised before any asset is processed."""


class DuplicateRestError(OfflineConfigError):
    pass


class ToolError(OfflineError):
    """A cache-consuming collaborator failed."""

    def __init__(self, tool: str, message: str) -> None:
        super().__init__(f"{tool}: {message}")
        self.tool = tool
