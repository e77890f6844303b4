"""Error types raised by the sidebar core."""

from __future__ import annotations


class SidebarError(Exception):
    """Base class for user-reportable sidebar failures."""


class InvalidSpec(SidebarError, ValueError):
    """A width setting is neither a positive integer nor a valid percentage."""

    def __init__(self, value: object, reason: str = "") -> None:
        self.value = value
        detail = f": {reason}" if reason else ""
        super().__init__(f"Invalid width spec {value!r}{detail}")


class NoSelection(SidebarError):
    """The interactive provider chooser was cancelled."""

    def __init__(self, message: str = "No agent provider selected") -> None:
        super().__init__(message)


class StaleHandle(SidebarError):
    """A panel or view handle no longer refers to a live object."""


class ConfigError(SidebarError):
    """Configuration file could not be read or validated."""
