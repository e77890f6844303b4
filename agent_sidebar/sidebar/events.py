"""Panel lifecycle events and lightweight signal bus."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Union

from loguru import logger


SESSION_STARTED = "session.started"
SESSION_STOPPED = "session.stopped"
PANEL_SHOWN = "panel.shown"
PANEL_HIDDEN = "panel.hidden"
PROJECT_RESET = "project.reset"


@dataclass(frozen=True)
class SessionStarted:
    """A new agent session was started for a project."""

    project_id: str
    provider_key: str
    fresh_session: bool


@dataclass(frozen=True)
class SessionStopped:
    project_id: str


@dataclass(frozen=True)
class PanelShown:
    """Panel attached to a side window."""

    project_id: str
    width: int


@dataclass(frozen=True)
class PanelHidden:
    """Panel window closed; session kept alive."""

    project_id: str
    saved_width: int | None


@dataclass(frozen=True)
class ProjectReset:
    project_id: str


SidebarEvent = Union[SessionStarted, SessionStopped, PanelShown, PanelHidden, ProjectReset]
EventHandler = Callable[[SidebarEvent], None]


class EventHub:
    """Synchronous pub/sub for panel lifecycle events.

    Handlers run in subscription order on the caller's thread, inside the
    command that published the event.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_name: str, handler: EventHandler) -> None:
        self._handlers[event_name].append(handler)

    def unsubscribe(self, event_name: str, handler: EventHandler) -> bool:
        handlers = self._handlers.get(event_name, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def publish(self, event_name: str, payload: SidebarEvent) -> None:
        handlers = list(self._handlers.get(event_name, []))
        logger.debug(f"[events] {event_name} -> {len(handlers)} handler(s)")
        for handler in handlers:
            handler(payload)
