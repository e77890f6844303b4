"""Panel state machine: create, show, hide and replace per-project sessions.

Every command resolves all fallible inputs (provider choice, width
configuration) before it touches the store, the window manager or the
session backend, so a failed or cancelled command leaves state untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from loguru import logger

from agent_sidebar.config.schema import Config, ProviderConfig, SidebarConfig
from agent_sidebar.host.protocols import (
    PanelHandle,
    ProjectIdentifier,
    SessionBackend,
    SessionOptions,
    ViewHandle,
    WindowManager,
)
from agent_sidebar.sidebar.events import (
    PANEL_HIDDEN,
    PANEL_SHOWN,
    PROJECT_RESET,
    SESSION_STARTED,
    SESSION_STOPPED,
    EventHub,
    PanelHidden,
    PanelShown,
    ProjectReset,
    SessionStarted,
    SessionStopped,
)
from agent_sidebar.sidebar.focus import FocusTracker
from agent_sidebar.sidebar.provider_selector import ProviderSelector
from agent_sidebar.sidebar.state_store import ProjectStateStore, SessionRecord
from agent_sidebar.sidebar.width import resolve_width


class PanelVisibility(str, Enum):
    """Derived panel state of a project."""

    ABSENT = "absent"
    HIDDEN = "hidden"
    VISIBLE = "visible"


@dataclass(frozen=True)
class SessionSummary:
    """One live session as reported by :meth:`PanelController.list_sessions`."""

    project_id: str
    visibility: PanelVisibility
    provider_label: str


class PanelController:
    """Drives toggle / toggle-focus / change-provider / reset for the current project."""

    def __init__(
        self,
        config: Config,
        store: ProjectStateStore,
        focus: FocusTracker,
        selector: ProviderSelector,
        backend: SessionBackend,
        windows: WindowManager,
        projects: ProjectIdentifier,
        events: EventHub | None = None,
    ) -> None:
        self._config = config
        self._store = store
        self._focus = focus
        self._selector = selector
        self._backend = backend
        self._windows = windows
        self._projects = projects
        self._events = events or EventHub()

    @property
    def events(self) -> EventHub:
        return self._events

    @property
    def _sidebar(self) -> SidebarConfig:
        return self._config.sidebar

    # ------------------------------------------------------------------ #
    # Queries                                                              #
    # ------------------------------------------------------------------ #

    def current_project(self) -> str:
        return self._projects.current_project_id()

    def visibility(self, project_id: str | None = None) -> PanelVisibility:
        pid = project_id or self.current_project()
        if pid not in self._store:
            return PanelVisibility.ABSENT
        return self._visibility_of(self._store.get(pid).panel_handle)

    def list_sessions(self) -> list[SessionSummary]:
        result: list[SessionSummary] = []
        for pid, record in self._store.items():
            state = self._visibility_of(record.panel_handle)
            if state is PanelVisibility.ABSENT:
                continue
            label = record.provider_config.label if record.provider_config else ""
            result.append(SessionSummary(project_id=pid, visibility=state, provider_label=label))
        return result

    # ------------------------------------------------------------------ #
    # Commands                                                             #
    # ------------------------------------------------------------------ #

    def toggle(self) -> None:
        """Hide a visible panel, show a hidden one, or start a new session."""
        pid = self.current_project()
        handle = self._live_panel(pid)
        if handle is None:
            self._create(pid, select=self._sidebar.focus_on_open)
            return
        view = self._windows.view_for(handle)
        if view is not None:
            self._hide(pid, view)
        else:
            self._show(pid, handle, select=self._sidebar.focus_on_open)

    def toggle_focus(self) -> None:
        """Move focus into the panel, or back out of it. Never hides the panel."""
        pid = self.current_project()
        current = self._windows.selected_view()
        handle = self._live_panel(pid)
        view = self._windows.view_for(handle) if handle is not None else None
        if view is not None and current is not None and view == current:
            logger.debug(f"[panel] {pid}: leaving panel")
            self._focus.restore()
            return
        self._ensure_visible(pid, handle, view, fresh_session=None)

    def resume(self) -> None:
        """Like toggle-focus, but a new session continues the previous conversation."""
        pid = self.current_project()
        handle = self._live_panel(pid)
        view = self._windows.view_for(handle) if handle is not None else None
        self._ensure_visible(pid, handle, view, fresh_session=False)

    def change_provider(self) -> None:
        """Restart the project's session with a freshly chosen provider."""
        pid = self.current_project()
        provider = self._selector.select()
        self._target_width(self._store.get(pid))
        self._teardown(pid)
        self._create(pid, select=True, provider=provider)

    def stop(self) -> None:
        """End the project's session but keep its provider and width."""
        pid = self.current_project()
        self._teardown(pid)

    def reset(self) -> None:
        """End the project's session and forget everything about the project."""
        pid = self.current_project()
        self._teardown(pid)
        self._store.remove(pid)
        logger.debug(f"[panel] {pid}: reset")
        self._events.publish(PROJECT_RESET, ProjectReset(project_id=pid))

    # ------------------------------------------------------------------ #
    # Transitions                                                          #
    # ------------------------------------------------------------------ #

    def _ensure_visible(
        self,
        pid: str,
        handle: PanelHandle | None,
        view: ViewHandle | None,
        fresh_session: bool | None,
    ) -> None:
        if view is not None:
            self._remember_focus(pid, self._windows.selected_view())
            self._windows.select_view(view)
        elif handle is not None:
            self._show(pid, handle, select=True)
        else:
            self._create(pid, select=True, fresh_session=fresh_session)

    def _create(
        self,
        pid: str,
        select: bool,
        provider: ProviderConfig | None = None,
        fresh_session: bool | None = None,
    ) -> None:
        record = self._store.get(pid)
        provider = provider or record.provider_config or self._selector.select()
        width = self._target_width(record)
        options = SessionOptions(
            auto_focus=select,
            fresh_session=self._sidebar.fresh_session if fresh_session is None else fresh_session,
        )

        handle = self._backend.start_session(provider, pid, options)
        self._store.update(pid, panel_handle=handle, provider_config=provider)
        logger.debug(f"[panel] {pid}: started {provider.key} session")
        self._events.publish(
            SESSION_STARTED,
            SessionStarted(project_id=pid, provider_key=provider.key, fresh_session=options.fresh_session),
        )
        self._show(pid, handle, select=select, width=width)

    def _show(self, pid: str, handle: PanelHandle, select: bool, width: int | None = None) -> None:
        if width is None:
            width = self._target_width(self._store.get(pid))
        if select:
            self._remember_focus(pid, self._windows.selected_view())

        view = self._windows.display_side(handle, self._sidebar.position)
        self._apply_window_settings(view, width)
        if select:
            self._windows.select_view(view)
        logger.debug(f"[panel] {pid}: shown at {width} columns")
        self._events.publish(PANEL_SHOWN, PanelShown(project_id=pid, width=width))

    def _hide(self, pid: str, view: ViewHandle) -> None:
        saved: int | None = None
        if not self._sidebar.locked:
            saved = self._windows.view_width(view)
            self._store.update(pid, saved_width=saved)
        self._windows.close_view(view)
        self._focus.restore()
        logger.debug(f"[panel] {pid}: hidden (saved_width={saved})")
        self._events.publish(PANEL_HIDDEN, PanelHidden(project_id=pid, saved_width=saved))

    def _teardown(self, pid: str) -> None:
        if pid not in self._store:
            return
        handle = self._store.get(pid).panel_handle
        if handle is None:
            return
        self._close_panel_view(handle)
        if handle.is_live():
            self._backend.destroy_session(handle)
            logger.debug(f"[panel] {pid}: session stopped")
            self._events.publish(SESSION_STOPPED, SessionStopped(project_id=pid))
        self._store.update(pid, panel_handle=None)

    # ------------------------------------------------------------------ #
    # Helpers                                                              #
    # ------------------------------------------------------------------ #

    def _live_panel(self, pid: str) -> PanelHandle | None:
        """Return the project's panel handle, clearing it if it went stale."""
        handle = self._store.get(pid).panel_handle
        if handle is None:
            return None
        if not handle.is_live():
            logger.debug(f"[panel] {pid}: stale panel handle dropped")
            self._close_panel_view(handle)
            self._store.update(pid, panel_handle=None)
            return None
        return handle

    def _close_panel_view(self, handle: PanelHandle) -> None:
        """Close any window still showing ``handle``, live or not."""
        view = self._windows.view_for(handle)
        if view is None:
            return
        was_selected = view == self._windows.selected_view()
        self._windows.close_view(view)
        if was_selected:
            self._focus.restore()

    def _visibility_of(self, handle: PanelHandle | None) -> PanelVisibility:
        if handle is None or not handle.is_live():
            return PanelVisibility.ABSENT
        if self._windows.view_for(handle) is None:
            return PanelVisibility.HIDDEN
        return PanelVisibility.VISIBLE

    def _target_width(self, record: SessionRecord) -> int:
        """Width for the next attach: saved width when unlocked, else from config."""
        if not self._sidebar.locked and record.saved_width is not None:
            return record.saved_width
        configured, minimum, maximum = self._sidebar.width_specs()
        return resolve_width(configured, minimum, maximum, self._windows.frame_width())

    def _apply_window_settings(self, view: ViewHandle, width: int) -> None:
        locked = self._sidebar.locked
        # A lone window spans the frame and cannot be resized.
        if self._windows.window_count() > 1:
            self._windows.resize_view(view, width)
        self._windows.set_cycle_skip(view, locked)
        self._windows.set_fixed_width(view, locked)

    def _remember_focus(self, pid: str, view: ViewHandle | None) -> None:
        if self._focus.save_if_outside_panel(view):
            self._store.update(pid, last_focused_view=view)
