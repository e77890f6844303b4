"""Headless in-memory host: windows, sessions and messages without a GUI.

Used by the ``simulate`` CLI command and by the test-suite. Views are kept
in a flat list with a most-recently-used order; side windows are created by
:meth:`MemoryWindowManager.display_side` and dropped by ``close_view``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from loguru import logger

from agent_sidebar.config.schema import ProviderConfig
from agent_sidebar.errors import StaleHandle
from agent_sidebar.host.protocols import SessionOptions, Side


@dataclass(eq=False)
class MemoryPanel:
    """Session surface created by :class:`MemorySessionBackend`."""

    handle_id: str
    project_id: str
    provider: ProviderConfig
    options: SessionOptions = field(default_factory=SessionOptions)
    live: bool = True
    is_panel: bool = True

    def is_live(self) -> bool:
        return self.live

    def __repr__(self) -> str:
        state = "live" if self.live else "dead"
        return f"MemoryPanel({self.handle_id}, {self.project_id!r}, {state})"


@dataclass(eq=False)
class MemoryView:
    """One window of the in-memory frame."""

    view_id: str
    width: int
    panel: MemoryPanel | None = None
    side: str = ""
    live: bool = True
    cycle_skip: bool = False
    fixed_width: bool = False

    def is_live(self) -> bool:
        return self.live

    def is_panel(self) -> bool:
        return self.panel is not None and self.panel.is_panel

    def __repr__(self) -> str:
        return f"MemoryView({self.view_id}, width={self.width})"


class MemoryWindowManager:
    """Window manager over a single frame of ``frame_width`` columns."""

    def __init__(self, frame_width: int = 200) -> None:
        self._frame_width = frame_width
        self._counter = 0
        main = MemoryView(view_id="main", width=frame_width)
        self._views: list[MemoryView] = [main]
        self._mru: list[MemoryView] = [main]
        self._selected: MemoryView | None = main

    # ------------------------------------------------------------------ #
    # Frame                                                                #
    # ------------------------------------------------------------------ #

    def frame_width(self) -> int:
        return self._frame_width

    def set_frame_width(self, columns: int) -> None:
        self._frame_width = columns

    def window_count(self) -> int:
        return len(self._views)

    def all_views(self) -> list[MemoryView]:
        return list(self._views)

    def open_view(self, name: str = "") -> MemoryView:
        """Split off a plain editor view (not selected)."""
        self._counter += 1
        view = MemoryView(
            view_id=name or f"view-{self._counter}",
            width=max(1, self._frame_width // (len(self._views) + 1)),
        )
        self._views.append(view)
        self._mru.append(view)
        return view

    # ------------------------------------------------------------------ #
    # Selection                                                            #
    # ------------------------------------------------------------------ #

    def selected_view(self) -> MemoryView | None:
        return self._selected

    def select_view(self, view: MemoryView) -> None:
        if not view.live:
            raise StaleHandle(f"{view!r} is no longer live")
        self._selected = view
        if view in self._mru:
            self._mru.remove(view)
        self._mru.insert(0, view)

    def most_recent_view(self, predicate: Callable[[MemoryView], bool]) -> MemoryView | None:
        for view in self._mru:
            if view.live and predicate(view):
                return view
        return None

    def other_view(self) -> MemoryView | None:
        """Next view in cycling order, skipping views marked ``cycle_skip``."""
        if self._selected is None or self._selected not in self._views:
            return None
        start = self._views.index(self._selected)
        count = len(self._views)
        for offset in range(1, count):
            view = self._views[(start + offset) % count]
            if not view.cycle_skip:
                return view
        return None

    # ------------------------------------------------------------------ #
    # Panels                                                               #
    # ------------------------------------------------------------------ #

    def view_for(self, panel: MemoryPanel) -> MemoryView | None:
        for view in self._views:
            if view.panel is panel:
                return view
        return None

    def display_side(self, panel: MemoryPanel, side: Side) -> MemoryView:
        self._counter += 1
        view = MemoryView(
            view_id=f"{side}-{self._counter}",
            width=max(1, self._frame_width // 2),
            panel=panel,
            side=side,
        )
        if side == "left":
            self._views.insert(0, view)
        else:
            self._views.append(view)
        self._mru.append(view)
        logger.debug(f"[memory] displayed {panel!r} in {view!r}")
        return view

    def view_width(self, view: MemoryView) -> int:
        return view.width

    def resize_view(self, view: MemoryView, columns: int) -> None:
        if view.fixed_width:
            logger.debug(f"[memory] {view!r} has fixed width, resize ignored")
            return
        view.width = max(1, min(columns, self._frame_width - 1))

    def close_view(self, view: MemoryView) -> None:
        if view not in self._views:
            return
        view.live = False
        self._views.remove(view)
        if view in self._mru:
            self._mru.remove(view)
        if self._selected is view:
            self._selected = self._mru[0] if self._mru else None

    def set_cycle_skip(self, view: MemoryView, skip: bool) -> None:
        view.cycle_skip = skip

    def set_fixed_width(self, view: MemoryView, fixed: bool) -> None:
        view.fixed_width = fixed


class MemorySessionBackend:
    """Session backend that records started sessions instead of spawning agents."""

    def __init__(self) -> None:
        self._counter = 0
        self.started: list[MemoryPanel] = []

    def start_session(
        self,
        provider: ProviderConfig,
        project_id: str,
        options: SessionOptions,
    ) -> MemoryPanel:
        self._counter += 1
        panel = MemoryPanel(
            handle_id=f"{provider.key}-{self._counter}",
            project_id=project_id,
            provider=provider,
            options=options,
        )
        self.started.append(panel)
        logger.debug(f"[memory] started {panel!r} command={provider.resolve_command()!r}")
        return panel

    def destroy_session(self, handle: MemoryPanel) -> None:
        handle.live = False


class MemoryMessageChannel:
    """Collects user-facing messages."""

    def __init__(self, echo: Callable[[str, str], None] | None = None) -> None:
        self.messages: list[tuple[str, str]] = []
        self._echo = echo

    def notify(self, text: str, level: str = "info") -> None:
        self.messages.append((level, text))
        if self._echo is not None:
            self._echo(text, level)
