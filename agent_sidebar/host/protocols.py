"""Interfaces of the host environment consumed by the sidebar core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, Protocol

from agent_sidebar.config.schema import ProviderConfig

Side = Literal["left", "right"]


@dataclass(frozen=True)
class SessionOptions:
    """Options passed to the session backend when starting a session."""

    auto_focus: bool = True
    fresh_session: bool = True


class PanelHandle(Protocol):
    """Live session surface shown inside the panel."""

    project_id: str
    is_panel: bool

    def is_live(self) -> bool:
        ...


class ViewHandle(Protocol):
    """A host window displaying some surface."""

    def is_live(self) -> bool:
        ...

    def is_panel(self) -> bool:
        """True when the view currently displays a panel surface."""
        ...


class SessionBackend(Protocol):
    def start_session(
        self,
        provider: ProviderConfig,
        project_id: str,
        options: SessionOptions,
    ) -> PanelHandle:
        ...

    def destroy_session(self, handle: PanelHandle) -> None:
        ...


class WindowManager(Protocol):
    def frame_width(self) -> int:
        ...

    def window_count(self) -> int:
        ...

    def selected_view(self) -> ViewHandle | None:
        ...

    def select_view(self, view: ViewHandle) -> None:
        ...

    def view_for(self, panel: PanelHandle) -> ViewHandle | None:
        """Return the visible view showing ``panel``, if any."""
        ...

    def display_side(self, panel: PanelHandle, side: Side) -> ViewHandle:
        """Show ``panel`` in a dedicated side window and return it."""
        ...

    def view_width(self, view: ViewHandle) -> int:
        ...

    def resize_view(self, view: ViewHandle, columns: int) -> None:
        ...

    def close_view(self, view: ViewHandle) -> None:
        ...

    def most_recent_view(self, predicate: Callable[[ViewHandle], bool]) -> ViewHandle | None:
        ...

    def all_views(self) -> list[ViewHandle]:
        ...

    def set_cycle_skip(self, view: ViewHandle, skip: bool) -> None:
        ...

    def set_fixed_width(self, view: ViewHandle, fixed: bool) -> None:
        ...


class ProjectIdentifier(Protocol):
    def current_project_id(self) -> str:
        ...


class MessageChannel(Protocol):
    def notify(self, text: str, level: str = "info") -> None:
        ...
