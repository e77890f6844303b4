"""Remember and restore editor focus around panel visibility changes."""

from __future__ import annotations

from loguru import logger

from agent_sidebar.host.protocols import ViewHandle, WindowManager


def _is_editor_view(view: ViewHandle) -> bool:
    return view.is_live() and not view.is_panel()


class FocusTracker:
    """Process-wide single slot for the last non-panel view that had focus."""

    def __init__(self, windows: WindowManager) -> None:
        self._windows = windows
        self.last_focused_view: ViewHandle | None = None

    def save_if_outside_panel(self, view: ViewHandle | None) -> bool:
        """Record ``view`` unless it displays a panel. Returns True if saved."""
        if view is None or view.is_panel():
            return False
        self.last_focused_view = view
        return True

    def restore(self) -> ViewHandle | None:
        """Select the best editor view and return it.

        Preference: the saved view (if still live and not turned into a
        panel), then the most recently used editor view, then any editor
        view. Does nothing when only panel views remain.
        """
        target = self.last_focused_view
        if target is None or not _is_editor_view(target):
            if target is not None:
                logger.debug("[focus] saved view is stale, falling back")
            target = self._windows.most_recent_view(_is_editor_view)
        if target is None:
            target = next((v for v in self._windows.all_views() if _is_editor_view(v)), None)
        if target is None:
            logger.debug("[focus] no editor view to restore")
            return None
        self._windows.select_view(target)
        return target
