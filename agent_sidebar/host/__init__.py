"""Host-side collaborators the sidebar core talks to."""

from agent_sidebar.host.protocols import (
    MessageChannel,
    PanelHandle,
    ProjectIdentifier,
    SessionBackend,
    SessionOptions,
    ViewHandle,
    WindowManager,
)

__all__ = [
    "MessageChannel",
    "PanelHandle",
    "ProjectIdentifier",
    "SessionBackend",
    "SessionOptions",
    "ViewHandle",
    "WindowManager",
]
