"""Sidebar core: width resolution, per-project state, focus and the panel state machine."""

from agent_sidebar.sidebar.controller import PanelController, PanelVisibility, SessionSummary
from agent_sidebar.sidebar.focus import FocusTracker
from agent_sidebar.sidebar.provider_selector import ProviderSelector
from agent_sidebar.sidebar.state_store import ProjectStateStore, SessionRecord
from agent_sidebar.sidebar.width import Absolute, Percentage, WidthSpec, parse_width_spec, resolve_width

__all__ = [
    "Absolute",
    "FocusTracker",
    "PanelController",
    "PanelVisibility",
    "Percentage",
    "ProjectStateStore",
    "ProviderSelector",
    "SessionRecord",
    "SessionSummary",
    "WidthSpec",
    "parse_width_spec",
    "resolve_width",
]
