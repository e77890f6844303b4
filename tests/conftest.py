"""Shared fixtures for agent-sidebar tests."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from agent_sidebar.config.schema import Config
from agent_sidebar.host.memory import MemoryMessageChannel, MemorySessionBackend, MemoryWindowManager
from agent_sidebar.sidebar.controller import PanelController
from agent_sidebar.sidebar.events import EventHub
from agent_sidebar.sidebar.focus import FocusTracker
from agent_sidebar.sidebar.provider_selector import ProviderSelector
from agent_sidebar.sidebar.state_store import ProjectStateStore

PROJECT_A = "/work/alpha"
PROJECT_B = "/work/beta"


class FixedProjects:
    """Project identifier whose answer is set by the test."""

    def __init__(self, project_id: str = PROJECT_A) -> None:
        self.project_id = project_id

    def current_project_id(self) -> str:
        return self.project_id


class ScriptedChooser:
    """Chooser returning queued answers; ``None`` simulates a cancel."""

    def __init__(self, *answers: str | None) -> None:
        self.answers = list(answers)
        self.calls: list[list[str]] = []

    def __call__(self, prompt: str, labels: list[str]) -> str | None:
        self.calls.append(labels)
        if not self.answers:
            return None
        return self.answers.pop(0)


@dataclass
class Harness:
    config: Config
    store: ProjectStateStore
    focus: FocusTracker
    chooser: ScriptedChooser
    backend: MemorySessionBackend
    windows: MemoryWindowManager
    projects: FixedProjects
    events: EventHub
    controller: PanelController
    published: list[tuple[str, object]] = field(default_factory=list)


def make_harness(
    locked: bool = True,
    answers: tuple[str | None, ...] = ("Claude Code",),
    frame_width: int = 200,
    **sidebar: object,
) -> Harness:
    config = Config()
    config.sidebar = config.sidebar.model_copy(update={"locked": locked, **sidebar})
    windows = MemoryWindowManager(frame_width=frame_width)
    store = ProjectStateStore()
    focus = FocusTracker(windows)
    chooser = ScriptedChooser(*answers)
    backend = MemorySessionBackend()
    projects = FixedProjects()
    events = EventHub()
    controller = PanelController(
        config=config,
        store=store,
        focus=focus,
        selector=ProviderSelector(config.providers, chooser),
        backend=backend,
        windows=windows,
        projects=projects,
        events=events,
    )
    harness = Harness(
        config=config,
        store=store,
        focus=focus,
        chooser=chooser,
        backend=backend,
        windows=windows,
        projects=projects,
        events=events,
        controller=controller,
    )
    for name in ("session.started", "session.stopped", "panel.shown", "panel.hidden", "project.reset"):
        events.subscribe(name, lambda payload, name=name: harness.published.append((name, payload)))
    return harness


@pytest.fixture
def harness() -> Harness:
    return make_harness()


@pytest.fixture
def messages() -> MemoryMessageChannel:
    return MemoryMessageChannel()
