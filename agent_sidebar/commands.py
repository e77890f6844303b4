"""User-invocable sidebar commands and their wiring."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from agent_sidebar.config.schema import Config
from agent_sidebar.errors import NoSelection, SidebarError
from agent_sidebar.host.protocols import MessageChannel, ProjectIdentifier, SessionBackend, WindowManager
from agent_sidebar.sidebar.controller import PanelController
from agent_sidebar.sidebar.events import EventHub
from agent_sidebar.sidebar.focus import FocusTracker
from agent_sidebar.sidebar.provider_selector import Chooser, ProviderSelector
from agent_sidebar.sidebar.state_store import ProjectStateStore

COMMANDS: dict[str, str] = {
    "toggle": "toggle",
    "toggle-focus": "toggle_focus",
    "change-provider": "change_provider",
    "reset": "reset",
    "stop": "stop",
    "resume": "resume",
}


@dataclass
class SidebarCommands:
    """Runs controller commands and reports failures to the user."""

    controller: PanelController
    messages: MessageChannel

    def run(self, name: str) -> bool:
        """Run command ``name``. Returns False if it failed and was reported."""
        attr = COMMANDS.get(name)
        if attr is None:
            raise KeyError(f"Unknown sidebar command '{name}'. Expected one of: {', '.join(COMMANDS)}")
        try:
            getattr(self.controller, attr)()
        except NoSelection as exc:
            logger.info(f"[command] {name}: {exc}")
            self.messages.notify(str(exc), level="info")
            return False
        except SidebarError as exc:
            logger.warning(f"[command] {name} failed: {exc}")
            self.messages.notify(str(exc), level="error")
            return False
        return True


def build_commands(
    config: Config,
    chooser: Chooser,
    windows: WindowManager,
    backend: SessionBackend,
    projects: ProjectIdentifier,
    messages: MessageChannel,
    events: EventHub | None = None,
) -> SidebarCommands:
    """Assemble a controller with process-wide store and focus tracker."""
    controller = PanelController(
        config=config,
        store=ProjectStateStore(),
        focus=FocusTracker(windows),
        selector=ProviderSelector(config.providers, chooser),
        backend=backend,
        windows=windows,
        projects=projects,
        events=events,
    )
    return SidebarCommands(controller=controller, messages=messages)
