"""Choose the agent provider for a new session."""

from __future__ import annotations

from typing import Callable

from loguru import logger

from agent_sidebar.config.schema import ProviderConfig, ProvidersConfig
from agent_sidebar.errors import NoSelection

# Receives the prompt and the candidate labels, returns the chosen label or
# None when the user cancels.
Chooser = Callable[[str, list[str]], str | None]


def provider_choices(providers: list[ProviderConfig]) -> dict[str, ProviderConfig]:
    """Map unique chooser labels to providers, in configuration order."""
    choices: dict[str, ProviderConfig] = {}
    for provider in providers:
        label = provider.label
        n = 2
        while label in choices:
            label = f"{provider.label} ({n})"
            n += 1
        choices[label] = provider
    return choices


class ProviderSelector:
    """Resolve the configured default provider or ask the user for one."""

    def __init__(self, providers: ProvidersConfig, chooser: Chooser) -> None:
        self._providers = providers
        self._chooser = chooser

    def select(self) -> ProviderConfig:
        default = self._providers.default_provider()
        if default is not None:
            return default
        if self._providers.default.strip():
            logger.warning(f"[provider] default {self._providers.default!r} is not configured, prompting")

        choices = provider_choices(self._providers.available)
        if not choices:
            raise NoSelection("No agent providers configured")
        picked = self._chooser("Select agent: ", list(choices))
        if picked is None or picked not in choices:
            raise NoSelection()
        logger.debug(f"[provider] selected {picked!r}")
        return choices[picked]
