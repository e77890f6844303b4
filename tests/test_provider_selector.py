"""Tests for provider selection."""

import pytest

from agent_sidebar.config.schema import ProviderConfig, ProvidersConfig
from agent_sidebar.errors import NoSelection
from agent_sidebar.sidebar.provider_selector import ProviderSelector, provider_choices
from tests.conftest import ScriptedChooser


def test_default_provider_skips_prompt() -> None:
    chooser = ScriptedChooser()
    selector = ProviderSelector(ProvidersConfig(default="gemini"), chooser)
    assert selector.select().key == "gemini"
    assert chooser.calls == []


def test_prompts_with_labels_when_no_default() -> None:
    chooser = ScriptedChooser("Codex CLI")
    selector = ProviderSelector(ProvidersConfig(), chooser)
    assert selector.select().key == "codex"
    assert chooser.calls == [["Claude Code", "Gemini CLI", "Codex CLI"]]


def test_unknown_default_falls_back_to_prompt() -> None:
    chooser = ScriptedChooser("Claude Code")
    selector = ProviderSelector(ProvidersConfig(default="nope"), chooser)
    assert selector.select().key == "claude"


def test_cancel_raises_no_selection() -> None:
    selector = ProviderSelector(ProvidersConfig(), ScriptedChooser(None))
    with pytest.raises(NoSelection):
        selector.select()


def test_no_providers_raises_no_selection() -> None:
    selector = ProviderSelector(ProvidersConfig(available=[]), ScriptedChooser("x"))
    with pytest.raises(NoSelection):
        selector.select()


def test_label_fallbacks_and_duplicates() -> None:
    providers = [
        ProviderConfig(key="a", display_name="Agent"),
        ProviderConfig(key="b", buffer_name="*b*"),
        ProviderConfig(key="c"),
        ProviderConfig(key="d", display_name="Agent"),
        ProviderConfig(key="e"),
    ]
    choices = provider_choices(providers)
    assert list(choices) == ["Agent", "*b*", "Unknown Agent", "Agent (2)", "Unknown Agent (2)"]
    assert choices["Agent (2)"].key == "d"
