"""Configuration schema for agent-sidebar."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings

if TYPE_CHECKING:
    from agent_sidebar.sidebar.width import WidthSpec

UNKNOWN_AGENT_LABEL = "Unknown Agent"


class ProviderConfig(BaseModel):
    """One agent configuration the panel can start a session with."""

    model_config = ConfigDict(frozen=True)

    key: str
    display_name: str = ""
    buffer_name: str = ""
    command: str = ""
    env_override: str = ""
    args: tuple[str, ...] = ()

    @property
    def label(self) -> str:
        """Human-readable name shown in the provider chooser."""
        return self.display_name.strip() or self.buffer_name.strip() or UNKNOWN_AGENT_LABEL

    def resolve_command(self) -> str:
        """Resolve command from env override or configured command."""
        if self.env_override:
            value = os.getenv(self.env_override, "").strip()
            if value:
                return value
        return self.command or self.key


def _default_providers() -> list[ProviderConfig]:
    return [
        ProviderConfig(
            key="claude",
            display_name="Claude Code",
            buffer_name="*claude*",
            command="claude",
            env_override="AGENT_SIDEBAR_CLAUDE_CMD",
        ),
        ProviderConfig(
            key="gemini",
            display_name="Gemini CLI",
            buffer_name="*gemini*",
            command="gemini",
            env_override="AGENT_SIDEBAR_GEMINI_CMD",
        ),
        ProviderConfig(
            key="codex",
            display_name="Codex CLI",
            buffer_name="*codex*",
            command="codex",
            env_override="AGENT_SIDEBAR_CODEX_CMD",
        ),
    ]


class ProvidersConfig(BaseModel):
    """Available agent providers and the optional default."""

    default: str = ""
    available: list[ProviderConfig] = Field(default_factory=_default_providers)

    def get(self, key: str) -> ProviderConfig | None:
        """Get a provider by key (case-insensitive)."""
        wanted = (key or "").strip().lower()
        for provider in self.available:
            if provider.key.lower() == wanted:
                return provider
        return None

    def default_provider(self) -> ProviderConfig | None:
        """Return the configured default provider, if any."""
        if not self.default.strip():
            return None
        return self.get(self.default)


class SidebarConfig(BaseModel):
    """Panel placement, sizing and lock behaviour."""

    width: int | str = 90
    min_width: int | str = 50
    max_width: int | str = "50%"
    position: Literal["left", "right"] = "right"
    locked: bool = True
    focus_on_open: bool = True
    fresh_session: bool = True

    def width_specs(self) -> tuple[WidthSpec, WidthSpec, WidthSpec]:
        """Parse (configured, minimum, maximum) width settings."""
        from agent_sidebar.sidebar.width import parse_width_spec

        return (
            parse_width_spec(self.width),
            parse_width_spec(self.min_width),
            parse_width_spec(self.max_width),
        )


class Config(BaseSettings):
    """Root configuration for agent-sidebar."""

    sidebar: SidebarConfig = Field(default_factory=SidebarConfig)
    providers: ProvidersConfig = Field(default_factory=ProvidersConfig)

    model_config = ConfigDict(
        env_prefix="AGENT_SIDEBAR_",
        env_nested_delimiter="__",
        extra="ignore",
    )
