"""Configuration module for agent-sidebar."""

from agent_sidebar.config.loader import get_config_path, load_config, save_config
from agent_sidebar.config.schema import Config, ProviderConfig, ProvidersConfig, SidebarConfig

__all__ = [
    "Config",
    "ProviderConfig",
    "ProvidersConfig",
    "SidebarConfig",
    "get_config_path",
    "load_config",
    "save_config",
]
