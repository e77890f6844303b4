"""agent-sidebar - per-project agent session panel."""

__version__ = "0.1.0"
__logo__ = "▌"
