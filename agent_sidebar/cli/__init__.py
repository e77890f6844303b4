"""CLI module for agent-sidebar."""
