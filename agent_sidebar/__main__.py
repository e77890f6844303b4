"""Entry point for ``python -m agent_sidebar``."""

from agent_sidebar.cli.commands import app

if __name__ == "__main__":
    app()
