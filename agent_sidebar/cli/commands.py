"""CLI commands for agent-sidebar."""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from agent_sidebar import __logo__, __version__

app = typer.Typer(
    name="agent-sidebar",
    help=f"{__logo__} agent-sidebar - per-project agent session panel",
    no_args_is_help=True,
)
console = Console()

SIMULATE_HELP = """\
Commands:
  toggle            show/hide the panel (starts a session if needed)
  focus             move focus into the panel or back out
  provider          restart the session with a newly chosen provider
  resume            show the panel, continuing the previous conversation
  stop              end the session, keep provider and width
  reset             end the session and forget the project
  project <path>    switch the current project directory
  open <name>       split off a new editor view
  select <view>     focus a view by id
  resize <columns>  resize the selected view
  frame <columns>   change the frame width
  status            show views and sessions
  quit              leave the simulator"""


def version_callback(value: bool) -> None:
    if value:
        console.print(f"{__logo__} agent-sidebar v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logging."),
) -> None:
    """agent-sidebar entrypoint."""
    del version
    logger.remove()
    logger.add(lambda message: sys.stderr.write(message), level="DEBUG" if verbose else "WARNING")


@app.command()
def init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config without prompt."),
) -> None:
    """Write a default configuration file."""
    from agent_sidebar.config.loader import get_config_path, save_config
    from agent_sidebar.config.schema import Config

    config_path = get_config_path()
    if config_path.exists() and not force:
        console.print(f"[yellow]Config already exists at {config_path}[/yellow]")
        if not typer.confirm("Overwrite?"):
            raise typer.Exit()
    save_config(Config(), config_path)
    console.print(f"[green]OK[/green] Created config at {config_path}")


@app.command()
def width(
    configured: str = typer.Option(..., "--configured", help="Configured width (columns or N%)."),
    minimum: str = typer.Option(..., "--minimum", help="Minimum width (columns or N%)."),
    maximum: str = typer.Option(..., "--maximum", help="Maximum width (columns or N%)."),
    frame_width: int = typer.Option(..., "--frame-width", help="Frame width in columns."),
) -> None:
    """Print the panel width resolved for a frame."""
    from agent_sidebar.errors import InvalidSpec
    from agent_sidebar.sidebar.width import resolve_width

    try:
        columns = resolve_width(configured, minimum, maximum, frame_width)
    except InvalidSpec as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)
    console.print(str(columns))


@app.command()
def providers() -> None:
    """List configured agent providers."""
    from agent_sidebar.config.loader import load_config
    from agent_sidebar.sidebar.provider_selector import provider_choices

    config = _load_config_or_exit(load_config)
    default = config.providers.default_provider()
    table = Table(title="Agent providers")
    table.add_column("Label")
    table.add_column("Key", style="cyan")
    table.add_column("Command")
    table.add_column("Default")
    for label, provider in provider_choices(config.providers.available).items():
        table.add_row(label, provider.key, provider.resolve_command(), "yes" if provider is default else "")
    console.print(table)


@app.command()
def simulate(
    project: Path = typer.Option(None, "--project", help="Initial project directory (default: cwd)."),
    frame_width: int = typer.Option(200, "--frame-width", help="Simulated frame width in columns."),
) -> None:
    """Drive the sidebar interactively against an in-memory host."""
    from agent_sidebar.commands import build_commands
    from agent_sidebar.config.loader import load_config
    from agent_sidebar.host.memory import MemoryMessageChannel, MemorySessionBackend, MemoryWindowManager
    from agent_sidebar.host.project import DirectoryProjectIdentifier

    config = _load_config_or_exit(load_config)
    windows = MemoryWindowManager(frame_width=frame_width)
    projects = DirectoryProjectIdentifier(project)
    messages = MemoryMessageChannel(echo=_echo_message)
    commands = build_commands(
        config=config,
        chooser=_prompt_choice,
        windows=windows,
        backend=MemorySessionBackend(),
        projects=projects,
        messages=messages,
    )
    aliases = {"focus": "toggle-focus", "provider": "change-provider"}

    console.print(SIMULATE_HELP)
    while True:
        try:
            line = typer.prompt("sidebar", default="", show_default=False)
        except typer.Abort:
            break
        name, _, arg = line.strip().partition(" ")
        arg = arg.strip()
        if not name:
            continue
        if name in ("quit", "exit"):
            break
        if name == "status":
            _print_status(commands, windows)
        elif name == "project" and arg:
            projects.change_directory(arg)
            console.print(f"Project: [cyan]{projects.current_project_id()}[/cyan]")
        elif name == "open":
            view = windows.open_view(arg)
            console.print(f"Opened [cyan]{view.view_id}[/cyan]")
        elif name == "select" and arg:
            match = next((v for v in windows.all_views() if v.view_id == arg), None)
            if match is None:
                console.print(f"[red]No view '{arg}'[/red]")
            else:
                windows.select_view(match)
        elif name == "resize" and arg.isdigit():
            selected = windows.selected_view()
            if selected is not None:
                windows.resize_view(selected, int(arg))
        elif name == "frame" and arg.isdigit():
            windows.set_frame_width(int(arg))
        else:
            try:
                commands.run(aliases.get(name, name))
            except KeyError as exc:
                console.print(f"[red]{exc.args[0]}[/red]")
                continue
            _print_status(commands, windows)


def _load_config_or_exit(loader):
    from agent_sidebar.errors import ConfigError

    try:
        return loader()
    except ConfigError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)


def _prompt_choice(prompt: str, labels: list[str]) -> str | None:
    for index, label in enumerate(labels, start=1):
        console.print(f"  {index}. {label}")
    raw = typer.prompt(prompt.strip(), default="", show_default=False).strip()
    if raw.isdigit() and 1 <= int(raw) <= len(labels):
        return labels[int(raw) - 1]
    return raw if raw in labels else None


def _echo_message(text: str, level: str) -> None:
    color = {"error": "red", "warning": "yellow"}.get(level, "dim")
    console.print(f"[{color}]{text}[/{color}]")


def _print_status(commands, windows) -> None:
    controller = commands.controller
    selected = windows.selected_view()
    table = Table(title=f"Frame ({windows.frame_width()} columns)")
    table.add_column("View", style="cyan")
    table.add_column("Width")
    table.add_column("Shows")
    table.add_column("Flags")
    for view in windows.all_views():
        shows = f"{view.panel.provider.label} @ {view.panel.project_id}" if view.panel else "editor"
        flags = []
        if view is selected:
            flags.append("selected")
        if view.cycle_skip:
            flags.append("no-cycle")
        if view.fixed_width:
            flags.append("fixed")
        table.add_row(view.view_id, str(view.width), shows, ", ".join(flags))
    console.print(table)
    for summary in controller.list_sessions():
        console.print(f"  - {summary.project_id}: {summary.visibility.value} ({summary.provider_label})")


if __name__ == "__main__":
    app()
