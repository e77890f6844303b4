"""Project detection from the working directory."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

DEFAULT_MARKERS: tuple[str, ...] = (".git", ".hg", ".project", "pyproject.toml")


class DirectoryProjectIdentifier:
    """Identify the current project by walking up to a root marker.

    Falls back to the working directory itself when no marker is found,
    so every directory maps to some project id.
    """

    def __init__(
        self,
        directory: Path | str | None = None,
        markers: tuple[str, ...] = DEFAULT_MARKERS,
    ) -> None:
        self._directory = Path(directory).expanduser() if directory else None
        self._markers = markers

    @property
    def directory(self) -> Path:
        return self._directory or Path.cwd()

    def change_directory(self, directory: Path | str) -> None:
        self._directory = Path(directory).expanduser()

    def current_project_id(self) -> str:
        start = self.directory.resolve()
        for candidate in (start, *start.parents):
            if any((candidate / marker).exists() for marker in self._markers):
                return str(candidate)
        logger.debug(f"[project] no project root above {start}, using directory")
        return str(start)
