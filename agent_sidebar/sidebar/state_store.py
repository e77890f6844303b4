"""Per-project session records."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Iterator

from loguru import logger

from agent_sidebar.config.schema import ProviderConfig
from agent_sidebar.host.protocols import PanelHandle, ViewHandle


@dataclass(frozen=True)
class SessionRecord:
    """Sidebar state for one project. All fields start absent.

    ``last_focused_view`` is informational: it records the editor view saved
    when this project's panel last took focus. Focus restoration reads the
    process-wide slot in :class:`FocusTracker` instead.
    """

    panel_handle: PanelHandle | None = None
    provider_config: ProviderConfig | None = None
    last_focused_view: ViewHandle | None = None
    saved_width: int | None = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))


Mutator = Callable[[SessionRecord], SessionRecord]


class ProjectStateStore:
    """Mapping of project id to :class:`SessionRecord`.

    ``get`` never fails: an unknown project gets a fresh empty record which
    is stored immediately. Records live until :meth:`remove` is called or
    the process exits; nothing is persisted.
    """

    def __init__(self) -> None:
        self._records: dict[str, SessionRecord] = {}

    def get(self, project_id: str) -> SessionRecord:
        record = self._records.get(project_id)
        if record is None:
            record = SessionRecord()
            self._records[project_id] = record
            logger.debug(f"[store] created record for {project_id}")
        return record

    def update(
        self,
        project_id: str,
        mutator: Mutator | None = None,
        **changes: Any,
    ) -> SessionRecord:
        """Replace the record for ``project_id`` with a mutated copy.

        Either pass a ``mutator`` taking and returning a record, or field
        values as keyword arguments (or both; the mutator runs first).
        """
        record = self.get(project_id)
        if mutator is not None:
            record = mutator(record)
        if changes:
            record = replace(record, **changes)
        handle = record.panel_handle
        if handle is not None:
            for other_id, other in self._records.items():
                if other_id != project_id and other.panel_handle is handle:
                    raise ValueError(f"Panel handle already belongs to project {other_id}")
        self._records[project_id] = record
        return record

    def remove(self, project_id: str) -> bool:
        removed = self._records.pop(project_id, None) is not None
        if removed:
            logger.debug(f"[store] removed record for {project_id}")
        return removed

    def items(self) -> Iterator[tuple[str, SessionRecord]]:
        return iter(list(self._records.items()))

    def __contains__(self, project_id: object) -> bool:
        return project_id in self._records

    def __len__(self) -> int:
        return len(self._records)
