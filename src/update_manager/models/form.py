"""Rendered update form models."""

from __future__ import annotations

from dataclasses import dataclass, field

from update_manager.models.classification import ClassificationEntry, ClassificationResult

TABLE_HEADERS: tuple[str, ...] = ("Name", "Installed version", "Recommended version")


@dataclass
class FormTable:
    key: str
    rows: list[ClassificationEntry] = field(default_factory=list)
    selectable: bool = False
    heading: str = ""
    note: str = ""


@dataclass
class UpdateForm:
    last_check: int = 0
    message: str | None = None
    result: ClassificationResult | None = None
    tables: list[FormTable] = field(default_factory=list)
    submit_label: str | None = None

    @property
    def downloads(self) -> dict[str, str]:
        return self.result.downloads if self.result else {}

    def table(self, key: str) -> FormTable | None:
        for t in self.tables:
            if t.key == key:
                return t
        return None
