"""Batch job description handed to an external runner."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

PROJECT_GET_CALLBACK = "update_manager_batch_project_get"
DOWNLOAD_FINISHED_CALLBACK = "update_manager_download_batch_finished"


@dataclass
class BatchOperation:
    callback: str
    args: tuple[Any, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"callback": self.callback, "args": list(self.args)}


@dataclass
class BatchJob:
    title: str = "Downloading updates"
    init_message: str = "Preparing to download selected updates"
    operations: list[BatchOperation] = field(default_factory=list)
    finished: str = DOWNLOAD_FINISHED_CALLBACK

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "init_message": self.init_message,
            "operations": [op.to_dict() for op in self.operations],
            "finished": self.finished,
        }
