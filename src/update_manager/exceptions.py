"""Exceptions raised by Update Manager."""

from __future__ import annotations


class UpdateManagerError(Exception):
    """Base exception class for all Update Manager errors."""


class SelectionError(UpdateManagerError):
    """Raised when a download is submitted without any project selected."""

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        super().__init__("; ".join(self.errors.values()))
