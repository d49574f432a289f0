from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class IFileDialogService(Protocol):
    """Asks the user for a document path. None means the dialog was cancelled."""

    def choose_open_path(self, start_dir: Path | None, filter_str: str) -> Path | None: ...

    def choose_save_path(self, start_path: Path | None, filter_str: str) -> Path | None:
        """``start_path`` pre-fills the dialog with the current document, if any."""
        ...
