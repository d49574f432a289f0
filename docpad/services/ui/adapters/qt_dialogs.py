from __future__ import annotations

from pathlib import Path

from PyQt6.QtWidgets import QFileDialog, QWidget

from docpad.services.ui.ports.dialogs import IFileDialogService

OPEN_CAPTION = "Open"
SAVE_CAPTION = "Save As"


class QtFileDialogService(IFileDialogService):
    """Native open/save dialogs, modal to ``parent``."""

    def __init__(self, parent: QWidget | None = None) -> None:
        self.parent = parent

    def choose_open_path(self, start_dir: Path | None, filter_str: str) -> Path | None:
        chosen, _ = QFileDialog.getOpenFileName(
            self.parent, OPEN_CAPTION, str(start_dir or ""), filter_str
        )
        return Path(chosen) if chosen else None

    def choose_save_path(self, start_path: Path | None, filter_str: str) -> Path | None:
        chosen, _ = QFileDialog.getSaveFileName(
            self.parent, SAVE_CAPTION, str(start_path or ""), filter_str
        )
        return Path(chosen) if chosen else None
