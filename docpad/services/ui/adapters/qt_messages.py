from __future__ import annotations

from typing import Any

from PyQt6.QtWidgets import QMessageBox

from docpad.domain.models import SaveChoice
from docpad.services.ui.ports.messages import IMessageService

_Btn = QMessageBox.StandardButton


class QtMessageService(IMessageService):
    """Qt-backed implementation for message dialogs."""

    def error(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.critical(parent, title, text)

    def ask(self, parent: Any | None, title: str, text: str) -> bool:
        resp = QMessageBox.question(parent, title, text, _Btn.Yes | _Btn.No)
        return resp == _Btn.Yes

    def ask_save_changes(self, parent: Any | None, title: str, text: str) -> SaveChoice:
        resp = QMessageBox.question(
            parent,
            title,
            text,
            _Btn.Yes | _Btn.No | _Btn.Cancel,
            _Btn.Yes,
        )
        if resp == _Btn.Yes:
            return SaveChoice.SAVE
        if resp == _Btn.No:
            return SaveChoice.DISCARD
        # Cancel, Escape or closing the box
        return SaveChoice.CANCEL
