from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from loguru import logger

from docpad.domain.interfaces import IFileService, ISettingsService
from docpad.domain.models import SaveChoice
from docpad.domain.session import DocumentSession
from docpad.services.ui.ports.dialogs import IFileDialogService
from docpad.services.ui.ports.messages import IMessageService
from docpad.utils.constants import (
    APP_NAME,
    DEFAULT_FILE_FILTER,
    MAX_RECENTS,
    SAVE_CHANGES_TEXT,
    SAVE_CHANGES_TITLE,
    UNTITLED,
)


@runtime_checkable
class IDocumentView(Protocol):
    """Very small surface for a passive view (implemented by the Qt MainWindow)."""

    # editor
    def get_text(self) -> str: ...
    def set_text(self, text: str) -> None: ...

    # window chrome
    def set_title(self, title: str) -> None: ...
    def set_window_modified(self, modified: bool) -> None: ...
    def set_recents(self, items: list[str]) -> None: ...

    # status
    def show_status(self, text: str, msec: int = 3000) -> None: ...


class DocumentPresenter(DocumentSession):
    """
    The document session as the app uses it: hooks go through the injected
    dialog, message and file ports, and the editor is reached only via IDocumentView.
    """

    def __init__(
        self,
        view: IDocumentView,
        files: IFileService,
        settings: ISettingsService,
        messages: IMessageService,
        dialogs: IFileDialogService,
        *,
        app_title: str = APP_NAME,
        file_filter: str = DEFAULT_FILE_FILTER,
        max_recents: int = MAX_RECENTS,
    ) -> None:
        super().__init__()
        self.view = view
        self.files = files
        self.settings = settings
        self.messages = messages
        self.dialogs = dialogs
        self.app_title = app_title
        self.file_filter = file_filter
        self.max_recents = max_recents

        self.recents: list[str] = self.settings.get_recent()[: self.max_recents]
        # set while the presenter itself replaces editor text
        self._syncing = False
        # filepath as of the last completed action
        self._last_good_path: Path | None = None

    # ---------- view-facing helpers ----------

    @property
    def title(self) -> str:
        name = self.filename or UNTITLED
        star = " •" if self.modified else ""
        return f"{name}{star} — {self.app_title}"

    def mark_modified(self) -> None:
        """Editor text changed; ignored while the presenter is loading or resetting."""
        if not self._syncing:
            self.modified = True

    def can_close(self) -> bool:
        return self.prompt_and_save_changes()

    def open_path(self, path: Path) -> bool:
        """Guarded open of a known path (recent files, drag & drop, command line)."""
        if not self.prompt_and_save_changes():
            return False
        self._filepath = Path(path)
        self.load()
        self.modified = False
        self.on_change()
        return True

    def forget_recent(self, path: Path | str) -> None:
        s = str(path)
        if s in self.recents:
            self.recents.remove(s)
            self.settings.set_recent(self.recents)
            self.view.set_recents(list(self.recents))

    # ---------- DocumentSession hooks ----------

    def on_change(self) -> None:
        self._last_good_path = self.filepath
        self.view.set_window_modified(self.modified)
        self.view.set_title(self.title)

    def show_open_dialog(self) -> Path | None:
        start_dir = self.filepath.parent if self.filepath else None
        return self.dialogs.choose_open_path(start_dir, self.file_filter)

    def show_save_dialog(self) -> Path | None:
        return self.dialogs.choose_save_path(self.filepath, self.file_filter)

    def ask_save_changes(self) -> SaveChoice:
        return self.messages.ask_save_changes(self.view, SAVE_CHANGES_TITLE, SAVE_CHANGES_TEXT)

    def load(self) -> None:
        path = self._require_path()
        try:
            text = self.files.read_text(path)
        except OSError:
            self._restore_path()
            raise
        self._set_view_text(text)
        logger.info("Opened {}", path)
        self.view.show_status(f"Opened: {path}")
        self._add_recent(path)

    def store(self) -> None:
        path = self._require_path()
        try:
            self.files.write_text_atomic(path, self.view.get_text())
        except OSError:
            self._restore_path()
            raise
        logger.info("Saved {}", path)
        self.view.show_status(f"Saved: {path}")
        self._add_recent(path)

    def reset(self) -> None:
        self._set_view_text("")

    # ---------- internals ----------

    def _require_path(self) -> Path:
        if self.filepath is None:
            raise RuntimeError("No file path set for this document")
        return self.filepath

    def _restore_path(self) -> None:
        # A failed read/write must not leave filepath pointing at the other file.
        if self._filepath != self._last_good_path:
            logger.debug("Restoring filepath {} -> {}", self._filepath, self._last_good_path)
            self._filepath = self._last_good_path

    def _set_view_text(self, text: str) -> None:
        self._syncing = True
        try:
            self.view.set_text(text)
        finally:
            self._syncing = False

    def _add_recent(self, path: Path) -> None:
        s = str(path)
        if s in self.recents:
            self.recents.remove(s)
        self.recents.insert(0, s)
        self.recents = self.recents[: self.max_recents]
        self.settings.set_recent(self.recents)
        self.view.set_recents(list(self.recents))
