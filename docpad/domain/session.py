from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from loguru import logger

from docpad.domain.models import SaveChoice


class DocumentSession(ABC):
    """
    Tracks the single open document and drives New / Open / Save / Save As.

    The session only knows two things: where the document lives (``filepath``,
    ``None`` while untitled) and whether it has unsaved edits (``modified``).
    Reading and writing content, showing dialogs and refreshing the UI are
    left to the hooks a subclass implements.

    Every action returns True when it completed and False when the user
    cancelled somewhere along the way. Cancelling never changes state.
    """

    def __init__(self) -> None:
        self._filepath: Path | None = None
        self._modified = False

    # ---------- state ----------

    @property
    def filepath(self) -> Path | None:
        return self._filepath

    @property
    def filename(self) -> str | None:
        """Base name of the current file without its extension."""
        if self._filepath is None:
            return None
        return self._filepath.stem

    @property
    def modified(self) -> bool:
        """True if the document changed since it was last opened or saved."""
        return self._modified

    @modified.setter
    def modified(self, value: bool) -> None:
        prev = self._modified
        self._modified = bool(value)
        if prev != self._modified:
            self.on_change()

    def on_change(self) -> None:
        """
        Called when the modified flag toggles and after every completed action.
        Override to refresh things like the window title.
        """

    # ---------- actions ----------

    def new(self) -> bool:
        if not self.prompt_and_save_changes():
            return False
        self._filepath = None
        self.reset()
        self.modified = False
        logger.debug("New untitled document")
        self.on_change()
        return True

    def open(self) -> bool:
        if not self.prompt_and_save_changes():
            return False

        path = self.show_open_dialog()
        if path is None:
            return False

        self._filepath = Path(path)
        self.load()
        self.modified = False
        logger.debug("Opened {}", self._filepath)
        self.on_change()
        return True

    def save(self) -> bool:
        if self._filepath is None:
            chosen = self.show_save_dialog()
            self._filepath = Path(chosen) if chosen is not None else None

        if self._filepath is None:
            return False

        self.store()
        self.modified = False
        logger.debug("Saved {}", self._filepath)
        self.on_change()
        return True

    def save_as(self) -> bool:
        path = self.show_save_dialog()
        if path is None:
            return False

        self._filepath = Path(path)
        self.store()
        self.modified = False
        logger.debug("Saved as {}", self._filepath)
        self.on_change()
        return True

    def prompt_and_save_changes(self) -> bool:
        """
        If there are unsaved changes, ask whether to save them and do so if asked.

        Returns True to carry on with the current action, False to abandon it.
        """
        if not self._modified:
            return True

        choice = self.ask_save_changes()
        if choice is SaveChoice.CANCEL:
            return False

        if choice is SaveChoice.SAVE:
            if self._filepath is None:
                path = self.show_save_dialog()
                if path is None:
                    return False
                self._filepath = Path(path)
            self.store()
            self.modified = False

        return True

    # ---------- hooks ----------

    @abstractmethod
    def show_open_dialog(self) -> Path | None:
        """Return the path picked in a File Open dialog, or None if cancelled."""
        raise NotImplementedError

    @abstractmethod
    def show_save_dialog(self) -> Path | None:
        """Return the path picked in a File Save dialog, or None if cancelled."""
        raise NotImplementedError

    @abstractmethod
    def ask_save_changes(self) -> SaveChoice:
        """Ask whether unsaved changes should be saved, discarded, or the action cancelled."""
        raise NotImplementedError

    @abstractmethod
    def load(self) -> None:
        """Load the file at ``filepath`` into the editor."""
        raise NotImplementedError

    @abstractmethod
    def store(self) -> None:
        """Write the editor content to ``filepath``."""
        raise NotImplementedError

    @abstractmethod
    def reset(self) -> None:
        """Clear the editor for a new, empty document."""
        raise NotImplementedError
