from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from loguru import logger
from PyQt6.QtCore import QByteArray
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QLabel,
    QMainWindow,
    QMenu,
    QPlainTextEdit,
    QStatusBar,
    QToolBar,
)

from docpad.domain.interfaces import ISettingsService
from docpad.services.ui.ports.messages import IMessageService
from docpad.services.ui.presenters.document_presenter import DocumentPresenter
from docpad.utils.constants import APP_NAME


class MainWindow(QMainWindow):
    """Thin PyQt window: a plain-text editor whose file actions go through the presenter."""

    def __init__(
        self,
        settings: ISettingsService,
        messages: IMessageService,
        *,
        wrap: bool = True,
        app_title: str = APP_NAME,
    ) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(900, 650)

        self.settings = settings
        self.messages = messages
        self.presenter: DocumentPresenter | None = None

        # Widgets
        self.editor = QPlainTextEdit(self)
        self.editor.setTabStopDistance(4 * self.editor.fontMetrics().horizontalAdvance(" "))
        self.setCentralWidget(self.editor)

        self.modified_label = QLabel("", self)

        # Signals
        self.editor.textChanged.connect(self._on_text_changed)

        # UI
        self._build_actions(wrap)
        self._build_toolbar()
        self._build_menu()
        self.setStatusBar(QStatusBar(self))
        self.statusBar().addPermanentWidget(self.modified_label)
        self._toggle_wrap(wrap)

        geo = self.settings.get_geometry()
        if isinstance(geo, (bytes, bytearray)):
            self.restoreGeometry(QByteArray(geo))

        self.setAcceptDrops(True)

    def attach_presenter(self, presenter: DocumentPresenter) -> None:
        self.presenter = presenter
        self.set_recents(list(presenter.recents))
        presenter.on_change()

    # ---------- IDocumentView ----------
    def get_text(self) -> str:
        return self.editor.toPlainText()

    def set_text(self, text: str) -> None:
        self.editor.setPlainText(text)

    def set_title(self, title: str) -> None:
        self.setWindowTitle(title)

    def set_window_modified(self, modified: bool) -> None:
        self.modified_label.setText("Modified" if modified else "")

    def set_recents(self, items: list[str]) -> None:
        self.recent_menu.clear()
        if not items:
            na = QAction("(empty)", self)
            na.setEnabled(False)
            self.recent_menu.addAction(na)
            return
        for p in items:
            self.recent_menu.addAction(
                QAction(p, self, triggered=lambda chk=False, x=p: self._open_recent(x))
            )

    def show_status(self, text: str, msec: int = 3000) -> None:
        self.statusBar().showMessage(text, msec)

    # ---------- UI creation ----------
    def _build_actions(self, wrap: bool):
        self.act_new = QAction(
            "New", self, shortcut=QKeySequence.StandardKey.New, triggered=self._new_file
        )
        self.act_open = QAction(
            "Open…",
            self,
            shortcut=QKeySequence.StandardKey.Open,
            triggered=self._open_dialog,
        )
        self.act_save = QAction(
            "Save", self, shortcut=QKeySequence.StandardKey.Save, triggered=self._save
        )
        self.act_save_as = QAction(
            "Save As…",
            self,
            shortcut=QKeySequence.StandardKey.SaveAs,
            triggered=self._save_as,
        )
        self.act_quit = QAction(
            "Quit", self, shortcut=QKeySequence.StandardKey.Quit, triggered=self.close
        )
        self.act_toggle_wrap = QAction(
            "Toggle Wrap",
            self,
            checkable=True,
            checked=wrap,
            triggered=self._toggle_wrap,
        )

        self.recent_menu = QMenu("Open Recent", self)

    def _build_toolbar(self):
        tb = QToolBar("Main", self)
        tb.setMovable(False)
        for a in (self.act_new, self.act_open, self.act_save, self.act_save_as):
            tb.addAction(a)
        tb.addSeparator()
        tb.addAction(self.act_toggle_wrap)
        self.addToolBar(tb)

    def _build_menu(self):
        m = self.menuBar()
        filem = m.addMenu("&File")
        filem.addAction(self.act_new)
        filem.addAction(self.act_open)
        filem.addMenu(self.recent_menu)
        filem.addSeparator()
        filem.addAction(self.act_save)
        filem.addAction(self.act_save_as)
        filem.addSeparator()
        filem.addAction(self.act_quit)

        viewm = m.addMenu("&View")
        viewm.addAction(self.act_toggle_wrap)

    # ---------- Actions ----------
    def _new_file(self) -> bool:
        return self._run("New", lambda p: p.new())

    def _open_dialog(self) -> bool:
        return self._run("Open", lambda p: p.open())

    def _save(self) -> bool:
        return self._run("Save", lambda p: p.save())

    def _save_as(self) -> bool:
        return self._run("Save As", lambda p: p.save_as())

    def open_path(self, path: Path) -> bool:
        return self._run("Open", lambda p: p.open_path(path))

    def _open_recent(self, path_str: str) -> bool:
        path = Path(path_str)
        if path.exists():
            return self.open_path(path)
        logger.warning("Recent file is gone: {}", path)
        if self.messages.ask(self, "Missing", f"File not found:\n{path}\n\nRemove it from recent files?"):
            if self.presenter is not None:
                self.presenter.forget_recent(path)
        return False

    def _run(self, label: str, action: Callable[[DocumentPresenter], bool]) -> bool:
        """Run a presenter action; file errors end up in an error box, not a traceback."""
        if self.presenter is None:
            return False
        try:
            return action(self.presenter)
        except OSError as e:
            logger.error("{} failed: {}", label, e)
            self.messages.error(self, f"{label} Error", f"{label} failed:\n{e}")
            return False

    def _toggle_wrap(self, on: bool):
        mode = (
            QPlainTextEdit.LineWrapMode.WidgetWidth if on else QPlainTextEdit.LineWrapMode.NoWrap
        )
        self.editor.setLineWrapMode(mode)

    def _on_text_changed(self):
        if self.presenter is not None:
            self.presenter.mark_modified()

    # ---------- DnD ----------
    def dragEnterEvent(self, e):
        if e.mimeData().hasUrls():
            e.acceptProposedAction()

    def dropEvent(self, e):
        urls = e.mimeData().urls()
        if not urls:
            return
        local = urls[0].toLocalFile()
        if local:
            self.open_path(Path(local))

    # ---------- Close ----------
    def closeEvent(self, event):
        if not self._run("Save", lambda p: p.can_close()) and self.presenter is not None:
            event.ignore()
            return
        self.settings.set_geometry(bytes(self.saveGeometry()))
        super().closeEvent(event)
