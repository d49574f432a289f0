from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QSettings

from docpad.domain.interfaces import IAppConfig, IFileService, ISettingsService
from docpad.services.config.app_config import build_app_config
from docpad.services.file_service import FileService
from docpad.services.settings_service import SettingsService
from docpad.services.ui.adapters import QtFileDialogService, QtMessageService
from docpad.services.ui.main_window import MainWindow
from docpad.services.ui.ports.dialogs import IFileDialogService
from docpad.services.ui.ports.messages import IMessageService
from docpad.services.ui.presenters import DocumentPresenter
from docpad.utils.constants import APP_NAME, APP_ORG


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds the main window and attaches its document presenter
    """

    def __init__(
        self,
        config: IAppConfig | None = None,
        files: IFileService | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
    ) -> None:
        self.config: IAppConfig = config or build_app_config()
        self.file_service: IFileService = files or FileService()
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )
        # None: each window gets Qt dialogs parented to it
        self.dialogs: IFileDialogService | None = dialogs
        self.messages: IMessageService = messages or QtMessageService()

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        organization: str = APP_ORG,
        application: str = APP_NAME,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(qsettings=qsettings)

    # ---------- UI factories ----------

    def build_presenter(self, view: MainWindow, *, app_title: str = APP_NAME) -> DocumentPresenter:
        return DocumentPresenter(
            view=view,
            files=self.file_service,
            settings=self.settings_service,
            messages=self.messages,
            dialogs=self.dialogs or QtFileDialogService(parent=view),
            app_title=app_title,
            file_filter=self.config.file_filter(),
            max_recents=self.config.max_recents(),
        )

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
    ) -> MainWindow:
        """Create the Qt MainWindow, attach its presenter and open ``start_path`` if given."""
        window = MainWindow(
            settings=self.settings_service,
            messages=self.messages,
            wrap=self.config.wrap_enabled(),
            app_title=app_title,
        )
        window.attach_presenter(self.build_presenter(window, app_title=app_title))

        if start_path:
            window.open_path(start_path)

        return window
