from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from loguru import logger
from PyQt6.QtWidgets import QApplication

from docpad.di.container import Container
from docpad.utils.constants import APP_NAME, APP_ORG
from docpad.utils.logging import configure_logging


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt, composes the application via the DI container,
    and launches the main window.
    """
    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container.default()
    configure_logging(container.config.log_level())
    logger.info("{} {} starting", APP_NAME, container.config.get_version())
    if container.config.loaded_from:
        logger.info("Config: {}", container.config.loaded_from)

    # Optional file path to open passed as first CLI argument
    start_path = Path(argv[1]) if len(argv) > 1 else None

    win = container.build_main_window(start_path=start_path, app_title=APP_NAME)
    win.show()

    return app.exec()
