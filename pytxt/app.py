from __future__ import annotations

from collections.abc import Sequence

from loguru import logger
from PyQt6.QtWidgets import QApplication

from pytxt.di.container import Container
from pytxt.services.config.app_config import build_app_config
from pytxt.services.logging_setup import configure_logging
from pytxt.utils.constants import APP_NAME, APP_ORG


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps logging and Qt, composes the application via the DI container,
    and launches the main window.
    """
    config = build_app_config()
    configure_logging(config.log_level())
    logger.info(f"Starting {APP_NAME} {config.get_version()}")

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container(config=config)
    win = container.build_main_window(app_title=APP_NAME)
    win.show()

    return app.exec()
