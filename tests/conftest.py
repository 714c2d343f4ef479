from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

import pytest
from loguru import logger

# Headless Qt for CI; must be set before a QApplication exists.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from pytxt.services.clipboard import ClipboardStore  # noqa: E402
from pytxt.services.engine import DocumentEngine  # noqa: E402
from pytxt.services.exporters.base import ExporterRegistryInst  # noqa: E402
from pytxt.services.exporters.html_exporter import HtmlExporter  # noqa: E402
from pytxt.services.exporters.rtf_exporter import RtfExporter  # noqa: E402
from pytxt.services.file_service import FileService  # noqa: E402
from pytxt.services.notifier import ChangeNotifier  # noqa: E402


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        if created:
            app.quit()


# --- Fakes shared across modules ---


class FakeAppConfig:
    """AppConfig stand-in with fixed answers."""

    def __init__(
        self, *, default_format: str = "rtf", escape_title: bool = True, level: str = "INFO"
    ) -> None:
        self._format = default_format
        self._escape = escape_title
        self._level = level

    def get_version(self) -> str:
        return "1.2.3"

    def default_export_format(self) -> str:
        return self._format

    def html_escape_title(self) -> bool:
        return self._escape

    def log_level(self) -> str:
        return self._level

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return default

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        return default

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return {}

    def app_version(self) -> str:
        return "1.2.3"


class FailingFileService:
    """Every write fails the way a read-only directory would."""

    def __init__(self, exc: OSError | None = None) -> None:
        self.exc = exc or PermissionError("Permission denied")
        self.attempts: list[Path] = []

    def write_text_atomic(self, path: Path, text: str) -> None:
        self.attempts.append(path)
        raise self.exc


class RecordingFileService:
    """Keeps written documents in memory instead of touching the disk."""

    def __init__(self) -> None:
        self.written: dict[Path, str] = {}

    def write_text_atomic(self, path: Path, text: str) -> None:
        self.written[path] = text


# --- Common fixtures ---


@pytest.fixture()
def log_messages():
    """Collect loguru messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    try:
        yield messages
    finally:
        logger.remove(handler_id)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def clipboard() -> ClipboardStore:
    return ClipboardStore()


@pytest.fixture()
def notifier() -> ChangeNotifier:
    return ChangeNotifier()


@pytest.fixture()
def exporters(file_service: FileService) -> ExporterRegistryInst:
    reg = ExporterRegistryInst()
    reg.register(RtfExporter(file_service))
    reg.register(HtmlExporter(file_service))
    return reg


@pytest.fixture()
def engine(
    clipboard: ClipboardStore, exporters: ExporterRegistryInst, notifier: ChangeNotifier
) -> DocumentEngine:
    return DocumentEngine(clipboard=clipboard, exporters=exporters, notifier=notifier)
