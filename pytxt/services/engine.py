from __future__ import annotations

from loguru import logger

from pytxt.domain.interfaces import (
    ContentObserver,
    IChangeNotifier,
    IClipboard,
    IExporter,
    IExporterRegistry,
)
from pytxt.domain.models import Document, ExportFormat, ExportResult
from pytxt.services.notifier import ChangeNotifier


class DocumentEngine:
    """
    Owns the text buffer, the active export strategy and the observer list.

    Every edit goes through `set_content`, which replaces the buffer and then
    pushes the new text to all observers before returning.
    """

    def __init__(
        self,
        clipboard: IClipboard,
        exporters: IExporterRegistry,
        *,
        notifier: IChangeNotifier | None = None,
        export_format: ExportFormat | str = ExportFormat.RTF,
    ) -> None:
        self._clipboard = clipboard
        self._exporters = exporters
        self._notifier: IChangeNotifier = notifier or ChangeNotifier()
        self._doc = Document()
        self._format = ExportFormat.parse(export_format)

    # ---------- buffer ----------
    @property
    def content(self) -> str:
        return self._doc.text

    def get_content(self) -> str:
        return self._doc.text

    def set_content(self, text: str) -> None:
        self._doc.text = text
        self._notifier.publish(text)

    # ---------- observers ----------
    def subscribe(self, observer: ContentObserver) -> None:
        self._notifier.subscribe(observer)

    def unsubscribe(self, observer: ContentObserver) -> None:
        self._notifier.unsubscribe(observer)

    # ---------- export ----------
    @property
    def export_format(self) -> ExportFormat:
        return self._format

    @property
    def exporter(self) -> IExporter:
        return self.exporter_for(self._format)

    def exporter_for(self, fmt: ExportFormat | str) -> IExporter:
        return self._exporters.get(ExportFormat.parse(fmt).value)

    def set_export_format(self, fmt: ExportFormat | str) -> None:
        self._format = ExportFormat.parse(fmt)
        logger.debug(f"Export format set to {self._format.name}")

    def save(self, filename: str) -> ExportResult:
        return self.exporter.save(self._doc.text, filename)

    # ---------- clipboard ----------
    def copy(self, text: str | None = None) -> None:
        """Copy `text` (e.g. the UI selection) or, when omitted, the whole buffer."""
        self._clipboard.copy(self._doc.text if text is None else text)

    def paste(self) -> str:
        return self._clipboard.paste()
