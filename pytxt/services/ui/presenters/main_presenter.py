from __future__ import annotations

from typing import Protocol, runtime_checkable

from loguru import logger

from pytxt.domain.models import ExportFormat, ExportResult
from pytxt.services.engine import DocumentEngine
from pytxt.services.statistics import StatisticsView
from pytxt.services.ui.ports.dialogs import IInputDialogService
from pytxt.services.ui.ports.messages import IMessageService

# Combo box order in the view
FORMAT_CHOICES: tuple[ExportFormat, ...] = (ExportFormat.RTF, ExportFormat.HTML)

_SAVED_KIND = {ExportFormat.RTF: "WORD", ExportFormat.HTML: "HTML"}


@runtime_checkable
class IMainView(Protocol):
    """Very small surface for a passive view (implemented by the Qt MainWindow)."""

    def get_editor_text(self) -> str: ...
    def set_stats_text(self, text: str) -> None: ...


class MainPresenter:
    """
    Coordinates the main window and the DocumentEngine.

    The view forwards raw UI events here; the presenter mutates the engine and
    reports outcomes through the message port. Export failures end up as an
    error message, never as an exception reaching Qt.
    """

    def __init__(
        self,
        view: IMainView,
        engine: DocumentEngine,
        messages: IMessageService,
        dialogs: IInputDialogService,
    ) -> None:
        self.view = view
        self.engine = engine
        self.messages = messages
        self.dialogs = dialogs

        self.stats = StatisticsView(sink=view.set_stats_text)
        engine.subscribe(self.stats)

    def detach(self) -> None:
        """Stop receiving buffer updates; the view is going away."""
        self.engine.unsubscribe(self.stats)

    # ---------- edits ----------
    def on_text_changed(self, text: str) -> None:
        self.engine.set_content(text)

    # ---------- export ----------
    def format_labels(self) -> list[str]:
        return [self.engine.exporter_for(f).label for f in FORMAT_CHOICES]

    def format_index(self) -> int:
        return FORMAT_CHOICES.index(self.engine.export_format)

    def select_format(self, choice: int | ExportFormat | str) -> None:
        fmt = FORMAT_CHOICES[choice] if isinstance(choice, int) else ExportFormat.parse(choice)
        self.engine.set_export_format(fmt)

    def save_via_dialog(self) -> ExportResult | None:
        name = self.dialogs.get_text(None, "Save", "File name (without extension) :")
        if name is None or not name.strip():
            return None
        return self.save(name)

    def save(self, filename: str) -> ExportResult:
        result = self.engine.save(filename)
        if result.ok:
            kind = _SAVED_KIND[self.engine.export_format]
            self.messages.info(None, "Saved", f"Saved {kind} File :\n{result.path}")
        else:
            self.messages.error(None, "Export Error", f"Error : {result.error}")
        return result

    # ---------- clipboard ----------
    def copy(self, selection: str | None = None) -> None:
        text = self.view.get_editor_text()
        self.engine.set_content(text)
        self.engine.copy(selection if selection else text)
        self.messages.info(None, "Copy", "Text successfully copied (CTRL+C) !")

    def paste(self) -> str:
        text = self.engine.paste()
        logger.debug(f"Pasting {len(text)} chars")
        return text
