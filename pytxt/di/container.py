from __future__ import annotations

from pytxt.domain.interfaces import IAppConfig, IClipboard, IExporterRegistry, IFileService
from pytxt.services.clipboard import ClipboardStore
from pytxt.services.config.app_config import build_app_config
from pytxt.services.engine import DocumentEngine
from pytxt.services.exporters.base import ExporterRegistryInst
from pytxt.services.exporters.html_exporter import HtmlExporter
from pytxt.services.exporters.rtf_exporter import RtfExporter
from pytxt.services.file_service import FileService
from pytxt.services.notifier import ChangeNotifier
from pytxt.services.ui.adapters import QtInputDialogService, QtMessageService
from pytxt.services.ui.main_window import MainWindow
from pytxt.services.ui.ports.dialogs import IInputDialogService
from pytxt.services.ui.ports.messages import IMessageService
from pytxt.services.ui.presenters.main_presenter import MainPresenter


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Owns the one clipboard and the one document engine of the process
      - Registers the built-in exporters (rtf, html) in its own registry
    """

    def __init__(
        self,
        config: IAppConfig | None = None,
        files: IFileService | None = None,
        clipboard: IClipboard | None = None,
        exporters: IExporterRegistry | None = None,
        dialogs: IInputDialogService | None = None,
        messages: IMessageService | None = None,
    ) -> None:
        self.config: IAppConfig = config or build_app_config()
        self.file_service: IFileService = files or FileService()
        self.clipboard: IClipboard = clipboard or ClipboardStore()
        self.exporters: IExporterRegistry = exporters or ExporterRegistryInst()

        # UI service ports are created lazily by build_main_window when not supplied
        self.dialogs = dialogs
        self.messages = messages

        self._ensure_builtin_exporters()

        self.engine = DocumentEngine(
            clipboard=self.clipboard,
            exporters=self.exporters,
            notifier=ChangeNotifier(),
            export_format=self.config.default_export_format(),
        )

    @staticmethod
    def default() -> Container:
        return Container()

    # ---------- Internals ----------

    def _ensure_builtin_exporters(self) -> None:
        try:
            self.exporters.get("rtf")
        except KeyError:
            self.exporters.register(RtfExporter(self.file_service))

        try:
            self.exporters.get("html")
        except KeyError:
            self.exporters.register(
                HtmlExporter(self.file_service, escape_title=self.config.html_escape_title())
            )

    # ---------- UI factories ----------

    def build_main_presenter(self, view) -> MainPresenter:
        if self.messages is None:
            self.messages = QtMessageService()
        if self.dialogs is None:
            self.dialogs = QtInputDialogService()
        return MainPresenter(
            view=view,
            engine=self.engine,
            messages=self.messages,
            dialogs=self.dialogs,
        )

    def build_main_window(self, *, app_title: str = "PyTextEditor") -> MainWindow:
        """Create the Qt MainWindow and attach a presenter bound to the shared engine."""
        window = MainWindow(app_title=app_title)
        window.attach_presenter(self.build_main_presenter(view=window))
        return window
