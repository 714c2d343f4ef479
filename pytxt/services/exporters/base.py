from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from pytxt.domain.interfaces import IExporter, IExporterRegistry, IFileService
from pytxt.domain.models import ExportResult


class BaseExporter(IExporter):
    """
    Shared save pipeline for every format: enforce the extension, render, write.

    I/O and encoding failures are turned into an `ExportResult` carrying the
    error message so the UI can report them; they are never raised past this point.
    """

    def __init__(self, file_service: IFileService) -> None:
        self._files = file_service

    def ensure_extension(self, filename: str) -> str:
        suffix = f".{self.file_ext}"
        return filename if filename.endswith(suffix) else filename + suffix

    @abstractmethod
    def render(self, content: str, filename: str) -> str:
        raise NotImplementedError

    def save(self, content: str, filename: str) -> ExportResult:
        target = self.ensure_extension(filename)
        path = Path(target)
        try:
            self._files.write_text_atomic(path, self.render(content, target))
        except (OSError, UnicodeError) as e:
            logger.error(f"{self.name.upper()} export to {path} failed: {e}")
            return ExportResult.io_error(path, str(e))
        logger.info(f"Exported {self.name.upper()}: {path}")
        return ExportResult.success(path)


@dataclass
class ExporterRegistryInst(IExporterRegistry):
    """
    Instance-based exporter registry (no globals, no side-effects).
    Keeps registry local to the DI container for testability and clarity.
    """

    _reg: dict[str, IExporter] = field(default_factory=dict)

    def register(self, e: IExporter) -> None:
        self._reg[e.name] = e

    def unregister(self, name: str) -> None:
        self._reg.pop(name, None)

    def get(self, name: str) -> IExporter:
        return self._reg[name]

    def all(self) -> list[IExporter]:
        return list(self._reg.values())
