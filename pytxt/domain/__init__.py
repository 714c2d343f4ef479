"""Domain layer: interfaces and simple models (dataclasses)."""

from .interfaces import (
    ContentObserver,
    IChangeNotifier,
    IClipboard,
    IExporter,
    IExporterRegistry,
    IFileService,
)
from .models import Document, ExportFormat, ExportResult, TextStats

__all__ = [
    "ContentObserver",
    "IChangeNotifier",
    "IClipboard",
    "IExporter",
    "IExporterRegistry",
    "IFileService",
    "Document",
    "ExportFormat",
    "ExportResult",
    "TextStats",
]
