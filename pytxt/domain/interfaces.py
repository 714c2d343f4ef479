from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Protocol

from .models import ExportResult

ContentObserver = Callable[[str], None]


class IFileService(Protocol):
    """Write text files. Writes should be atomic when possible."""

    def write_text_atomic(self, path: Path, text: str) -> None: ...


class IClipboard(Protocol):
    """Single shared slot holding the last copied text."""

    def copy(self, text: str) -> None: ...
    def paste(self) -> str: ...


class IChangeNotifier(Protocol):
    """Synchronous fan-out of the current buffer to subscribed observers."""

    def subscribe(self, observer: ContentObserver) -> None: ...
    def unsubscribe(self, observer: ContentObserver) -> None: ...
    def publish(self, content: str) -> None: ...


class IConfigService(Protocol):
    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...
    def app_version(self) -> str: ...


class IAppConfig(IConfigService, Protocol):
    def get_version(self) -> str: ...
    def default_export_format(self) -> str: ...
    def html_escape_title(self) -> bool: ...
    def log_level(self) -> str: ...


class IExporter(ABC):
    """Export strategy interface. Implementations serialise plain text to a file format."""

    name: str  # e.g. "rtf", "html"
    label: str  # e.g. "HTML FORMAT (.html)"
    file_ext: str  # without the leading dot

    @abstractmethod
    def render(self, content: str, filename: str) -> str:
        """Return the full serialised document for `content`."""
        raise NotImplementedError

    @abstractmethod
    def save(self, content: str, filename: str) -> ExportResult:
        """Write `content` to `filename` (extension enforced). Never raises on I/O errors."""
        raise NotImplementedError


class IExporterRegistry(ABC):
    @abstractmethod
    def register(self, e: IExporter) -> None: ...

    @abstractmethod
    def unregister(self, name: str) -> None: ...

    @abstractmethod
    def get(self, name: str) -> IExporter: ...

    @abstractmethod
    def all(self) -> list[IExporter]: ...
