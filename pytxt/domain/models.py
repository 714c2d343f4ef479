from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass
class Document:
    text: str = ""


@dataclass(frozen=True)
class TextStats:
    word_count: int
    char_count: int


class ExportFormat(Enum):
    """Selectable export strategies. The value is the exporter's registry key."""

    RTF = "rtf"
    HTML = "html"

    @classmethod
    def parse(cls, value: ExportFormat | str) -> ExportFormat:
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for fmt in cls:
            if key in (fmt.value, fmt.name.lower()):
                return fmt
        raise ValueError(f"Unknown export format: {value!r}")


@dataclass(frozen=True)
class ExportResult:
    """Outcome of one export: the file that was (or would have been) written."""

    path: Path
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, path: Path) -> ExportResult:
        return cls(path=path)

    @classmethod
    def io_error(cls, path: Path, message: str) -> ExportResult:
        return cls(path=path, error=message)
