from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from pytxt.domain.interfaces import IFileService


class FileService(IFileService):
    """Atomic writes for exported text files."""

    def write_text_atomic(self, path: Path, text: str) -> None:
        # Qt silently truncates a name at the first NUL and would write elsewhere
        if "\x00" in str(path):
            raise OSError(f"Invalid file name: {str(path)!r}")
        # Encode before opening so an unencodable buffer leaves nothing on disk
        data = text.encode("utf-8")
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path}")
        sf.write(data)
        if not sf.commit():
            raise OSError(f"Commit failed for: {path}")
