from __future__ import annotations

from typing import Any

from PyQt6.QtWidgets import QInputDialog

from pytxt.services.ui.ports.dialogs import IInputDialogService


class QtInputDialogService(IInputDialogService):
    """Qt-backed implementation of the text prompt."""

    def get_text(self, parent: Any | None, title: str, label: str) -> str | None:
        text, ok = QInputDialog.getText(parent, title, label)
        return text if ok else None
