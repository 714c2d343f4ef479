from __future__ import annotations

from .qt_dialogs import QtInputDialogService
from .qt_messages import QtMessageService

__all__ = [
    "QtInputDialogService",
    "QtMessageService",
]
