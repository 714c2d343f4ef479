from __future__ import annotations

from .dialogs import IInputDialogService
from .messages import IMessageService

__all__ = [
    "IInputDialogService",
    "IMessageService",
]
