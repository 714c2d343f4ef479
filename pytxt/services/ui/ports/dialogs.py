from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IInputDialogService(Protocol):
    """
    Abstract UI port for single-line prompts. Keeps the rest of the app decoupled from Qt.
    """

    def get_text(self, parent: Any | None, title: str, label: str) -> str | None:
        """Return the entered text, or None if cancelled."""
        ...
