from __future__ import annotations

from loguru import logger

from pytxt.domain.interfaces import IClipboard


class ClipboardStore(IClipboard):
    """
    In-process clipboard holding the last copied text.

    One instance is built by the container and shared by everything that copies
    or pastes, so every caller observes the value last written by any other.
    """

    def __init__(self) -> None:
        self._content = ""

    def copy(self, text: str) -> None:
        self._content = text
        logger.info("Text copied successfully.")

    def paste(self) -> str:
        return self._content
