from __future__ import annotations

import html

from pytxt.domain.interfaces import IFileService
from pytxt.services.exporters.base import BaseExporter
from pytxt.utils.constants import HTML_TEMPLATE


class HtmlExporter(BaseExporter):
    """
    Self-contained, inline-styled HTML page.

    The filename doubles as page title and heading. The content goes in verbatim;
    `white-space: pre-wrap` keeps its line breaks without any <br> substitution.
    """

    name = "html"
    label = "HTML FORMAT (.html)"
    file_ext = "html"

    def __init__(self, file_service: IFileService, *, escape_title: bool = True) -> None:
        super().__init__(file_service)
        self.escape_title = escape_title

    def render(self, content: str, filename: str) -> str:
        title = html.escape(filename, quote=True) if self.escape_title else filename
        return HTML_TEMPLATE.format(title=title, body=content)
