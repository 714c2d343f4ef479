from __future__ import annotations

from pytxt.services.exporters.base import BaseExporter
from pytxt.utils.constants import RTF_FOOTER, RTF_HEADER, RTF_PARAGRAPH

_RTF_SPECIALS = {"\\": "\\\\", "{": "\\{", "}": "\\}"}


def _unicode_escapes(ch: str) -> str:
    """\\uN? escapes for one character, N being signed 16-bit UTF-16 code units."""
    data = ch.encode("utf-16-le", "surrogatepass")
    out = []
    for i in range(0, len(data), 2):
        unit = int.from_bytes(data[i : i + 2], "little", signed=True)
        out.append(f"\\u{unit}?")
    return "".join(out)


def to_rtf_body(content: str) -> str:
    parts: list[str] = []
    for ch in content:
        if ch == "\n":
            parts.append(RTF_PARAGRAPH)
        elif ord(ch) > 127:
            parts.append(_unicode_escapes(ch))
        else:
            parts.append(_RTF_SPECIALS.get(ch, ch))
    return "".join(parts)


class RtfExporter(BaseExporter):
    name = "rtf"
    label = "WORD FORMAT (.rtf)"
    file_ext = "rtf"

    def render(self, content: str, filename: str) -> str:
        return RTF_HEADER + to_rtf_body(content) + RTF_FOOTER
