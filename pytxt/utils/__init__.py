"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    HTML_TEMPLATE,
    RTF_FOOTER,
    RTF_HEADER,
    RTF_PARAGRAPH,
    STATS_READY,
    STATS_TEMPLATE,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "HTML_TEMPLATE",
    "RTF_HEADER",
    "RTF_FOOTER",
    "RTF_PARAGRAPH",
    "STATS_READY",
    "STATS_TEMPLATE",
]
