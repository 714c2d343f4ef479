"""Concrete service implementations: clipboard, notifier, statistics, engine, files."""

from .clipboard import ClipboardStore
from .engine import DocumentEngine
from .file_service import FileService
from .notifier import ChangeNotifier, ReentrantPublishError
from .statistics import StatisticsView, compute_stats, format_stats

__all__ = [
    "ClipboardStore",
    "ChangeNotifier",
    "DocumentEngine",
    "FileService",
    "ReentrantPublishError",
    "StatisticsView",
    "compute_stats",
    "format_stats",
]
