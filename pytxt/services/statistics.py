from __future__ import annotations

from collections.abc import Callable

from pytxt.domain.models import TextStats
from pytxt.utils.constants import STATS_TEMPLATE


def compute_stats(content: str) -> TextStats:
    # str.split() without arguments splits on runs of whitespace and drops the edges
    words = content.split()
    return TextStats(word_count=len(words), char_count=len(content))


def format_stats(stats: TextStats) -> str:
    return STATS_TEMPLATE.format(words=stats.word_count, chars=stats.char_count)


class StatisticsView:
    """
    Observer deriving word/character counts from the buffer.

    Stateless apart from remembering the last result; the counts are recomputed in
    full on every notification. `sink` receives the formatted label text.
    """

    def __init__(self, sink: Callable[[str], None] | None = None) -> None:
        self._sink = sink
        self.last: TextStats | None = None

    def recompute(self, content: str) -> TextStats:
        stats = compute_stats(content)
        self.last = stats
        if self._sink is not None:
            self._sink(format_stats(stats))
        return stats

    __call__ = recompute
