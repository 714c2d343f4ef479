from __future__ import annotations

from loguru import logger

from pytxt.domain.interfaces import ContentObserver, IChangeNotifier


class ReentrantPublishError(RuntimeError):
    """Raised when an observer triggers another publish while one is being delivered."""


class ChangeNotifier(IChangeNotifier):
    """
    Push-style observer list.

    Observers are plain callables receiving the full current content. Delivery is
    synchronous, in subscription order; duplicates are kept and fire once per
    registration.
    """

    def __init__(self) -> None:
        self._observers: list[ContentObserver] = []
        self._publishing = False

    def __len__(self) -> int:
        return len(self._observers)

    def subscribe(self, observer: ContentObserver) -> None:
        self._observers.append(observer)

    def unsubscribe(self, observer: ContentObserver) -> None:
        try:
            self._observers.remove(observer)
        except ValueError:
            pass

    def publish(self, content: str) -> None:
        if self._publishing:
            raise ReentrantPublishError("publish() called from within an observer")
        self._publishing = True
        try:
            targets = list(self._observers)
            logger.debug(f"Publishing {len(content)} chars to {len(targets)} observer(s)")
            for observer in targets:
                observer(content)
        finally:
            self._publishing = False
