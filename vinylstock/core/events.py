"""Change notification channel for live catalog views."""
import logging
import threading
from typing import Callable, List

from vinylstock.models.record import ChangeEvent

logger = logging.getLogger(__name__)

Subscriber = Callable[[ChangeEvent], None]


class ChangeNotifier:
    """Fan out ChangeEvents to subscribers, in subscription order."""

    def __init__(self) -> None:
        self._subscribers: List[Subscriber] = []
        self._lock = threading.Lock()

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register callback; returns a function that unsubscribes it."""
        with self._lock:
            self._subscribers.append(callback)

        def _unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return _unsubscribe

    def publish(self, event: ChangeEvent) -> None:
        with self._lock:
            subscribers = list(self._subscribers)
        for callback in subscribers:
            try:
                callback(event)
            except Exception:
                # The mutation is already committed; keep notifying the rest
                logger.exception("Change subscriber failed for %s", event)
