"""
Change notifications.

Every successful write in the access layer publishes a ChangeEvent so that
views depending on the data (tenant list, dashboard, house stats) know to
reload. Clients that can't subscribe in-process poll `version`.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangeEvent:
    entity_type: str  # house / room / tenant / payment
    action: str  # created / updated / deleted
    entity_id: Optional[int] = None


Subscriber = Callable[[ChangeEvent], None]


class ChangeFeed:
    def __init__(self) -> None:
        self._subscribers: List[Subscriber] = []
        self.version = 0

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback. Returns a function that removes it again."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, event: ChangeEvent) -> None:
        self.version += 1
        logger.debug("Change %s (version %s)", event, self.version)
        for callback in list(self._subscribers):
            try:
                callback(event)
            except Exception:
                logger.exception("Change subscriber %r failed for %s", callback, event)


changes = ChangeFeed()
