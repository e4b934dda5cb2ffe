"""Change notification for roster, log and practice documents.

Subscribers register a callback per topic and receive the whole current
document (or ``None`` once it is gone) after the writing transaction
commits. Topics are document paths such as ``"practices/3"`` or collection
paths such as ``"practices"``; a document change is delivered to both.
"""

from collections import defaultdict
from collections.abc import Callable
from typing import Any

from loguru import logger
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

Snapshot = dict[str, Any] | None
Callback = Callable[[str, Snapshot], None]

_PENDING_KEY = "poloclub.pending_changes"


def collection_of(topic: str) -> str | None:
    """Collection path of a document topic, e.g. 'horses/3/logs/9' -> 'horses/3/logs'."""
    head, _, tail = topic.rpartition("/")
    if head and tail.isdigit():
        return head
    return None


class ChangeFeed:
    """Observer registry delivering whole-document snapshots."""

    def __init__(self):
        self._subscribers: dict[str, list[Callback]] = defaultdict(list)

    def subscribe(self, topic: str, callback: Callback) -> Callable[[], None]:
        """Register ``callback`` for ``topic``. Returns the unsubscribe function."""
        self._subscribers[topic].append(callback)

        def unsubscribe() -> None:
            callbacks = self._subscribers.get(topic, [])
            if callback in callbacks:
                callbacks.remove(callback)

        return unsubscribe

    def subscriber_count(self, topic: str) -> int:
        return len(self._subscribers.get(topic, []))

    def stage(self, session: AsyncSession, topic: str, snapshot: Snapshot) -> None:
        """Queue a change for delivery when ``session`` commits."""
        session.sync_session.info.setdefault(_PENDING_KEY, []).append((self, topic, snapshot))

    def publish(self, topic: str, snapshot: Snapshot) -> None:
        """Deliver a change now to the topic and its collection."""
        targets = [topic]
        collection = collection_of(topic)
        if collection:
            targets.append(collection)

        for target in targets:
            for callback in list(self._subscribers.get(target, [])):
                try:
                    callback(topic, snapshot)
                except Exception as e:
                    logger.error(f"Subscriber for '{target}' failed on {topic}: {e}")


# Savepoints are ignored; only the outermost transaction delivers or discards.
@event.listens_for(Session, "after_commit")
def _deliver_pending(session: Session) -> None:
    if session.in_nested_transaction():
        return
    for feed, topic, snapshot in session.info.pop(_PENDING_KEY, []):
        feed.publish(topic, snapshot)


@event.listens_for(Session, "after_rollback")
def _discard_pending(session: Session) -> None:
    if session.in_nested_transaction():
        return
    session.info.pop(_PENDING_KEY, None)


change_feed = ChangeFeed()
