"""Named topics that fan messages out to their subscribers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from urlbroker.components import Subscriber


@dataclass(eq=False)
class Topic:
    """A named channel holding an ordered list of subscribers."""

    topic_name: str
    subscribers: list[Subscriber] = field(default_factory=list)

    def subscribe(self, subscriber: Subscriber) -> None:
        """Add a subscriber; it will receive every later message."""
        self.subscribers.append(subscriber)

    def notify(self, message: str) -> None:
        """Deliver a message to every subscriber in subscription order."""
        for subscriber in self.subscribers:
            subscriber.update(message)