"""Base participants of the publish/subscribe system."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from urlbroker.broker import Broker
    from urlbroker.topic import Topic


@dataclass(eq=False)
class Component:
    """Something with a name that is attached to a topic by name."""

    name: str = ""
    topic_name: str = ""


class Publisher(Component):
    """Publishes messages to one topic obtained from a broker."""

    def __init__(self, name: str, broker: Broker, topic_name: str) -> None:
        super().__init__(name, topic_name)
        self.topic: Topic = broker.create_or_get_topic(topic_name)

    def publish(self, message: str) -> None:
        """Send a message to every subscriber of the topic."""
        self.topic.notify(message)


class Subscriber(Component):
    """Receives messages from a topic; the base class ignores them."""

    def update(self, message: str) -> None:
        """Handle a delivered message."""