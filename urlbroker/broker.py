"""A broker that owns topics and routes subscriptions to them."""

from __future__ import annotations

from typing import TYPE_CHECKING

from urlbroker.topic import Topic

if TYPE_CHECKING:
    from urlbroker.components import Subscriber


class Broker:
    """Keeps one topic per name, creating topics on first use."""

    def __init__(self) -> None:
        self.topics: dict[str, Topic] = {}

    def create_or_get_topic(self, topic_name: str) -> Topic:
        """Return the topic with this name, creating it if needed."""
        topic = self.topics.get(topic_name)
        if topic is None:
            topic = Topic(topic_name)
            self.topics[topic_name] = topic
        return topic

    def subscribe(self, subscriber: Subscriber) -> bool:
        """Subscribe to the topic named by the subscriber's topic name."""
        self.create_or_get_topic(subscriber.topic_name).subscribe(subscriber)
        return True