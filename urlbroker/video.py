"""Video URL publisher and follower widgets without a GUI toolkit."""

from __future__ import annotations

from collections.abc import Callable

from urlbroker.broker import Broker
from urlbroker.components import Publisher, Subscriber

WAITING_TEXT = "Esperando URL"
PUBLISH_LABEL = "Publicar URL"


class VideoPublisher(Publisher):
    """Holds a URL entry field and publishes its trimmed content."""

    def __init__(self, name: str, broker: Broker, topic_name: str) -> None:
        super().__init__(name, broker, topic_name)
        self.url_text = ""
        self.button_label = PUBLISH_LABEL
        self._listeners: list[Callable[[str], None]] = []

    def connect(self, callback: Callable[[str], None]) -> None:
        """Register a callback invoked with each URL that gets published."""
        self._listeners.append(callback)

    def publish_url(self) -> str | None:
        """Publish the entered URL, notify listeners and clear the field.

        Returns the published URL, or None when the field was blank.
        """
        url = self.url_text.strip()
        if not url:
            return None
        self.publish(url)
        for callback in self._listeners:
            callback(url)
        self.url_text = ""
        return url


class VideoFollower(Subscriber):
    """Shows the last URL it received as its button text."""

    def __init__(self, name: str, topic_name: str) -> None:
        super().__init__(name, topic_name)
        self.text = WAITING_TEXT

    def update(self, message: str) -> None:
        """Display the received message."""
        self.text = message