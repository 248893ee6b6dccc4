from urlbroker.broker import Broker
from urlbroker.components import Component, Publisher, Subscriber


class _Recorder(Subscriber):
    def __init__(self, name, topic_name):
        super().__init__(name, topic_name)
        self.received = []

    def update(self, message):
        self.received.append(message)


def test_component_defaults_are_empty():
    comp = Component()
    assert comp.name == ""
    assert comp.topic_name == ""


def test_component_keeps_values():
    comp = Component("VideoPublisher", "video_topic")
    assert (comp.name, comp.topic_name) == ("VideoPublisher", "video_topic")


def test_publisher_registers_topic_with_broker():
    broker = Broker()
    pub = Publisher("VideoPublisher", broker, "video_topic")
    assert pub.topic is broker.create_or_get_topic("video_topic")
    assert pub.topic_name == "video_topic"


def test_publish_reaches_broker_subscribers():
    broker = Broker()
    sub = _Recorder("VideoFollower", "video_topic")
    broker.subscribe(sub)
    Publisher("VideoPublisher", broker, "video_topic").publish("clip")
    assert sub.received == ["clip"]


def test_publish_other_topic_not_delivered():
    broker = Broker()
    sub = _Recorder("VideoFollower", "video_topic")
    broker.subscribe(sub)
    Publisher("p", broker, "other").publish("clip")
    assert sub.received == []


def test_base_subscriber_update_returns_nothing():
    sub = Subscriber("s", "video_topic")
    assert sub.update("x") is None