from urlbroker.components import Subscriber
from urlbroker.topic import Topic


class _Recorder(Subscriber):
    def __init__(self, log, label):
        super().__init__(label, "video_topic")
        self.log = log

    def update(self, message):
        self.log.append((self.name, message))


def test_new_topic_has_name_and_no_subscribers():
    topic = Topic("video_topic")
    assert topic.topic_name == "video_topic"
    assert topic.subscribers == []


def test_subscribe_keeps_order():
    topic = Topic("video_topic")
    log = []
    first, second = _Recorder(log, "a"), _Recorder(log, "b")
    topic.subscribe(first)
    topic.subscribe(second)
    assert topic.subscribers == [first, second]


def test_notify_reaches_all_in_order():
    topic = Topic("video_topic")
    log = []
    topic.subscribe(_Recorder(log, "a"))
    topic.subscribe(_Recorder(log, "b"))
    topic.notify("msg")
    assert log == [("a", "msg"), ("b", "msg")]


def test_notify_without_subscribers_delivers_nothing():
    topic = Topic("video_topic")
    topic.notify("msg")
    assert len(topic.subscribers) == 0


def test_same_subscriber_twice_gets_message_twice():
    topic = Topic("video_topic")
    log = []
    rec = _Recorder(log, "a")
    topic.subscribe(rec)
    topic.subscribe(rec)
    assert topic.subscribers == [rec, rec]
    topic.notify("m")
    assert log == [("a", "m"), ("a", "m")]
    assert [s.name for s in topic.subscribers] == ["a", "a"]