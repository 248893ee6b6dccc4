# urlbroker

A small publish/subscribe library. A `Broker` keeps one `Topic` per name;
publishers send messages to a topic and every subscriber of that topic
receives them, in the order it subscribed. A pair of URL components and a
line-based command sit on top.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Concepts

- `urlbroker.topic.Topic(topic_name)`: a named channel with a `subscribers`
  list. `subscribe(subscriber)` appends a subscriber; `notify(message)` calls
  `update(message)` on each subscriber in subscription order.
- `urlbroker.broker.Broker`: holds its topics in the `topics` dict, keyed by
  name. `create_or_get_topic(topic_name)` returns the existing topic with that
  name or creates and stores a new one. `subscribe(subscriber)` attaches the
  subscriber to the topic named by its `topic_name` (creating the topic if
  needed) and returns `True`.
- `urlbroker.components`:
  - `Component(name="", topic_name="")`: something with a name and a topic
    name.
  - `Publisher(name, broker, topic_name)`: gets its topic from the broker when
    created; `publish(message)` notifies every subscriber of that topic.
  - `Subscriber(name, topic_name)`: receives messages in `update(message)`.
    The base class ignores them; subclass it to react.
- `urlbroker.video`:
  - `VideoPublisher(name, broker, topic_name)`: a `Publisher` with a pending
    URL in `url_text` and a `button_label` of `"Publicar URL"`.
    `connect(callback)` registers a callback. `publish_url()` strips
    `url_text`; if nothing is left it returns `None` and does nothing else.
    Otherwise it publishes the URL to the topic, calls every registered
    callback with it, clears `url_text` and returns the URL.
  - `VideoFollower(name, topic_name)`: a `Subscriber` whose `text` starts as
    `"Esperando URL"` and is replaced by each message passed to `update`.

## Example

```python
from urlbroker.broker import Broker
from urlbroker.components import Publisher, Subscriber


class Printer(Subscriber):
    def update(self, message):
        print(f"{self.name} got {message}")


broker = Broker()
broker.subscribe(Printer("printer", "video_topic"))

publisher = Publisher("publisher", broker, "video_topic")
publisher.publish("https://example.com/video")
# printer got https://example.com/video
```

`urlbroker.app.build_components(broker)` creates a `VideoPublisher` and a
`VideoFollower` on the `video_topic` topic and registers the follower's
`update` as a callback of the publisher, returning both as a tuple. The
follower is not subscribed to the topic through the broker; it is updated by
the callback.

## Command line

```
urlbroker https://example.com/a https://example.com/b
```

prints the follower's text before anything is published, then its text after
each URL is published:

```
Esperando URL
https://example.com/a
https://example.com/b
```

With no arguments, `urlbroker` reads URLs from standard input, one per line.
Surrounding whitespace is stripped and blank lines are skipped. The command
exits with status 0.

## What it does not do

There is no graphical window: the URL field, the publish button and the
follower's display are plain attributes (`url_text`, `button_label`, `text`),
and the only front end is the line-based `urlbroker` command. Messages are
delivered synchronously in the same process; nothing is sent over a network
or stored.