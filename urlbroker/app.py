"""Command-line front end wiring a video publisher to a follower."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

from urlbroker.broker import Broker
from urlbroker.video import VideoFollower, VideoPublisher

TOPIC_NAME = "video_topic"


def build_components(broker: Broker) -> tuple[VideoPublisher, VideoFollower]:
    """Create the publisher and follower and connect them."""
    publisher = VideoPublisher("VideoPublisher", broker, TOPIC_NAME)
    follower = VideoFollower("VideoFollower", TOPIC_NAME)
    publisher.connect(follower.update)
    return publisher, follower


def _run(urls: Iterable[str], out) -> None:
    publisher, follower = build_components(Broker())
    print(follower.text, file=out)
    for line in urls:
        publisher.url_text = line
        if publisher.publish_url() is not None:
            print(follower.text, file=out)


def main(argv: list[str] | None = None) -> int:
    """Publish URLs given as arguments, or read one per line from stdin."""
    parser = argparse.ArgumentParser(prog="urlbroker")
    parser.add_argument("urls", nargs="*", help="URLs to publish")
    args = parser.parse_args(argv)
    _run(args.urls if args.urls else sys.stdin, sys.stdout)
    return 0