"""Publish/subscribe broker with topics, publishers, subscribers and a command-line URL publisher."""

__version__ = "0.1.0"
__all__ = ["__version__"]