# interactive_de/__init__.py
"""Build statically-shaped values by prompting a human for every leaf."""

from interactive_de.channel import LineChannel
from interactive_de.context import PromptContext
from interactive_de.engine import Deserializer, deserialize_interactive
from interactive_de.errors import (
    ChannelError,
    CustomError,
    InteractiveError,
    QuitRequested,
    UnsupportedShapeError,
)

__all__ = [
    "Deserializer",
    "LineChannel",
    "PromptContext",
    "deserialize_interactive",
    "InteractiveError",
    "QuitRequested",
    "ChannelError",
    "CustomError",
    "UnsupportedShapeError",
]
