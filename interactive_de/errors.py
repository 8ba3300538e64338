# interactive_de/errors.py
"""
Error taxonomy for interactive deserialization.

Only these exceptions cross recursion frames. Malformed scalar or yes/no
input is a plain ValueError that stays inside the channel's retry loop.
"""


class InteractiveError(Exception):
    """Base class for every failure that aborts a construction."""


class QuitRequested(InteractiveError):
    """User typed a quit sentinel or closed the input stream."""

    def __init__(self) -> None:
        super().__init__("quit")


class ChannelError(InteractiveError):
    """The underlying text channel became unusable (raised from the OSError)."""

    def __init__(self) -> None:
        super().__init__("io error")


class CustomError(InteractiveError):
    """The schema layer rejected a value."""


class UnsupportedShapeError(InteractiveError):
    """
    A shape the interactive medium cannot express was requested.

    This is a contract violation by the schema, not a user mistake.
    """

    def __init__(self, shape: str) -> None:
        super().__init__(f"unsupported shape: {shape} cannot be entered interactively")
        self.shape = shape
