# interactive_de/logging_config.py
"""
Stderr-only logging configuration for CLI mode.

stdout carries the prompt transcript, so ALL logging must go to stderr.
The default level is WARNING: a normal run (including a quit) leaves
stderr empty.
"""

import logging
import sys

_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def configure_logging(verbosity: str = "normal") -> None:
    """
    Configure human-readable logging to stderr.

    Clears existing handlers to prevent stdout pollution.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s  %(levelname)-7s  %(message)s", datefmt="%H:%M:%S")
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(_LEVELS.get(verbosity, logging.WARNING))
