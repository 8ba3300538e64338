# interactive_de/config/__init__.py
"""Configuration system for interactive-de."""

from .loader import get_config_path, load_config
from .schema import InteractiveConfig, OutputConfig, PromptConfig

__all__ = [
    "InteractiveConfig",
    "PromptConfig",
    "OutputConfig",
    "load_config",
    "get_config_path",
]
