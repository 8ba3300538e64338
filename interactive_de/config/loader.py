# interactive_de/config/loader.py
"""
Configuration loading.

The file lives in the platformdirs user config directory unless
INTERACTIVE_DE_CONFIG points elsewhere. A missing file is created with the
defaults so users have something to edit.
"""

import logging
import os
from pathlib import Path

import yaml
from platformdirs import user_config_path

from .schema import InteractiveConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "INTERACTIVE_DE_CONFIG"


def get_config_path() -> Path:
    """Get path to config file, honouring INTERACTIVE_DE_CONFIG."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return user_config_path("interactive-de", ensure_exists=True) / "config.yaml"


def load_config(config_path: Path | None = None) -> InteractiveConfig:
    """
    Load and validate the configuration file.

    Raises:
        ValueError: If the file is not valid YAML, is not a mapping, or
            fails validation (pydantic.ValidationError)
    """
    path = config_path or get_config_path()

    if not path.exists():
        config = InteractiveConfig()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(config.model_dump(mode="json"), sort_keys=False))
        logger.info(f"Created default config at {path}")
        return config

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"invalid YAML in {path}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping, got {type(data).__name__}")

    config = InteractiveConfig.model_validate(data)
    logger.debug(f"Loaded config from {path}")
    return config
