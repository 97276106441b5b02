"""Configuration - Action inputs resolved once per run."""

from trellolink.config.exceptions import ConfigError
from trellolink.config.loader import REQUIRED_INPUTS, get_input, load_config
from trellolink.config.models import ActionConfig, CardAction

__all__ = [
    "REQUIRED_INPUTS",
    "ActionConfig",
    "CardAction",
    "ConfigError",
    "get_input",
    "load_config",
]
