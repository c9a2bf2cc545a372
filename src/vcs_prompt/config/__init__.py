"""Configuration management for vcs-prompt."""

from vcs_prompt.config.exceptions import (
    ConfigurationError,
    InvalidConfigurationError,
)
from vcs_prompt.config.models import PromptConfig, ShellType, load_config

__all__ = [
    "ConfigurationError",
    "InvalidConfigurationError",
    "PromptConfig",
    "ShellType",
    "load_config",
]
