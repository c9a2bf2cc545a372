"""Configuration models."""

import re
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    DotEnvSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from vcs_prompt.config.exceptions import InvalidConfigurationError
from vcs_prompt.vcs.base import VCSType

COLOR_CODES = {
    "black": "30",
    "red": "31",
    "green": "32",
    "yellow": "33",
    "blue": "34",
    "magenta": "35",
    "cyan": "36",
    "white": "37",
}

_ESCAPE_RE = re.compile(r"^(?:\x1b\[[0-9;]*m)+$")


class ShellType(str, Enum):
    """Shells whose line editors need escape sequences marked invisible."""

    BASH = "bash"
    ZSH = "zsh"

    @property
    def invisible_markers(self) -> tuple[str, str]:
        """Get the start/end markers for a zero-width span.

        Bash reads these from command substitution output, so readline's raw
        markers are used instead of ``\\[`` and ``\\]``.

        Returns:
            Tuple of (start marker, end marker)
        """
        return {
            ShellType.BASH: ("\x01", "\x02"),
            ShellType.ZSH: ("%{", "%}"),
        }[self]


class PromptConfig(BaseSettings):
    """Session configuration for the prompt indicator.

    Loaded once per shell session and never modified afterward.
    """

    # Indicator glyphs
    untracked_glyph: str = Field(default="…", description="Shown before the untracked count")
    changed_glyph: str = Field(default="✚", description="Shown before the changed count")
    staged_glyph: str = Field(default="●", description="Shown before the staged count")
    clean_glyph: str = Field(default="✔", description="Shown alone for a clean working copy")
    ahead_glyph: str = Field(default="↑", description="Appended to the branch when ahead of upstream")
    behind_glyph: str = Field(default="↓", description="Appended to the branch when behind upstream")
    separator: str = Field(default="|", description="Between branch and indicators")

    # Colors (ANSI escape sequences or color names such as 'green' or 'bold_red')
    git_color: str = Field(default="green", description="Color for Git status")
    hg_color: str = Field(default="blue", description="Color for Mercurial status")
    svn_color: str = Field(default="yellow", description="Color for Subversion status")
    error_color: str = Field(default="bold_red", description="Color for parse errors")
    reset_color: str = Field(default="\x1b[0m", description="Sequence ending a colored span")

    color_enabled: bool = Field(default=True, description="Emit color escape sequences")
    shell: ShellType = Field(default=ShellType.BASH, description="Shell receiving the prompt text")

    model_config = SettingsConfigDict(
        env_file=[".env.vcsprompt"],
        env_file_encoding="utf-8",
        env_prefix="VCS_PROMPT_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    def __init__(self, **kwargs: Any) -> None:
        """Initialize configuration.

        Args:
            **kwargs: Configuration values; ``env_file`` selects a custom env file

        Raises:
            InvalidConfigurationError: If env_file is specified but does not exist
        """
        env_file = kwargs.pop("env_file", None)

        if env_file is not None:
            env_path = Path(env_file)
            if not env_path.exists():
                raise InvalidConfigurationError(f"Environment file not found: {env_file}")
            kwargs["_custom_env_file"] = env_path

        super().__init__(**kwargs)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Use a custom env file instead of the default one when given.

        Args:
            settings_cls: The settings class being instantiated
            init_settings: Settings from __init__ arguments
            env_settings: Settings from environment variables
            dotenv_settings: Settings from .env files
            file_secret_settings: Settings from secret files

        Returns:
            Tuple of settings sources in priority order
        """
        # Note: init_kwargs exists at runtime but may not be in type stubs
        init_kwargs = init_settings.init_kwargs  # type: ignore[attr-defined]
        custom_env_path = init_kwargs.get("_custom_env_file")

        if custom_env_path is not None:
            custom_dotenv = DotEnvSettingsSource(
                settings_cls,
                env_file=custom_env_path,
                env_file_encoding="utf-8",
            )
            return (init_settings, custom_dotenv, env_settings, file_secret_settings)

        return (init_settings, env_settings, dotenv_settings, file_secret_settings)

    @field_validator("git_color", "hg_color", "svn_color", "error_color", "reset_color")
    @classmethod
    def parse_color(cls, v: str) -> str:
        """Resolve a color name to its escape sequence.

        Args:
            v: Color name or raw escape sequence

        Returns:
            ANSI escape sequence

        Raises:
            InvalidConfigurationError: If the value is neither
        """
        if not v or _ESCAPE_RE.match(v):
            return v

        name = v.strip().lower()
        bold = name.startswith("bold_")
        if bold:
            name = name.removeprefix("bold_")
        if name not in COLOR_CODES:
            raise InvalidConfigurationError(f"Invalid color: {v!r}. Valid names: {sorted(COLOR_CODES)}")
        return f"\x1b[{'1' if bold else '0'};{COLOR_CODES[name]}m"

    def color_for(self, vcs_type: VCSType) -> str:
        """Get the color sequence for a backend.

        Args:
            vcs_type: Backend

        Returns:
            ANSI escape sequence
        """
        return {
            VCSType.GIT: self.git_color,
            VCSType.HG: self.hg_color,
            VCSType.SVN: self.svn_color,
        }[vcs_type]


@lru_cache(maxsize=1)
def load_config() -> PromptConfig:
    """Load the session configuration once.

    Returns:
        The shared, read-only configuration
    """
    return PromptConfig()
