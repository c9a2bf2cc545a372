"""Render prompt states as decorated prompt text."""

from vcs_prompt.config import PromptConfig, ShellType
from vcs_prompt.models import NotInTree, ParseError, PromptState, Status, StatusRecord


class RecordFormatter:
    """Turns a prompt state into the string shown in the prompt.

    The formatter is backend-agnostic: fields that do not apply to a backend
    are zero or empty in its record and simply produce no output.
    """

    def __init__(self, config: PromptConfig) -> None:
        """Initialize the formatter.

        Args:
            config: Session configuration, read but never modified
        """
        self.config = config

    def format(self, state: PromptState) -> str:
        """Render a prompt state.

        Args:
            state: State produced for the current render

        Returns:
            Decorated prompt text, empty when no backend owns the directory
        """
        if isinstance(state, NotInTree):
            return ""
        if isinstance(state, ParseError):
            return self._decorate(state.message, self.config.error_color, f"{state.vcs_type.value}!")
        if isinstance(state, Status):
            record = state.record
            return self._decorate(
                self.format_record(record),
                self.config.color_for(record.vcs_type),
                record.vcs_type.value,
            )
        raise TypeError(f"Unknown prompt state: {state!r}")

    def format_record(self, record: StatusRecord) -> str:
        """Render the undecorated body for a status record.

        Args:
            record: Parsed status record

        Returns:
            Branch segment, separator and indicators
        """
        config = self.config
        branch = record.branch_label
        if record.ahead_count > 0:
            branch += config.ahead_glyph
        if record.behind_count > 0:
            branch += config.behind_glyph

        if record.is_clean:
            indicators = config.clean_glyph
        else:
            indicators = "".join(
                f"{glyph}{count}"
                for glyph, count in (
                    (config.untracked_glyph, record.untracked_count),
                    (config.changed_glyph, record.changed_count),
                    (config.staged_glyph, record.staged_count),
                )
                if count > 0
            )

        if not branch:
            return indicators
        return f"{branch}{config.separator}{indicators}"

    def _decorate(self, body: str, color: str, tag: str) -> str:
        """Wrap a body in matching prefix and suffix decoration.

        Args:
            body: Text to wrap
            color: Color sequence used when color is enabled
            tag: Literal label used when color is disabled

        Returns:
            Decorated text
        """
        if self.config.shell is ShellType.ZSH:
            # zsh prompt-expands the whole string, so branch names and
            # messages must not introduce escapes of their own
            body = body.replace("%", "%%")

        if not self.config.color_enabled:
            return f"[{tag}:{body}]"

        start, end = self.config.shell.invisible_markers
        return f"{start}{color}{end}{body}{start}{self.config.reset_color}{end}"
