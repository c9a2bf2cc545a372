"""Tests for the record formatter."""

import pytest

from vcs_prompt.config import PromptConfig, ShellType
from vcs_prompt.formatter import RecordFormatter
from vcs_prompt.models import NotInTree, ParseError, Status, StatusRecord
from vcs_prompt.vcs.base import VCSType

GREEN = "\x1b[0;32m"
RED = "\x1b[1;31m"
RESET = "\x1b[0m"


@pytest.fixture
def config() -> PromptConfig:
    """Create a color configuration with predictable values.

    Returns:
        Configuration for bash
    """
    return PromptConfig(git_color="green", error_color="bold_red", shell=ShellType.BASH)


@pytest.fixture
def plain_config() -> PromptConfig:
    """Create a configuration with color disabled.

    Returns:
        Configuration without color
    """
    return PromptConfig(color_enabled=False)


def git_status(**counts: int) -> Status:
    """Helper to build a Git status on main."""
    return Status(record=StatusRecord(vcs_type=VCSType.GIT, branch_label="main", **counts))


class TestNotInTree:
    """Tests for directories no backend owns."""

    def test_empty_with_color(self, config: PromptConfig) -> None:
        """Test that NotInTree renders nothing."""
        assert RecordFormatter(config).format(NotInTree()) == ""

    def test_empty_without_color(self, plain_config: PromptConfig) -> None:
        """Test that NotInTree renders nothing regardless of color setting."""
        assert RecordFormatter(plain_config).format(NotInTree()) == ""


class TestStatusFormatting:
    """Tests for Status rendering."""

    def test_clean(self, config: PromptConfig) -> None:
        """Test clean tree shows branch and only the clean glyph."""
        text = RecordFormatter(config).format(git_status())

        assert text == f"\x01{GREEN}\x02main|✔\x01{RESET}\x02"

    def test_indicator_order(self, config: PromptConfig) -> None:
        """Test untracked, changed, staged order with counts."""
        text = RecordFormatter(config).format(git_status(untracked_count=3, changed_count=2, staged_count=1))

        assert text == f"\x01{GREEN}\x02main|…3✚2●1\x01{RESET}\x02"

    def test_zero_counts_are_omitted(self, config: PromptConfig) -> None:
        """Test that only positive counts are shown."""
        body = RecordFormatter(config).format_record(git_status(staged_count=4).record)

        assert body == "main|●4"

    def test_ahead_and_behind_glyphs_shown_once(self, config: PromptConfig) -> None:
        """Test that ahead/behind glyphs do not repeat with magnitude."""
        body = RecordFormatter(config).format_record(git_status(ahead_count=5, behind_count=2).record)

        assert body == "main↑↓|"

    def test_ahead_with_changes(self, config: PromptConfig) -> None:
        """Test ahead glyph alongside count indicators."""
        body = RecordFormatter(config).format_record(git_status(ahead_count=1, changed_count=1).record)

        assert body == "main↑|✚1"

    def test_svn_has_no_branch_segment(self, config: PromptConfig) -> None:
        """Test that Subversion shows indicators without a separator."""
        record = StatusRecord(vcs_type=VCSType.SVN, changed_count=2)

        assert RecordFormatter(config).format_record(record) == "✚2"

    def test_svn_clean(self, config: PromptConfig) -> None:
        """Test clean Subversion working copy."""
        record = StatusRecord(vcs_type=VCSType.SVN)

        assert RecordFormatter(config).format_record(record) == "✔"

    def test_backend_color(self) -> None:
        """Test that each backend uses its own color."""
        config = PromptConfig(hg_color="cyan")
        state = Status(record=StatusRecord(vcs_type=VCSType.HG, branch_label="default"))

        assert RecordFormatter(config).format(state).startswith("\x01\x1b[0;36m\x02")

    def test_zsh_markers(self) -> None:
        """Test zsh invisible span markers."""
        config = PromptConfig(git_color="green", shell=ShellType.ZSH)

        text = RecordFormatter(config).format(git_status())

        assert text == f"%{{{GREEN}%}}main|✔%{{{RESET}%}}"

    def test_zsh_escapes_percent(self) -> None:
        """Test that a percent sign in a branch name is not a zsh prompt escape."""
        config = PromptConfig(git_color="green", shell=ShellType.ZSH)
        state = Status(record=StatusRecord(vcs_type=VCSType.GIT, branch_label="50%-done"))

        text = RecordFormatter(config).format(state)

        assert text == f"%{{{GREEN}%}}50%%-done|✔%{{{RESET}%}}"

    def test_zsh_escapes_percent_without_color(self) -> None:
        """Test that uncolored zsh output is escaped too."""
        config = PromptConfig(color_enabled=False, shell=ShellType.ZSH)
        state = ParseError(vcs_type=VCSType.GIT, message="100% broken")

        assert RecordFormatter(config).format(state) == "[git!:100%% broken]"

    def test_bash_keeps_percent(self, config: PromptConfig) -> None:
        """Test that bash output is not escaped."""
        state = Status(record=StatusRecord(vcs_type=VCSType.GIT, branch_label="50%-done"))

        assert "50%-done" in RecordFormatter(config).format(state)

    def test_custom_glyphs(self) -> None:
        """Test configured glyphs and separator."""
        config = PromptConfig(
            untracked_glyph="?",
            changed_glyph="+",
            staged_glyph="*",
            separator=" ",
            color_enabled=False,
        )

        text = RecordFormatter(config).format(git_status(untracked_count=1, changed_count=1, staged_count=1))

        assert text == "[git:main ?1+1*1]"

    def test_without_color(self, plain_config: PromptConfig) -> None:
        """Test that a backend tag replaces color and no escapes are emitted."""
        text = RecordFormatter(plain_config).format(git_status(changed_count=1))

        assert text == "[git:main|✚1]"
        assert "\x1b" not in text
        assert "\x01" not in text


class TestParseErrorFormatting:
    """Tests for ParseError rendering."""

    def test_error_color(self, config: PromptConfig) -> None:
        """Test error color around the literal message."""
        state = ParseError(vcs_type=VCSType.HG, message="unexpected hg summary output")

        text = RecordFormatter(config).format(state)

        assert text == f"\x01{RED}\x02unexpected hg summary output\x01{RESET}\x02"

    def test_special_condition_literal(self, config: PromptConfig) -> None:
        """Test that a special condition shows its literal message."""
        state = ParseError(vcs_type=VCSType.SVN, message="'svn upgrade' needed", special=True)

        text = RecordFormatter(config).format(state)

        assert "'svn upgrade' needed" in text
        assert text.startswith(f"\x01{RED}\x02")

    def test_error_without_color(self, plain_config: PromptConfig) -> None:
        """Test error tag when color is disabled."""
        state = ParseError(vcs_type=VCSType.SVN, message="unexpected svn status output")

        assert RecordFormatter(plain_config).format(state) == "[svn!:unexpected svn status output]"

    def test_error_distinct_from_status(self, config: PromptConfig) -> None:
        """Test that errors never use the backend color."""
        state = ParseError(vcs_type=VCSType.GIT, message="unexpected git status output")

        assert GREEN not in RecordFormatter(config).format(state)


class TestDecorationPairing:
    """Tests that prefix and suffix always appear together."""

    @pytest.mark.parametrize("color_enabled", [True, False])
    @pytest.mark.parametrize(
        "state",
        [
            NotInTree(),
            Status(record=StatusRecord(vcs_type=VCSType.GIT, branch_label="main")),
            Status(record=StatusRecord(vcs_type=VCSType.SVN, untracked_count=1)),
            ParseError(vcs_type=VCSType.HG, message="unexpected hg summary output"),
        ],
    )
    def test_prefix_and_suffix_paired(self, state, color_enabled: bool) -> None:
        """Test that markers are balanced for every state."""
        text = RecordFormatter(PromptConfig(color_enabled=color_enabled)).format(state)

        if color_enabled:
            assert text.count("\x01") == text.count("\x02")
            assert text.startswith("\x01") == text.endswith("\x02")
        else:
            assert text.startswith("[") == text.endswith("]")
