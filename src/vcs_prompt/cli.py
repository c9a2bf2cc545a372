"""Command-line interface for vcs-prompt."""

import logging
import sys

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from vcs_prompt import __version__
from vcs_prompt.config import ConfigurationError, PromptConfig, ShellType
from vcs_prompt.formatter import RecordFormatter
from vcs_prompt.models import NotInTree, ParseError, Status
from vcs_prompt.prompt import get_prompt_state

app = typer.Typer(
    name="vcs-prompt",
    help="Version control status indicator for shell prompts",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

# Help text constants
VERBOSE_OUTPUT_HELP = "Log backend invocations to stderr"
ENV_FILE_HELP = "Path to custom environment file (default: .env.vcsprompt)"
PATH_HELP = "Directory to inspect (default: current directory)"


def setup_logging(verbose: bool) -> None:
    """Setup logging configuration.

    Logs always go to stderr so they never end up in the prompt text.

    Args:
        verbose: If True, enable debug logging
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
    )


def load_cli_config(env_file: str | None, **overrides: object) -> PromptConfig:
    """Load configuration, applying command-line overrides.

    Args:
        env_file: Optional custom env file
        **overrides: Values taking precedence over the environment; None values are skipped

    Returns:
        Configuration object

    Raises:
        SystemExit: If the configuration is invalid
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return PromptConfig(env_file=env_file, **values)
    except ConfigurationError as e:
        err_console.print(f"[red]Configuration error: {e}[/red]")
        sys.exit(1)


@app.command()
def render(
    path: str | None = typer.Option(
        None,
        "--path",
        "-C",
        help=PATH_HELP,
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable color escape sequences",
    ),
    shell: ShellType | None = typer.Option(
        None,
        "--shell",
        help="Shell the prompt text is meant for (overrides config)",
    ),
    env_file: str | None = typer.Option(
        None,
        "--env-file",
        help=ENV_FILE_HELP,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help=VERBOSE_OUTPUT_HELP,
    ),
) -> None:
    """Print the prompt indicator for the current directory."""
    setup_logging(verbose)

    config = load_cli_config(env_file, shell=shell, color_enabled=False if no_color else None)
    text = RecordFormatter(config).format(get_prompt_state(path))

    sys.stdout.write(text)
    sys.stdout.flush()


@app.command()
def status(
    path: str | None = typer.Option(
        None,
        "--path",
        "-C",
        help=PATH_HELP,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help=VERBOSE_OUTPUT_HELP,
    ),
) -> None:
    """Show the parsed status record for troubleshooting."""
    setup_logging(verbose)

    state = get_prompt_state(path)

    if isinstance(state, NotInTree):
        console.print("[yellow]Not inside a Git, Mercurial or Subversion working copy[/yellow]")
        return

    if isinstance(state, ParseError):
        label = "Condition" if state.special else "Parse error"
        console.print(f"[red]{state.vcs_type.display_name} {label}: {state.message}[/red]")
        sys.exit(1)

    if isinstance(state, Status):
        record = state.record
        table = Table(title=f"{record.vcs_type.display_name} status")
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        table.add_row("Branch", record.branch_label or "-")
        table.add_row("Untracked", str(record.untracked_count))
        table.add_row("Changed", str(record.changed_count))
        table.add_row("Staged", str(record.staged_count))
        table.add_row("Ahead", str(record.ahead_count))
        table.add_row("Behind", str(record.behind_count))
        table.add_row("Clean", "yes" if record.is_clean else "no")
        console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"vcs-prompt version {__version__}")


if __name__ == "__main__":
    app()
