"""Main CLI command for generating and committing a commit log."""

from typing import Optional

import typer
from rich.console import Console

from clog_ai import __version__
from clog_ai.config import ConfigError, load_config
from clog_ai.git import (
    DEFAULT_MAX_DIFF_CHARS,
    GitError,
    commit_with_message,
    get_working_diff,
)
from clog_ai.llm import LLMError, generate_commit_log, get_provider
from clog_ai.cli.init import init_command
from clog_ai.cli.utils import display_commit_log, display_debug_info, is_confirmed


console = Console(stderr=True)

INIT_COMMAND = "init"


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        typer.echo(f"clog-ai {__version__}")
        raise typer.Exit(0)


def main_command(
    command: Optional[str] = typer.Argument(
        None,
        help="Use 'init' to create the config file. Omit to generate a commit log.",
        show_default=False,
    ),
    max_diff_chars: int = typer.Option(
        DEFAULT_MAX_DIFF_CHARS,
        "--max-diff-chars",
        min=0,
        help="Maximum characters of the diff sent to the model",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Bypass confirmation prompt and commit immediately",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Show the raw LLM response and request details",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate a git commit log from uncommitted changes with AI."""
    if command and command.strip() == INIT_COMMAND:
        init_command()
        return

    # Pre-flight checks, before any git or network activity
    try:
        config = load_config()
    except ConfigError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    try:
        with console.status(
            "Generating commit log...",
            spinner="squareCorners",
            spinner_style="yellow",
        ):
            diff = get_working_diff(max_chars=max_diff_chars)
            provider = get_provider(config)
            result = generate_commit_log(provider, diff, config.language)
    except (GitError, LLMError) as e:
        typer.echo("✗ Generate commit log fail", err=True)
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    typer.echo("✓ Generate commit log success", err=True)

    if debug:
        display_debug_info(config, diff, result)

    display_commit_log(result.commit_log)

    if not yes:
        try:
            answer = typer.prompt(
                "Submit git commit with the log? (yes/no)",
                default="",
                show_default=False,
            )
        except typer.Abort:
            # stdin closed before an answer
            return
        if not is_confirmed(answer):
            return

    try:
        output = commit_with_message(result.commit_log)
    except GitError as e:
        typer.echo("✗ commit fail", err=True)
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    typer.echo("✓ commit success", err=True)
    if output:
        typer.echo(output)
