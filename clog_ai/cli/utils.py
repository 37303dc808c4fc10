"""Shared utility functions for CLI commands."""

import typer

from clog_ai.config import Configuration
from clog_ai.llm import LLMResult


SEPARATOR = "-" * 19

CONFIRM_ANSWERS = ("y", "yes")


def is_confirmed(answer: str) -> bool:
    """Return True only for 'y' or 'yes', in any letter case."""
    return answer.lower() in CONFIRM_ANSWERS


def display_commit_log(commit_log: str) -> None:
    """Print the commit log between separator lines."""
    typer.echo(SEPARATOR)
    typer.echo(commit_log)
    typer.echo(SEPARATOR)


def display_debug_info(config: Configuration, diff: str, result: LLMResult) -> None:
    """Display details of the generation request and the raw reply.

    Args:
        config: The loaded configuration.
        diff: The diff sent to the model.
        result: The generation result.
    """
    typer.echo("=" * 60, err=True)
    typer.echo("                  CLOG-AI DEBUG INFO", err=True)
    typer.echo("=" * 60, err=True)
    typer.echo(f"Data Source: {config.datasource}", err=True)
    typer.echo(f"Language: {config.language}", err=True)
    typer.echo(f"LLM Model: {result.model}", err=True)
    typer.echo(f"Characters: {len(diff):,} diff / {result.prompt_chars:,} prompt / {result.output_chars:,} output", err=True)
    typer.echo("", err=True)
    typer.echo("[RAW LLM RESPONSE]", err=True)
    typer.echo(result.raw_response, err=True)
    typer.echo("=" * 60, err=True)
