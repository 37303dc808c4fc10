"""CLI entry point for clog-ai.

Usage:
    clog-ai init    create ~/.config/clog-ai/config.json
    clog-ai         generate a commit log and offer to commit it
"""

import typer

from clog_ai.cli.init import init_command
from clog_ai.cli.main import main_command


app = typer.Typer(
    name="clog-ai",
    help="clog-ai: AI-generated git commit logs",
    add_completion=False,
)

app.command()(main_command)


__all__ = [
    "app",
    "init_command",
    "main_command",
]
