"""CLI command for initializing the clog-ai configuration."""

import typer

from clog_ai.config import get_config_file_path, init_config


def init_command() -> None:
    """Create the config file from the default template.

    An existing config file is left untouched. Always exits with code 0.
    """
    config_file = get_config_file_path().resolve()

    if init_config():
        typer.echo(f"init success, please edit config file: {config_file}")
    else:
        typer.echo(f"config file already exists, please edit config file: {config_file}")

    raise typer.Exit(0)
