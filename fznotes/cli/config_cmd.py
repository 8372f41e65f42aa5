"""Config command for fznotes CLI."""

from __future__ import annotations

from pathlib import Path

import click

from ..config import (
    DEFAULT_CONFIG_PATH,
    ConfigError,
    bootstrap_config_file,
    load_config,
)
from ._common import FznotesCliError


@click.command(name="config")
@click.pass_context
def config(ctx: click.Context) -> None:
    """Open the fznotes configuration file in the editor."""

    selected_path: Path | None = ctx.obj.get("config_path")
    config_path = selected_path or DEFAULT_CONFIG_PATH

    created = bootstrap_config_file(config_path)
    try:
        editor = load_config(config_path).editor_cmd
    except ConfigError:
        editor = None

    try:
        result = click.edit(filename=str(config_path), editor=editor)
    except click.ClickException as exc:
        raise FznotesCliError(f"Failed to launch editor: {exc.message}") from exc

    if created:
        click.echo(f"Created configuration at {config_path}")

    if result is None:
        click.echo(f"Opened configuration at {config_path}")
    else:  # pragma: no cover - depends on click behaviour
        click.echo(f"Updated configuration at {config_path}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(config)
