"""Info command for fznotes CLI."""

from __future__ import annotations

import click
import yaml

from ..config import FznotesConfig
from ..services.notes import display_name
from ..storage import NoteStore, StorageError
from ._common import FznotesCliError, get_app


@click.command(name="info")
@click.pass_context
def info(ctx: click.Context) -> None:
    """Display the notes directory and the effective configuration."""

    app = get_app(ctx)
    config: FznotesConfig = app.config
    store: NoteStore = app.store

    try:
        notes = store.list_notes()
    except StorageError as exc:
        raise FznotesCliError(str(exc)) from exc

    latest = display_name(notes[-1]) if notes else "(none)"

    click.echo("fznotes info:\n")
    click.echo(f"  Notes directory : {store.path}")
    click.echo(f"  Total notes     : {len(notes)}")
    click.echo(f"  Latest note     : {latest}")
    click.echo("\nConfiguration:\n")
    click.echo(yaml.safe_dump(config.as_dict(), sort_keys=False).strip())


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(info)
