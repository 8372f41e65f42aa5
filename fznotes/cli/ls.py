"""List command for fznotes CLI."""

from __future__ import annotations

import click

from ..services.notes import display_name
from ..storage import StorageError
from ._common import FznotesCliError, get_app


@click.command(name="ls")
@click.option(
    "-r",
    "--reverse",
    is_flag=True,
    help="Reverse order (newest dates first)",
)
@click.pass_context
def ls(ctx: click.Context, reverse: bool) -> None:
    """List the Markdown notes in the notes directory."""

    app = get_app(ctx)

    try:
        notes = app.store.list_notes()
    except StorageError as exc:
        raise FznotesCliError(str(exc)) from exc

    if reverse:
        notes = list(reversed(notes))

    for name in notes:
        click.echo(display_name(name))


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(ls)
