"""Open command for fznotes CLI."""

from __future__ import annotations

import click

from ..services.notes import search_and_open
from ._common import get_app


@click.command(name="open")
@click.pass_context
def open_(ctx: click.Context) -> None:
    """Pick notes with the selector and open them in the editor."""

    app = get_app(ctx)
    search_and_open(app, echo=click.echo)


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(open_)
