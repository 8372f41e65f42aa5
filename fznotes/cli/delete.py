"""Delete command for fznotes CLI."""

from __future__ import annotations

import click

from ..services.notes import delete_notes
from ._common import get_app, prompt_line


@click.command(name="delete")
@click.pass_context
def delete(ctx: click.Context) -> None:
    """Pick notes with the selector and delete them after confirmation."""

    app = get_app(ctx)
    delete_notes(app, prompt=prompt_line, echo=click.echo)


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(delete)
