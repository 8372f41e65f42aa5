"""New-note command for fznotes CLI."""

from __future__ import annotations

import click

from ..services.notes import create_note
from ._common import FznotesCliError, get_app, prompt_line


@click.command(name="new")
@click.argument("title", nargs=-1)
@click.pass_context
def new(ctx: click.Context, title: tuple[str, ...]) -> None:
    """Create today's note for TITLE and open it in the editor.

    The title is prompted for when omitted.
    """

    app = get_app(ctx)

    joined = " ".join(title) if title else None
    path = create_note(app, joined, prompt=prompt_line, echo=click.echo)
    if path is None:
        raise FznotesCliError("No note was created.")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(new)
