"""fznotes CLI package."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import click

from ..menu import run_menu
from . import config_cmd, delete, info, ls, new, open_cmd
from ._common import CONTEXT_SETTINGS, FznotesCliError, get_app, prompt_line

__all__ = ["cli", "main", "FznotesCliError"]

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.option(
    "-c",
    "--config",
    "config_path_opt",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to configuration TOML file.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log diagnostics to stderr.")
@click.pass_context
def cli(ctx: click.Context, config_path_opt: Path | None, verbose: bool) -> None:
    """Create, find and delete Markdown notes through fzf.

    Without a subcommand an interactive menu is shown.
    """

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT
    )

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path_opt

    if ctx.invoked_subcommand is None:
        app = get_app(ctx)
        ctx.exit(run_menu(app, prompt=prompt_line, echo=click.echo))


for register_command in (
    new.register,
    ls.register,
    open_cmd.register,
    delete.register,
    config_cmd.register,
    info.register,
):
    register_command(cli)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else None
    try:
        result = cli.main(args=args, prog_name="fzn", standalone_mode=False)
    except click.ClickException as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.Abort:
        return 1
    except SystemExit as exc:
        return int(exc.code or 0)
    return int(result or 0)
