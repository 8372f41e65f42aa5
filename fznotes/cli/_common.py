"""Shared helpers for fznotes CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from ..app import AppContext, bootstrap
from ..config import ConfigError, MissingConfigError
from ..storage import StorageError

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}


class FznotesCliError(click.ClickException):
    """Shared Click exception wrapper for CLI failures."""


def get_app(ctx: click.Context) -> AppContext:
    """Return a cached AppContext for the current CLI invocation."""

    app: AppContext | None = ctx.obj.get("app")
    if app is not None:
        return app

    config_path_opt: Path | None = ctx.obj.get("config_path")

    try:
        app, created = bootstrap(config_path_opt, launcher=ctx.obj.get("launcher"))
    except MissingConfigError as exc:
        raise FznotesCliError(
            f"{exc}. Run 'fzn config' to create one or drop --config."
        ) from exc
    except ConfigError as exc:
        raise FznotesCliError(str(exc)) from exc
    except StorageError as exc:
        raise FznotesCliError(f"Error creating notes directory: {exc}") from exc

    if created:
        click.echo(f"Created notes directory: {app.store.path}")

    ctx.obj["app"] = app
    return app


def prompt_line(text: str) -> str:
    """Read one raw line from the user; an empty answer is allowed."""

    return click.prompt(text, default="", show_default=False, prompt_suffix=": ")
