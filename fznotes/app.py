"""Application bootstrap and context container for fznotes."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import FznotesConfig, load_config
from .launcher import ProcessLauncher, SubprocessLauncher
from .selector import Selector
from .storage import NoteStore


@dataclass(slots=True)
class AppContext:
    """Aggregates core services for the CLI lifecycle."""

    config: FznotesConfig
    store: NoteStore
    launcher: ProcessLauncher
    selector: Selector


def build_context(
    config: FznotesConfig, launcher: ProcessLauncher | None = None
) -> AppContext:
    """Wire the services for ``config`` without touching the filesystem."""

    process_launcher = launcher if launcher is not None else SubprocessLauncher()
    return AppContext(
        config=config,
        store=NoteStore(config.notes_dir),
        launcher=process_launcher,
        selector=Selector(config.selector_cmd, process_launcher),
    )


def bootstrap(
    config_path: Path | None, launcher: ProcessLauncher | None = None
) -> tuple[AppContext, bool]:
    """Load configuration and make sure the notes directory exists.

    Returns the context and whether the notes directory had to be created.
    """

    # Defer error mapping to the CLI, which knows how to present messages.
    config = load_config(config_path)
    app = build_context(config, launcher)
    created = app.store.ensure_directory()
    return app, created
