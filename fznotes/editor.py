"""Utilities for handing a note over to the configured editor."""

from __future__ import annotations

import shlex
from pathlib import Path

from .launcher import LaunchError, ProcessLauncher


class EditorError(RuntimeError):
    """Raised when the editor cannot be launched or exits with an error."""


def open_in_editor(editor_cmd: str, path: Path, launcher: ProcessLauncher) -> None:
    """Open ``path`` in ``editor_cmd`` and block until the editor exits.

    The editor inherits the terminal so the user interacts with it directly.
    """

    try:
        command = shlex.split(editor_cmd)
    except ValueError as exc:
        raise EditorError(f"Invalid editor command: {exc}") from exc
    if not command:
        raise EditorError("Editor command is empty.")

    argv = [*command, str(path)]
    try:
        result = launcher.run(argv)
    except LaunchError as exc:
        raise EditorError(str(exc)) from exc

    if result.returncode != 0:
        raise EditorError(f"{argv[0]} exited with status {result.returncode}")
