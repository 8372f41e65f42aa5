"""Fuzzy-finder integration used for menus and note selection."""

from __future__ import annotations

import os
import shlex
from typing import Sequence

from .launcher import LaunchError, ProcessLauncher


class SelectorError(RuntimeError):
    """Raised when the selector cannot run or exits unsuccessfully."""


class Selector:
    """Builds selector invocations and parses what the user picked."""

    def __init__(self, command: str, launcher: ProcessLauncher) -> None:
        self.command = command
        self.launcher = launcher

    def select(
        self,
        candidates: Sequence[str],
        *,
        prompt: str | None = None,
        multi: bool = False,
        height: int | None = None,
        preview: str | None = None,
        preview_window: str | None = None,
    ) -> list[str]:
        """Return the candidate lines chosen by the user, in output order.

        Candidates travel in the filesystem encoding, so note names that are
        not valid UTF-8 come back unchanged.
        """

        try:
            command = shlex.split(self.command)
        except ValueError as exc:
            raise SelectorError(f"Invalid selector command: {exc}") from exc
        if not command:
            raise SelectorError("Selector command is empty.")

        flags = self._flags(prompt, multi, height, preview, preview_window)
        argv = [*command, *flags]
        payload = os.fsencode("\n".join(candidates))

        try:
            result = self.launcher.run(argv, stdin=payload)
        except LaunchError as exc:
            raise SelectorError(str(exc)) from exc

        if result.returncode != 0:
            raise SelectorError(f"{command[0]} exited with status {result.returncode}")

        output = os.fsdecode(result.stdout)
        return [line.strip() for line in output.splitlines() if line.strip()]

    @staticmethod
    def _flags(
        prompt: str | None,
        multi: bool,
        height: int | None,
        preview: str | None,
        preview_window: str | None,
    ) -> list[str]:
        flags: list[str] = []
        if multi:
            flags.append("--multi")
        if prompt is not None:
            flags.append(f"--prompt={prompt}")
        if height is not None:
            flags.append(f"--height={height}")
        if preview is not None:
            flags.extend(["--preview", preview])
            if preview_window is not None:
                flags.append(f"--preview-window={preview_window}")
        return flags
