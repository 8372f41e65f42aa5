"""Process launching for the external selector and editor."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Protocol, Sequence

logger = logging.getLogger(__name__)


class LaunchError(RuntimeError):
    """Raised when an external program cannot be started."""


@dataclass(slots=True, frozen=True)
class ProcessResult:
    """Captured standard output and exit status of a finished child."""

    stdout: bytes
    returncode: int


class ProcessLauncher(Protocol):
    """Runs a command to completion.

    When ``stdin`` is given it is fed to the child and the child's standard
    output is captured. When ``stdin`` is ``None`` the child inherits the
    terminal and ``stdout`` of the result is empty.
    """

    def run(self, argv: Sequence[str], stdin: bytes | None = None) -> ProcessResult:
        ...


class SubprocessLauncher:
    """ProcessLauncher backed by :func:`subprocess.run`."""

    def run(self, argv: Sequence[str], stdin: bytes | None = None) -> ProcessResult:
        args = list(argv)
        if not args:
            raise LaunchError("Cannot launch an empty command.")

        logger.debug("launching %s", args)
        try:
            if stdin is None:
                process = subprocess.run(args, check=False)
                return ProcessResult(stdout=b"", returncode=process.returncode)

            # stderr stays on the terminal so interactive tools can draw there.
            process = subprocess.run(
                args,
                input=stdin,
                stdout=subprocess.PIPE,
                check=False,
            )
        except OSError as exc:
            raise LaunchError(f"Failed to launch '{args[0]}': {exc}") from exc

        logger.debug("%s exited with %s", args[0], process.returncode)
        return ProcessResult(
            stdout=process.stdout or b"", returncode=process.returncode
        )
