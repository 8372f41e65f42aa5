"""Shared fixtures: a scripted process launcher and a temporary notes dir."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pytest
from fznotes.app import AppContext, build_context
from fznotes.config import FznotesConfig
from fznotes.launcher import ProcessResult


class ScriptedLauncher:
    """In-memory ProcessLauncher.

    Calls with ``stdin`` are selector runs and consume ``responses`` in order;
    each response is a string (stdout, exit 0), a ProcessResult or an
    exception to raise. Calls without ``stdin`` are editor runs and return
    ``editor_result``.
    """

    def __init__(self, responses: Sequence[object] = ()) -> None:
        self.responses = list(responses)
        self.calls: list[tuple[list[str], bytes | None]] = []
        self.editor_result: object = ProcessResult(stdout=b"", returncode=0)

    def run(self, argv: Sequence[str], stdin: bytes | None = None) -> ProcessResult:
        self.calls.append((list(argv), stdin))
        if stdin is None:
            return self._resolve(self.editor_result)
        if not self.responses:
            raise AssertionError(f"Unexpected selector call: {list(argv)}")
        return self._resolve(self.responses.pop(0))

    @staticmethod
    def _resolve(response: object) -> ProcessResult:
        if isinstance(response, BaseException):
            raise response
        if isinstance(response, ProcessResult):
            return response
        return ProcessResult(stdout=str(response).encode("utf-8"), returncode=0)

    @property
    def selector_calls(self) -> list[tuple[list[str], bytes | None]]:
        return [call for call in self.calls if call[1] is not None]

    @property
    def editor_calls(self) -> list[list[str]]:
        return [argv for argv, stdin in self.calls if stdin is None]


class Console:
    """Collects echoed lines and answers prompts from a script."""

    def __init__(self, answers: Sequence[str] = ()) -> None:
        self.answers = list(answers)
        self.lines: list[str] = []
        self.prompts: list[str] = []

    def echo(self, message: str) -> None:
        self.lines.append(message)

    def prompt(self, text: str) -> str:
        self.prompts.append(text)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {text}")
        return self.answers.pop(0)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def launcher() -> ScriptedLauncher:
    return ScriptedLauncher()


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    return tmp_path / "notes"


@pytest.fixture
def config(notes_dir: Path) -> FznotesConfig:
    return FznotesConfig(
        notes_dir=notes_dir,
        editor_cmd="nvim",
        selector_cmd="fzf",
        preview_cmd="bat --style=plain --color=always",
    )


@pytest.fixture
def app(config: FznotesConfig, launcher: ScriptedLauncher) -> AppContext:
    ctx = build_context(config, launcher)
    ctx.store.ensure_directory()
    return ctx
