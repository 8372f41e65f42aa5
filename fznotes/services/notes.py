"""High-level note workflows shared by the menu and the subcommands."""

from __future__ import annotations

import logging
import os
import shlex
from datetime import datetime
from pathlib import Path
from typing import Callable

from ..app import AppContext
from ..editor import EditorError, open_in_editor
from ..selector import SelectorError
from ..storage import StorageError
from ..utils.datetime_fmt import now_local

EchoFunc = Callable[[str], None]
PromptFunc = Callable[[str], str]

CONFIRM_ANSWERS = frozenset({"y", "Y"})
PREVIEW_WINDOW = "right:70%"
DELETE_PROMPT = "Select a note to delete: "

logger = logging.getLogger(__name__)


def display_name(name: str) -> str:
    """Return ``name`` printable even when it is not valid UTF-8 on disk."""

    return os.fsencode(name).decode("utf-8", errors="replace")


def open_note(ctx: AppContext, path: Path, *, echo: EchoFunc) -> bool:
    """Open ``path`` in the editor, reporting failures instead of raising."""

    try:
        open_in_editor(ctx.config.editor_cmd, path, ctx.launcher)
    except EditorError as exc:
        echo(f"Error opening note: {exc}")
        return False
    return True


def create_note(
    ctx: AppContext,
    title: str | None = None,
    *,
    prompt: PromptFunc,
    echo: EchoFunc,
    now: datetime | None = None,
) -> Path | None:
    """Create a dated note for ``title`` (prompting when omitted) and edit it.

    An existing note with the same name is opened untouched. Returns the note
    path, or ``None`` when nothing could be written.
    """

    if title is None:
        title = prompt("Enter the note title")
    timestamp = now if now is not None else now_local()

    try:
        path, created = ctx.store.create_note(title, timestamp)
    except StorageError as exc:
        echo(f"Error creating new note: {exc}")
        return None

    if created:
        echo(f"Created new note: {path.name}")
    else:
        echo(f"Note already exists: {path.name}")

    open_note(ctx, path, echo=echo)
    return path


def _list_or_report(ctx: AppContext, echo: EchoFunc) -> list[str]:
    try:
        notes = ctx.store.list_notes()
    except StorageError as exc:
        echo(f"Error retrieving notes: {exc}")
        return []
    if not notes:
        echo("No notes found.")
    return notes


def search_and_open(ctx: AppContext, *, echo: EchoFunc) -> list[str]:
    """Let the user pick notes with a preview pane and open each one.

    Returns the names that were selected.
    """

    notes = _list_or_report(ctx, echo)
    if not notes:
        return []

    notes_dir = shlex.quote(str(ctx.store.path))
    preview = f"{ctx.config.preview_cmd} {notes_dir}/{{}}"
    try:
        selected = ctx.selector.select(
            notes, multi=True, preview=preview, preview_window=PREVIEW_WINDOW
        )
    except SelectorError as exc:
        echo(f"Error with selector: {exc}")
        return []

    for name in selected:
        try:
            path = ctx.store.note_path(name)
        except StorageError as exc:
            echo(f"Error opening note: {exc}")
            continue
        open_note(ctx, path, echo=echo)
    return selected


def delete_notes(
    ctx: AppContext, *, prompt: PromptFunc, echo: EchoFunc
) -> list[str]:
    """Let the user pick notes and delete each one after confirmation.

    Only the exact answers ``y`` and ``Y`` confirm. Returns the deleted names.
    """

    notes = _list_or_report(ctx, echo)
    if not notes:
        return []

    try:
        selected = ctx.selector.select(notes, prompt=DELETE_PROMPT, multi=True)
    except SelectorError as exc:
        echo(f"Error with selector: {exc}")
        return []

    deleted: list[str] = []
    for name in selected:
        shown = display_name(name)
        answer = prompt(f"Are you sure you want to delete {shown}? (y/n)")
        if answer not in CONFIRM_ANSWERS:
            echo("Deletion cancelled.")
            continue
        try:
            ctx.store.delete_note(name)
        except StorageError as exc:
            echo(f"Error deleting note: {exc}")
            continue
        logger.info("deleted note %s", name)
        echo(f"Deleted note: {shown}")
        deleted.append(name)
    return deleted
