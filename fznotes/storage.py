"""Flat-directory persistence layer for fznotes."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from pathlib import Path

from .utils.datetime_fmt import format_created, format_note_date

NOTE_SUFFIX = ".md"

# Path separators, characters Windows refuses in filenames, and controls.
_UNSAFE_TITLE_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f\x7f]')

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """Raised when interacting with the notes directory fails."""


class InvalidTitleError(StorageError):
    """Raised when a title cannot be turned into a safe filename."""


def normalize_title(title: str) -> str:
    """Return ``title`` stripped of surrounding whitespace, or raise.

    Titles that could escape the notes directory or that common filesystems
    reject raise InvalidTitleError.
    """

    normalized = title.strip()
    if not normalized:
        raise InvalidTitleError("Note title must not be empty.")
    if set(normalized) == {"."}:
        raise InvalidTitleError(f"Invalid note title: {normalized!r}")
    bad = _UNSAFE_TITLE_CHARS.search(normalized)
    if bad is not None:
        raise InvalidTitleError(
            f"Note title contains an unsupported character: {bad.group()!r}"
        )
    return normalized


def note_filename(title: str, day: date) -> str:
    """Build the ``YYYY-MM-DD_<title>.md`` filename for a note."""

    return f"{format_note_date(day)}_{normalize_title(title)}{NOTE_SUFFIX}"


def render_note(title: str, created: datetime) -> str:
    return f"# {title}\n\nCreated: {format_created(created)}\n"


class NoteStore:
    """High-level helper for the notes directory."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def ensure_directory(self) -> bool:
        """Create the notes directory when absent.

        Returns True when the directory was created, False if it already
        existed.
        """

        if self.path.is_dir():
            return False
        try:
            self.path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Failed to create notes directory: {exc}") from exc
        logger.debug("created notes directory %s", self.path)
        return True

    def list_notes(self) -> list[str]:
        """Return the names of the Markdown notes, sorted."""

        try:
            entries = list(self.path.iterdir())
        except OSError as exc:
            raise StorageError(f"Failed to read notes directory: {exc}") from exc
        return sorted(
            entry.name
            for entry in entries
            if entry.name.endswith(NOTE_SUFFIX) and entry.is_file()
        )

    def note_path(self, name: str) -> Path:
        if not name or Path(name).name != name:
            raise StorageError(f"Invalid note name: {name!r}")
        return self.path / name

    def create_note(self, title: str, now: datetime) -> tuple[Path, bool]:
        """Write a templated note for ``title`` unless it already exists.

        Returns the note path and whether a new file was written.
        """

        normalized = normalize_title(title)
        path = self.note_path(note_filename(normalized, now.date()))

        try:
            if path.exists():
                return path, False
            # "x" refuses to clobber a file that appeared since the check.
            with path.open("x", encoding="utf-8") as fh:
                fh.write(render_note(normalized, now))
        except FileExistsError:
            return path, False
        except OSError as exc:
            raise StorageError(f"Failed to create note: {exc}") from exc

        logger.debug("wrote note %s", path)
        return path, True

    def delete_note(self, name: str) -> None:
        path = self.note_path(name)
        try:
            path.unlink()
        except FileNotFoundError:
            raise StorageError(f"Note {name!r} not found.") from None
        except OSError as exc:
            raise StorageError(f"Failed to delete note {name!r}: {exc}") from exc
        logger.debug("deleted note %s", path)
