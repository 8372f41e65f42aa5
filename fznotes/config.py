"""Configuration management for fznotes."""

from __future__ import annotations

import os
import shlex
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_DIR = Path("~/.config/fznotes").expanduser()
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.toml"
DEFAULT_NOTES_DIR = Path("~/notes")
DEFAULT_EDITOR = "nvim"
DEFAULT_SELECTOR = "fzf"
DEFAULT_PREVIEWER = "bat --style=plain --color=always"


class ConfigError(RuntimeError):
    """Base error for configuration related issues."""


class MissingConfigError(ConfigError):
    """Raised when an explicitly requested configuration file is absent."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Configuration file not found at {path}")
        self.path = path


class InvalidConfigError(ConfigError):
    """Raised when the configuration file holds malformed values."""


@dataclass(slots=True)
class FznotesConfig:
    """Settings shared by every note operation."""

    notes_dir: Path
    editor_cmd: str = DEFAULT_EDITOR
    selector_cmd: str = DEFAULT_SELECTOR
    preview_cmd: str = DEFAULT_PREVIEWER
    source_path: Path | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "notes_dir": str(self.notes_dir),
            "editor_cmd": self.editor_cmd,
            "selector_cmd": self.selector_cmd,
            "preview_cmd": self.preview_cmd,
            "source_path": str(self.source_path) if self.source_path else None,
        }


def default_config() -> FznotesConfig:
    """Return the configuration used when no file is present."""

    return FznotesConfig(
        notes_dir=DEFAULT_NOTES_DIR.expanduser().resolve(),
        editor_cmd=_check_command("EDITOR", _default_editor()),
    )


def _default_editor() -> str:
    return os.environ.get("EDITOR") or DEFAULT_EDITOR


def load_config(path: Path | None = None) -> FznotesConfig:
    """Load configuration from ``path`` or the default location.

    Parameters
    ----------
    path:
        Optional location of the configuration file. When ``None`` the default
        path (``~/.config/fznotes/config.toml``) is used, and a missing file
        simply yields the defaults.

    Raises
    ------
    MissingConfigError
        If an explicitly given file cannot be found.
    InvalidConfigError
        If a setting is malformed.
    """

    config_path = (path or DEFAULT_CONFIG_PATH).expanduser()
    if not config_path.exists():
        if path is not None:
            raise MissingConfigError(config_path)
        return default_config()

    try:
        with config_path.open("rb") as fh:
            raw = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise InvalidConfigError(f"Invalid TOML in {config_path}: {exc}") from exc

    section = raw.get("fznotes", {})
    if not isinstance(section, dict):
        raise InvalidConfigError("'fznotes' section must be a table")

    config_dir = config_path.parent

    # Relative notes directories are resolved against the configuration
    # directory, not the working directory.
    notes_dir_raw = _optional_string(section, "notes_dir")
    if notes_dir_raw is None:
        notes_dir = DEFAULT_NOTES_DIR.expanduser().resolve()
    else:
        candidate = Path(notes_dir_raw).expanduser()
        notes_dir = (
            candidate if candidate.is_absolute() else config_dir / candidate
        ).resolve()

    editor_cmd = _optional_string(section, "editor_cmd")
    if editor_cmd is None:
        editor_cmd = _check_command("EDITOR", _default_editor())
    selector_cmd = _optional_string(section, "selector_cmd") or DEFAULT_SELECTOR
    preview_cmd = _optional_string(section, "preview_cmd") or DEFAULT_PREVIEWER

    return FznotesConfig(
        notes_dir=notes_dir,
        editor_cmd=_check_command("editor_cmd", editor_cmd),
        selector_cmd=_check_command("selector_cmd", selector_cmd),
        preview_cmd=_check_command("preview_cmd", preview_cmd),
        source_path=config_path,
    )


def _check_command(key: str, command: str) -> str:
    """Return ``command`` unchanged if it splits into shell words."""

    try:
        words = shlex.split(command)
    except ValueError as exc:
        raise InvalidConfigError(f"'{key}' is not a valid command: {exc}") from exc
    if not words:
        raise InvalidConfigError(f"'{key}' must name a command")
    return command


def _optional_string(section: dict[str, Any], key: str) -> str | None:
    value = section.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidConfigError(f"'{key}' must be a string when provided")
    stripped = value.strip()
    if not stripped:
        raise InvalidConfigError(f"'{key}' must be a non-empty string")
    return stripped


def bootstrap_config_file(path: Path) -> bool:
    """Create a default config file if missing.

    Returns True when the file was created, False if it already existed.
    """

    if path.exists():
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    default_content = (
        "[fznotes]\n"
        f'notes_dir = "{DEFAULT_NOTES_DIR}"\n'
        f'editor_cmd = "{DEFAULT_EDITOR}"\n'
        f'selector_cmd = "{DEFAULT_SELECTOR}"\n'
        f'preview_cmd = "{DEFAULT_PREVIEWER}"\n'
    )
    path.write_text(default_content, encoding="utf-8")
    return True
