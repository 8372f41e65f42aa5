from __future__ import annotations

import textwrap
from pathlib import Path

import pytest
from fznotes import config as config_module
from fznotes.config import (
    DEFAULT_EDITOR,
    DEFAULT_PREVIEWER,
    DEFAULT_SELECTOR,
    FznotesConfig,
    InvalidConfigError,
    MissingConfigError,
    bootstrap_config_file,
    load_config,
)


def write_config(tmp_path: Path, content: str) -> Path:
    config_file = tmp_path / "config.toml"
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(textwrap.dedent(content), encoding="utf-8")
    return config_file


def test_missing_default_file_yields_defaults(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", tmp_path / "none.toml")
    monkeypatch.delenv("EDITOR", raising=False)

    config = load_config()

    assert config.notes_dir == Path("~/notes").expanduser().resolve()
    assert config.editor_cmd == DEFAULT_EDITOR
    assert config.selector_cmd == DEFAULT_SELECTOR
    assert config.preview_cmd == DEFAULT_PREVIEWER
    assert config.source_path is None


def test_editor_environment_variable_is_the_fallback(
    tmp_path: Path, monkeypatch
) -> None:
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", tmp_path / "none.toml")
    monkeypatch.setenv("EDITOR", "hx")

    assert load_config().editor_cmd == "hx"


def test_load_config_success(tmp_path: Path) -> None:
    config_path = write_config(
        tmp_path,
        """
        [fznotes]
        notes_dir = "/srv/notes"
        editor_cmd = "code --wait"
        selector_cmd = "sk"
        preview_cmd = "cat"
        """,
    )

    config = load_config(config_path)

    assert isinstance(config, FznotesConfig)
    assert config.notes_dir == Path("/srv/notes").resolve()
    assert config.editor_cmd == "code --wait"
    assert config.selector_cmd == "sk"
    assert config.preview_cmd == "cat"
    assert config.source_path == config_path


def test_relative_notes_dir_resolves_against_config_dir(tmp_path: Path) -> None:
    config_path = write_config(
        tmp_path / "nested",
        """
        [fznotes]
        notes_dir = "journal"
        """,
    )

    config = load_config(config_path)

    assert config.notes_dir == (tmp_path / "nested" / "journal").resolve()


def test_explicit_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(MissingConfigError):
        load_config(tmp_path / "missing.toml")


@pytest.mark.parametrize(
    "body",
    [
        'editor_cmd = 3',
        'selector_cmd = "   "',
        "notes_dir = []",
    ],
)
def test_malformed_values_are_rejected(tmp_path: Path, body: str) -> None:
    config_path = write_config(tmp_path, f"[fznotes]\n{body}\n")

    with pytest.raises(InvalidConfigError):
        load_config(config_path)


def test_section_must_be_a_table(tmp_path: Path) -> None:
    config_path = write_config(tmp_path, 'fznotes = "nope"\n')

    with pytest.raises(InvalidConfigError):
        load_config(config_path)


def test_invalid_toml_is_reported(tmp_path: Path) -> None:
    config_path = write_config(tmp_path, "[fznotes\n")

    with pytest.raises(InvalidConfigError):
        load_config(config_path)


def test_bootstrap_config_file_writes_loadable_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "conf" / "config.toml"

    assert bootstrap_config_file(config_path) is True
    assert bootstrap_config_file(config_path) is False

    config = load_config(config_path)
    assert config.notes_dir == Path("~/notes").expanduser().resolve()
    assert config.editor_cmd == DEFAULT_EDITOR
    assert config.selector_cmd == DEFAULT_SELECTOR


@pytest.mark.parametrize("key", ["editor_cmd", "selector_cmd", "preview_cmd"])
def test_unbalanced_quotes_in_commands_are_rejected(tmp_path: Path, key: str) -> None:
    config_path = write_config(tmp_path, f"[fznotes]\n{key} = 'vim \"'\n")

    with pytest.raises(InvalidConfigError, match=key):
        load_config(config_path)


def test_malformed_editor_environment_is_rejected(
    tmp_path: Path, monkeypatch
) -> None:
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", tmp_path / "none.toml")
    monkeypatch.setenv("EDITOR", "vim '")

    with pytest.raises(InvalidConfigError, match="EDITOR"):
        load_config()


def test_configured_editor_wins_over_malformed_environment(
    tmp_path: Path, monkeypatch
) -> None:
    monkeypatch.setenv("EDITOR", "vim '")
    config_path = write_config(tmp_path, '[fznotes]\neditor_cmd = "nano"\n')

    assert load_config(config_path).editor_cmd == "nano"
