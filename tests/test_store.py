from __future__ import annotations

import json
from pathlib import Path

import pytest

from packages.shared.config import AppConfig
from packages.shared.errors import (
    ConfigDirUnavailable,
    DecodeError,
    DeleteError,
    DirCreateError,
    ReadError,
    WriteError,
)
from packages.shared.store import ConfigStore

SAMPLE = AppConfig(
    theme="dark",
    color="blue",
    zoom=100,
    show_app_rail=True,
    sidebar_open=False,
    sidebar_width=240,
)


def _store(config_dir: Path) -> ConfigStore:
    return ConfigStore(resolve_dir=lambda: config_dir)


def _unavailable() -> Path:
    raise ConfigDirUnavailable("no home directory")


def test_load_without_file_returns_defaults(tmp_path: Path) -> None:
    config_dir = tmp_path / "NextAI"
    store = _store(config_dir)

    assert store.load() == AppConfig()
    # Reading never creates the directory.
    assert not config_dir.exists()


def test_save_then_load_roundtrip(tmp_path: Path) -> None:
    store = _store(tmp_path / "NextAI")
    store.save(SAMPLE)

    assert store.load() == SAMPLE

    path = Path(store.path())
    assert path.is_absolute()
    assert path.name == "settings.json"
    assert path.parent.is_dir()


def test_save_creates_missing_parents(tmp_path: Path) -> None:
    config_dir = tmp_path / "a" / "b" / "NextAI"
    store = _store(config_dir)
    store.save(SAMPLE)
    assert (config_dir / "settings.json").is_file()


def test_saved_file_layout(tmp_path: Path) -> None:
    store = _store(tmp_path)
    store.save(SAMPLE)

    text = Path(store.path()).read_text(encoding="utf-8")
    assert json.loads(text) == {
        "theme": "dark",
        "color": "blue",
        "zoom": 100,
        "show_app_rail": True,
        "sidebar_open": False,
        "sidebar_width": 240,
    }
    assert '\n  "zoom": 100,\n' in text
    assert not (tmp_path / "settings.json.tmp").exists()


def test_save_replaces_instead_of_merging(tmp_path: Path) -> None:
    store = _store(tmp_path)
    store.save(SAMPLE)
    store.save(AppConfig(theme="light"))

    assert store.load() == AppConfig(theme="light")
    assert json.loads(Path(store.path()).read_text(encoding="utf-8"))["color"] == ""


def test_load_partial_file_fills_defaults(tmp_path: Path) -> None:
    (tmp_path / "settings.json").write_text('{"sidebar_open": true}', encoding="utf-8")
    assert _store(tmp_path).load() == AppConfig(sidebar_open=True)


def test_load_malformed_file_fails_and_keeps_it(tmp_path: Path) -> None:
    p = tmp_path / "settings.json"
    p.write_text("{not valid json", encoding="utf-8")

    with pytest.raises(DecodeError):
        _store(tmp_path).load()
    assert p.read_text(encoding="utf-8") == "{not valid json"


def test_load_wrong_type_fails(tmp_path: Path) -> None:
    (tmp_path / "settings.json").write_text('{"zoom": "large"}', encoding="utf-8")
    with pytest.raises(DecodeError):
        _store(tmp_path).load()


def test_load_invalid_utf8_is_a_read_error(tmp_path: Path) -> None:
    (tmp_path / "settings.json").write_bytes(b'{"theme": "\xff\xfe"}')
    with pytest.raises(ReadError):
        _store(tmp_path).load()


def test_load_unreadable_path_is_a_read_error(tmp_path: Path) -> None:
    (tmp_path / "settings.json").mkdir()
    with pytest.raises(ReadError) as exc:
        _store(tmp_path).load()
    assert str(exc.value).startswith("Failed to read config: ")


def test_save_dir_create_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(DirCreateError):
        _store(blocker / "NextAI").save(SAMPLE)


def test_save_write_failure_cleans_temp_file(tmp_path: Path) -> None:
    target = tmp_path / "settings.json"
    target.mkdir()
    (target / "keep").write_text("x", encoding="utf-8")

    with pytest.raises(WriteError):
        _store(tmp_path).save(SAMPLE)
    assert not (tmp_path / "settings.json.tmp").exists()


def test_delete_is_idempotent(tmp_path: Path) -> None:
    store = _store(tmp_path)
    store.delete()

    store.save(SAMPLE)
    store.delete()
    assert not Path(store.path()).exists()
    store.delete()
    assert store.load() == AppConfig()


def test_delete_failure(tmp_path: Path) -> None:
    (tmp_path / "settings.json").mkdir()
    with pytest.raises(DeleteError):
        _store(tmp_path).delete()


def test_path_is_stable_and_does_not_touch_disk(tmp_path: Path) -> None:
    config_dir = tmp_path / "NextAI"
    store = _store(config_dir)

    first = store.path()
    assert first == store.path()
    assert first == str(config_dir / "settings.json")
    assert not config_dir.exists()


def test_every_operation_reports_unavailable_dir() -> None:
    store = ConfigStore(resolve_dir=_unavailable)

    with pytest.raises(ConfigDirUnavailable):
        store.load()
    with pytest.raises(ConfigDirUnavailable):
        store.save(SAMPLE)
    with pytest.raises(ConfigDirUnavailable):
        store.delete()
    with pytest.raises(ConfigDirUnavailable) as exc:
        store.path()
    assert str(exc.value) == "Failed to get config dir: no home directory"


def test_no_cache_between_calls(tmp_path: Path) -> None:
    store = _store(tmp_path)
    store.save(SAMPLE)
    (tmp_path / "settings.json").write_text('{"theme": "light"}', encoding="utf-8")

    assert store.load() == AppConfig(theme="light")
