from __future__ import annotations

import json

import pytest

from packages.shared.config import AppConfig
from packages.shared.errors import DecodeError

FIELDS = ["theme", "color", "zoom", "show_app_rail", "sidebar_open", "sidebar_width"]


def test_defaults_are_zero_values() -> None:
    cfg = AppConfig()
    assert cfg.theme == ""
    assert cfg.color == ""
    assert cfg.zoom == 0
    assert cfg.show_app_rail is False
    assert cfg.sidebar_open is False
    assert cfg.sidebar_width == 0


def test_missing_keys_fall_back_to_defaults() -> None:
    cfg = AppConfig.from_json('{"theme": "dark", "zoom": 125}')
    assert cfg == AppConfig(theme="dark", zoom=125)


def test_empty_object_decodes_to_defaults() -> None:
    assert AppConfig.from_json("{}") == AppConfig()


def test_unknown_keys_are_ignored() -> None:
    cfg = AppConfig.from_json('{"color": "rose", "schema_version": 3}')
    assert cfg.color == "rose"
    assert "schema_version" not in cfg.model_dump()


def test_malformed_json_is_a_decode_error() -> None:
    with pytest.raises(DecodeError) as exc:
        AppConfig.from_json('{"theme": "dark",')
    assert str(exc.value).startswith("Failed to parse config: ")


def test_non_object_root_is_a_decode_error() -> None:
    with pytest.raises(DecodeError):
        AppConfig.from_json('["dark"]')


@pytest.mark.parametrize(
    "doc",
    [
        '{"zoom": "100"}',
        '{"show_app_rail": 1}',
        '{"sidebar_open": "true"}',
        '{"theme": 5}',
        '{"color": null}',
        '{"sidebar_width": 2147483648}',
    ],
)
def test_wrong_field_types_are_rejected(doc: str) -> None:
    with pytest.raises(DecodeError):
        AppConfig.from_json(doc)


def test_to_json_is_pretty_and_emits_every_key_in_order() -> None:
    cfg = AppConfig(theme="dark", color="blue", zoom=100, show_app_rail=True, sidebar_width=240)
    text = cfg.to_json()

    assert text.startswith('{\n  "theme": "dark",\n')
    data = json.loads(text)
    assert list(data) == FIELDS
    assert data["sidebar_open"] is False


def test_non_ascii_values_survive_json() -> None:
    cfg = AppConfig(theme="系统", color="café")
    assert AppConfig.from_json(cfg.to_json()) == cfg
