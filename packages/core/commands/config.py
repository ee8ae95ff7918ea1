from __future__ import annotations

from functools import partial
from typing import Any, Dict, Union

from pydantic import ValidationError

from packages.shared.config import AppConfig
from packages.shared.errors import DecodeError
from packages.shared.store import ConfigStore

from .registry import CommandRegistry


def get_config(store: ConfigStore) -> AppConfig:
    return store.load()


def set_config(store: ConfigStore, config: Union[AppConfig, Dict[str, Any]]) -> None:
    # The front-end sends a plain dict; decode it with the same rules as the file.
    if not isinstance(config, AppConfig):
        try:
            config = AppConfig.model_validate(config)
        except ValidationError as e:
            raise DecodeError(e) from e
    store.save(config)


def delete_config(store: ConfigStore) -> None:
    store.delete()


def get_config_path(store: ConfigStore) -> str:
    return store.path()


def register_config_commands(registry: CommandRegistry, store: ConfigStore) -> None:
    for fn in (get_config, set_config, delete_config, get_config_path):
        registry.add(fn.__name__, partial(fn, store))
