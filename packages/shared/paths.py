from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir, user_log_dir

from packages.shared.errors import ConfigDirUnavailable

APP_NAME = "NextAI"
CONFIG_FILE = "settings.json"

# Replaces the platform config directory when set (must be absolute).
CONFIG_DIR_ENV = "NEXTAI_CONFIG_DIR"


def resolve_app_config_dir() -> Path:
    override = os.environ.get(CONFIG_DIR_ENV, "").strip()
    if override:
        path = Path(override).expanduser()
        if not path.is_absolute():
            raise ConfigDirUnavailable(f"{CONFIG_DIR_ENV} is not an absolute path: {override}")
        return path

    try:
        base = user_config_dir(APP_NAME, appauthor=False)
    except (OSError, RuntimeError, KeyError) as e:
        raise ConfigDirUnavailable(e) from e
    if not base:
        raise ConfigDirUnavailable("platform returned no config directory")
    return Path(base)


def config_path() -> Path:
    return resolve_app_config_dir() / CONFIG_FILE


def logs_dir() -> Path:
    return Path(user_log_dir(APP_NAME, appauthor=False))


def log_path() -> Path:
    return logs_dir() / "app.log"


def ensure_app_dirs() -> None:
    # The config dir is left to ConfigStore.save so a read never creates it.
    logs_dir().mkdir(parents=True, exist_ok=True)
