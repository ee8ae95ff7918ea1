from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable

from packages.shared.config import AppConfig
from packages.shared.errors import DeleteError, DirCreateError, ReadError, WriteError
from packages.shared.paths import CONFIG_FILE, resolve_app_config_dir

log = logging.getLogger(__name__)


class ConfigStore:
    """Reads and writes ``settings.json`` inside the app config directory.

    Nothing is cached: every call resolves the directory again and goes to
    disk, so the file is the only source of truth. A missing file loads as
    the defaults; ``save`` creates the directory on demand.
    """

    def __init__(self, resolve_dir: Callable[[], Path] = resolve_app_config_dir) -> None:
        self._resolve_dir = resolve_dir

    def _file(self) -> Path:
        return Path(self._resolve_dir()) / CONFIG_FILE

    def load(self) -> AppConfig:
        path = self._file()
        try:
            if not path.exists():
                log.debug("No config at %s, using defaults", path)
                return AppConfig()
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(e) from e

        return AppConfig.from_json(raw)

    def save(self, cfg: AppConfig) -> None:
        config_dir = Path(self._resolve_dir())
        try:
            config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirCreateError(e) from e

        content = cfg.to_json()
        path = config_dir / CONFIG_FILE
        tmp = path.with_name(path.name + ".tmp")
        try:
            tmp.write_bytes(content.encode("utf-8"))
            os.replace(tmp, path)
        except OSError as e:
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                log.debug("Could not remove %s", tmp)
            raise WriteError(e) from e
        log.debug("Saved config to %s", path)

    def delete(self) -> None:
        path = self._file()
        try:
            if path.exists():
                path.unlink()
                log.debug("Deleted config at %s", path)
        except OSError as e:
            raise DeleteError(e) from e

    def path(self) -> str:
        return str(self._file())
