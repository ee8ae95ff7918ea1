"""
Front-end side of the settings commands.

Mirrors how the UI talks to the backend: it never sees typed errors, only
``CommandError`` messages, and it falls back to its own defaults when the
backend cannot be reached.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from packages.core.commands.registry import CommandError, CommandRegistry
from packages.shared.config import AppConfig

log = logging.getLogger(__name__)

SIDEBAR_DEFAULT_WIDTH = 280

# What the UI shows before anything has been saved.
DEFAULT_CONFIG = AppConfig(
    theme="system",
    color="default",
    zoom=100,
    show_app_rail=True,
    sidebar_open=True,
    sidebar_width=SIDEBAR_DEFAULT_WIDTH,
)


class ConfigClient:
    def __init__(self, registry: CommandRegistry) -> None:
        self._registry = registry

    def load(self) -> AppConfig:
        try:
            data = self._registry.invoke("get_config")
        except CommandError as e:
            log.error("Failed to load config: %s", e)
            return DEFAULT_CONFIG.model_copy()
        return AppConfig.model_validate(data)

    def save(self, **changes: Any) -> bool:
        """Overlay ``changes`` on the current config and store the full record."""
        unknown = set(changes) - set(AppConfig.model_fields)
        if unknown:
            raise TypeError(f"unknown config fields: {', '.join(sorted(unknown))}")

        current = self.load()
        merged = {**current.model_dump(), **changes}
        try:
            self._registry.invoke("set_config", {"config": merged})
        except CommandError as e:
            log.error("Failed to save config: %s", e)
            return False
        return True

    def delete(self) -> bool:
        try:
            self._registry.invoke("delete_config")
        except CommandError as e:
            log.error("Failed to delete config: %s", e)
            return False
        return True

    def get_path(self) -> Optional[str]:
        try:
            return self._registry.invoke("get_config_path")
        except CommandError as e:
            log.error("Failed to get config path: %s", e)
            return None
