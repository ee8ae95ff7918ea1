"""
Named-command boundary between the settings backend and the front-end.

Commands are plain callables registered under a name. ``invoke`` binds the
front-end's arguments, runs the command and hands back a JSON-ready value.
Typed ``ConfigError`` failures are flattened here into ``CommandError``, whose
only payload is the human-readable message.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel

from packages.shared.errors import ConfigError

log = logging.getLogger(__name__)


class CommandError(Exception):
    """Raised by ``CommandRegistry.invoke``; ``str(err)`` is the message for the UI."""


def _to_wire(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    return value


class CommandRegistry:
    def __init__(self) -> None:
        self._commands: Dict[str, Callable[..., Any]] = {}

    def add(self, name: str, fn: Callable[..., Any]) -> None:
        if name in self._commands:
            raise ValueError(f"command {name} is already registered")
        self._commands[name] = fn

    def register(self, name: Optional[str] = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            self.add(name or fn.__name__, fn)
            return fn
        return decorator

    def names(self) -> List[str]:
        return sorted(self._commands)

    def invoke(self, name: str, args: Optional[Dict[str, Any]] = None) -> Any:
        fn = self._commands.get(name)
        if fn is None:
            raise CommandError(f"command {name} not found")

        try:
            bound = inspect.signature(fn).bind(**(args or {}))
        except TypeError as e:
            raise CommandError(f"invalid args for command {name}: {e}") from e

        try:
            result = fn(*bound.args, **bound.kwargs)
        except ConfigError as e:
            log.warning("Command %s failed: %s", name, e)
            raise CommandError(str(e)) from e
        return _to_wire(result)
