from __future__ import annotations


class ConfigError(Exception):
    """Base class for settings persistence failures.

    The message is what the front-end sees once the command boundary
    flattens the error to a string.
    """

    action = "handle config"

    def __init__(self, cause: object) -> None:
        self.cause = cause
        super().__init__(f"Failed to {self.action}: {cause}")


class ConfigDirUnavailable(ConfigError):
    action = "get config dir"


class ReadError(ConfigError):
    action = "read config"


class DecodeError(ConfigError):
    action = "parse config"


class DirCreateError(ConfigError):
    action = "create config dir"


class EncodeError(ConfigError):
    action = "serialize config"


class WriteError(ConfigError):
    action = "write config"


class DeleteError(ConfigError):
    action = "delete config"
