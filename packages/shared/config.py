from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_core import PydanticSerializationError

from packages.shared.errors import DecodeError, EncodeError

THEME_MODES = ("light", "dark", "system")

# Stored as signed 32-bit integers; anything wider is rejected on decode.
Int32 = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]


class AppConfig(BaseModel):
    """The persisted settings record.

    Every field defaults to its zero value so a partial document still
    decodes. Types are strict: ``"100"`` is not a zoom level and ``1`` is
    not a boolean.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    theme: str = ""  # light / dark / system, not validated
    color: str = ""
    zoom: Int32 = 0
    show_app_rail: bool = False
    sidebar_open: bool = False
    sidebar_width: Int32 = 0

    @classmethod
    def from_json(cls, raw: str | bytes) -> "AppConfig":
        try:
            return cls.model_validate_json(raw)
        except ValidationError as e:
            raise DecodeError(e) from e

    def to_json(self) -> str:
        try:
            return self.model_dump_json(indent=2)
        except PydanticSerializationError as e:
            raise EncodeError(e) from e
