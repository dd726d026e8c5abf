"""Pydantic schema for user settings."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from boohash.utils.hash import DEFAULT_CHUNK_SIZE, MAX_CHUNK_SIZE

DEFAULT_LOG_LEVEL = "WARNING"


class HashSettings(BaseModel):
    """Optional defaults applied to every invocation."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    chunk_size: int = DEFAULT_CHUNK_SIZE
    log_level: str = DEFAULT_LOG_LEVEL
    log_to_file: bool = False
    report_timing: bool = True

    @field_validator("chunk_size", mode="before")
    @classmethod
    def _coerce_chunk_size(cls, value: Any) -> int:
        try:
            chunk_size = int(value)
        except (TypeError, ValueError, OverflowError):
            return DEFAULT_CHUNK_SIZE
        return min(max(1, chunk_size), MAX_CHUNK_SIZE)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: Any) -> str:
        if value in (None, ""):
            return DEFAULT_LOG_LEVEL
        name = str(value).strip().upper()
        if isinstance(logging.getLevelName(name), int):
            return name
        return DEFAULT_LOG_LEVEL

    def to_mapping(self) -> dict[str, Any]:
        """Return a serialisable representation of the settings."""

        return self.model_dump()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "HashSettings":
        if not isinstance(data, Mapping):
            data = {}
        return cls.model_validate(dict(data))


__all__ = ["DEFAULT_LOG_LEVEL", "HashSettings"]
