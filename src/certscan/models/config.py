from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HashAlgorithm(StrEnum):
    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"


class PresentationConfig(BaseModel):
    """Toggles chosen at startup that govern how every record is rendered."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    json_mode: bool = False
    no_color: bool = False
    resp_only: bool = False
    san: bool = False
    cn: bool = False
    org: bool = False
    tls_version: bool = False
    cipher: bool = False
    expired: bool = False
    self_signed: bool = False
    # Unknown names are kept so they render as an empty segment.
    hash: list[str] = Field(default_factory=list)
    output_file: Path | None = None

    @field_validator("hash", mode="before")
    @classmethod
    def _split_hash(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, str):
            return [item.strip().lower() for item in value.split(",") if item.strip()]
        return value

    @property
    def color_enabled(self) -> bool:
        return not self.no_color
