from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FingerprintHash(BaseModel):
    model_config = ConfigDict(frozen=True)

    md5: str = ""
    sha1: str = ""
    sha256: str = ""


class Certificate(BaseModel):
    model_config = ConfigDict(frozen=True)

    subject_cn: str = ""
    subject_an: list[str] = Field(default_factory=list)
    subject_org: list[str] = Field(default_factory=list)
    expired: bool = False
    self_signed: bool = False
    fingerprint_hash: FingerprintHash = Field(default_factory=FingerprintHash)


class ScanResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str
    port: str
    tls_version: str = ""
    cipher: str = ""
    certificate: Certificate = Field(default_factory=Certificate)

    @field_validator("port", mode="before")
    @classmethod
    def _port_as_string(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value
