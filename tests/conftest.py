from __future__ import annotations

import pytest

import certscan.config as config_module
from certscan.models.results import Certificate, FingerprintHash, ScanResult


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch) -> None:
    monkeypatch.setattr(config_module, "_config_candidates", lambda: [])
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("CERTSCAN_OUTPUT", raising=False)


@pytest.fixture
def scan_result() -> ScanResult:
    return ScanResult(
        host="example.com",
        port="443",
        tls_version="tls13",
        cipher="TLS_AES_128_GCM_SHA256",
        certificate=Certificate(
            subject_cn="a.example.com",
            subject_an=["*.example.com", "a.example.com"],
            subject_org=["Example Inc", "Example Holdings"],
            expired=True,
            self_signed=False,
            fingerprint_hash=FingerprintHash(md5="aa11", sha1="bb22", sha256="cc33"),
        ),
    )
