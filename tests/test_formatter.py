from __future__ import annotations

import json

import pytest

from certscan.errors import FormatError
from certscan.models.config import PresentationConfig
from certscan.models.results import Certificate, ScanResult
from certscan.output.ansi import strip_ansi
from certscan.output.formatter import (
    JSONFormatter,
    TextFormatter,
    available_formatters,
    create_formatter,
)


def _text(result: ScanResult, **toggles: object) -> str:
    config = PresentationConfig(no_color=True, **toggles)
    return TextFormatter(config).format(result).decode("utf-8")


def test_registry_selects_formatter_from_config() -> None:
    assert available_formatters() == ["json", "text"]
    assert isinstance(create_formatter(PresentationConfig(json_mode=True)), JSONFormatter)
    assert isinstance(create_formatter(PresentationConfig()), TextFormatter)


def test_unknown_formatter_name_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unsupported formatter"):
        create_formatter(PresentationConfig(), name="xml")


def test_prefix_only_when_nothing_enabled(scan_result) -> None:
    assert _text(scan_result) == "example.com:443"


def test_summary_segments_follow_fixed_order(scan_result) -> None:
    output = _text(
        scan_result,
        hash=["md5"],
        self_signed=True,
        expired=True,
        cipher=True,
        tls_version=True,
        org=True,
    )
    assert output == (
        "example.com:443 [Example Inc,Example Holdings] [TLS13] "
        "[TLS_AES_128_GCM_SHA256] [expired] [aa11]"
    )


def test_name_lines_then_summary_segments(scan_result) -> None:
    output = _text(scan_result, san=True, cn=True, tls_version=True)
    assert output.split("\n") == [
        "example.com:443 [example.com]",
        "example.com:443 [a.example.com]",
        " [TLS13]",
    ]


def test_name_block_without_segments_has_no_trailing_newline(scan_result) -> None:
    output = _text(scan_result, cn=True)
    assert output == "example.com:443 [a.example.com]"


def test_resp_only_drops_host_port_prefix(scan_result) -> None:
    output = _text(scan_result, resp_only=True, san=True, cn=True, cipher=True)
    assert "example.com:443" not in output
    assert output.split("\n") == ["example.com", "a.example.com", " [TLS_AES_128_GCM_SHA256]"]


def test_resp_only_without_names_is_bare_segments(scan_result) -> None:
    assert _text(scan_result, resp_only=True, tls_version=True) == " [TLS13]"


def test_hash_segments_follow_configured_order(scan_result) -> None:
    output = _text(scan_result, hash=["sha256", "md5"])
    assert output == "example.com:443 [cc33] [aa11]"
    assert output.count("[") == 2


def test_unknown_hash_algorithm_renders_empty_segment(scan_result) -> None:
    assert _text(scan_result, hash=["crc32", "SHA1"]) == "example.com:443 [] [bb22]"


def test_not_expired_never_shows_expired_marker(scan_result) -> None:
    fresh = scan_result.model_copy(
        update={"certificate": scan_result.certificate.model_copy(update={"expired": False})}
    )
    assert "expired" not in _text(fresh, expired=True)


def test_self_signed_marker_only_when_self_signed(scan_result) -> None:
    assert "self-signed" not in _text(scan_result, self_signed=True)
    signed = scan_result.model_copy(
        update={"certificate": scan_result.certificate.model_copy(update={"self_signed": True})}
    )
    assert _text(signed, self_signed=True) == "example.com:443 [self-signed]"


def test_empty_organization_is_omitted() -> None:
    result = ScanResult(host="h", port="1", certificate=Certificate(subject_org=[]))
    assert _text(result, org=True) == "h:1"


def test_color_applies_only_inside_brackets(scan_result) -> None:
    config = PresentationConfig(cn=True, tls_version=True)
    output = TextFormatter(config).format(scan_result)
    assert b"\x1b[" in output
    assert output.startswith(b"example.com:443 [\x1b[")
    assert strip_ansi(output) == b"example.com:443 [a.example.com]\n [TLS13]"


def test_json_formatter_serializes_full_result(scan_result) -> None:
    config = PresentationConfig(json_mode=True, tls_version=True, cn=True)
    payload = JSONFormatter(config).format(scan_result)
    assert b"\n" not in payload
    assert b"\x1b" not in payload
    decoded = json.loads(payload)
    assert decoded == scan_result.model_dump(mode="json")
    assert decoded["certificate"]["fingerprint_hash"]["sha256"] == "cc33"


def test_json_formatter_reports_serialization_failure() -> None:
    broken = ScanResult.model_construct(host=object(), port="443")
    with pytest.raises(FormatError, match="could not serialize"):
        JSONFormatter(PresentationConfig(json_mode=True)).format(broken)


def test_text_formatter_reports_unencodable_result() -> None:
    result = ScanResult(host="bad\udc80.test", port="443")
    with pytest.raises(FormatError, match="could not encode") as excinfo:
        TextFormatter(PresentationConfig(no_color=True)).format(result)
    assert isinstance(excinfo.value.__cause__, UnicodeEncodeError)
