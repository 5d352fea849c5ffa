from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from pydantic_core import PydanticSerializationError

from certscan.errors import FormatError
from certscan.models.config import HashAlgorithm, PresentationConfig
from certscan.models.results import FingerprintHash, ScanResult
from certscan.output.colors import Colorizer
from certscan.output.names import normalize_cert_names


class RecordFormatter(ABC):
    name: str = "unknown"

    def __init__(self, config: PresentationConfig) -> None:
        self.config = config

    @abstractmethod
    def format(self, result: ScanResult) -> bytes:
        raise NotImplementedError


_REGISTRY: dict[str, Callable[[PresentationConfig], RecordFormatter]] = {}


def register_formatter(name: str) -> Callable[[type[RecordFormatter]], type[RecordFormatter]]:
    def decorator(cls: type[RecordFormatter]) -> type[RecordFormatter]:
        cls.name = name
        _REGISTRY[name] = cls
        return cls

    return decorator


def create_formatter(config: PresentationConfig, name: str | None = None) -> RecordFormatter:
    selected = name or ("json" if config.json_mode else "text")
    if selected not in _REGISTRY:
        msg = f"Unsupported formatter: {selected}. Available: {', '.join(sorted(_REGISTRY))}"
        raise ValueError(msg)
    return _REGISTRY[selected](config)


def available_formatters() -> list[str]:
    return sorted(_REGISTRY)


@register_formatter("json")
class JSONFormatter(RecordFormatter):
    def format(self, result: ScanResult) -> bytes:
        try:
            return result.model_dump_json().encode("utf-8")
        except (PydanticSerializationError, TypeError, ValueError) as exc:
            raise FormatError(f"could not serialize result for {result.host!r}:{result.port}: {exc}") from exc


@register_formatter("text")
class TextFormatter(RecordFormatter):
    """Renders one result as name lines followed by a bracketed summary line."""

    def __init__(self, config: PresentationConfig) -> None:
        super().__init__(config)
        self.colors = Colorizer(enabled=config.color_enabled)

    def format(self, result: ScanResult) -> bytes:
        try:
            return self.format_text(result).encode("utf-8")
        except UnicodeEncodeError as exc:
            raise FormatError(f"could not encode result for {result.host!r}:{result.port}: {exc}") from exc

    def format_text(self, result: ScanResult) -> str:
        config = self.config
        colors = self.colors
        cert = result.certificate
        prefix = "" if config.resp_only else f"{result.host}:{result.port}"

        names: list[str] = []
        if config.san:
            names.extend(cert.subject_an)
        if config.cn:
            names.append(cert.subject_cn)

        parts: list[str] = []
        for name in normalize_cert_names(names):
            if config.resp_only:
                parts.append(f"{name}\n")
            else:
                parts.append(f"{prefix} [{colors.name(name)}]\n")

        if not config.san and not config.cn:
            parts.append(prefix)

        segments: list[str] = []
        if config.org and cert.subject_org:
            segments.append(colors.organization(",".join(cert.subject_org)))
        if config.tls_version:
            segments.append(colors.version(result.tls_version.upper()))
        if config.cipher:
            segments.append(colors.cipher(result.cipher))
        if config.expired and cert.expired:
            segments.append(colors.expired("expired"))
        if config.self_signed and cert.self_signed:
            segments.append(colors.self_signed("self-signed"))
        for algorithm in config.hash:
            segments.append(colors.hash(_fingerprint(cert.fingerprint_hash, algorithm)))

        parts.extend(f" [{segment}]" for segment in segments)
        return "".join(parts).rstrip("\n")


def _fingerprint(fingerprints: FingerprintHash, algorithm: str) -> str:
    try:
        key = HashAlgorithm(algorithm.lower())
    except ValueError:
        return ""
    return str(getattr(fingerprints, key.value))
