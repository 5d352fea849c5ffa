"""Domain models."""

from certscan.models.config import HashAlgorithm, PresentationConfig
from certscan.models.results import Certificate, FingerprintHash, ScanResult

__all__ = [
    "Certificate",
    "FingerprintHash",
    "HashAlgorithm",
    "PresentationConfig",
    "ScanResult",
]
