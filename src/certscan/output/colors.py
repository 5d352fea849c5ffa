from __future__ import annotations

from enum import StrEnum

from rich.color import ColorSystem
from rich.style import Style


class ColorTag(StrEnum):
    NAME = "name"
    ORGANIZATION = "organization"
    VERSION = "version"
    CIPHER = "cipher"
    EXPIRED = "expired"
    SELF_SIGNED = "self_signed"
    HASH = "hash"


TAG_STYLES: dict[ColorTag, Style] = {
    ColorTag.NAME: Style(color="cyan"),
    ColorTag.ORGANIZATION: Style(color="bright_yellow"),
    ColorTag.VERSION: Style(color="blue"),
    ColorTag.CIPHER: Style(color="green"),
    ColorTag.EXPIRED: Style(color="red"),
    ColorTag.SELF_SIGNED: Style(color="yellow"),
    ColorTag.HASH: Style(color="bright_magenta"),
}


class Colorizer:
    """Wraps text fragments in ANSI color sequences keyed by what the fragment is."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    def decorate(self, tag: ColorTag, text: str) -> str:
        if not self.enabled or not text:
            return text
        return TAG_STYLES[tag].render(text, color_system=ColorSystem.STANDARD)

    def name(self, text: str) -> str:
        return self.decorate(ColorTag.NAME, text)

    def organization(self, text: str) -> str:
        return self.decorate(ColorTag.ORGANIZATION, text)

    def version(self, text: str) -> str:
        return self.decorate(ColorTag.VERSION, text)

    def cipher(self, text: str) -> str:
        return self.decorate(ColorTag.CIPHER, text)

    def expired(self, text: str) -> str:
        return self.decorate(ColorTag.EXPIRED, text)

    def self_signed(self, text: str) -> str:
        return self.decorate(ColorTag.SELF_SIGNED, text)

    def hash(self, text: str) -> str:
        return self.decorate(ColorTag.HASH, text)
