from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from certscan.models.config import PresentationConfig

logger = logging.getLogger(__name__)


def _config_candidates() -> list[Path]:
    return [Path.cwd() / "certscan.toml", Path.home() / ".config/certscan/config.toml"]


def _load_config_file() -> dict[str, object]:
    for candidate in _config_candidates():
        if not candidate.exists():
            continue
        try:
            payload = tomllib.loads(candidate.read_text(encoding="utf-8"))
        except (OSError, tomllib.TOMLDecodeError) as exc:
            logger.warning("Ignoring unreadable config file %s: %s", candidate, exc)
            continue
        section = payload.get("output", payload)
        return dict(section) if isinstance(section, dict) else {}
    return {}


def _env_overrides() -> dict[str, object]:
    payload: dict[str, object] = {}
    if os.getenv("NO_COLOR"):
        payload["no_color"] = True
    output = os.getenv("CERTSCAN_OUTPUT")
    if output:
        payload["output_file"] = output
    return payload


def load_config(**overrides: object) -> PresentationConfig:
    """Resolve presentation toggles from file, environment and explicit overrides.

    Later sources win: config file, then environment, then any override that is
    not ``None``.
    """
    payload: dict[str, object] = {}
    payload.update(_load_config_file())
    payload.update(_env_overrides())
    payload.update({key: value for key, value in overrides.items() if value is not None})
    return PresentationConfig.model_validate(payload)
