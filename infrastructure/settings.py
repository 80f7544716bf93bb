"""Settings access helpers for JSON-based configuration."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from loguru import logger

from core.models import (
    MINIMUM_PATH,
    OS_MAX_PATH,
    ConfigurationSnapshot,
    OverlengthBehavior,
    ReplacementCharacter,
)


class JsonSettings:
    """Lightweight JSON settings reader with dotted-key access."""

    def __init__(self, settings_path: str | Path) -> None:
        self._path = Path(settings_path)
        if not self._path.exists():
            raise FileNotFoundError(f"settings.json not found: {self._path}")
        with self._path.open("r", encoding="utf-8") as f:
            self._data = json.load(f)

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return value for dotted `key`, or `default` if not present."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return node


def os_max_file_length(output_dir: str | Path | None = None) -> int:
    """File name budget left by the OS path limit once `output_dir` is accounted for."""
    directory = str(output_dir) if output_dir is not None else os.getcwd()
    return OS_MAX_PATH - len(directory)


def _parse_enum(enum_cls: Any, raw: Any, fallback: Any) -> Any:
    try:
        return enum_cls(str(raw).strip().upper())
    except ValueError:
        logger.warning("Unknown {} value {!r}, using {}", enum_cls.__name__, raw, fallback.name)
        return fallback


def _read_bool(settings: JsonSettings, key: str, default: bool) -> bool:
    raw = settings.get(key, default)
    if isinstance(raw, bool):
        return raw
    logger.warning("Setting {} expects true or false, got {!r}; using {}", key, raw, default)
    return default


def _parse_max_length(raw: Any, default: int) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        logger.warning("Invalid maximum file name length {!r}, using {}", raw, default)
        return default
    return value if value >= MINIMUM_PATH else default


def load_configuration(
    settings: JsonSettings, output_dir: str | Path | None = None
) -> ConfigurationSnapshot:
    """Build a `ConfigurationSnapshot` from the `naming` section of `settings`."""
    defaults = ConfigurationSnapshot()
    return ConfigurationSnapshot(
        prefix=str(settings.get("naming.prefix", defaults.prefix) or ""),
        suffix=str(settings.get("naming.suffix", defaults.suffix) or ""),
        undescribed=str(settings.get("naming.undescribed", defaults.undescribed) or ""),
        replacement_character=_parse_enum(
            ReplacementCharacter,
            settings.get("naming.replacement_character", defaults.replacement_character.value),
            ReplacementCharacter.HYPHEN,
        ),
        remove_trailing_numbers=_read_bool(
            settings, "naming.remove_trailing_numbers", defaults.remove_trailing_numbers
        ),
        correct_caps=_read_bool(settings, "naming.correct_caps", defaults.correct_caps),
        index_unique=_read_bool(settings, "naming.index_unique", defaults.index_unique),
        over_length=_parse_enum(
            OverlengthBehavior,
            settings.get("naming.over_length", defaults.over_length.value),
            OverlengthBehavior.REFUSE,
        ),
        user_max_length=_parse_max_length(
            settings.get("naming.max_length", defaults.user_max_length), defaults.user_max_length
        ),
        os_max_length=os_max_file_length(output_dir),
    )
