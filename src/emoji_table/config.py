"""
Configuration file support for the ``emoji-table`` command.

A configuration file is YAML (``.yaml``/``.yml``) or TOML (``.toml``) with
flat keys. Values given on the command line override the file.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


@dataclass
class EmojiTableConfig:
    """Settings shared by the CLI subcommands.

    Attributes:
        max_emoji_version: Hide symbols introduced after this Emoji version.
        source: ``emoji-test.txt`` used by ``generate``.
        output: Module written by ``generate``.
        json_indent: Indentation of JSON exports, None for compact output.
    """

    max_emoji_version: float | None = None
    source: Path | None = None
    output: Path | None = None
    json_indent: int | None = 2


def _read_yaml(path: Path) -> dict[str, Any]:
    with path.open(encoding="utf-8") as fp:
        try:
            data = yaml.safe_load(fp) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file {path} must contain a YAML mapping")
    return data


def _read_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as fp:
        try:
            return tomllib.load(fp)
        except tomllib.TOMLDecodeError as exc:
            raise ValueError(f"Invalid TOML in {path}: {exc}") from exc


def _coerce(key: str, value: Any, base_dir: Path) -> Any:
    if value is None:
        return None
    if key == "max_emoji_version":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"max_emoji_version must be a number, got {value!r}")
        return float(value)
    if key in ("source", "output"):
        if not isinstance(value, str):
            raise ValueError(f"{key} must be a path string, got {value!r}")
        path = Path(value).expanduser()
        return path if path.is_absolute() else (base_dir / path).resolve()
    if key == "json_indent":
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"json_indent must be a non-negative integer, got {value!r}")
        return value
    raise ValueError(f"Unknown configuration key: {key}")


def load_config(path: Path | None) -> EmojiTableConfig:
    """Load settings from ``path``.

    Relative ``source`` and ``output`` paths are resolved against the
    directory holding the configuration file.

    Args:
        path: YAML or TOML file, or None for defaults.

    Returns:
        Loaded configuration.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: On an unsupported extension, unknown key or bad value.
    """
    if path is None:
        return EmojiTableConfig()

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    suffix = path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path)
    elif suffix == ".toml":
        data = _read_toml(path)
    else:
        raise ValueError(f"Unsupported configuration format: {path.suffix or path.name}")

    known = {f.name for f in fields(EmojiTableConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown configuration key(s) in {path}: {', '.join(unknown)}")

    base_dir = path.parent.resolve()
    values = {key: _coerce(key, value, base_dir) for key, value in data.items()}
    logger.debug("Loaded configuration from %s: %s", path, values)
    return EmojiTableConfig(**values)
