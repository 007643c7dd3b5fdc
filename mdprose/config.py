"""Load and validate .mdprose.yaml."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml

from mdprose.markdown.parser import HEADING_LINE_MODES

CONFIG_FILENAME = ".mdprose.yaml"

# Default config values
DEFAULTS: dict[str, Any] = {
    "parser": {
        "heading_lines": "cleaned",
    },
    "composition": {
        "words_per_minute": 200,
    },
}


class ConfigError(Exception):
    """Raised when config is invalid."""


def _deep_merge(base: dict, override: dict) -> dict:
    """Merge override into base recursively. Override wins on conflicts."""
    result = base.copy()
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _validate(config: dict) -> None:
    """Validate known sections of a merged config."""
    parser = config.get("parser")
    if not isinstance(parser, dict):
        raise ConfigError("'parser' must be a mapping")
    mode = parser.get("heading_lines")
    if mode not in HEADING_LINE_MODES:
        raise ConfigError(
            f"'parser.heading_lines' must be one of {list(HEADING_LINE_MODES)}, got {mode!r}"
        )

    composition = config.get("composition")
    if not isinstance(composition, dict):
        raise ConfigError("'composition' must be a mapping")
    wpm = composition.get("words_per_minute")
    # bool is an int subclass; reject it explicitly
    if isinstance(wpm, bool) or not isinstance(wpm, int) or wpm <= 0:
        raise ConfigError(
            f"'composition.words_per_minute' must be a positive integer, got {wpm!r}"
        )


def load_config(project_root: Path | None = None) -> dict:
    """Load config from .mdprose.yaml under project_root.

    Falls back to cwd if project_root is None. A missing file means
    defaults; callers always get a full config dict.
    """
    root = Path(project_root) if project_root else Path.cwd()
    config_path = root / CONFIG_FILENAME

    if not config_path.exists():
        return copy.deepcopy(DEFAULTS)

    try:
        with open(config_path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config must be a YAML mapping, got {type(raw).__name__}")

    config = _deep_merge(copy.deepcopy(DEFAULTS), raw)
    _validate(config)
    return config
