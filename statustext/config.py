"""Load statustext configuration from pyproject.toml and optional .statustext.toml."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from .errors import StatusTextConfigError
from .resolver import StatusTextResolver

logger = logging.getLogger(__name__)


@dataclass
class StatustextConfig:
    """Runtime configuration for statustext."""

    # Whether callers should honour the shifted single-response rule
    single_custom_rule: bool = False
    # Code -> text overrides applied to every response.  TOML table keys are
    # strings, so codes are written as "418" = "Short And Stout".
    global_status: Dict[str, str] = field(default_factory=dict)
    # Code -> text reached through code + 20 / code + 240
    custom_status: Dict[str, str] = field(default_factory=dict)


def _read_toml(path: Path) -> dict:
    """Read a TOML file; return empty dict if missing or unparseable."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError, UnicodeDecodeError):
        return {}


def _apply(cfg: StatustextConfig, d: dict) -> None:
    """Overlay dict values onto cfg, ignoring unknown keys.

    Overlay tables are merged key by key so a local file only needs to list
    the codes it changes.
    """
    valid = set(cfg.__dataclass_fields__)
    for key, val in d.items():
        if key not in valid:
            logger.debug("ignoring unknown config key %r", key)
            continue
        if key in ("global_status", "custom_status") and isinstance(val, dict):
            getattr(cfg, key).update(val)
        else:
            setattr(cfg, key, val)


def load_config(project_root: Optional[Path] = None) -> StatustextConfig:
    """Load config from pyproject.toml [tool.statustext], then .statustext.toml."""
    if project_root is None:
        project_root = Path.cwd()
    cfg = StatustextConfig()
    pyproject = _read_toml(project_root / "pyproject.toml")
    _apply(cfg, pyproject.get("tool", {}).get("statustext", {}))
    local = _read_toml(project_root / ".statustext.toml")
    _apply(cfg, local)
    return cfg


def _parse_entry(table: str, key: object, text: object) -> tuple:
    try:
        code = int(key)
    except (TypeError, ValueError):
        raise StatusTextConfigError(
            f"{table}: status code must be an integer, got {key!r}"
        ) from None
    if not isinstance(text, str):
        raise StatusTextConfigError(
            f"{table}: text for {code} must be a string, got {text!r}"
        )
    return code, text


def build_resolver(config: Optional[StatustextConfig] = None) -> StatusTextResolver:
    """Return a new resolver with *config*'s overlays and flag applied.

    Raises StatusTextConfigError for an overlay that is not a table, a
    non-integer code, non-string text or a non-boolean flag.
    """
    if config is None:
        config = load_config()
    for table in ("global_status", "custom_status"):
        value = getattr(config, table)
        if not isinstance(value, dict):
            raise StatusTextConfigError(f"{table}: expected a table, got {value!r}")
    if not isinstance(config.single_custom_rule, bool):
        raise StatusTextConfigError(
            "single_custom_rule: expected true or false, "
            f"got {config.single_custom_rule!r}"
        )
    resolver = StatusTextResolver()
    for key, text in config.global_status.items():
        resolver.set_global_status(*_parse_entry("global_status", key, text))
    for key, text in config.custom_status.items():
        resolver.set_custom_status(*_parse_entry("custom_status", key, text))
    resolver.set_enabled(config.single_custom_rule)
    return resolver
