"""Runtime settings for the style sanitizer.

Settings come from the environment unless a `SanitizerConfig` is passed to
`Policy` explicitly:

- STYLEPOLICY_LOG_DROPPED: "1"/"true"/"yes" logs every dropped declaration
  at DEBUG level (default off; the log includes attacker-controlled text).
- STYLEPOLICY_MAX_STYLE_LENGTH: style strings longer than this many
  characters sanitize to "" without being parsed. 0 (the default) means no
  limit.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("", "0", "false", "no", "off")


@dataclass(frozen=True)
class SanitizerConfig:
    log_dropped: bool = False
    max_style_length: int = 0

    def __post_init__(self) -> None:
        if self.max_style_length < 0:
            raise ValueError("SanitizerConfig.max_style_length must be zero or positive")


def _env_bool(name: str) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (1/0, true/false, yes/no), got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def config_from_env() -> SanitizerConfig:
    """Build a SanitizerConfig from STYLEPOLICY_* environment variables.

    Raises:
        ValueError: if a variable is set to a value that cannot be parsed.
    """
    return SanitizerConfig(
        log_dropped=_env_bool("STYLEPOLICY_LOG_DROPPED"),
        max_style_length=_env_int("STYLEPOLICY_MAX_STYLE_LENGTH", 0),
    )
