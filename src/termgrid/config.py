"""Runtime settings with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


ENV_PREFIX = "TERMGRID_"


@dataclass(frozen=True)
class Settings:
    """
    Tunables shared by the terminal handle and the input loops.

    Attributes:
        ambiguous_timeout: Seconds to wait for more input when the keys read
            so far are a complete binding and also a prefix of a longer one
            (a lone Escape versus an arrow key, for instance).
        poll_interval: Seconds between stop-signal checks while an input
            loop is idle.
        log_level: Level name used by the CLI when configuring logging.
    """
    ambiguous_timeout: float = 0.1
    poll_interval: float = 0.1
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings, letting ``TERMGRID_*`` variables override defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            ambiguous_timeout=_float_var(env, "AMBIGUOUS_TIMEOUT", defaults.ambiguous_timeout),
            poll_interval=_float_var(env, "POLL_INTERVAL", defaults.poll_interval),
            log_level=env.get(ENV_PREFIX + "LOG_LEVEL", defaults.log_level).upper(),
        )


def _float_var(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{ENV_PREFIX}{name} must be positive, got {raw!r}")
    return value
