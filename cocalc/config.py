"""Runtime settings for the cocalc CLI, read from the environment.

    COCALC_LOG_LEVEL  — logging level name (default WARNING)
    COCALC_PROMPT     — REPL prompt (default "> ")
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_PROMPT = "> "


@dataclass
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    prompt: str = DEFAULT_PROMPT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """Build settings from ``environ`` (defaults to os.environ)."""
        env = os.environ if environ is None else environ
        return cls(
            log_level=env.get("COCALC_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            prompt=env.get("COCALC_PROMPT", DEFAULT_PROMPT),
        )
