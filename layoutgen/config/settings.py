"""
Application Settings

Environment configuration for layout generation.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from layoutgen.core import InvalidParameter

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Application settings from environment."""

    scale: str = "medium"
    seed: Optional[int] = 42
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        raw_seed = os.getenv("LAYOUTGEN_SEED", "42")
        if raw_seed.strip().lower() in ("", "none"):
            seed = None
        else:
            try:
                seed = int(raw_seed)
            except ValueError:
                raise InvalidParameter("LAYOUTGEN_SEED", raw_seed, "must be an integer or 'none'") from None
        log_level = os.getenv("LAYOUTGEN_LOG_LEVEL", "WARNING").strip().upper()
        if log_level not in LOG_LEVELS:
            raise InvalidParameter(
                "LAYOUTGEN_LOG_LEVEL", log_level, f"expected one of {', '.join(LOG_LEVELS)}"
            )
        return cls(
            scale=os.getenv("LAYOUTGEN_SCALE", "medium"),
            seed=seed,
            log_level=log_level,
        )

    def configure_logging(self) -> None:
        """Apply ``log_level`` to the package logger."""
        logging.getLogger("layoutgen").setLevel(self.log_level)
