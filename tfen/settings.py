"""
Runtime configuration for the TFEN shell (loader, CLI).

Values come from the environment and can be overridden by CLI flags:

- TFEN_LOG_LEVEL: logging level name (default WARNING)
- TFEN_DEBUG: any non-empty value forces DEBUG
- TFEN_OUTPUT_FORMAT: default output format, "json" or "yaml"
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

OUTPUT_FORMATS = ("json", "yaml")

_LOG_FORMAT = "[%(levelname)s] %(message)s"


@dataclass
class Settings:
    log_level: str = "WARNING"
    output_format: str = "json"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Builds settings from environment variables.

        Raises:
            ValueError: On an unknown output format or log level
        """
        env = os.environ if environ is None else environ

        level = env.get("TFEN_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
        if env.get("TFEN_DEBUG"):
            level = "DEBUG"

        fmt = env.get("TFEN_OUTPUT_FORMAT", "json").strip().lower() or "json"

        settings = cls(log_level=level, output_format=fmt)
        settings.validate()
        return settings

    def validate(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Invalid output format '{self.output_format}'. Expected one of: {', '.join(OUTPUT_FORMATS)}"
            )
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Invalid log level '{self.log_level}'")


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """
    Configures the ``tfen`` logger.

    The handler is installed once per process; later calls only change the level.
    """
    logger = logging.getLogger("tfen")
    logger.setLevel(level)
    if not getattr(logger, "_tfen_handler_installed", False):
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(h)
        logger._tfen_handler_installed = True  # type: ignore[attr-defined]
    return logger


__all__ = ["Settings", "OUTPUT_FORMATS", "setup_logging"]
