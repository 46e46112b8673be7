"""
Runtime settings for gendiff.

Settings come from environment variables:
- GENDIFF_FORMAT: default output format (stylish, plain, json)
- GENDIFF_LOG_LEVEL: console log level (TRACE ... CRITICAL, or WARN/ERR/FATAL)
"""
import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

DEFAULT_FORMAT = "stylish"


class LogLevel(str, Enum):
    """Log verbosity levels understood by loguru."""
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @classmethod
    def from_string(cls, level: str) -> "LogLevel":
        """Parse log level from string (case-insensitive)."""
        level = level.strip().upper()
        try:
            return cls(level)
        except ValueError:
            aliases = {
                "WARN": cls.WARNING,
                "ERR": cls.ERROR,
                "FATAL": cls.CRITICAL,
            }
            if level in aliases:
                return aliases[level]
            raise ValueError(f"Unknown log level: {level}") from None


@dataclass
class Settings:
    """
    Settings for a gendiff run.

    Attributes:
        default_format: Output format used when none is given explicitly
        log_level: Console log level; None means derive it from --verbose
    """
    default_format: str = DEFAULT_FORMAT
    log_level: Optional[LogLevel] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables."""
        env = os.environ if environ is None else environ

        fmt = env.get("GENDIFF_FORMAT", "").strip() or DEFAULT_FORMAT
        raw_level = env.get("GENDIFF_LOG_LEVEL", "").strip()
        level = LogLevel.from_string(raw_level) if raw_level else None

        return cls(default_format=fmt, log_level=level)
