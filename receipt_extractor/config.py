"""Extractor configuration.

This module provides environment-specific configuration settings for the receipt extractor.
"""

import math
import os
from typing import Any, Dict, Optional

from receipt_extractor.errors import ConfigurationError


def _env_flag(name: str, default: str = "false") -> bool:
    """Read a boolean flag; ``1`` and ``true`` (any case) enable it."""
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


def _env_number(name: str, default: str, cast: type, minimum: float, maximum: Optional[float] = None) -> Any:
    """Read a numeric setting and check it lies in ``[minimum, maximum]``."""
    raw = os.getenv(name, default)
    try:
        value = cast(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(name, raw, f"expected {cast.__name__}") from None

    if not math.isfinite(value):
        raise ConfigurationError(name, raw, "must be a finite number")

    if value < minimum or (maximum is not None and value > maximum):
        bounds = f">= {minimum}" if maximum is None else f"between {minimum} and {maximum}"
        raise ConfigurationError(name, raw, f"must be {bounds}")
    return value


class Config:
    """Base configuration with settings common to all environments."""

    DEBUG: bool = False
    TESTING: bool = False

    def __init__(self) -> None:
        """Initialize configuration from the current environment."""
        # Diagnostics
        self.PARSER_DEBUG: bool = _env_flag("PARSER_DEBUG")
        self.PARSER_DEBUG_DIR: str = os.getenv("PARSER_DEBUG_DIR", os.path.join(os.getcwd(), "tmp"))

        # Amount extraction thresholds
        self.KEYWORD_AMOUNT_LIMIT: float = _env_number("KEYWORD_AMOUNT_LIMIT", "10000", float, 0.01)
        self.POSITIONAL_AMOUNT_LIMIT: float = _env_number("POSITIONAL_AMOUNT_LIMIT", "1000", float, 0.01)
        self.POSITIONAL_START_RATIO: float = _env_number("POSITIONAL_START_RATIO", "0.5", float, 0.0, 1.0)

        # Logging and batch settings
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG" if self.DEBUG else "INFO").upper()
        self.BATCH_WORKERS: int = _env_number("BATCH_WORKERS", "4", int, 1)

    def parser_options(self) -> Dict[str, Any]:
        """Keyword arguments for constructing a ReceiptParser from this configuration."""
        return {
            "keyword_amount_limit": self.KEYWORD_AMOUNT_LIMIT,
            "positional_amount_limit": self.POSITIONAL_AMOUNT_LIMIT,
            "positional_start_ratio": self.POSITIONAL_START_RATIO,
            "enable_diagnostics": self.PARSER_DEBUG,
            "debug_dir": self.PARSER_DEBUG_DIR if self.PARSER_DEBUG else None,
        }


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG: bool = True


class UnitTestConfig(Config):  # noqa: D101
    """Testing configuration."""

    TESTING: bool = True
    DEBUG: bool = True


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG: bool = False
    TESTING: bool = False


def get_config() -> Config:
    """Get the appropriate configuration based on environment."""
    env = os.getenv("RECEIPT_EXTRACTOR_ENV", "development").lower()

    configs = {
        "development": DevelopmentConfig,
        "testing": UnitTestConfig,
        "production": ProductionConfig,
    }

    config_class = configs.get(env, DevelopmentConfig)
    return config_class()
