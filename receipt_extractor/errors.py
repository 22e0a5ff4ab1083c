"""Exception types raised around the extraction pipeline.

The pipeline itself never raises for bad receipt text; these are for the host
layer (configuration loading and reading input files).
"""

from __future__ import annotations


class ReceiptExtractorError(Exception):
    """Base class for receipt extractor errors."""


class ConfigurationError(ReceiptExtractorError, ValueError):
    """Raised when an environment setting is malformed or out of range."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid value for {name}: {value!r} ({reason})")


class ExtractionInputError(ReceiptExtractorError):
    """Raised when receipt text cannot be read from its source."""

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        super().__init__(f"{source}: {message}")
