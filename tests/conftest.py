"""Pytest configuration and fixtures for the test suite."""

from typing import Generator

import pytest

from receipt_extractor.services.receipt_parser import ReceiptParser

CONFIG_ENV_VARS = (
    "RECEIPT_EXTRACTOR_ENV",
    "PARSER_DEBUG",
    "PARSER_DEBUG_DIR",
    "KEYWORD_AMOUNT_LIMIT",
    "POSITIONAL_AMOUNT_LIMIT",
    "POSITIONAL_START_RATIO",
    "LOG_LEVEL",
    "BATCH_WORKERS",
)

CAFE_RECEIPT = """RECEIPT
Order #4521
Ocean View Cafe
123 Main St
Tel: 555-1234
2021-11-25
Latte\t4.50
Croissant\t3.25
Subtotal: $50.00
Tax: $4.00
Total: $54.00
Thank you!
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[pytest.MonkeyPatch, None, None]:
    """Isolate tests from extractor settings in the developer's environment or .env file."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("RECEIPT_EXTRACTOR_ENV", "testing")
    yield monkeypatch


@pytest.fixture
def parser() -> ReceiptParser:
    """Parser with default thresholds and diagnostics off."""
    return ReceiptParser()


@pytest.fixture
def cafe_receipt() -> str:
    """A small cafe receipt with merchant, date, subtotal, tax and total."""
    return CAFE_RECEIPT
