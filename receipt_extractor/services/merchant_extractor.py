"""Merchant name extraction from the header of a receipt."""

import logging
import re

logger = logging.getLogger(__name__)

# The business name is expected within the first few lines
MERCHANT_SCAN_LINES = 6
MAX_MERCHANT_LENGTH = 120
MIN_MERCHANT_LENGTH = 3
# Lines longer than this are accepted even without a business word
MEANINGFUL_LINE_LENGTH = 8

NOISE_PATTERN = re.compile(
    r"(receipt|invoice|order|transaction|guest|table|address|tel|phone|tax id|gst|vat|www\.|http|bill|date|time"
    r"|device|cashier)",
    re.IGNORECASE,
)
BUSINESS_WORDS_PATTERN = re.compile(
    r"(restaurant|cafe|store|shop|mart|mall|hotel|pvt|ltd|inc|corp|company|park|pier)",
    re.IGNORECASE,
)
_PURE_NUMBER = re.compile(r"^\d+$")
_NUMBER_SEQUENCE = re.compile(r"^\d+\s+\d+")
_HAS_LETTER = re.compile(r"[A-Za-z]")


def _is_noise_line(line: str) -> bool:
    if len(line) < MIN_MERCHANT_LENGTH:
        return True
    if NOISE_PATTERN.search(line):
        return True
    return bool(_PURE_NUMBER.match(line) or _NUMBER_SEQUENCE.match(line))


def extract_merchant(lines: list[str]) -> str | None:
    """Extract the merchant name from the first lines of a receipt.

    The first non-noise line wins if it contains a business word (cafe, store, ltd, ...)
    or is long enough to be meaningful, and has at least one letter.

    Args:
        lines: Trimmed, non-empty receipt lines

    Returns:
        Merchant name truncated to 120 characters, or None
    """
    for line in lines[:MERCHANT_SCAN_LINES]:
        line = line.strip()
        if _is_noise_line(line):
            continue

        looks_like_business = BUSINESS_WORDS_PATTERN.search(line) or len(line) > MEANINGFUL_LINE_LENGTH
        if looks_like_business and _HAS_LETTER.search(line):
            return line[:MAX_MERCHANT_LENGTH]

    logger.debug(f"No merchant name found in first {MERCHANT_SCAN_LINES} lines")
    return None
