"""Total amount extraction from receipt lines.

Amounts are found in two phases. The keyword phase looks for a total/due/payable
label and takes the amount from the same line (score 10) or the line right after
it (score 8). Only when that finds nothing does the positional phase scan the
bottom part of the receipt for any money-looking value (score 3). A candidate
replaces the current best only with a strictly higher score, so the first of
equally scored candidates wins.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
import logging
import re

logger = logging.getLogger(__name__)

# Upper bounds (exclusive) for accepted amounts
KEYWORD_AMOUNT_LIMIT = Decimal("10000")
POSITIONAL_AMOUNT_LIMIT = Decimal("1000")
# Fraction of the line count where the positional scan starts
POSITIONAL_START_RATIO = 0.5

TOTAL_KEYWORD_PATTERNS = [
    re.compile(r"(?:grand\s*)?total\s*[:\-]?\s*", re.IGNORECASE),
    re.compile(r"total\s*amount\s*[:\-]?\s*", re.IGNORECASE),
    re.compile(r"amount\s*(?:due|payable)\s*[:\-]?\s*", re.IGNORECASE),
    re.compile(r"balance\s*due\s*[:\-]?\s*", re.IGNORECASE),
    re.compile(r"total\s*due\s*[:\-]?\s*", re.IGNORECASE),
    re.compile(r"paid\s*master\s*card\s*[:\-]?\s*", re.IGNORECASE),
    re.compile(r"net\s*amount\s*[:\-]?\s*", re.IGNORECASE),
    re.compile(r"final\s*amount\s*[:\-]?\s*", re.IGNORECASE),
]

# Lines that are never the source of the total, even when a total keyword appears
EXCLUDED_LINE_PATTERN = re.compile(
    r"sub\s*total|tax\b|tip\b|change\b|discount\b|refund|zip|address|phone|device\s*id",
    re.IGNORECASE,
)

# 1-4 digits or comma-grouped thousands, not cut out of a longer number
_AMOUNT = r"(?<![\d,.])(?:\d{1,3}(?:,\d{3})+|\d{1,4})"

MONEY_PATTERNS = [
    re.compile(rf"\$?\s*({_AMOUNT}\.\d{{2}})\s*$"),  # $3.86 or 3.86 at end of line
    re.compile(rf"({_AMOUNT}\.\d{{2}})(?!\d)\s*\$?"),  # 3.86$ or 3.86
    re.compile(rf"\$\s*({_AMOUNT}(?:\.\d{{2}})?)(?!\d)"),  # $ 3.86
]

_CURRENCY_AND_SPACE = re.compile(r"[\u20b9$\u20ac\u00a3\s]")
_EUROPEAN_DECIMAL = re.compile(r",\d{2}$")


class MatchSource(Enum):
    """Where an amount candidate was found, valued by its score."""

    SAME_LINE_KEYWORD = 10
    NEXT_LINE_KEYWORD = 8
    POSITIONAL = 3


@dataclass(frozen=True)
class MatchCandidate:
    """An accepted amount together with how it was found."""

    value: Decimal
    source: MatchSource
    line_index: int

    @property
    def score(self) -> int:
        return self.source.value

    def beats(self, other: "MatchCandidate | None") -> bool:
        """Whether this candidate should replace ``other`` as the best match."""
        return other is None or self.score > other.score


def normalize_money(value: str | None) -> Decimal | None:
    """Convert a money string to a Decimal, handling US and European separators.

    "1,234.56" and "1.234,56" both become Decimal("1234.56"). Parentheses are dropped,
    not read as a negative sign.

    Args:
        value: Money text as it appears on the receipt

    Returns:
        The amount, or None if the text is not numeric
    """
    if not value:
        return None

    cleaned = _CURRENCY_AND_SPACE.sub("", str(value))
    if _EUROPEAN_DECIMAL.search(cleaned) and "." in cleaned:
        cleaned = cleaned.replace(".", "").replace(",", ".", 1)
    else:
        cleaned = cleaned.replace(",", "")
    cleaned = cleaned.replace("(", "").replace(")", "")

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        return None
    return amount if amount.is_finite() else None


def is_excluded_line(line: str) -> bool:
    """Check whether a line is a subtotal/tax/tip/etc. line that never holds the total."""
    return bool(EXCLUDED_LINE_PATTERN.search(line))


def _find_money(text: str, limit: Decimal) -> Decimal | None:
    """Return the first money value in ``text`` with ``0 < amount < limit``."""
    for pattern in MONEY_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        amount = normalize_money(match.group(1))
        if amount is not None and 0 < amount < limit:
            return amount
    return None


def _find_keyword_candidate(lines: list[str], limit: Decimal) -> MatchCandidate | None:
    best: MatchCandidate | None = None

    for index, raw_line in enumerate(lines):
        line = raw_line.strip()
        if is_excluded_line(line):
            continue

        for keyword in TOTAL_KEYWORD_PATTERNS:
            if not keyword.search(line):
                continue

            after_keyword = keyword.sub("", line, count=1).strip()
            amount = _find_money(after_keyword, limit)
            if amount is not None:
                candidate = MatchCandidate(amount, MatchSource.SAME_LINE_KEYWORD, index)
                if candidate.beats(best):
                    best = candidate

            if index + 1 < len(lines):
                next_line = lines[index + 1].strip()
                if is_excluded_line(next_line):
                    continue
                amount = _find_money(next_line, limit)
                if amount is not None:
                    candidate = MatchCandidate(amount, MatchSource.NEXT_LINE_KEYWORD, index + 1)
                    if candidate.beats(best):
                        best = candidate

    return best


def _find_positional_candidate(lines: list[str], limit: Decimal, start_ratio: float) -> MatchCandidate | None:
    best: MatchCandidate | None = None
    start = int(len(lines) * start_ratio)

    for index in range(start, len(lines)):
        line = lines[index].strip()
        if is_excluded_line(line):
            continue
        amount = _find_money(line, limit)
        if amount is not None:
            candidate = MatchCandidate(amount, MatchSource.POSITIONAL, index)
            if candidate.beats(best):
                best = candidate

    return best


def find_amount_candidate(
    lines: list[str],
    keyword_limit: Decimal = KEYWORD_AMOUNT_LIMIT,
    positional_limit: Decimal = POSITIONAL_AMOUNT_LIMIT,
    positional_start_ratio: float = POSITIONAL_START_RATIO,
) -> MatchCandidate | None:
    """Find the best total-amount candidate in receipt lines.

    Args:
        lines: Trimmed, non-empty receipt lines
        keyword_limit: Exclusive upper bound for keyword-anchored amounts
        positional_limit: Exclusive upper bound for positional-fallback amounts
        positional_start_ratio: Fraction of the line count where the positional scan begins

    Returns:
        The winning MatchCandidate, or None if no plausible amount was found
    """
    best = _find_keyword_candidate(lines, keyword_limit)
    if best is None:
        logger.debug("No keyword-anchored total found, falling back to positional scan")
        best = _find_positional_candidate(lines, positional_limit, positional_start_ratio)

    if best is not None:
        logger.debug(f"Selected total {best.value} ({best.source.name}, line {best.line_index + 1})")
    return best


def extract_amount(
    lines: list[str],
    keyword_limit: Decimal = KEYWORD_AMOUNT_LIMIT,
    positional_limit: Decimal = POSITIONAL_AMOUNT_LIMIT,
    positional_start_ratio: float = POSITIONAL_START_RATIO,
) -> Decimal | None:
    """Extract the receipt total from its lines, or None if nothing plausible is found."""
    candidate = find_amount_candidate(lines, keyword_limit, positional_limit, positional_start_ratio)
    return candidate.value if candidate else None
