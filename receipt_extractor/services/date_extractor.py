"""Purchase date extraction from receipt lines."""

from datetime import datetime
import logging
import re

logger = logging.getLogger(__name__)

# Accepted purchase years lie strictly between these bounds
MIN_YEAR = 1990
MAX_YEAR = 2030

_MONTH_NAME = re.compile(
    r"(\d{1,2})\s+(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\s+(\d{4})",
    re.IGNORECASE,
)
_ISO_DATE = re.compile(r"(\d{4})[/-](\d{1,2})[/-](\d{1,2})")
_NUMERIC_DATE = re.compile(r"(\d{1,2})[/-](\d{1,2})[/-](\d{2,4})")
_LABELED_DATE = re.compile(
    r"(?:date|bill date|invoice date)[:\s]+(\d{1,2}[/\-.]\d{1,2}[/\-.]\d{2,4})",
    re.IGNORECASE,
)

# Month-first formats are tried before day-first ones, so "03/04/2021" reads as March 4th.
# Day/month order is not inferred from locale.
_NUMERIC_FORMATS = ["%m/%d/%Y", "%d/%m/%Y", "%m/%d/%y", "%d/%m/%y"]


def _month_name_date(match: re.Match[str]) -> str:
    day, month, year = match.groups()
    return f"{int(day):02d} {month.title()} {year}"


def _iso_date(match: re.Match[str]) -> str:
    year, month, day = match.groups()
    return f"{year}-{int(month):02d}-{int(day):02d}"


def _numeric_date(match: re.Match[str]) -> str:
    return "/".join(match.groups())


def _labeled_date(match: re.Match[str]) -> str:
    return re.sub(r"[-.]", "/", match.group(1))


# (pattern, assembles the matched groups into a date string, strptime formats to try)
DATE_PATTERNS = [
    (_MONTH_NAME, _month_name_date, ["%d %b %Y"]),
    (_ISO_DATE, _iso_date, ["%Y-%m-%d"]),
    (_NUMERIC_DATE, _numeric_date, _NUMERIC_FORMATS),
    (_LABELED_DATE, _labeled_date, _NUMERIC_FORMATS),
]


def _parse_date_string(date_str: str, formats: list[str]) -> datetime | None:
    """Parse ``date_str`` with the first format that yields a real calendar date."""
    for fmt in formats:
        try:
            return datetime.strptime(date_str, fmt)
        except ValueError:
            continue
    return None


def is_plausible_purchase_date(value: datetime) -> bool:
    """Check the year lies within the accepted purchase window."""
    return MIN_YEAR < value.year < MAX_YEAR


def extract_date(lines: list[str]) -> datetime | None:
    """Extract the purchase date from receipt lines.

    Each line is tested against the pattern families in order. A match that is not a real
    calendar date falls through to the next family; a real date outside the year window
    ends the scan of that line. The first accepted date in line order wins.

    Args:
        lines: Trimmed, non-empty receipt lines

    Returns:
        Parsed date (midnight, no timezone) or None
    """
    for line in lines:
        for pattern, assemble, formats in DATE_PATTERNS:
            match = pattern.search(line)
            if not match:
                continue

            date_str = assemble(match)
            parsed = _parse_date_string(date_str, formats)
            if parsed is None:
                logger.debug(f"Rejected date candidate '{date_str}' from line: {line}")
                continue

            if is_plausible_purchase_date(parsed):
                return parsed
            logger.debug(f"Date {parsed.date()} outside {MIN_YEAR}-{MAX_YEAR} window, skipping")
            break

    return None
