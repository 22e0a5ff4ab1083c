"""Text canonicalization and line splitting for raw receipt text."""

import re

# Non-breaking space, the U+2000..U+200B space/zero-width range, and tabs
_SPACE_VARIANTS = re.compile("[\u00a0\u2000-\u200b\t]")
_TRAILING_WHITESPACE = re.compile(r"[^\S\n]+$", re.MULTILINE)
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

# Alternate encodings of currency signs mapped to the glyph the amount patterns expect
CURRENCY_GLYPH_VARIANTS: dict[str, str] = {
    "\u20a8": "\u20b9",  # legacy rupee sign
    "\uff04": "$",  # fullwidth dollar
    "\ufe69": "$",  # small dollar
    "\uffe1": "\u00a3",  # fullwidth pound
    "\uffe5": "\u00a5",  # fullwidth yen
}
_CURRENCY_TRANSLATION = str.maketrans(CURRENCY_GLYPH_VARIANTS)


def normalize_text(text: str | None) -> str:
    """Canonicalize whitespace and currency glyphs in raw receipt text.

    Leading whitespace is kept; only trailing whitespace on each line is removed.

    Args:
        text: Raw text from the text-extraction service (may be empty)

    Returns:
        Normalized text, or an empty string for empty input
    """
    if not text:
        return ""

    normalized = _SPACE_VARIANTS.sub(" ", text)
    normalized = _TRAILING_WHITESPACE.sub("", normalized)
    return normalized.translate(_CURRENCY_TRANSLATION)


def split_lines(text: str) -> list[str]:
    """Split normalized text into trimmed, non-empty lines in document order."""
    return [line.strip() for line in _LINE_BREAK.split(text) if line.strip()]
