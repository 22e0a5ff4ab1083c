"""Receipt parser for extracting structured fields from receipt text.

This module provides the ReceiptParser class that runs the full extraction pipeline:
normalize the text, split it into lines, extract the date, total and merchant, and score
the result. It has no dependencies on storage or transport, and keeps no state between
calls, so a single parser can be shared across threads.
"""

from collections.abc import Callable
from dataclasses import asdict, dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
import logging
import os
from typing import Any

from receipt_extractor.services.amount_extractor import (
    KEYWORD_AMOUNT_LIMIT,
    POSITIONAL_AMOUNT_LIMIT,
    POSITIONAL_START_RATIO,
    MatchCandidate,
    find_amount_candidate,
)
from receipt_extractor.services.confidence import calculate_confidence_score
from receipt_extractor.services.date_extractor import extract_date
from receipt_extractor.services.merchant_extractor import extract_merchant
from receipt_extractor.services.text_normalizer import normalize_text, split_lines

logger = logging.getLogger(__name__)

DiagnosticSink = Callable[[str], Any]


def _amount_limit(name: str, value: Any) -> Decimal:
    """Convert an amount bound to Decimal, rejecting non-finite and non-positive values."""
    try:
        limit = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"{name} must be a number, got {value!r}") from None
    if not limit.is_finite() or limit <= 0:
        raise ValueError(f"{name} must be a positive finite number, got {value!r}")
    return limit


@dataclass(frozen=True)
class ExtractedFields:
    """Structured data extracted from a receipt."""

    merchant_name: str | None = None
    total_amount: Decimal | None = None
    purchased_at: datetime | None = None
    confidence_score: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Fields in canonical order: merchant_name, total_amount, purchased_at, confidence_score."""
        return asdict(self)


class ReceiptParser:
    """Extracts merchant, total and purchase date from raw receipt text."""

    def __init__(
        self,
        keyword_amount_limit: Decimal | float = KEYWORD_AMOUNT_LIMIT,
        positional_amount_limit: Decimal | float = POSITIONAL_AMOUNT_LIMIT,
        positional_start_ratio: float = POSITIONAL_START_RATIO,
        enable_diagnostics: bool = False,
        diagnostic_sink: DiagnosticSink | None = None,
        debug_dir: str | None = None,
    ) -> None:
        """Initialize the parser.

        Args:
            keyword_amount_limit: Exclusive upper bound for keyword-anchored totals
            positional_amount_limit: Exclusive upper bound for positional-fallback totals
            positional_start_ratio: Fraction of the line count where the positional scan begins
            enable_diagnostics: Emit lines and per-field results to the diagnostic sink
            diagnostic_sink: Callable receiving one diagnostic message at a time
                (defaults to this module's debug logger)
            debug_dir: When diagnostics are enabled, directory the normalized text is written to
        """
        if not 0 <= positional_start_ratio <= 1:
            raise ValueError(f"positional_start_ratio must be between 0 and 1, got {positional_start_ratio}")

        self.keyword_amount_limit = _amount_limit("keyword_amount_limit", keyword_amount_limit)
        self.positional_amount_limit = _amount_limit("positional_amount_limit", positional_amount_limit)
        self.positional_start_ratio = positional_start_ratio
        self.enable_diagnostics = enable_diagnostics
        self.diagnostic_sink: DiagnosticSink = diagnostic_sink or logger.debug
        self.debug_dir = debug_dir

    @classmethod
    def from_config(cls, config: Any, diagnostic_sink: DiagnosticSink | None = None) -> "ReceiptParser":
        """Create a parser from a Config object."""
        return cls(diagnostic_sink=diagnostic_sink, **config.parser_options())

    def parse(self, raw_text: str, document_id: str | None = None) -> ExtractedFields:
        """Parse receipt fields from extracted text.

        Missing fields are returned as None; malformed text never raises.

        Args:
            raw_text: Raw text extracted from the receipt document
            document_id: Optional identifier used to name the debug text file

        Returns:
            ExtractedFields with the recovered fields and their confidence score

        Raises:
            TypeError: If raw_text is not a string
        """
        if not isinstance(raw_text, str):
            raise TypeError(f"raw_text must be a str, not {type(raw_text).__name__}")

        normalized = normalize_text(raw_text)
        lines = split_lines(normalized)

        if self.enable_diagnostics:
            self._emit_lines(lines)
            if self.debug_dir:
                self._write_debug_text(normalized, document_id)

        candidate = None
        if lines:
            purchased_at = extract_date(lines)
            candidate = find_amount_candidate(
                lines,
                keyword_limit=self.keyword_amount_limit,
                positional_limit=self.positional_amount_limit,
                positional_start_ratio=self.positional_start_ratio,
            )
            total_amount = candidate.value if candidate else None
            merchant_name = extract_merchant(lines)

            fields = ExtractedFields(
                merchant_name=merchant_name,
                total_amount=total_amount,
                purchased_at=purchased_at,
                confidence_score=calculate_confidence_score(merchant_name, total_amount, purchased_at),
            )
        else:
            logger.debug("No lines found in receipt text - returning empty result")
            fields = ExtractedFields()

        if self.enable_diagnostics:
            self._emit_results(fields, candidate)

        return fields

    def _emit(self, message: str) -> None:
        self.diagnostic_sink(message)

    def _emit_lines(self, lines: list[str]) -> None:
        self._emit("=" * 60)
        self._emit(f"Total lines found: {len(lines)}")
        for i, line in enumerate(lines, 1):
            self._emit(f"  Line {i}: {line}")
        self._emit("=" * 60)

    def _emit_results(self, fields: ExtractedFields, candidate: MatchCandidate | None) -> None:
        source = candidate.source.name if candidate else None
        self._emit("Parsed results:")
        self._emit(f"  Date: {fields.purchased_at}")
        self._emit(f"  Amount: {fields.total_amount} (source: {source})")
        self._emit(f"  Merchant: {fields.merchant_name}")
        self._emit(f"  Confidence: {fields.confidence_score}")
        self._emit("=" * 60)

    def _write_debug_text(self, text: str, document_id: str | None) -> None:
        """Persist normalized text for inspection; failures are logged, not raised."""
        name = f"extracted-{document_id or datetime.now().strftime('%Y%m%d%H%M%S%f')}.txt"
        path = os.path.join(self.debug_dir or "", name)
        try:
            os.makedirs(self.debug_dir or ".", exist_ok=True)
            with open(path, "w", encoding="utf-8") as handle:
                handle.write(text)
            logger.debug(f"Wrote normalized receipt text to {path}")
        except OSError as e:
            logger.warning(f"Could not write debug text to {path}: {e}")


def extract(raw_text: str, **options: Any) -> ExtractedFields:
    """Extract receipt fields from raw text with a parser built from ``options``."""
    return ReceiptParser(**options).parse(raw_text)
