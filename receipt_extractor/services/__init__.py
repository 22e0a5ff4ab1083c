"""Extraction services: text normalization, field extractors, scoring and the parser."""

from receipt_extractor.services.amount_extractor import (
    MatchCandidate,
    MatchSource,
    extract_amount,
    find_amount_candidate,
    normalize_money,
)
from receipt_extractor.services.batch import extract_many
from receipt_extractor.services.confidence import calculate_confidence_score
from receipt_extractor.services.date_extractor import extract_date
from receipt_extractor.services.merchant_extractor import extract_merchant
from receipt_extractor.services.receipt_parser import ExtractedFields, ReceiptParser, extract
from receipt_extractor.services.text_normalizer import normalize_text, split_lines

__all__ = [
    "ExtractedFields",
    "MatchCandidate",
    "MatchSource",
    "ReceiptParser",
    "calculate_confidence_score",
    "extract",
    "extract_amount",
    "extract_date",
    "extract_many",
    "extract_merchant",
    "find_amount_candidate",
    "normalize_money",
    "normalize_text",
    "split_lines",
]
