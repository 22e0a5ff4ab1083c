"""Confidence scoring for extracted receipt fields."""

from datetime import datetime
from decimal import Decimal

MERCHANT_WEIGHT = 0.3
AMOUNT_WEIGHT = 0.4
DATE_WEIGHT = 0.3


def calculate_confidence_score(
    merchant_name: str | None,
    total_amount: Decimal | None,
    purchased_at: datetime | None,
) -> float:
    """Score how much of the receipt was recovered.

    Each field adds its weight when present (the amount only when positive). The weights
    sum to 1.0, so the score stays within [0.0, 1.0].

    Returns:
        Confidence score rounded to two decimals
    """
    score = 0.0
    if merchant_name:
        score += MERCHANT_WEIGHT
    if total_amount is not None and total_amount > 0:
        score += AMOUNT_WEIGHT
    if purchased_at is not None:
        score += DATE_WEIGHT
    return round(score, 2)
