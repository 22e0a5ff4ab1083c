"""Tests for confidence scoring."""

from datetime import datetime
from decimal import Decimal

import pytest

from receipt_extractor.services.confidence import calculate_confidence_score

DATE = datetime(2021, 11, 25)


@pytest.mark.parametrize(
    "merchant,amount,purchased_at,expected",
    [
        (None, None, None, 0.0),
        ("Cafe", None, None, 0.3),
        (None, Decimal("5.00"), None, 0.4),
        (None, None, DATE, 0.3),
        ("Cafe", Decimal("5.00"), None, 0.7),
        ("Cafe", None, DATE, 0.6),
        (None, Decimal("5.00"), DATE, 0.7),
        ("Cafe", Decimal("5.00"), DATE, 1.0),
    ],
)
def test_score_is_sum_of_present_field_weights(merchant, amount, purchased_at, expected) -> None:
    assert calculate_confidence_score(merchant, amount, purchased_at) == expected


def test_non_positive_amount_earns_no_credit() -> None:
    assert calculate_confidence_score(None, Decimal("0"), None) == 0.0


def test_empty_merchant_earns_no_credit() -> None:
    assert calculate_confidence_score("", None, DATE) == 0.3
