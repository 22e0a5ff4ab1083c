"""Tests for extraction result schemas."""

from datetime import datetime
from decimal import Decimal

from receipt_extractor.api.schemas import ExtractedFieldsSchema, ExtractionResultSchema
from receipt_extractor.services.receipt_parser import ExtractedFields


class TestExtractedFieldsSchema:
    """Tests for ExtractedFieldsSchema."""

    def test_dump_full_result(self) -> None:
        fields = ExtractedFields("Ocean View Cafe", Decimal("54.00"), datetime(2021, 11, 25), 1.0)

        data = ExtractedFieldsSchema().dump(fields)

        assert data == {
            "merchant_name": "Ocean View Cafe",
            "total_amount": "54.00",
            "purchased_at": "2021-11-25T00:00:00",
            "confidence_score": 1.0,
        }

    def test_canonical_field_order(self) -> None:
        data = ExtractedFieldsSchema().dump(ExtractedFields())

        assert list(data) == ["merchant_name", "total_amount", "purchased_at", "confidence_score"]

    def test_absent_fields_dump_as_none(self) -> None:
        data = ExtractedFieldsSchema().dump(ExtractedFields())

        assert data["merchant_name"] is None
        assert data["total_amount"] is None
        assert data["purchased_at"] is None
        assert data["confidence_score"] == 0.0

    def test_amount_rendered_with_two_places(self) -> None:
        data = ExtractedFieldsSchema().dump(ExtractedFields(total_amount=Decimal("40")))

        assert data["total_amount"] == "40.00"


class TestExtractionResultSchema:
    """Tests for ExtractionResultSchema."""

    def test_source_follows_fields(self) -> None:
        payload = {**ExtractedFields(merchant_name="Harbor Shop", confidence_score=0.3).to_dict(), "source": "a.txt"}

        data = ExtractionResultSchema().dump(payload)

        assert list(data) == ["merchant_name", "total_amount", "purchased_at", "confidence_score", "source"]
        assert data["merchant_name"] == "Harbor Shop"
        assert data["source"] == "a.txt"
