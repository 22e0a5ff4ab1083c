"""Serialization schemas for extraction results."""

from marshmallow import Schema, fields


class ExtractedFieldsSchema(Schema):
    class Meta:
        ordered = True

    merchant_name = fields.Str(allow_none=True)
    total_amount = fields.Decimal(places=2, as_string=True, allow_none=True)
    purchased_at = fields.DateTime(format="iso", allow_none=True)
    confidence_score = fields.Float()


class ExtractionResultSchema(ExtractedFieldsSchema):
    """Extraction result tagged with the document it came from."""

    source = fields.Str()


extraction_result_schema = ExtractionResultSchema()
