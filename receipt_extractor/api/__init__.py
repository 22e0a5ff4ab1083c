"""Serialization of extraction results."""

from receipt_extractor.api.schemas import ExtractedFieldsSchema, ExtractionResultSchema

__all__ = ["ExtractedFieldsSchema", "ExtractionResultSchema"]
