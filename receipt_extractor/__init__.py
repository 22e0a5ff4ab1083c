import logging

from dotenv import load_dotenv

from receipt_extractor.services.receipt_parser import ExtractedFields, ReceiptParser, extract

# Load environment variables from .env file
load_dotenv()

# Initialize logger
logger = logging.getLogger(__name__)

__all__ = ["ExtractedFields", "ReceiptParser", "extract"]
