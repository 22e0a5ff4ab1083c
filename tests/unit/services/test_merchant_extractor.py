"""Tests for merchant name extraction."""

from receipt_extractor.services.merchant_extractor import MAX_MERCHANT_LENGTH, extract_merchant


class TestExtractMerchant:
    """Tests for extract_merchant."""

    def test_skips_noise_lines_before_business_name(self) -> None:
        lines = ["RECEIPT", "Order #4521", "Ocean View Cafe", "123 Main St", "Tel: 555-1234", "2021-11-25"]
        assert extract_merchant(lines) == "Ocean View Cafe"

    def test_short_business_word_line_accepted(self) -> None:
        assert extract_merchant(["Joe's Cafe"]) == "Joe's Cafe"
        assert extract_merchant(["ABC Ltd"]) == "ABC Ltd"

    def test_long_line_without_business_word_accepted(self) -> None:
        assert extract_merchant(["Golden Dragon Noodles"]) == "Golden Dragon Noodles"

    def test_short_line_without_business_word_skipped(self) -> None:
        assert extract_merchant(["Hi there", "Blue Bottle Coffee"]) == "Blue Bottle Coffee"

    def test_numeric_lines_skipped(self) -> None:
        assert extract_merchant(["12345678901", "4521 778 12", "Sunrise Bakery"]) == "Sunrise Bakery"

    def test_requires_a_letter(self) -> None:
        assert extract_merchant(["#### ---- ####"]) is None

    def test_very_short_lines_skipped(self) -> None:
        assert extract_merchant(["AB", "Mart"]) == "Mart"

    def test_only_first_six_lines_scanned(self) -> None:
        lines = ["Receipt", "Invoice", "Order 1", "Table 4", "Guest 2", "Cashier: Amy", "Lakeside Restaurant"]
        assert extract_merchant(lines) is None

    def test_url_and_contact_lines_are_noise(self) -> None:
        lines = ["www.example.com", "http://shop.example", "GST: 29ABCDE", "Harbor Shop"]
        assert extract_merchant(lines) == "Harbor Shop"

    def test_truncated_to_max_length(self) -> None:
        name = "Very Long Restaurant Name " * 10
        result = extract_merchant([name.strip()])
        assert result is not None
        assert len(result) == MAX_MERCHANT_LENGTH == 120

    def test_empty(self) -> None:
        assert extract_merchant([]) is None
