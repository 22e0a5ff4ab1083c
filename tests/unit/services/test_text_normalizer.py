"""Tests for text normalization and line splitting."""

from receipt_extractor.services.text_normalizer import normalize_text, split_lines


class TestNormalizeText:
    """Tests for normalize_text."""

    def test_empty_returns_empty(self) -> None:
        assert normalize_text("") == ""
        assert normalize_text(None) == ""

    def test_non_breaking_and_zero_width_spaces(self) -> None:
        text = "Total:\u00a0$5.00\u2009end\u200b!"
        assert normalize_text(text) == "Total: $5.00 end !"

    def test_tabs_become_spaces(self) -> None:
        assert normalize_text("Latte\t4.50") == "Latte 4.50"

    def test_trailing_whitespace_stripped_leading_kept(self) -> None:
        assert normalize_text("  Cafe   \n  Total: 5.00\t\t") == "  Cafe\n  Total: 5.00"

    def test_rupee_glyph_variant_canonicalized(self) -> None:
        assert normalize_text("Total \u20a8 250.00") == "Total \u20b9 250.00"

    def test_fullwidth_dollar_canonicalized(self) -> None:
        assert normalize_text("Total \uff0412.00") == "Total $12.00"


class TestSplitLines:
    """Tests for split_lines."""

    def test_splits_trims_and_drops_blank_lines(self) -> None:
        assert split_lines("  Cafe  \n\n   \nTotal: 5.00\n") == ["Cafe", "Total: 5.00"]

    def test_handles_crlf_and_cr(self) -> None:
        assert split_lines("one\r\ntwo\rthree\nfour") == ["one", "two", "three", "four"]

    def test_empty_text(self) -> None:
        assert split_lines("") == []

    def test_no_empty_elements_after_normalization(self) -> None:
        lines = split_lines(normalize_text("\u00a0\u00a0\n\t\nStore\u200b\n"))
        assert lines == ["Store"]
        assert all(line.strip() for line in lines)
