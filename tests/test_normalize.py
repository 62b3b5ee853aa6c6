"""Tests for OCR misspell normalization."""

import pytest

from card_scanner.parser.normalize import MISSPELL_TABLE, is_digits, normalize


class TestNormalize:
    """Test letter/digit look-alike repair."""

    def test_common_confusions(self):
        """Test that look-alike letters become digits."""
        test_cases = [
            ("4lll", "4111"),
            ("O000", "0000"),
            ("5S55", "5555"),
            ("B8B8", "8888"),
            ("I234", "1234"),
            ("Z0Z0", "2020"),
            ("4|11", "4111"),
        ]

        for input_text, expected in test_cases:
            assert normalize(input_text) == expected, f"Failed for {input_text}"

    def test_preserves_length(self):
        """Test that normalization never changes the string length."""
        for text in ["4111 1111 1111 1111", "VALID THRU 11/29", "", "CVC 123", "x\ny"]:
            assert len(normalize(text)) == len(text)

    def test_keeps_delimiters(self):
        assert normalize("4lll-llll 1111") == "4111-1111 1111"

    def test_idempotent(self):
        """Test that normalizing twice is the same as normalizing once."""
        samples = [
            "4lll 1O11",
            "VALID THRU 11/29",
            "".join(MISSPELL_TABLE),
            "BOSS GOOD THRU",
            "0123456789",
        ]
        for text in samples:
            once = normalize(text)
            assert normalize(once) == once

    def test_table_maps_only_to_digits(self):
        assert all(value.isdigit() for value in MISSPELL_TABLE.values())
        assert not any(key.isdigit() for key in MISSPELL_TABLE)

    def test_empty_input(self):
        assert normalize("") == ""


class TestIsDigits:

    @pytest.mark.parametrize("text,expected", [
        ("4111", True),
        ("", False),
        ("41 11", False),
        ("41a1", False),
        ("٤١١١", False),
    ])
    def test_is_digits(self, text, expected):
        assert is_digits(text) is expected


if __name__ == "__main__":
    pytest.main([__file__])
