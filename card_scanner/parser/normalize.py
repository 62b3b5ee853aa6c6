"""Repair common OCR character confusions in card text."""

from typing import Dict

# Letters OCR engines commonly return in place of embossed digits.
# Only letter -> digit substitutions, so normalizing twice changes nothing.
MISSPELL_TABLE: Dict[str, str] = {
    "O": "0",
    "o": "0",
    "Q": "0",
    "D": "0",
    "I": "1",
    "i": "1",
    "l": "1",
    "|": "1",
    "Z": "2",
    "z": "2",
    "S": "5",
    "s": "5",
    "G": "6",
    "b": "6",
    "T": "7",
    "B": "8",
    "g": "9",
    "q": "9",
}

_TRANSLATION = str.maketrans(MISSPELL_TABLE)


def normalize(text: str) -> str:
    """
    Replace look-alike characters with the digits they were probably meant to be.

    The result always has the same length as the input; whitespace and
    delimiters are kept so later passes can still see digit grouping.

    Examples:
        >>> normalize("4lll 1O11")
        '4111 1011'
        >>> normalize("S2B0")
        '5280'
    """
    if not text:
        return ""
    return text.translate(_TRANSLATION)


def is_digits(text: str) -> bool:
    """True if text is non-empty and made only of ASCII digits."""
    return bool(text) and text.isascii() and text.isdigit()
