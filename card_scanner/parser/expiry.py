"""Expiry date (MMYY) extraction from OCR text fragments."""

from datetime import date
from typing import Callable, Optional, Sequence

from ..core.constants import (
    CARD_DATE_LENGTH,
    CENTURY_WINDOW,
    DATE_EXCLUSION_YEARS,
)
from ..utils.log import LoggerMixin
from .normalize import is_digits, normalize
from .regexes import (
    clean_expiry_text,
    find_anchored_four_digits,
    find_date,
    has_expiry_keyword,
)


def resolve_century(two_digit_year: int, current_year: int) -> int:
    """
    Map a two-digit year onto a calendar year.

    Years up to twenty past the current one stay in the current century,
    later ones fall back to the previous century.

    Examples:
        >>> resolve_century(29, 2025)
        2029
        >>> resolve_century(60, 2025)
        1960
    """
    current_century = current_year - (current_year % 100)
    if two_digit_year <= (current_year % 100) + CENTURY_WINDOW:
        return current_century + two_digit_year
    return current_century - 100 + two_digit_year


def is_valid_month(month: Optional[int]) -> bool:
    return month is not None and 1 <= month <= 12


def is_valid_year(year: Optional[int]) -> bool:
    return year is not None and 0 <= year <= 99


def split_mmyy(token: str):
    """Split an MMYY token into (month, year) ints, or (None, None)."""
    if len(token) != CARD_DATE_LENGTH or not is_digits(token):
        return None, None
    return int(token[:2]), int(token[2:])


def is_valid_mmyy(token: str) -> bool:
    month, year = split_mmyy(token)
    return is_valid_month(month) and is_valid_year(year)


def is_date_shaped(token: str) -> bool:
    """
    True if a 4-digit run looks like an expiry rather than card digits.

    Stricter than is_valid_mmyy: the year half must fall in 20-50.
    """
    month, year = split_mmyy(token)
    low, high = DATE_EXCLUSION_YEARS
    return is_valid_month(month) and year is not None and low <= year <= high


class ExpiryDateExtractor(LoggerMixin):
    """Finds the card expiry in a frame's fragments."""

    def __init__(self, today: Callable[[], date] = date.today):
        self._today = today

    @property
    def current_year(self) -> int:
        return self._today().year

    def extract(self, fragments: Sequence[str]) -> str:
        """
        Return the best-guess MMYY expiry, or "" when none is found.

        Keyword-anchored text ("VALID THRU 11/29", "DATE1129") is searched
        first; otherwise the first bare 4-digit fragment that reads as a
        month and year wins.
        """
        try:
            expiry = self._find_anchored(fragments)
            if expiry:
                self.logger.debug("Anchored expiry found", expiry=expiry)
                return expiry

            expiry = self._find_positional(fragments)
            if expiry:
                self.logger.debug("Positional expiry found", expiry=expiry)
            return expiry

        except Exception as e:
            self.logger.error("Expiry extraction failed", error=str(e))
            return ""

    def _find_anchored(self, fragments: Sequence[str]) -> str:
        for fragment in fragments:
            cleaned = clean_expiry_text(fragment)
            if not has_expiry_keyword(cleaned):
                continue

            date_match = find_date(cleaned)
            if date_match:
                mmyy = self._format_mmyy(date_match.month, date_match.year)
                if is_valid_mmyy(mmyy):
                    return mmyy

            four_digits = find_anchored_four_digits(cleaned)
            if four_digits and is_valid_mmyy(four_digits):
                return four_digits

        return ""

    def _find_positional(self, fragments: Sequence[str]) -> str:
        for fragment in fragments:
            stripped = fragment.strip()
            # All look-alike letters ("IOIZ") is a word, not a date
            if not any(ch.isdigit() for ch in stripped):
                continue
            candidate = normalize(stripped)
            if is_valid_mmyy(candidate):
                return candidate
        return ""

    def _format_mmyy(self, month: str, year: str) -> str:
        """Zero-pad the month and reduce the year to two digits."""
        month = month.zfill(2)
        if len(year) == 2:
            year = str(resolve_century(int(year), self.current_year))
        return month + year[-2:]
