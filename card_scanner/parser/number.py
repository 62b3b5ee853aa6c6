"""Card number extraction from OCR text fragments."""

import re
from typing import Callable, List, Optional, Sequence, Tuple

from ..core.constants import PHONE_KEYWORDS, PHONE_PREFIXES
from ..utils.log import LoggerMixin, mask_card_number
from .expiry import ExpiryDateExtractor, is_date_shaped
from .network import is_valid_card_number, is_valid_length
from .normalize import is_digits, normalize
from .regexes import (
    DigitRun,
    collapse_cvc,
    iter_delimited_groups,
    raw_token_pattern,
    remove_anchored_dates,
    resolved_date_pattern,
    scan_four_digit_runs,
)

_PHONE_KEYWORD_PATTERN = re.compile("|".join(PHONE_KEYWORDS), re.IGNORECASE)

Strategy = Callable[[Sequence[str]], Optional[str]]


def trim_fragments(fragments: Sequence[str], expiry: str = "") -> List[str]:
    """
    Cut date and security-code text out of the fragments.

    The resolved expiry (as M/YY, MM-YY or MM/YYYY), keyword-anchored dates
    and CVC digits are removed so they cannot be read back as card digits.
    The raw MMYY token is only removed when it is date-shaped. Fragments
    left empty are dropped.
    """
    patterns = []
    if expiry:
        patterns.append(resolved_date_pattern(expiry))
        if is_date_shaped(expiry):
            patterns.append(raw_token_pattern(expiry))

    trimmed = []
    for fragment in fragments:
        text = remove_anchored_dates(fragment)
        for pattern in patterns:
            text = pattern.sub(" ", text)
        text = collapse_cvc(text)
        if text.strip():
            trimmed.append(text)
    return trimmed


def contiguous_digits(fragments: Sequence[str]) -> Optional[str]:
    """A fragment that is itself a whole card number, e.g. "4111111111111111"."""
    for fragment in fragments:
        candidate = normalize(fragment.strip())
        if is_valid_length(candidate) and is_digits(candidate):
            if is_valid_card_number(candidate):
                return candidate
    return None


def delimited_groups(fragments: Sequence[str]) -> Optional[str]:
    """A number printed in hyphen or space separated groups, e.g. "3782 822463 10005"."""
    for fragment in fragments:
        for match in iter_delimited_groups(fragment):
            candidate = normalize(match.digits)
            if is_valid_length(candidate) and is_valid_card_number(candidate):
                return candidate
    return None


def is_phone_shaped(run: DigitRun) -> bool:
    """Telephone numbers on card backs often start 15xx/16xx next to a hyphen or TEL label."""
    if not run.value.startswith(PHONE_PREFIXES):
        return False
    return "-" in run.line or bool(_PHONE_KEYWORD_PATTERN.search(run.line))


def collect_card_runs(fragments: Sequence[str]) -> List[str]:
    """Unique 4-digit runs that are neither date-shaped nor phone-shaped."""
    values = []
    for run in scan_four_digit_runs(fragments):
        if is_date_shaped(run.value) or is_phone_shaped(run):
            continue
        if run.value not in values:
            values.append(run.value)
    return values


def multi_fragment_assembly(fragments: Sequence[str]) -> Optional[str]:
    """A number split over several fragments or lines as 4-digit groups."""
    values = collect_card_runs(fragments)
    # Three groups make 12 digits, short of the minimum length
    if len(values) != 4:
        return None

    candidate = "".join(values)
    if is_valid_length(candidate) and is_valid_card_number(candidate):
        return candidate
    return None


# Tried in order; the first hit wins
STRATEGIES: Tuple[Tuple[str, Strategy], ...] = (
    ("contiguous", contiguous_digits),
    ("delimited", delimited_groups),
    ("multi_fragment", multi_fragment_assembly),
)


class CardNumberExtractor(LoggerMixin):
    """Recovers the card number from a frame's fragments."""

    def __init__(self, expiry_extractor: Optional[ExpiryDateExtractor] = None):
        self.expiry_extractor = expiry_extractor or ExpiryDateExtractor()
        self.strategies = STRATEGIES

    def extract(self, fragments: Sequence[str], expiry: Optional[str] = None) -> str:
        """
        Return the best-guess card number, or "" when no strategy succeeds.

        Args:
            fragments: OCR text fragments of one frame
            expiry: Expiry already found for this frame; computed if None
        """
        try:
            if expiry is None:
                expiry = self.expiry_extractor.extract(fragments)

            working = trim_fragments(fragments, expiry)
            if not working:
                return ""

            for name, strategy in self.strategies:
                number = strategy(working)
                if number:
                    self.logger.debug(
                        "Card number strategy matched",
                        strategy=name,
                        number=mask_card_number(number),
                    )
                    return number

            self.logger.debug("No card number found", fragments=len(working))
            return ""

        except Exception as e:
            self.logger.error("Card number extraction failed", error=str(e))
            return ""
