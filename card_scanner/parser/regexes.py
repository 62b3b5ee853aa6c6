"""Regex patterns and scanning passes for payment card text."""

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..core.constants import CVC_MARKER, EXPIRY_KEYWORDS
from .normalize import MISSPELL_TABLE, normalize

# Suffixed and run-together spellings of the expiry keywords, longest first
_KEYWORD_FORMS = (
    "EXPIRATION", "EXPIRES", "EXPIRY", "EXPIRE", "EXPDATE", "VALIDTHRU",
) + EXPIRY_KEYWORDS

# A whole expiry keyword; digits may follow directly ("DATE1129") but letters
# may not ("EXPRESS", "UPDATE", "VALIDATION")
_KEYWORD = rf'(?<![A-Z])(?:{"|".join(_KEYWORD_FORMS)})(?![A-Z])'

EXPIRY_KEYWORD_PATTERN = re.compile(_KEYWORD, re.IGNORECASE)

# MM/YY, MM-YY, M/YYYY ... on case-folded, cleaned text
DATE_PATTERN = re.compile(r'(\d{1,2})[/\-](\d{2,4})')

# Expiry keyword followed later by exactly four digits, e.g. "DATE1129CVC421"
ANCHORED_FOUR_DIGIT_PATTERN = re.compile(
    rf'{_KEYWORD}.*?(?<!\d)(\d{{4}})(?!\d)'
)

# Keyword-anchored date, used to cut expiry text out of card number candidates
ANCHORED_DATE_PATTERN = re.compile(
    rf'{_KEYWORD}(?:[\s.:]+{_KEYWORD})*[\s.:]*'
    r'(?:(?P<month>\d{1,2})\s*[/\-]\s*\d{2,4}|(?P<mmyy>\d{4}))(?!\d)',
    re.IGNORECASE,
)

# Security code label followed by its digits
CVC_PATTERN = re.compile(r'CV[CV]2?\s*[:#.]?\s*\d{3,4}(?!\d)', re.IGNORECASE)

# Anything that is not an expiry-relevant character after case folding
EXPIRY_NOISE_PATTERN = re.compile(r'[^A-Z0-9/\-\s]')

# Digits or their OCR look-alikes
_DIGIT_LIKE = "0-9" + re.escape("".join(MISSPELL_TABLE))


def _groups_pattern(*widths: int) -> "re.Pattern[str]":
    groups = [rf"([{_DIGIT_LIKE}]{{{width}}})" for width in widths]
    return re.compile(r"[-\s]".join(groups))


# Digit groups separated by a hyphen or whitespace, most specific first
DELIMITED_GROUP_PATTERNS: Tuple[Tuple[str, "re.Pattern[str]"], ...] = (
    ("4-4-4-4", _groups_pattern(4, 4, 4, 4)),
    ("4-6-5", _groups_pattern(4, 6, 5)),
    ("4-4-4", _groups_pattern(4, 4, 4)),
    ("4-4", _groups_pattern(4, 4)),
)

# Word-bounded 4-character token made of digits or their look-alikes
FOUR_DIGIT_RUN_PATTERN = re.compile(
    rf'(?<![0-9A-Za-z|])([{_DIGIT_LIKE}]{{4}})(?![0-9A-Za-z|])'
)

LINE_BREAK_PATTERN = re.compile(r'\r\n|\r|\n')


@dataclass(frozen=True)
class DateMatch:
    """A month/year pair found in text."""

    month: str
    year: str
    start: int
    end: int


@dataclass(frozen=True)
class DigitGroupMatch:
    """Digit groups captured by one delimiter layout."""

    layout: str
    groups: Tuple[str, ...]

    @property
    def digits(self) -> str:
        return "".join(self.groups)

    @property
    def has_real_digits(self) -> bool:
        """Every group carries at least one actual digit."""
        return all(any(ch.isdigit() for ch in group) for group in self.groups)


@dataclass(frozen=True)
class DigitRun:
    """A 4-digit run and where it was found."""

    value: str
    line: str
    fragment_index: int
    line_index: int


def find_date(text: str) -> Optional[DateMatch]:
    """
    Find the first MM/YY or MM-YY date.

    Examples:
        >>> find_date("VALID THRU 11/29")
        DateMatch(month='11', year='29', start=11, end=16)
    """
    match = DATE_PATTERN.search(text)
    if not match:
        return None
    return DateMatch(
        month=match.group(1),
        year=match.group(2),
        start=match.start(),
        end=match.end(),
    )


def find_anchored_four_digits(text: str) -> Optional[str]:
    """Four consecutive digits appearing after an expiry keyword."""
    match = ANCHORED_FOUR_DIGIT_PATTERN.search(text)
    return match.group(1) if match else None


def iter_delimited_groups(text: str) -> List[DigitGroupMatch]:
    """
    First match of every delimiter layout, in layout priority order.

    Groups may hold OCR look-alike letters ("4lll"), but a group made only of
    letters is not a digit group.
    """
    matches = []
    for layout, pattern in DELIMITED_GROUP_PATTERNS:
        for match in pattern.finditer(text):
            group_match = DigitGroupMatch(layout=layout, groups=match.groups())
            if group_match.has_real_digits:
                matches.append(group_match)
                break
    return matches


def split_lines(text: str) -> List[str]:
    return LINE_BREAK_PATTERN.split(text)


def scan_four_digit_runs(fragments: Sequence[str]) -> List[DigitRun]:
    """
    Collect every word-bounded 4-digit run, line by line, in fragment order.

    Runs are normalized after matching; tokens that contain no real digit
    (e.g. "GOOD") are skipped so plain words are not read as numbers.
    """
    runs = []
    for fragment_index, fragment in enumerate(fragments):
        for line_index, line in enumerate(split_lines(fragment)):
            for match in FOUR_DIGIT_RUN_PATTERN.finditer(line):
                token = match.group(1)
                if not any(ch.isdigit() for ch in token):
                    continue
                runs.append(
                    DigitRun(
                        value=normalize(token),
                        line=line,
                        fragment_index=fragment_index,
                        line_index=line_index,
                    )
                )
    return runs


def clean_expiry_text(text: str) -> str:
    """Case-fold and drop characters that never take part in an expiry."""
    return EXPIRY_NOISE_PATTERN.sub("", text.upper())


def resolved_date_pattern(expiry: str) -> "re.Pattern[str]":
    """Pattern matching an MMYY expiry written as M/YY, MM-YY or MM/YYYY."""
    month = int(expiry[:2])
    year = re.escape(expiry[2:])
    return re.compile(rf'(?<!\d)0?{month}\s*[/\-]\s*(?:\d{{2}})?{year}(?!\d)')


def raw_token_pattern(token: str) -> "re.Pattern[str]":
    return re.compile(rf'(?<!\d){re.escape(token)}(?!\d)')


def collapse_cvc(text: str) -> str:
    """Replace a security code and its label with the bare marker."""
    return CVC_PATTERN.sub(CVC_MARKER, text)


def has_expiry_keyword(text: str) -> bool:
    return EXPIRY_KEYWORD_PATTERN.search(text) is not None


def _drop_anchored_date(match: "re.Match[str]") -> str:
    month = match.group("month") or match.group("mmyy")[:2]
    if 1 <= int(month) <= 12:
        return " "
    # "EXP 4890" is not a date; keep the digits for number extraction
    return match.group(0)


def remove_anchored_dates(text: str) -> str:
    """
    Blank out keyword-anchored dates such as "VALID THRU 11/29" or "DATE1129".

    Examples:
        >>> remove_anchored_dates("AMERICAN EXPRESS 3782 822463 10005")
        'AMERICAN EXPRESS 3782 822463 10005'
    """
    return ANCHORED_DATE_PATTERN.sub(_drop_anchored_date, text)
