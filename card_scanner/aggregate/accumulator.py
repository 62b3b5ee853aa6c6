"""Stabilization of per-frame card candidates across consecutive frames."""

from collections import Counter
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple

from ..core.constants import CARD_SCAN_TRIES
from ..core.types import CardRecord
from ..parser.network import get_card_network
from ..utils.validation import validate_try_count


@dataclass(frozen=True)
class SampleAccumulator:
    """
    Valid candidates collected so far in a scanning session.

    The value is immutable; observe() returns a new accumulator instead of
    mutating this one, so callers can keep it in their own session state.
    """

    try_count: int = CARD_SCAN_TRIES
    samples: Tuple[CardRecord, ...] = ()

    def __post_init__(self):
        validate_try_count(self.try_count)

    def __len__(self) -> int:
        return len(self.samples)

    @property
    def is_full(self) -> bool:
        return len(self.samples) >= self.try_count

    def cleared(self) -> "SampleAccumulator":
        return replace(self, samples=())


def most_frequent(values: Iterable[str]) -> str:
    """
    Most common non-empty value; ties go to the value seen first.

    Examples:
        >>> most_frequent(["1129", "", "0330", "1129"])
        '1129'
        >>> most_frequent(["", ""])
        ''
    """
    counts = Counter(value for value in values if value)
    if not counts:
        return ""
    # Counter keeps first-seen order among equal counts
    return counts.most_common(1)[0][0]


def stabilize(samples: Iterable[CardRecord]) -> CardRecord:
    """Resolve buffered candidates into a single record."""
    samples = tuple(samples)
    number = most_frequent(sample.number for sample in samples)
    expiry = most_frequent(sample.expiry for sample in samples)
    return CardRecord(
        number=number,
        network=get_card_network(number),
        expiry=expiry,
    )


def observe(
    accumulator: SampleAccumulator, candidate: Optional[CardRecord]
) -> Tuple[SampleAccumulator, Optional[CardRecord]]:
    """
    Feed one frame's candidate into the accumulator.

    Invalid or missing candidates leave the accumulator untouched and do not
    count toward the try budget. When the budget is reached the stabilized
    record is returned together with an emptied accumulator.
    """
    if candidate is None or not candidate.is_valid():
        return accumulator, None

    updated = replace(accumulator, samples=accumulator.samples + (candidate,))
    if not updated.is_full:
        return updated, None

    return updated.cleared(), stabilize(updated.samples)
