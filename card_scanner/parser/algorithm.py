"""Parser algorithms turning one frame's OCR fragments into a card candidate."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..core.types import CardRecord
from ..utils.log import LoggerMixin, mask_card_number
from .expiry import ExpiryDateExtractor
from .network import get_card_network
from .number import CardNumberExtractor


class ParserAlgorithm(ABC):
    """
    Interface for per-frame card parsing.

    Implementations must be pure with respect to the frame: aggregation
    across frames is handled by the caller, so an algorithm can be swapped
    without touching stabilization or validation.
    """

    @abstractmethod
    def parse(self, fragments: Sequence[str]) -> Optional[CardRecord]:
        """Return a valid candidate for this frame, or None."""

    @abstractmethod
    def get_card_number(self, fragments: Sequence[str]) -> str:
        """Return the card number found in the fragments, or ""."""

    @abstractmethod
    def get_expiry_date(self, fragments: Sequence[str]) -> str:
        """Return the MMYY expiry found in the fragments, or ""."""


class DefaultParserAlgorithm(ParserAlgorithm, LoggerMixin):
    """Keyword/positional expiry search plus three-strategy number recovery."""

    def __init__(self, expiry_extractor: Optional[ExpiryDateExtractor] = None):
        self.expiry_extractor = expiry_extractor or ExpiryDateExtractor()
        self.number_extractor = CardNumberExtractor(self.expiry_extractor)

    def get_card_number(self, fragments: Sequence[str]) -> str:
        return self.number_extractor.extract(fragments)

    def get_expiry_date(self, fragments: Sequence[str]) -> str:
        return self.expiry_extractor.extract(fragments)

    def build_record(self, fragments: Sequence[str]) -> CardRecord:
        """Build this frame's record, valid or not."""
        expiry = self.get_expiry_date(fragments)
        number = self.number_extractor.extract(fragments, expiry=expiry)
        return CardRecord(
            number=number,
            network=get_card_network(number),
            expiry=expiry,
        )

    def parse(self, fragments: Sequence[str]) -> Optional[CardRecord]:
        context = self.log_start("Frame parse", fragments=len(fragments))
        try:
            record = self.build_record(fragments)
        except Exception as e:
            self.log_error(context, e)
            raise

        if not record.is_valid():
            self.log_success(context, accepted=False, expiry=record.expiry)
            return None

        self.log_success(
            context,
            accepted=True,
            number=mask_card_number(record.number),
            network=record.network.value,
            expiry=record.expiry,
        )
        return record
