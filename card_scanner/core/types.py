from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from .constants import (
    CARD_AMEX,
    CARD_MASTERCARD,
    CARD_UNKNOWN,
    CARD_VISA,
    MAX_CARD_NUMBER_LENGTH,
    MIN_CARD_NUMBER_LENGTH,
)


class CardNetwork(str, Enum):
    VISA = CARD_VISA
    MASTERCARD = CARD_MASTERCARD
    AMEX = CARD_AMEX
    UNKNOWN = CARD_UNKNOWN

    @classmethod
    def from_value(cls, value: Any) -> "CardNetwork":
        """Map a display name to a network, falling back to UNKNOWN."""
        if isinstance(value, cls):
            return value
        for network in cls:
            if network.value == value:
                return network
        return cls.UNKNOWN


@dataclass(frozen=True)
class CardRecord:
    number: str = ""
    network: CardNetwork = CardNetwork.UNKNOWN
    expiry: str = ""

    def is_valid(self) -> bool:
        """A record is valid when it carries a 13-19 digit number."""
        return (
            bool(self.number)
            and MIN_CARD_NUMBER_LENGTH <= len(self.number) <= MAX_CARD_NUMBER_LENGTH
        )

    def number_formatted(self) -> str:
        """Group the number the way it is embossed on the card."""
        if not self.is_valid():
            return ""

        number = self.number
        # AMEX: 4-6-5
        if len(number) == 15 and number.startswith("3"):
            return f"{number[:4]} {number[4:10]} {number[10:]}"

        return " ".join(number[i:i + 4] for i in range(0, len(number), 4))

    def to_dict(self) -> Dict[str, str]:
        return {
            "number": self.number,
            "type": self.network.value,
            "expiry": self.expiry,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CardRecord":
        return cls(
            number=str(data.get("number") or ""),
            network=CardNetwork.from_value(data.get("type")),
            expiry=str(data.get("expiry") or ""),
        )

    def __str__(self) -> str:
        return (
            f"Card Info\nnumber: {self.number}\n"
            f"type: {self.network.value}\nexpiry: {self.expiry}"
        )
