"""Card network classification and per-network length rules."""

from ..core.constants import (
    AMEX_PREFIXES,
    MASTERCARD_PREFIXES,
    MAX_CARD_NUMBER_LENGTH,
    MIN_CARD_NUMBER_LENGTH,
    NETWORK_LENGTHS,
    VISA_PREFIXES,
)
from ..core.types import CardNetwork
from .normalize import is_digits


def get_card_network(number: str) -> CardNetwork:
    """
    Classify a card number by its leading digits.

    Examples:
        >>> get_card_network("4111111111111111")
        <CardNetwork.VISA: 'Visa'>
        >>> get_card_network("371449635398431")
        <CardNetwork.AMEX: 'American Express'>
    """
    if not number:
        return CardNetwork.UNKNOWN
    if number.startswith(AMEX_PREFIXES):
        return CardNetwork.AMEX
    if number.startswith(VISA_PREFIXES):
        return CardNetwork.VISA
    if number.startswith(MASTERCARD_PREFIXES):
        return CardNetwork.MASTERCARD
    return CardNetwork.UNKNOWN


def is_valid_length(number: str) -> bool:
    return MIN_CARD_NUMBER_LENGTH <= len(number) <= MAX_CARD_NUMBER_LENGTH


def is_valid_card_number(number: str) -> bool:
    """
    Check a digit string against the global bounds and its network's lengths.

    A network-specific length rule overrides the generic 13-19 bound, so a
    15 digit number starting with 5 is rejected. No checksum is computed.
    """
    if not is_digits(number) or not is_valid_length(number):
        return False

    allowed = NETWORK_LENGTHS.get(get_card_network(number).value)
    if allowed is None:
        return True
    return len(number) in allowed
