from typing import Dict, Final, Tuple

# Card number length bounds (inclusive)
MIN_CARD_NUMBER_LENGTH: Final[int] = 13
MAX_CARD_NUMBER_LENGTH: Final[int] = 19
CARD_DATE_LENGTH: Final[int] = 4

# Valid observations required before a stabilized record is emitted
CARD_SCAN_TRIES: Final[int] = 3

# Network display names
CARD_VISA: Final[str] = "Visa"
CARD_MASTERCARD: Final[str] = "MasterCard"
CARD_AMEX: Final[str] = "American Express"
CARD_UNKNOWN: Final[str] = "Unknown"

# Accepted lengths per network
NETWORK_LENGTHS: Final[Dict[str, Tuple[int, ...]]] = {
    CARD_VISA: (13, 16, 19),
    CARD_MASTERCARD: (16,),
    CARD_AMEX: (15,),
}

VISA_PREFIXES: Final[Tuple[str, ...]] = ("4",)
MASTERCARD_PREFIXES: Final[Tuple[str, ...]] = ("5",)
AMEX_PREFIXES: Final[Tuple[str, ...]] = ("34", "37")

# 4-digit runs whose YY half falls in this range are treated as dates, not card digits
DATE_EXCLUSION_YEARS: Final[Tuple[int, int]] = (20, 50)

# Two-digit years up to (current % 100) + window resolve into the current century
CENTURY_WINDOW: Final[int] = 20

EXPIRY_KEYWORDS: Final[Tuple[str, ...]] = ("DATE", "VALID", "THRU", "EXP")
PHONE_KEYWORDS: Final[Tuple[str, ...]] = ("PHONE", "TEL")
PHONE_PREFIXES: Final[Tuple[str, ...]] = ("15", "16")
CVC_MARKER: Final[str] = "CVC"
