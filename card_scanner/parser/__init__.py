"""Parsing package for payment card text."""

from .algorithm import DefaultParserAlgorithm, ParserAlgorithm
from .expiry import ExpiryDateExtractor, resolve_century
from .network import get_card_network, is_valid_card_number
from .normalize import normalize
from .number import CardNumberExtractor

__all__ = [
    "ParserAlgorithm",
    "DefaultParserAlgorithm",
    "ExpiryDateExtractor",
    "CardNumberExtractor",
    "resolve_century",
    "get_card_network",
    "is_valid_card_number",
    "normalize",
]
