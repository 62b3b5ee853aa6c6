"""Card Scanner - Recover payment card number, network and expiry from OCR text."""

__version__ = "1.0.0"
__author__ = "Card Scanner Team"
__description__ = "Turns noisy OCR text fragments into validated, multi-frame stabilized payment card records"

from .aggregate.accumulator import SampleAccumulator, observe
from .core.types import CardNetwork, CardRecord
from .parser.algorithm import DefaultParserAlgorithm, ParserAlgorithm
from .scanner import CardScanner
from .utils.config import settings

# Core functionality imports
from .utils.log import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__description__",
    # Core components
    "configure_logging",
    "get_logger",
    "settings",
    "CardNetwork",
    "CardRecord",
    "ParserAlgorithm",
    "DefaultParserAlgorithm",
    "SampleAccumulator",
    "observe",
    "CardScanner",
]
