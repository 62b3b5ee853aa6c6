"""Scanning session: per-frame parsing plus multi-frame stabilization."""

from typing import Any, Optional

from .aggregate.accumulator import SampleAccumulator, observe
from .core.types import CardRecord
from .parser.algorithm import DefaultParserAlgorithm, ParserAlgorithm
from .utils import config
from .utils.error_handler import (
    ConfigurationError,
    ErrorContext,
    handle_error,
    safe_execute,
)
from .utils.log import LoggerMixin, mask_card_number
from .utils.validation import validate_fragments, validate_try_count


class CardScanner(LoggerMixin):
    """
    Turns a stream of OCR frames into stabilized card records.

    Not reentrant: frames must be submitted one at a time. Each scanner owns
    its accumulator exclusively.
    """

    def __init__(
        self,
        try_count: Optional[int] = None,
        algorithm: Optional[ParserAlgorithm] = None,
    ):
        if try_count is None:
            try_count = config.settings.CARD_SCAN_TRIES
        try:
            self.try_count = validate_try_count(try_count)
        except ConfigurationError as e:
            context = ErrorContext(
                operation="configure",
                module=__name__,
                function="__init__",
                input_data={"try_count": try_count},
            )
            handle_error(e, context, self.logger)
        self.algorithm = algorithm or DefaultParserAlgorithm()
        self.accumulator = SampleAccumulator(try_count=self.try_count)

        self.logger.info(
            "Card scanner initialized",
            try_count=self.try_count,
            algorithm=type(self.algorithm).__name__,
        )

    @property
    def pending_samples(self) -> int:
        return len(self.accumulator)

    def parse_frame(self, fragments: Any) -> Optional[CardRecord]:
        """Parse one frame without touching the accumulator."""
        fragments = validate_fragments(fragments)
        context = ErrorContext(
            operation="parse_frame",
            module=__name__,
            function="parse_frame",
            input_data={"fragments": len(fragments)},
        )
        return safe_execute(
            self.algorithm.parse,
            fragments,
            context=context,
            logger=self.logger,
            default_return=None,
        )

    def process_frame(self, fragments: Any) -> Optional[CardRecord]:
        """
        Process one frame.

        Returns:
            The stabilized record once try_count valid frames have been seen,
            otherwise None
        """
        candidate = self.parse_frame(fragments)
        self.accumulator, result = observe(self.accumulator, candidate)

        if result is None:
            self.logger.debug(
                "Frame processed",
                accepted=candidate is not None,
                pending=self.pending_samples,
                try_count=self.try_count,
            )
            return None

        self.logger.info(
            "Card stabilized",
            number=mask_card_number(result.number),
            network=result.network.value,
            expiry=result.expiry,
        )
        return result

    def reset(self):
        """Discard buffered samples."""
        self.accumulator = self.accumulator.cleared()
