"""Tests for the scanning session."""

from unittest.mock import MagicMock, patch

import pytest

from card_scanner.core.types import CardNetwork, CardRecord
from card_scanner.parser.algorithm import DefaultParserAlgorithm
from card_scanner.scanner import CardScanner
from card_scanner.utils.error_handler import ConfigurationError, handle_error


@pytest.fixture
def scanner(expiry_extractor):
    return CardScanner(try_count=3, algorithm=DefaultParserAlgorithm(expiry_extractor))


class TestCardScanner:

    def test_emits_after_try_count_valid_frames(self, scanner, visa_front_frame):
        assert scanner.process_frame(visa_front_frame) is None
        assert scanner.process_frame(visa_front_frame) is None
        result = scanner.process_frame(visa_front_frame)

        assert result == CardRecord(
            number="4111111111111111", network=CardNetwork.VISA, expiry="1129"
        )
        assert scanner.pending_samples == 0

    def test_majority_number_and_expiry(self, scanner):
        frames = [
            ["4111 1111 1111 1111", "VALID THRU 11/29"],
            ["4111111111111111", "VALID THRU 11/29"],
            ["5555 5555 5555 4444"],
        ]
        results = [scanner.process_frame(frame) for frame in frames]

        assert results[:2] == [None, None]
        assert results[2].number == "4111111111111111"
        assert results[2].expiry == "1129"
        assert results[2].network == CardNetwork.VISA

    def test_invalid_frames_do_not_consume_budget(self, scanner, visa_front_frame, noise_frame):
        scanner.process_frame(visa_front_frame)
        for _ in range(5):
            assert scanner.process_frame(noise_frame) is None
        assert scanner.pending_samples == 1

    def test_malformed_input_is_a_parse_miss(self, scanner):
        assert scanner.process_frame(None) is None
        assert scanner.process_frame([None, 42]) is None
        assert scanner.process_frame("4111111111111111") is None
        assert scanner.pending_samples == 1

    def test_algorithm_errors_are_swallowed(self):
        algorithm = MagicMock()
        algorithm.parse.side_effect = RuntimeError("engine exploded")
        scanner = CardScanner(try_count=1, algorithm=algorithm)

        assert scanner.process_frame(["4111111111111111"]) is None
        assert scanner.pending_samples == 0

    def test_reset(self, scanner, visa_front_frame):
        scanner.process_frame(visa_front_frame)
        scanner.reset()
        assert scanner.pending_samples == 0

    def test_parse_frame_does_not_buffer(self, scanner, visa_front_frame):
        record = scanner.parse_frame(visa_front_frame)
        assert record.number == "4111111111111111"
        assert scanner.pending_samples == 0

    @pytest.mark.parametrize("try_count", [0, -3])
    def test_invalid_try_count(self, try_count):
        with pytest.raises(ConfigurationError):
            CardScanner(try_count=try_count)

    def test_invalid_try_count_is_logged(self):
        with patch('card_scanner.scanner.handle_error', side_effect=handle_error) as mock_handle:
            with pytest.raises(ConfigurationError):
                CardScanner(try_count=0)

        error, context, _ = mock_handle.call_args[0]
        assert isinstance(error, ConfigurationError)
        assert context.operation == "configure"
        assert context.input_data == {"try_count": 0}

    def test_try_count_from_settings(self, mock_settings):
        mock_settings.CARD_SCAN_TRIES = 5
        assert CardScanner().try_count == 5

    def test_instances_do_not_share_buffers(self, visa_front_frame):
        first = CardScanner(try_count=2)
        second = CardScanner(try_count=2)
        first.process_frame(visa_front_frame)
        assert first.pending_samples == 1
        assert second.pending_samples == 0
