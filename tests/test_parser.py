"""Unit tests for raw text validation per declared format."""

import pytest

from ycclab.core.types import RGB
from ycclab.shared.parser import (
    InputRejected,
    UnknownFormat,
    parse_input,
    validate_and_convert,
)


class TestHexInput:
    """Test the anchored hex format."""

    @pytest.mark.unit
    def test_accepts_six_digits_any_case(self):
        assert validate_and_convert("#3B82F6", "hex") == (59, 130, 246)
        assert validate_and_convert("3b82f6", "hex") == (59, 130, 246)
        assert validate_and_convert("3B82f6", "hex") == RGB(59, 130, 246)

    @pytest.mark.unit
    def test_rejects_wrong_length_and_garbage(self):
        for raw in ("3B82F", "#3B8", "3B82F6A", "color #3B82F6", "#3B82F6;", " 3B82F6", "", "#"):
            assert validate_and_convert(raw, "hex") is None, raw

    @pytest.mark.unit
    def test_strict_has_no_effect_on_hex(self):
        assert validate_and_convert("#3B82F6", "hex", strict=True) == (59, 130, 246)
        assert validate_and_convert("3B82F", "hex", strict=True) is None


class TestRgbInput:
    """Test the scanning rgb format."""

    @pytest.mark.unit
    def test_accepts_plain_triple(self):
        assert validate_and_convert("59,130,246", "rgb") == (59, 130, 246)
        assert validate_and_convert("59 , 130,\t246", "rgb") == (59, 130, 246)

    @pytest.mark.unit
    def test_scans_through_surrounding_text(self):
        assert validate_and_convert("rgb(59, 130, 246)", "rgb") == (59, 130, 246)
        assert validate_and_convert("color: 0, 0, 0;", "rgb") == (0, 0, 0)

    @pytest.mark.unit
    def test_bounds_are_inclusive(self):
        assert validate_and_convert("0,0,0", "rgb") == (0, 0, 0)
        assert validate_and_convert("255,255,255", "rgb") == (255, 255, 255)

    @pytest.mark.unit
    def test_out_of_range_rejects_whole_input(self):
        assert validate_and_convert("999,999,999", "rgb") is None
        assert validate_and_convert("256,0,0", "rgb") is None
        assert validate_and_convert("10,20,300", "rgb") is None

    @pytest.mark.unit
    def test_huge_digit_runs_are_rejected_not_raised(self):
        """Numbers too long for int() are just another out-of-range value."""
        assert validate_and_convert("9" * 5000 + ",0,0", "rgb") is None
        assert validate_and_convert("0,0," + "1" * 5000, "ycbcr") is None
        assert validate_and_convert("1234,0,0", "rgb") is None
        with pytest.raises(InputRejected):
            parse_input("0," + "9" * 5000 + ",0", "rgb", strict=True)

    @pytest.mark.unit
    def test_longer_run_does_not_match_its_tail(self):
        assert validate_and_convert("10255,0,0", "rgb") is None

    @pytest.mark.unit
    def test_leading_zeros(self):
        assert validate_and_convert("0255,007,000", "rgb") == (255, 7, 0)

    @pytest.mark.unit
    def test_only_ascii_digits(self):
        assert validate_and_convert("٥٩,١٣٠,٢٤٦", "rgb") is None
        assert validate_and_convert("٥٩,١٣٠,٢٤٦", "rgb", strict=True) is None
        assert validate_and_convert("１６,１２８,１２８", "ycbcr") is None

    @pytest.mark.unit
    def test_wrong_arity_is_rejected(self):
        assert validate_and_convert("59,130", "rgb") is None
        assert validate_and_convert("59 130 246", "rgb") is None
        assert validate_and_convert("", "rgb") is None

    @pytest.mark.unit
    def test_strict_anchors_the_triple(self):
        assert validate_and_convert(" 59, 130, 246 ", "rgb", strict=True) == (59, 130, 246)
        assert validate_and_convert("rgb(59, 130, 246)", "rgb", strict=True) is None
        assert validate_and_convert("59,130,246,1", "rgb", strict=True) is None


class TestYCbCrInput:
    """Test the scanning ycbcr format."""

    @pytest.mark.unit
    def test_converts_to_rgb(self):
        assert validate_and_convert("16,128,128", "ycbcr") == (0, 0, 0)
        assert validate_and_convert("235, 128, 128", "ycbcr") == (255, 255, 255)
        assert validate_and_convert("ycbcr(126, 128, 128)", "ycbcr") == (128, 128, 128)

    @pytest.mark.unit
    def test_limited_range_bounds(self):
        assert validate_and_convert("15,128,128", "ycbcr") is None
        assert validate_and_convert("236,128,128", "ycbcr") is None
        assert validate_and_convert("100,15,128", "ycbcr") is None
        assert validate_and_convert("100,128,241", "ycbcr") is None
        assert validate_and_convert("100,240,16", "ycbcr") is not None

    @pytest.mark.unit
    def test_rgb_valid_values_can_be_out_of_ycbcr_range(self):
        assert validate_and_convert("0,0,0", "rgb") is not None
        assert validate_and_convert("0,0,0", "ycbcr") is None


class TestParseInput:
    """Test the raising variant used by one-shot commands."""

    @pytest.mark.unit
    def test_raises_input_rejected(self):
        with pytest.raises(InputRejected):
            parse_input("3B82F", "hex")
        with pytest.raises(InputRejected):
            parse_input("999,999,999", "rgb")

    @pytest.mark.unit
    def test_input_rejected_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_input("15,128,128", "ycbcr")

    @pytest.mark.unit
    def test_unknown_format(self):
        with pytest.raises(UnknownFormat):
            parse_input("10,10,10", "hsl")
        with pytest.raises(UnknownFormat):
            validate_and_convert("10,10,10", "cmyk")

    @pytest.mark.unit
    def test_non_text_is_rejected(self):
        assert validate_and_convert(None, "rgb") is None
        assert validate_and_convert(123456, "hex") is None
