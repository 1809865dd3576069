#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_encoding.py
"""Unit tests for encoding detection and decoding utilities."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from csv2xlsx.exceptions import DecodeError
from csv2xlsx.utils.encoding import (
    decode_bytes,
    detect_encoding,
    detect_encoding_with_fallback,
)


class TestDetectEncoding:
    """Test cases for detect_encoding function."""

    def test_detect_utf8(self):
        """Test detection of UTF-8 encoded text."""
        data = "name,city\nZoë,Köln\nJosé,München\n".encode("utf-8")
        encoding = detect_encoding(data)
        assert encoding is not None
        assert encoding.lower() == "utf-8"

    def test_detect_ascii(self):
        """Test that plain ASCII is detected as a UTF-8 compatible charset."""
        encoding = detect_encoding(b"a,b,c\n1,2,3\n")
        assert encoding is not None
        assert encoding.lower() in ["ascii", "utf-8"]

    def test_empty_data(self):
        """Test detection with empty data."""
        assert detect_encoding(b"") is None

    def test_below_threshold_returns_none(self):
        """Test that low-confidence detection is discarded."""
        with patch("csv2xlsx.utils.encoding.chardet.detect", return_value={"encoding": "ascii", "confidence": 0.05}):
            assert detect_encoding(b"abc", confidence_threshold=0.1) is None

    def test_at_threshold_is_accepted(self):
        """Test that confidence equal to the threshold is accepted."""
        with patch("csv2xlsx.utils.encoding.chardet.detect", return_value={"encoding": "ascii", "confidence": 0.1}):
            assert detect_encoding(b"abc", confidence_threshold=0.1) == "ascii"

    def test_detector_exception_returns_none(self):
        """Test that a failing detector is treated as no signal."""
        with patch("csv2xlsx.utils.encoding.chardet.detect", side_effect=RuntimeError("boom")):
            assert detect_encoding(b"abc") is None

    def test_sample_size_limits_input(self):
        """Test that only the leading sample is passed to chardet."""
        data = b"x" * 1000
        with patch(
            "csv2xlsx.utils.encoding.chardet.detect", return_value={"encoding": "ascii", "confidence": 1.0}
        ) as mock_detect:
            detect_encoding(data, sample_size=100)

        assert mock_detect.call_args[0][0] == b"x" * 100


class TestDetectEncodingWithFallback:
    """Test cases for detect_encoding_with_fallback."""

    def test_detected_value_has_no_warning(self):
        """Test that a confident detection carries no warning."""
        with patch("csv2xlsx.utils.encoding.chardet.detect", return_value={"encoding": "utf-8", "confidence": 0.99}):
            result = detect_encoding_with_fallback(b"abc")

        assert result.value == "utf-8"
        assert result.warnings == ()
        assert not result.used_fallback

    def test_fallback_to_utf8(self):
        """Test the UTF-8 fallback when nothing is detected."""
        result = detect_encoding_with_fallback(b"")

        assert result.value == "utf-8"
        assert result.used_fallback

    def test_custom_default(self):
        """Test a caller-supplied fallback charset."""
        with patch("csv2xlsx.utils.encoding.chardet.detect", return_value={"encoding": None, "confidence": 0.0}):
            result = detect_encoding_with_fallback(b"abc", default="cp1252")

        assert result.value == "cp1252"


class TestDecodeBytes:
    """Test cases for decode_bytes."""

    def test_decode_valid(self):
        """Test decoding valid bytes."""
        assert decode_bytes("Zoë".encode("utf-8"), "utf-8") == "Zoë"

    def test_decode_keeps_bom_for_plain_utf8(self):
        """Test that no normalization beyond the codec is applied."""
        data = b"\xef\xbb\xbfa,b"
        assert decode_bytes(data, "utf-8") == "\ufeffa,b"
        assert decode_bytes(data, "utf-8-sig") == "a,b"

    def test_invalid_bytes_raise_decode_error(self):
        """Test that invalid bytes raise DecodeError with the encoding."""
        with pytest.raises(DecodeError) as exc_info:
            decode_bytes(b"\xff\xfe\xfa", "utf-8")

        assert exc_info.value.encoding == "utf-8"
        assert isinstance(exc_info.value.original_error, UnicodeDecodeError)

    def test_unknown_codec_raises_decode_error(self):
        """Test that an unknown codec name raises DecodeError."""
        with pytest.raises(DecodeError) as exc_info:
            decode_bytes(b"abc", "not-a-codec")

        assert isinstance(exc_info.value.original_error, LookupError)
