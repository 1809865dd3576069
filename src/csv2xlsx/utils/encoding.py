#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csv2xlsx/utils/encoding.py
"""Character encoding detection and decoding utilities.

Detection runs chardet over the raw bytes of a CSV file. Absence of a confident
signal (empty input, ambiguous bytes, a chardet failure) is never an error: the
detector falls back to UTF-8 and reports the fallback as a warning.
"""

from __future__ import annotations

import logging

import chardet

from csv2xlsx.constants import DEFAULT_ENCODING, DEFAULT_ENCODING_CONFIDENCE_THRESHOLD
from csv2xlsx.exceptions import DecodeError
from csv2xlsx.models import DetectionResult

logger = logging.getLogger(__name__)


def detect_encoding(
    data: bytes,
    sample_size: int | None = None,
    confidence_threshold: float = DEFAULT_ENCODING_CONFIDENCE_THRESHOLD,
) -> str | None:
    """Detect character encoding of binary data using chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int | None, default None
        Number of leading bytes to analyze. None analyzes the whole buffer.
    confidence_threshold : float, default 0.1
        Minimum confidence level (0.0-1.0) required to trust detection

    Returns
    -------
    str | None
        Detected encoding name (e.g., 'utf-8', 'ascii', 'Windows-1252'), or None if:
        - the buffer is empty
        - detection fails
        - confidence is below threshold

    Examples
    --------
    >>> detect_encoding("name,city\\nZoë,Köln".encode("utf-8"))
    'utf-8'

    """
    if not data:
        logger.debug("chardet: empty buffer, nothing to detect")
        return None

    sample = data[:sample_size] if sample_size is not None and len(data) > sample_size else data

    try:
        result = chardet.detect(sample)
    except Exception as e:
        logger.debug(f"chardet detection failed: {e}")
        return None

    if not result or not result.get("encoding"):
        logger.debug("chardet: No encoding detected")
        return None

    encoding = result["encoding"]
    confidence = result.get("confidence") or 0.0

    logger.debug(f"chardet detected encoding: {encoding} (confidence: {confidence:.2f})")

    if confidence < confidence_threshold:
        logger.debug(f"chardet confidence {confidence:.2f} below threshold {confidence_threshold}")
        return None

    return encoding


def detect_encoding_with_fallback(
    data: bytes,
    confidence_threshold: float = DEFAULT_ENCODING_CONFIDENCE_THRESHOLD,
    default: str = DEFAULT_ENCODING,
) -> DetectionResult[str]:
    """Resolve the encoding of ``data``, falling back to ``default``.

    Parameters
    ----------
    data : bytes
        Full file content
    confidence_threshold : float, default 0.1
        Minimum chardet confidence to accept a detection
    default : str, default "utf-8"
        Charset returned when no confident encoding is detected

    Returns
    -------
    DetectionResult[str]
        The resolved charset; ``warnings`` notes when the default was used

    """
    detected = detect_encoding(data, confidence_threshold=confidence_threshold)
    if detected:
        return DetectionResult(detected)

    logger.debug(f"No confident encoding detected, using {default}")
    return DetectionResult(default, (f"No confident encoding detected, using {default}",))


def decode_bytes(data: bytes, encoding: str) -> str:
    """Decode ``data`` strictly with ``encoding``.

    No normalization is applied beyond what the codec itself does (for example
    ``utf-8-sig`` drops a leading byte order mark, ``utf-8`` keeps it).

    Parameters
    ----------
    data : bytes
        Raw file content
    encoding : str
        Codec name understood by Python

    Returns
    -------
    str
        Decoded text

    Raises
    ------
    DecodeError
        If the codec is unknown or the bytes are invalid for it

    """
    try:
        return data.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise DecodeError(encoding, original_error=e) from e
