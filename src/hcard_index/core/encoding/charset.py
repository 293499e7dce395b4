"""
charset-normalizer based encoding detector.
"""

import logging
import os
from typing import BinaryIO, Optional

from charset_normalizer import from_bytes

from .base import EncodingDetectionError, EncodingDetector

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_SIZE = 10240
SAMPLE_SIZE_ENV = "HCARD_INDEX_SAMPLE_SIZE"


def strip_markup_bytes(data: bytes) -> bytes:
    """Drop everything between '<' and '>' so tag names do not skew detection.

    The raw bytes are kept when the content does not look like markup: fewer
    than 5 tags, more than one in five tags opened inside another tag, or a
    long input that filters down to almost nothing.
    """
    filtered = bytearray()
    open_tags = 0
    bad_tags = 0
    in_markup = False
    for byte in data:
        if byte == ord("<"):
            if in_markup:
                bad_tags += 1
            in_markup = True
            open_tags += 1
        if not in_markup:
            filtered.append(byte)
        if byte == ord(">"):
            in_markup = False

    if open_tags < 5 or open_tags // 5 < bad_tags or (len(filtered) < 100 and len(data) > 600):
        return data
    return bytes(filtered)


class CharsetNormalizerDetector(EncodingDetector):
    """Encoding detector using the charset-normalizer backend."""

    def __init__(self, sample_size: Optional[int] = None, strip_markup: bool = True):
        """Initialize the detector.

        Args:
            sample_size: Number of bytes read from the stream. Defaults to the
                HCARD_INDEX_SAMPLE_SIZE environment variable, then 10240.
            strip_markup: Ignore the content of markup tags when guessing
        """
        if sample_size is None:
            sample_size = int(os.getenv(SAMPLE_SIZE_ENV, DEFAULT_SAMPLE_SIZE))
        if sample_size <= 0:
            raise ValueError(f"sample_size must be positive, got {sample_size}")
        self.sample_size = sample_size
        self.strip_markup = strip_markup

    def guess_encoding(self, stream: BinaryIO) -> str:
        data = stream.read(self.sample_size)
        if isinstance(data, str):
            raise TypeError("Expected a binary stream, got a text stream")

        if self.strip_markup:
            filtered = strip_markup_bytes(data)
            if filtered is data:
                logger.debug("Input does not look like markup, detecting on raw bytes")
            data = filtered

        best = from_bytes(data).best()
        if best is None:
            logger.warning(f"No encoding matched {len(data)} bytes of input")
            raise EncodingDetectionError("No encoding matched the input")

        # Normalize encoding name (utf_8 -> utf-8)
        encoding = best.encoding.replace("_", "-").lower()
        logger.debug(f"Detected encoding {encoding}")
        return encoding
