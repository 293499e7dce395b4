"""
Encoding Detection Module

Guesses the character encoding of fetched documents.
"""

from .base import EncodingDetector, EncodingDetectionError
from .charset import CharsetNormalizerDetector, strip_markup_bytes

__all__ = [
    "EncodingDetector",
    "EncodingDetectionError",
    "CharsetNormalizerDetector",
    "strip_markup_bytes",
]
