"""hCard Index - Structured name records for hCard metadata extraction."""

from .core.models import HCardName, FieldValue, NameComponent, FIELDS, NAME_COMPONENTS
from .core.encoding import CharsetNormalizerDetector, EncodingDetector, EncodingDetectionError

__version__ = "0.1.0"

__all__ = [
    "HCardName",
    "FieldValue",
    "NameComponent",
    "FIELDS",
    "NAME_COMPONENTS",
    "EncodingDetector",
    "EncodingDetectionError",
    "CharsetNormalizerDetector",
]
