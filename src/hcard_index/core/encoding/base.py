"""
Base classes for character encoding detectors.
"""

import os
from abc import ABC, abstractmethod
from typing import BinaryIO


class EncodingDetectionError(Exception):
    """Raised when no encoding can be guessed for a byte stream."""
    pass


class EncodingDetector(ABC):
    """Abstract base class for character encoding detectors."""

    @abstractmethod
    def guess_encoding(self, stream: BinaryIO) -> str:
        """Guess the character encoding of a byte stream.

        Args:
            stream: Binary stream positioned at the start of the content

        Returns:
            Name of the detected encoding, e.g. "utf-8"

        Raises:
            OSError: If reading the stream fails
            EncodingDetectionError: If no encoding matches the content
        """
        pass

    def guess_file_encoding(self, filepath: str) -> str:
        """Guess the character encoding of a file.

        Args:
            filepath: Path to the file

        Returns:
            Name of the detected encoding

        Raises:
            FileNotFoundError: If file does not exist
        """
        if not os.path.exists(filepath):
            raise FileNotFoundError(f"File does not exist: {filepath}")
        with open(filepath, "rb") as f:
            return self.guess_encoding(f)
