"""Core functionality for hCard name processing."""

from . import models
from . import encoding

__all__ = ["models", "encoding"]
