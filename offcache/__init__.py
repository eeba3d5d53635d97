"""Partition build output into offline cache buckets."""

from .config.options import OfflineOptions
from .core.engine import Emission, OfflineEngine, Resolution
from .core.errors import DuplicateRestError, OfflineConfigError, OfflineError, ToolError

__version__ = "0.1.0"

__all__ = [
    "DuplicateRestError",
    "Emission",
    "OfflineConfigError",
    "OfflineEngine",
    "OfflineError",
    "OfflineOptions",
    "Resolution",
    "ToolError",
]
