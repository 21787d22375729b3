"""
Core module: Configuration, logging, and exception handling.
"""

from .config import Config, load_config
from .exceptions import (
    ConfigurationError,
    DecodeError,
    TransportError,
    TriageError,
)

__all__ = [
    "Config",
    "load_config",
    "TriageError",
    "TransportError",
    "DecodeError",
    "ConfigurationError",
]
