"""
Custom exceptions for chat incident triage.

Transport failures and undecodable model output are distinct so callers can
log or alert on them differently. An unrecognized severity is not an error.
"""

from __future__ import annotations

from typing import Any, Optional


class TriageError(Exception):
    """Base exception for a triage attempt that produced no result."""
    pass


class TransportError(TriageError):
    """
    Raised when the classification call could not be completed
    (network, authentication, backend 4xx/5xx).
    """

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class DecodeError(TriageError):
    """Raised when backend output does not decode as the expected triage shape."""

    def __init__(self, message: str, raw_output: str):
        super().__init__(message)
        self.raw_output = raw_output


class ConfigurationError(Exception):
    """Raised when configuration is invalid or missing."""
    pass
