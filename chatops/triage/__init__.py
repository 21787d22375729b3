"""
Triage domain: severity levels, triage results, and model-output parsing.
"""

from .parser import normalize_severity, parse_triage, strip_code_fence
from .schema import Severity, TriageResult

__all__ = [
    "Severity",
    "TriageResult",
    "normalize_severity",
    "parse_triage",
    "strip_code_fence",
]
