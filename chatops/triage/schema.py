"""
Schema definitions for triage verdicts.

A TriageResult is a value built fresh for each inbound message; it has no
identity and is never persisted.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Severity(str, Enum):
    """Incident severity levels, P1 highest."""

    P1 = "P1"
    P2 = "P2"
    P3 = "P3"
    NONE = "none"
    UNKNOWN = "unknown"


class TriageResult(BaseModel):
    """
    Triage verdict for a single chat message.

    Fields:
    - is_incident: whether an incident should be created
    - severity: normalized severity (UNKNOWN when the backend value is unrecognized)
    - summary: short incident summary, None when the backend supplied none
    - rationale: explanation of the verdict
    - confidence: backend-supplied score, passed through unchanged
    """

    model_config = ConfigDict(frozen=True)

    is_incident: bool
    severity: Severity
    summary: Optional[str] = None
    rationale: str
    confidence: float
