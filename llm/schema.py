"""
Schemas for the classification backend exchange.

TriageResponse is the exact JSON shape the backend is instructed to return.
Fields are strictly typed: a string where a boolean is expected is a decode
failure, not a coercion.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class TriageResponse(BaseModel):
    """
    Raw triage verdict as emitted by the backend.

    Fields:
    - create_incident: whether an incident should be created
    - severity: "P1" | "P2" | "P3" | "none" (any other value is kept verbatim)
    - summary: short summary or null
    - rationale: explanation of the verdict
    - confidence: backend-defined score, finite (NaN and Infinity are not JSON)
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    create_incident: bool
    severity: Optional[str] = None
    summary: Optional[str] = None
    rationale: str
    confidence: float = Field(allow_inf_nan=False)


class ClassificationRequest(BaseModel):
    """Single-turn generation request, built right before each call."""

    model_config = ConfigDict(frozen=True)

    model: str
    temperature: float
    max_output_tokens: int
    input: str
    instructions: str

    def as_params(self) -> Dict[str, Any]:
        return self.model_dump()


class ClassifierOutput(BaseModel):
    """Raw text returned by the backend for one classification."""

    model_config = ConfigDict(frozen=True)

    text: str
    model: str
    completed: bool
    response_id: Optional[str] = None
