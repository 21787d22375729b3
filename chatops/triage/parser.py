"""
Parsing and normalization of classifier output.

The backend is asked for a bare JSON object but may still wrap it in a
Markdown code fence. Parsing is strict: anything that does not decode into
the expected shape raises DecodeError carrying the raw text. Severity
normalization, by contrast, is total and falls back to UNKNOWN.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Optional

from pydantic import ValidationError

from chatops.core.exceptions import DecodeError
from llm.schema import TriageResponse

from .schema import Severity, TriageResult

logger = logging.getLogger("chatops.triage")

_OPENING_FENCE = re.compile(r"^```[\w+.-]*[ \t]*(?:\r?\n)?")
_CLOSING_FENCE = re.compile(r"(?:\r?\n)?[ \t]*```$")

# Case-sensitive: matches the vocabulary of the triage instructions.
SEVERITY_TOKENS: Dict[str, Severity] = {
    "P1": Severity.P1,
    "P2": Severity.P2,
    "P3": Severity.P3,
    "none": Severity.NONE,
}

_INCIDENT_SEVERITIES = {Severity.P1, Severity.P2, Severity.P3}


def strip_code_fence(raw: str) -> str:
    """
    Remove a Markdown code fence around the payload, if present.

    Handles an opening fence with or without a language tag (```json) and a
    closing fence; either may appear without the other.
    """
    text = raw.strip()
    text = _OPENING_FENCE.sub("", text, count=1)
    text = _CLOSING_FENCE.sub("", text, count=1)
    return text.strip()


def normalize_severity(value: Optional[str]) -> Severity:
    if value is None:
        return Severity.UNKNOWN
    return SEVERITY_TOKENS.get(value, Severity.UNKNOWN)


def parse_triage(raw: str) -> TriageResult:
    """
    Decode raw classifier output into a TriageResult.

    Raises:
        DecodeError: if the output is not a JSON object of the triage shape
    """
    cleaned = strip_code_fence(raw)
    try:
        response = TriageResponse.model_validate_json(cleaned)
    except ValidationError as exc:
        raise DecodeError(
            f"cannot decode model response: {_describe(exc)}; raw output: {raw}",
            raw_output=raw,
        ) from exc

    severity = normalize_severity(response.severity)
    if severity is Severity.UNKNOWN:
        logger.info("Unrecognized severity %r, marking as unknown", response.severity)
    _warn_if_inconsistent(response.create_incident, severity)

    return TriageResult(
        is_incident=response.create_incident,
        severity=severity,
        summary=response.summary,
        rationale=response.rationale,
        confidence=response.confidence,
    )


def _warn_if_inconsistent(create_incident: bool, severity: Severity) -> None:
    # The verdict is reported as given; the mismatch is only logged.
    if create_incident and severity is Severity.NONE:
        logger.warning("Backend requested an incident with severity 'none'")
    elif not create_incident and severity in _INCIDENT_SEVERITIES:
        logger.warning("Backend declined an incident but assigned severity %s", severity.value)


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)
