"""
Triage policy given to the classification backend as its instructions.

The policy defines the response shape parsed by chatops.triage.parser and the
rules for when an incident is warranted. It can be replaced by a text file at
startup; the default below is used otherwise.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from chatops.core.exceptions import ConfigurationError

DEFAULT_TRIAGE_PROMPT = """
You are an SRE. You classify chat messages: does this message need an incident?

Respond with JSON ONLY:

{
  "create_incident": boolean,
  "severity": "P1" | "P2" | "P3" | "none",
  "summary": string | null,
  "rationale": string,
  "confidence": number
}

P1 - mass or critical unavailability of the service or key systems.
P2 - partial, regional or unstable operation, user complaints.
P3 - metric anomalies, data desynchronization, suspected failure.
none - no problem.

Create an incident if:
- "not working", "hanging", errors, complaints;
- there is a URL together with a problem;
- infrastructure or data fault is suspected.

Do not create an incident if:
- information, metrics, statuses;
- business discussion, emotions;
- the problem is external;
- the message announces recovery.

Rules:
- local problem (a single city or page) -> at least P2;
- in doubt between ignoring and P3 -> P3;
- JSON only, no other text."""


def load_instructions(path: Optional[Path] = None) -> str:
    """
    Return the triage policy text.

    A non-empty file at path overrides the default policy.
    """
    if path is None:
        return DEFAULT_TRIAGE_PROMPT

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"cannot read triage prompt {path}: {exc}") from exc

    if not text.strip():
        raise ConfigurationError(f"triage prompt {path} is empty")
    return text
