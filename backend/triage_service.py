"""
Backend service layer for chat triage.

Sends one message to the classifier and parses the raw output into a
TriageResult. Errors propagate to the caller: no fallback verdict is ever
invented for a failed classification.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import time

from chatops.core.config import Config
from chatops.triage import TriageResult, parse_triage
from llm.client import ClassifierClient, create_classifier_client

logger = logging.getLogger("backend.triage")


@dataclass
class TriageService:
    """
    Triage pipeline: classify, then parse.

    Holds no per-call state; safe to share between request threads.
    """

    classifier: ClassifierClient

    def triage(self, message: str) -> TriageResult:
        start = time.perf_counter()
        output = self.classifier.classify(message)
        latency_ms = int((time.perf_counter() - start) * 1000)
        logger.debug("Classifier %s answered in %d ms: %r", output.model, latency_ms, output.text)

        result = parse_triage(output.text)
        logger.info(
            "Triage verdict: incident=%s severity=%s confidence=%s (%d ms)",
            result.is_incident,
            result.severity.value,
            result.confidence,
            latency_ms,
        )
        return result


def format_reply(result: TriageResult) -> str:
    """Render a verdict as a human-readable chat reply."""
    return (
        f"IsIncident: {'yes' if result.is_incident else 'no'}\n"
        f"Severity: {result.severity.value}\n"
        f"Summary: {result.summary or '-'}\n"
        f"Rationale: {result.rationale}\n"
        f"Confidence: {result.confidence:.2f}"
    )


def create_triage_service(config: Config) -> TriageService:
    """
    Factory for the triage service with the configured backend client.
    """

    return TriageService(classifier=create_classifier_client(config))
