"""
LLM utilities for chat triage.

Backend client, request configuration, policy prompt, and schema definitions.
"""

from .client import ClassifierClient, create_classifier_client
from .config import LLMConfig
from .prompt import DEFAULT_TRIAGE_PROMPT, load_instructions
from .schema import ClassificationRequest, ClassifierOutput, TriageResponse

__all__ = [
    "ClassifierClient",
    "create_classifier_client",
    "LLMConfig",
    "DEFAULT_TRIAGE_PROMPT",
    "load_instructions",
    "ClassificationRequest",
    "ClassifierOutput",
    "TriageResponse",
]
