"""
Unit tests for the triage policy prompt.
"""

import pytest

from chatops.core.exceptions import ConfigurationError
from llm.prompt import DEFAULT_TRIAGE_PROMPT, load_instructions


def test_prompt_describes_response_shape():
    for field in ("create_incident", "severity", "summary", "rationale", "confidence"):
        assert f'"{field}"' in DEFAULT_TRIAGE_PROMPT
    assert '"P1" | "P2" | "P3" | "none"' in DEFAULT_TRIAGE_PROMPT


def test_prompt_contains_decision_rules():
    assert "JSON ONLY" in DEFAULT_TRIAGE_PROMPT
    assert "at least P2" in DEFAULT_TRIAGE_PROMPT
    assert "in doubt between ignoring and P3 -> P3" in DEFAULT_TRIAGE_PROMPT
    assert "announces recovery" in DEFAULT_TRIAGE_PROMPT


def test_default_used_without_override():
    assert load_instructions(None) == DEFAULT_TRIAGE_PROMPT


def test_override_file_replaces_default(tmp_path):
    path = tmp_path / "policy.txt"
    path.write_text("Classify strictly. JSON only.", encoding="utf-8")

    assert load_instructions(path) == "Classify strictly. JSON only."


def test_missing_override_file_raises(tmp_path):
    with pytest.raises(ConfigurationError):
        load_instructions(tmp_path / "missing.txt")


def test_empty_override_file_raises(tmp_path):
    path = tmp_path / "policy.txt"
    path.write_text("  \n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_instructions(path)
