"""
Configuration for triage classification requests.

Generation parameters are fixed low-variance defaults: temperature 0.3 and a
500-token output cap.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from chatops.core.config import Config

from .prompt import DEFAULT_TRIAGE_PROMPT, load_instructions


class LLMConfig(BaseModel):
    """
    Configuration for the classification backend.

    Notes:
    - model is the backend model identifier.
    - temperature is kept low to reduce output variance.
    - max_output_tokens bounds cost and latency.
    - timeout_seconds bounds a single backend call.
    - instructions is the triage policy text.
    """

    model_config = ConfigDict(frozen=True)

    model: str = Field(..., min_length=1, description="Backend model identifier")
    temperature: float = Field(0.3, ge=0.0, le=2.0)
    max_output_tokens: int = Field(500, ge=16)
    timeout_seconds: float = Field(30.0, gt=0.0)
    instructions: str = Field(DEFAULT_TRIAGE_PROMPT, min_length=1)

    @classmethod
    def from_config(cls, config: Config) -> "LLMConfig":
        return cls(
            model=config.openai_chat_model,
            timeout_seconds=config.request_timeout_seconds,
            instructions=load_instructions(config.prompt_path),
        )
