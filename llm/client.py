"""
Classification backend client.

One synchronous Responses API call per message: no retries, no streaming.
Backend failures surface as TransportError; the caller decides whether to
retry.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any

import openai
from openai import OpenAI

from chatops.core.config import Config
from chatops.core.exceptions import ConfigurationError, TransportError

from .config import LLMConfig
from .schema import ClassificationRequest, ClassifierOutput

logger = logging.getLogger("llm")


@dataclass
class ClassifierClient:
    """
    Triage classifier backed by an OpenAI-compatible Responses endpoint.

    The OpenAI client and config are read-only after construction, so a single
    instance can serve concurrent callers.
    """

    config: LLMConfig
    client: Any

    def build_request(self, message: str) -> ClassificationRequest:
        return ClassificationRequest(
            model=self.config.model,
            temperature=self.config.temperature,
            max_output_tokens=self.config.max_output_tokens,
            input=message,
            instructions=self.config.instructions,
        )

    def classify(self, message: str) -> ClassifierOutput:
        request = self.build_request(message)
        try:
            response = self.client.responses.create(
                **request.as_params(),
                timeout=self.config.timeout_seconds,
            )
        except openai.APIStatusError as exc:
            logger.error("Backend returned HTTP %s: %s", exc.status_code, exc.body)
            raise TransportError(
                f"cannot do request to API: {exc}",
                status_code=exc.status_code,
                payload=exc.body,
            ) from exc
        except openai.APIError as exc:
            logger.error("Backend request failed: %s", exc)
            raise TransportError(f"cannot do request to API: {exc}", payload=exc.body) from exc

        completed = response.status == "completed"
        if not completed:
            logger.warning("Response %s finished with status %s", response.id, response.status)

        return ClassifierOutput(
            text=response.output_text,
            model=response.model,
            completed=completed,
            response_id=response.id,
        )


def create_classifier_client(config: Config) -> ClassifierClient:
    """
    Factory for the classifier client from startup configuration.
    """

    if not config.openai_api_key:
        raise ConfigurationError("OPENAI_API_KEY is not set")

    llm_config = LLMConfig.from_config(config)
    client = OpenAI(
        api_key=config.openai_api_key,
        base_url=config.openai_base_url,
        timeout=llm_config.timeout_seconds,
        max_retries=0,
    )
    logger.info("Classifier using model %s (base_url=%s)", llm_config.model, config.openai_base_url or "<default>")
    return ClassifierClient(config=llm_config, client=client)
