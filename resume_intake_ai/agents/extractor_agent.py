"""Extraction Agent: prompt the language model for a resume JSON object, falling back across models."""

import asyncio
from enum import Enum
from typing import Any, List, Optional

import httpx
import openai
from openai import AsyncOpenAI
from pydantic import BaseModel, Field

from resume_intake_ai.agents.prompts import MODEL_PROBE_PROMPT, build_extraction_prompt
from resume_intake_ai.config import ExtractionConfig
from resume_intake_ai.schemas.resume_record import response_json_schema
from resume_intake_ai.utils.errors import (
    AllModelsExhaustedError,
    ContentBlockedError,
    ModelError,
    ModelRequestError,
)
from resume_intake_ai.utils.logger import get_logger

logger = get_logger(__name__)

# Error codes / message fragments meaning "this model id cannot serve the request"
_UNAVAILABLE_CODES = {"model_not_found", "unsupported_model", "model_not_available"}
_UNAVAILABLE_PHRASES = ("does not exist", "not found", "not supported", "unsupported model", "is not available")
_BLOCKED_CODES = {"content_policy_violation", "content_filter"}


class ErrorClass(str, Enum):
    AVAILABILITY = "availability"
    CONTENT_BLOCKED = "content_blocked"
    FATAL = "fatal"


def classify_model_error(error: BaseException) -> ErrorClass:
    """
    Decide whether a failed call should move on to the next model.
    Only model-specific unavailability (and timeouts) is retryable; auth,
    quota, permission and other request errors are fatal for the whole list.
    """
    if isinstance(error, (asyncio.TimeoutError, openai.APITimeoutError)):
        return ErrorClass.AVAILABILITY
    if isinstance(error, (openai.NotFoundError, openai.InternalServerError)):
        return ErrorClass.AVAILABILITY
    if isinstance(error, openai.BadRequestError):
        code = (getattr(error, "code", None) or "").lower()
        if code in _BLOCKED_CODES:
            return ErrorClass.CONTENT_BLOCKED
        if code in _UNAVAILABLE_CODES:
            return ErrorClass.AVAILABILITY
        message = str(getattr(error, "message", "") or error).lower()
        if any(phrase in message for phrase in _UNAVAILABLE_PHRASES):
            return ErrorClass.AVAILABILITY
    return ErrorClass.FATAL


def _response_text(response: Any, model: str) -> str:
    """Text payload of a chat completion; a missing or refused payload is a content block."""
    choice = response.choices[0] if getattr(response, "choices", None) else None
    if not choice or not choice.message:
        raise ContentBlockedError(model, "no choices in response")
    if choice.finish_reason == "content_filter":
        raise ContentBlockedError(model, "blocked by content filter")
    refusal = getattr(choice.message, "refusal", None)
    if refusal:
        raise ContentBlockedError(model, f"refused: {refusal}")
    content = choice.message.content
    if not content or not content.strip():
        raise ContentBlockedError(model, "empty response")
    return content


class ExtractionOrchestrator:
    """Sends the extraction prompt to each configured model in priority order."""

    def __init__(self, config: ExtractionConfig, client: Optional[Any] = None) -> None:
        self._config = config
        self._client = client

    @property
    def config(self) -> ExtractionConfig:
        return self._config

    def get_client(self) -> Any:
        """Return the injected client, or build an AsyncOpenAI client on first use."""
        if self._client is None:
            if not self._config.api_key:
                logger.error("OPENAI_API_KEY is not set; cannot run extraction")
                raise ModelError("OPENAI_API_KEY is not set")
            self._client = AsyncOpenAI(
                api_key=self._config.api_key,
                base_url=self._config.base_url,
                timeout=httpx.Timeout(self._config.timeout_seconds, connect=10.0),
                max_retries=self._config.max_retries,
            )
        return self._client

    def _request_kwargs(self, model: str, prompt: str) -> dict:
        kwargs: dict = {
            "model": model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self._config.temperature,
            "max_tokens": self._config.max_tokens,
        }
        if self._config.enforce_response_schema:
            kwargs["response_format"] = {
                "type": "json_schema",
                "json_schema": {
                    "name": "resume_record",
                    "schema": response_json_schema(self._config.skills_variant),
                    "strict": False,
                },
            }
        return kwargs

    async def _generate(self, model: str, prompt: str) -> str:
        client = self.get_client()
        response = await asyncio.wait_for(
            client.chat.completions.create(**self._request_kwargs(model, prompt)),
            timeout=self._config.timeout_seconds,
        )
        return _response_text(response, model)

    async def extract_structured(self, text: str) -> str:
        """
        Return the raw text of the first model that answers.

        Raises ContentBlockedError when a model declines, ModelRequestError for
        non-availability failures, AllModelsExhaustedError when no candidate
        is available.
        """
        prompt = build_extraction_prompt(text, self._config.skills_variant)
        attempted: List[str] = []
        last_error: Optional[BaseException] = None

        for model in self._config.model_candidates:
            attempted.append(model)
            logger.info("Requesting extraction from model %s", model)
            try:
                raw = await self._generate(model, prompt)
            except (openai.OpenAIError, asyncio.TimeoutError) as e:
                error_class = classify_model_error(e)
                if error_class == ErrorClass.AVAILABILITY:
                    logger.warning("Model %s unavailable (%s); trying next candidate", model, type(e).__name__)
                    last_error = e
                    continue
                if error_class == ErrorClass.CONTENT_BLOCKED:
                    logger.warning("Model %s blocked the request: %s", model, e)
                    raise ContentBlockedError(model, str(e)) from e
                logger.error("Model %s failed with a non-retryable error: %s", model, e)
                raise ModelRequestError(model, e) from e
            logger.info("Model %s returned %s characters", model, len(raw))
            return raw

        logger.error("All model candidates exhausted: %s", attempted)
        raise AllModelsExhaustedError(attempted, last_error) from last_error


class ModelProbeFailure(BaseModel):
    model: str
    error: str


class ModelProbeReport(BaseModel):
    """Which configured models currently answer a trivial prompt."""

    working: List[str] = Field(default_factory=list)
    failed: List[ModelProbeFailure] = Field(default_factory=list)


async def probe_models(config: ExtractionConfig, client: Optional[Any] = None) -> ModelProbeReport:
    """Send a liveness prompt to every candidate; unlike extraction, never stops early."""
    orchestrator = ExtractionOrchestrator(config, client=client)
    report = ModelProbeReport()
    for model in config.model_candidates:
        try:
            c = orchestrator.get_client()
            response = await asyncio.wait_for(
                c.chat.completions.create(
                    model=model,
                    messages=[{"role": "user", "content": MODEL_PROBE_PROMPT}],
                    max_tokens=10,
                ),
                timeout=config.timeout_seconds,
            )
            text = _response_text(response, model)
        except (openai.OpenAIError, asyncio.TimeoutError, ModelError) as e:
            logger.info("Probe %s failed: %s", model, e)
            report.failed.append(ModelProbeFailure(model=model, error=str(e) or type(e).__name__))
            continue
        logger.info("Probe %s ok: %s", model, text.strip()[:40])
        report.working.append(model)
    return report
