"""Gemini generateContent client used as the extraction oracle."""

from __future__ import annotations

import time
from typing import Any

import httpx
from pydantic import BaseModel, SecretStr, ValidationError

from ..config import Settings, get_logger
from ..core.exceptions import OracleError


class OracleConfig(BaseModel):
    """Configuration for the Gemini client."""

    api_key: SecretStr | None = None
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    model: str = "gemini-2.5-flash"
    timeout: float = 30.0
    json_mode: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> OracleConfig:
        return cls(
            api_key=settings.gemini_api_key,
            base_url=settings.gemini_base_url,
            model=settings.gemini_model,
            timeout=settings.oracle_timeout,
            json_mode=settings.oracle_json_mode,
        )

    @property
    def is_configured(self) -> bool:
        return self.api_key is not None and bool(self.api_key.get_secret_value())


class GeminiPart(BaseModel):
    text: str | None = None


class GeminiContent(BaseModel):
    parts: list[GeminiPart] = []


class GeminiCandidate(BaseModel):
    content: GeminiContent | None = None
    finishReason: str | None = None


class GeminiResponse(BaseModel):
    """The subset of the generateContent response the client reads."""

    candidates: list[GeminiCandidate] = []


class GeminiClient:
    """Async client for the Gemini generateContent endpoint."""

    provider = "gemini"

    def __init__(self, config: OracleConfig, transport: httpx.AsyncBaseTransport | None = None):
        """Initialize Gemini client.

        Args:
            config: Oracle configuration
            transport: Optional transport, used to stub the endpoint in tests
        """
        self.config = config
        self.logger = get_logger("oracle.gemini")
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=httpx.Timeout(config.timeout),
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    async def generate(self, prompt: str) -> str:
        """Send a prompt and return the first candidate's first text part.

        Args:
            prompt: Full prompt text

        Returns:
            The generated text, untouched

        Raises:
            OracleError: If the call fails or the reply holds no text
        """
        if not self.config.is_configured:
            raise OracleError("Gemini API key is not configured", provider=self.provider)

        start_time = time.time()
        payload = await self._make_api_call(self._prepare_request(prompt))
        text = self._process_response(payload)

        self.logger.info(
            "Oracle reply received",
            model=self.config.model,
            response_length=len(text),
            processing_time_ms=int((time.time() - start_time) * 1000),
        )
        self.logger.debug("Oracle raw reply", text=text)
        return text

    def _prepare_request(self, prompt: str) -> dict[str, Any]:
        body: dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}
        if self.config.json_mode:
            body["generationConfig"] = {"responseMimeType": "application/json"}
        return body

    async def _make_api_call(self, body: dict[str, Any]) -> dict[str, Any]:
        """Make the HTTP call.

        Raises:
            OracleError: On timeouts, network errors, non-2xx statuses or a non-JSON body
        """
        api_key = self.config.api_key.get_secret_value() if self.config.api_key else ""
        try:
            response = await self._client.post(
                f"/models/{self.config.model}:generateContent",
                json=body,
                headers={"x-goog-api-key": api_key},
            )
        except httpx.TimeoutException as e:
            raise OracleError(
                f"Gemini request timed out after {self.config.timeout} seconds", provider=self.provider, original_error=e
            ) from e
        except httpx.HTTPError as e:
            raise OracleError(f"Gemini network error: {e}", provider=self.provider, original_error=e) from e

        if response.status_code != 200:
            raise OracleError(f"Gemini API error {response.status_code}: {response.text[:200]}", provider=self.provider)

        try:
            return response.json()
        except ValueError as e:
            raise OracleError("Gemini returned a non-JSON body", provider=self.provider, original_error=e) from e

    def _process_response(self, payload: dict[str, Any]) -> str:
        try:
            response = GeminiResponse.model_validate(payload)
        except ValidationError as e:
            raise OracleError("Unexpected Gemini response shape", provider=self.provider, original_error=e) from e

        if not response.candidates:
            raise OracleError("Gemini returned no candidates", provider=self.provider)

        content = response.candidates[0].content
        if content is None or not content.parts:
            raise OracleError("Gemini candidate has no content parts", provider=self.provider)

        return content.parts[0].text or ""

    async def health_check(self) -> bool:
        """The oracle is considered available when it has credentials."""
        return self.config.is_configured

    async def close(self) -> None:
        """Close HTTP client connections."""
        await self._client.aclose()
