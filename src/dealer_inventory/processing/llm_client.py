from __future__ import annotations

import json
import logging
import re
from typing import Any

import requests

from dealer_inventory.core.config import (
    GEMINI_API_BASE,
    GEMINI_MAX_OUTPUT_TOKENS,
    GEMINI_MODEL,
    GEMINI_TIMEOUT_SEC,
)
from dealer_inventory.core.constants import VALUATION_FIELD_MAP
from dealer_inventory.core.errors import CompletionError
from dealer_inventory.models import ValuationResult

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?", flags=re.IGNORECASE)


def _extract_gemini_text(payload: dict[str, Any]) -> str:
    # pull the text part out of a generateContent response
    try:
        return payload["candidates"][0]["content"]["parts"][0]["text"].strip()
    except Exception:
        return ""


def strip_code_fences(text: str) -> str:
    """Remove ```json / ``` wrappers the model adds despite being told not to."""
    return _FENCE_RE.sub("", text or "").replace("```", "").strip()


def parse_valuation_json(text: str) -> ValuationResult:
    """Parse a completion into the four valuation fields.

    Raises ValueError when the cleaned text is not a JSON object. Missing keys
    become empty strings; numbers are kept as their string form.
    """
    cleaned = strip_code_fences(text)
    data = json.loads(cleaned)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    result: dict[str, str] = {}
    for key in VALUATION_FIELD_MAP:
        value = data.get(key)
        result[key] = "" if value is None else str(value).strip()
    return result  # type: ignore[return-value]


class GeminiCompletionClient:
    """`complete(prompt) -> text` over the Gemini REST API."""

    def __init__(
        self,
        *,
        api_key: str,
        api_base: str = GEMINI_API_BASE,
        model: str = GEMINI_MODEL,
        timeout_sec: int = GEMINI_TIMEOUT_SEC,
        max_output_tokens: int = GEMINI_MAX_OUTPUT_TOKENS,
        session: requests.Session | None = None,
    ) -> None:
        self._api_key = api_key
        self._url = f"{api_base.rstrip('/')}/models/{model}:generateContent"
        self._timeout_sec = timeout_sec
        self._max_output_tokens = max_output_tokens
        self._session = session or requests.Session()

    def _payload(self, prompt: str) -> dict[str, Any]:
        return {
            "contents": [
                {
                    "role": "user",
                    "parts": [{"text": prompt}],
                }
            ],
            "generationConfig": {
                "temperature": 0.2,
                "maxOutputTokens": self._max_output_tokens,
            },
        }

    def complete(self, prompt: str) -> str:
        # single attempt; a failed row is reported by the caller, never re-sent
        logger.debug("gemini request url=%s", self._url)
        try:
            resp = self._session.post(
                self._url,
                headers={"x-goog-api-key": self._api_key, "Content-Type": "application/json"},
                json=self._payload(prompt),
                timeout=self._timeout_sec,
            )
        except requests.RequestException as e:
            raise CompletionError(f"Gemini request failed: {type(e).__name__}: {e}") from e

        if not resp.ok:
            raise CompletionError(f"Gemini request failed: {resp.status_code} {resp.text[:200]}")

        try:
            data = resp.json()
        except ValueError as e:
            raise CompletionError("Gemini response body is not JSON") from e

        text = _extract_gemini_text(data)
        if not text:
            raise CompletionError("Gemini response has no text")
        return text

