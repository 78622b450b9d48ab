"""
The two endpoints an analysis can be sent to.

- ProxyProvider: our own backend (``/api/detect``). It holds its own key,
  so only the text is sent and the reply is already flat JSON.
- GeminiProvider: the Gemini ``generateContent`` API called directly with
  the user's key. The model answers with text that is itself a JSON
  object, possibly wrapped in a markdown code fence.

Each provider knows how to build its request, how to dig the candidate
object out of a reply, which verdict to show when the reply has none, and
how to classify an AI score for display. The thresholds differ between
the two and are kept as they are.
"""
from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from ..core.config import settings
from ..core.errors import (
    LogicalProviderError,
    MalformedResponseError,
    MissingCredentialError,
    UnparseableProviderOutputError,
)
from ..models.schemas import Severity
from .normalizer import error_message, strip_code_fences

logger = logging.getLogger(__name__)


class ProviderKind(str, Enum):
    PROXY = "proxy"
    GEMINI = "gemini"


@dataclass
class OutboundRequest:
    url: str
    json: Dict[str, Any]
    # query parameters; the Gemini key travels here and is never logged
    params: Dict[str, str] = field(default_factory=dict)
    method: str = "POST"


class Provider(ABC):
    kind: ProviderKind

    def __init__(self, url: str):
        self.url = url

    @abstractmethod
    def build_request(self, text: str, credential: Optional[str] = None) -> OutboundRequest:
        ...

    @abstractmethod
    def extract_candidate(self, data: Any) -> Dict[str, Any]:
        """Return the object holding the scores, or raise a typed error."""

    @abstractmethod
    def fallback_verdict(self, ai_score: int) -> str:
        ...

    @abstractmethod
    def severity_of(self, ai_score: int) -> Severity:
        ...

    def status_fallback_message(self, status_code: int) -> str:
        return "An unknown server error occurred."


class ProxyProvider(Provider):
    kind = ProviderKind.PROXY

    def build_request(self, text: str, credential: Optional[str] = None) -> OutboundRequest:
        return OutboundRequest(url=self.url, json={"text": text})

    def extract_candidate(self, data: Any) -> Dict[str, Any]:
        if not isinstance(data, dict):
            raise MalformedResponseError("The server returned a response that could not be read.")
        # the backend may report a logical error with a 2xx status
        if data.get("error"):
            raise LogicalProviderError(error_message(data["error"]) or "An unknown server error occurred.")
        return data

    def fallback_verdict(self, ai_score: int) -> str:
        return "Highly likely written by AI." if ai_score > 50 else "Likely written by a human."

    def severity_of(self, ai_score: int) -> Severity:
        if ai_score > 75:
            return Severity.WARNING
        if ai_score > 50:
            return Severity.WARNING_MILD
        return Severity.SUCCESS


GEMINI_PROMPT = (
    "You are an expert at telling human writing apart from text produced by large language models. "
    "Analyze the text between the markers below and reply with ONLY a single JSON object, no prose "
    "and no markdown, containing exactly these three fields:\n"
    '  "ai_score": an integer from 0 to 100, your confidence that the text was machine-generated;\n'
    '  "human_score": an integer equal to 100 minus ai_score;\n'
    '  "verdict": a short one-sentence conclusion.\n\n'
    "TEXT START\n{text}\nTEXT END"
)


class GeminiProvider(Provider):
    kind = ProviderKind.GEMINI

    def build_request(self, text: str, credential: Optional[str] = None) -> OutboundRequest:
        if not credential:
            raise MissingCredentialError("Please save your Gemini API key before analyzing.")
        payload = {
            "contents": [{"role": "user", "parts": [{"text": GEMINI_PROMPT.format(text=text)}]}],
            "config": {"temperature": 0},
        }
        return OutboundRequest(url=self.url, json=payload, params={"key": credential})

    def extract_candidate(self, data: Any) -> Dict[str, Any]:
        if not isinstance(data, dict):
            raise MalformedResponseError("The AI provider returned a response that could not be read.")
        message = error_message(data.get("error"))
        if message:
            raise LogicalProviderError(message)
        feedback = data.get("promptFeedback") or {}
        if not isinstance(feedback, dict):
            raise MalformedResponseError("The AI provider returned a response that could not be read.")
        block_reason = feedback.get("blockReason")
        if block_reason:
            raise LogicalProviderError(f"The AI provider refused to analyze this text ({block_reason}).")

        try:
            generated = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            generated = None
        if not isinstance(generated, str):
            raise MalformedResponseError("The AI provider response did not contain any generated text.")

        try:
            candidate = json.loads(strip_code_fences(generated))
        except json.JSONDecodeError as exc:
            logger.warning("Gemini output is not valid JSON (%d chars)", len(generated))
            raise UnparseableProviderOutputError("Could not parse the AI response. Please try again.") from exc
        if not isinstance(candidate, dict):
            raise UnparseableProviderOutputError("Could not parse the AI response. Please try again.")
        return candidate

    def fallback_verdict(self, ai_score: int) -> str:
        return "Analysis complete (low confidence)."

    def severity_of(self, ai_score: int) -> Severity:
        if ai_score > 70:
            return Severity.WARNING
        if ai_score > 40:
            return Severity.CAUTION
        return Severity.SUCCESS

    def status_fallback_message(self, status_code: int) -> str:
        return f"The AI provider returned an error (HTTP {status_code})."


def get_provider(name: Optional[str] = None) -> Provider:
    normalized = (name or settings.PROVIDER or "").strip().lower()
    if normalized in {ProviderKind.PROXY.value, ""}:
        return ProxyProvider(settings.PROXY_URL)
    if normalized == ProviderKind.GEMINI.value:
        return GeminiProvider(settings.GEMINI_API_URL)
    raise ValueError(f"Unknown detection provider: {name}")
