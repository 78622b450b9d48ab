"""Turns a provider's HTTP response into a bounded, displayable result.

Parsing happens in two stages. The outer stage reads the transport
envelope (status code and JSON body); the inner stage, only used by
providers that wrap the model's own generation, is handled by the
provider's ``extract_candidate``. Each stage raises its own error kind so
"the server failed" and "the model wrote garbage" stay distinguishable.

Usage:
    response = await transport.send(provider.build_request(text, key))
    result = normalize(response, provider)
"""
from __future__ import annotations

import math
import re
import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

import httpx

from ..core.errors import MalformedResponseError, ProviderStatusError
from ..models.schemas import NormalizedResult

if TYPE_CHECKING:
    from .providers import Provider

logger = logging.getLogger(__name__)

HUMAN_SCORE_FIELDS = ("human_percentage", "human_score")
AI_SCORE_FIELDS = ("ai_percentage", "ai_score")
VERDICT_FIELDS = ("conclusion", "verdict")

_FENCE_OPEN = re.compile(r"^```[\w-]*")
_FENCE_CLOSE = re.compile(r"```$")


def strip_code_fences(text: Optional[str]) -> str:
    """Remove surrounding ```json ... ``` markup and whitespace.

    Repeats until nothing changes, so the result is a fixed point and a
    second call is a no-op.
    """
    cleaned = (text or "").strip()
    while True:
        stripped = _FENCE_CLOSE.sub("", _FENCE_OPEN.sub("", cleaned)).strip()
        if stripped == cleaned:
            return cleaned
        cleaned = stripped


def clamp_score(value: Any) -> int:
    """Round half up and bound to [0, 100]. Missing, non-numeric or NaN values are 0."""
    if value is None or isinstance(value, bool):
        return 0
    # JSON integers can be arbitrarily large, too large for a float
    if isinstance(value, int):
        return min(100, max(0, value))
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    if math.isnan(number):
        return 0
    if math.isinf(number):
        return 100 if number > 0 else 0
    return min(100, max(0, math.floor(number + 0.5)))


def first_present(data: Dict[str, Any], names: tuple) -> Any:
    for name in names:
        if data.get(name) is not None:
            return data[name]
    return None


def error_message(error: Any) -> Optional[str]:
    """Proxy backends send ``error`` as a string, Google APIs as ``{"message": ...}``."""
    if isinstance(error, str) and error.strip():
        return error.strip()
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
    return None


def _status_error(response: httpx.Response, provider: Provider) -> ProviderStatusError:
    message = None
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        message = error_message(data.get("error"))
    return ProviderStatusError(response.status_code, message or provider.status_fallback_message(response.status_code))


def normalize(response: httpx.Response, provider: Provider) -> NormalizedResult:
    if not response.is_success:
        err = _status_error(response, provider)
        logger.warning("%s provider answered HTTP %s: %s", provider.kind.value, err.status_code, err.message)
        raise err

    try:
        data = response.json()
    except ValueError as exc:
        logger.warning("%s provider returned a non-JSON body", provider.kind.value)
        raise MalformedResponseError("The server returned a response that could not be read.") from exc

    candidate = provider.extract_candidate(data)

    human_score = clamp_score(first_present(candidate, HUMAN_SCORE_FIELDS))
    ai_score = clamp_score(first_present(candidate, AI_SCORE_FIELDS))
    verdict = first_present(candidate, VERDICT_FIELDS)
    if not isinstance(verdict, str) or not verdict.strip():
        verdict = provider.fallback_verdict(ai_score)

    return NormalizedResult(human_score=human_score, ai_score=ai_score, verdict=verdict.strip())
