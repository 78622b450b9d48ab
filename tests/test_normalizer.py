import httpx
import pytest

from textcheck.core.errors import (
    LogicalProviderError,
    MalformedResponseError,
    ProviderStatusError,
    UnparseableProviderOutputError,
)
from textcheck.services.normalizer import clamp_score, normalize, strip_code_fences

from conftest import gemini_body


class TestClampScore:
    @pytest.mark.parametrize("value, expected", [
        (30, 30),
        (84.4, 84),
        (84.5, 85),
        (2.5, 3),
        (150, 100),
        (100.4, 100),
        (-5, 0),
        ("85", 85),
    ])
    def test_rounds_and_bounds(self, value, expected):
        assert clamp_score(value) == expected

    @pytest.mark.parametrize("value", [None, "abc", [], {}, True, float("nan")])
    def test_missing_or_non_numeric_is_zero(self, value):
        assert clamp_score(value) == 0

    def test_integer_too_large_for_float(self):
        assert clamp_score(10 ** 400) == 100
        assert clamp_score(-(10 ** 400)) == 0

    @pytest.mark.parametrize("value, expected", [
        (float("inf"), 100),
        (float("-inf"), 0),
        (1e400, 100),
        ("1e400", 100),
        ("-Infinity", 0),
    ])
    def test_infinite_values_are_bounded(self, value, expected):
        assert clamp_score(value) == expected


class TestStripCodeFences:
    def test_json_fence(self):
        assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_bare_fence_and_whitespace(self):
        assert strip_code_fences('  \n```\n{"a": 1}\n```  \n') == '{"a": 1}'

    def test_plain_text_untouched(self):
        assert strip_code_fences('{"a": 1}') == '{"a": 1}'

    @pytest.mark.parametrize("text", [
        '```json\n{"a": 1}\n```',
        '```json\n```json\n{"a": 1}\n```\n```',
        "```",
        "",
        '  {"verdict": "uses ``` inside"}  ',
    ])
    def test_idempotent(self, text):
        once = strip_code_fences(text)
        assert strip_code_fences(once) == once


class TestNormalizeProxy:
    def test_scores_read_directly(self, proxy):
        result = normalize(httpx.Response(200, json={"human_percentage": 30, "ai_percentage": 70}), proxy)
        assert (result.human_score, result.ai_score) == (30, 70)
        assert result.verdict == "Highly likely written by AI."

    def test_human_fallback_verdict(self, proxy):
        result = normalize(httpx.Response(200, json={"human_percentage": 80, "ai_percentage": 50}), proxy)
        assert result.verdict == "Likely written by a human."

    def test_conclusion_is_kept(self, proxy):
        body = {"human_percentage": 10, "ai_percentage": 90, "conclusion": "Machine text."}
        assert normalize(httpx.Response(200, json=body), proxy).verdict == "Machine text."

    def test_scores_are_not_forced_to_sum_to_100(self, proxy):
        result = normalize(httpx.Response(200, json={"human_percentage": 60, "ai_percentage": 60}), proxy)
        assert result.human_score + result.ai_score == 120

    def test_missing_fields_default_to_zero(self, proxy):
        result = normalize(httpx.Response(200, json={}), proxy)
        assert (result.human_score, result.ai_score) == (0, 0)
        assert result.verdict == "Likely written by a human."

    def test_huge_json_integer(self, proxy):
        body = '{"human_percentage": 1' + "0" * 400 + ', "ai_percentage": 5}'
        response = httpx.Response(200, content=body.encode(), headers={"content-type": "application/json"})
        result = normalize(response, proxy)
        assert (result.human_score, result.ai_score) == (100, 5)

    def test_infinite_json_number(self, proxy):
        response = httpx.Response(200, content=b'{"human_percentage": -1e400, "ai_percentage": 1e400}')
        result = normalize(response, proxy)
        assert (result.human_score, result.ai_score) == (0, 100)

    def test_alternate_field_names(self, proxy):
        result = normalize(httpx.Response(200, json={"human_score": 12, "ai_score": 88}), proxy)
        assert (result.human_score, result.ai_score) == (12, 88)

    def test_error_field_on_success_status(self, proxy):
        with pytest.raises(LogicalProviderError) as exc_info:
            normalize(httpx.Response(200, json={"error": "Text too long", "ai_percentage": 99}), proxy)
        assert exc_info.value.message == "Text too long"

    def test_non_success_uses_error_field(self, proxy):
        with pytest.raises(ProviderStatusError) as exc_info:
            normalize(httpx.Response(500, json={"error": "API key rejected"}), proxy)
        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "API key rejected"

    def test_non_success_generic_message(self, proxy):
        with pytest.raises(ProviderStatusError) as exc_info:
            normalize(httpx.Response(502, text="<html>Bad gateway</html>"), proxy)
        assert exc_info.value.message == "An unknown server error occurred."

    def test_non_success_ignores_scores_in_body(self, proxy):
        with pytest.raises(ProviderStatusError):
            normalize(httpx.Response(400, json={"human_percentage": 40, "ai_percentage": 60}), proxy)

    def test_non_json_body(self, proxy):
        with pytest.raises(MalformedResponseError) as exc_info:
            normalize(httpx.Response(200, text="not json"), proxy)
        assert not isinstance(exc_info.value, UnparseableProviderOutputError)


class TestNormalizeGemini:
    def test_fenced_output(self, gemini):
        generated = '```json\n{"ai_score":85,"human_score":15,"verdict":"Reads like a model."}\n```'
        result = normalize(httpx.Response(200, json=gemini_body(generated)), gemini)
        assert (result.human_score, result.ai_score) == (15, 85)
        assert result.verdict == "Reads like a model."

    def test_missing_verdict_fallback(self, gemini):
        result = normalize(httpx.Response(200, json=gemini_body('{"ai_score": 20}')), gemini)
        assert result.human_score == 0
        assert result.verdict == "Analysis complete (low confidence)."

    def test_truncated_output(self, gemini):
        with pytest.raises(UnparseableProviderOutputError):
            normalize(httpx.Response(200, json=gemini_body('{"ai_score": 85, "human_sc')), gemini)

    def test_output_that_is_not_an_object(self, gemini):
        with pytest.raises(UnparseableProviderOutputError):
            normalize(httpx.Response(200, json=gemini_body("[85, 15]")), gemini)

    def test_no_generated_text(self, gemini):
        with pytest.raises(MalformedResponseError) as exc_info:
            normalize(httpx.Response(200, json={"candidates": []}), gemini)
        assert not isinstance(exc_info.value, UnparseableProviderOutputError)

    def test_blocked_prompt(self, gemini):
        with pytest.raises(LogicalProviderError) as exc_info:
            normalize(httpx.Response(200, json={"promptFeedback": {"blockReason": "SAFETY"}}), gemini)
        assert "SAFETY" in exc_info.value.message

    def test_quota_error(self, gemini):
        response = httpx.Response(429, json={"error": {"code": 429, "message": "quota exceeded"}})
        with pytest.raises(ProviderStatusError) as exc_info:
            normalize(response, gemini)
        assert exc_info.value.message == "quota exceeded"

    @pytest.mark.parametrize("body", [
        {"promptFeedback": "blocked"},
        {"promptFeedback": ["SAFETY"]},
        {"candidates": [{"content": "not an object"}]},
        {"candidates": [{"content": {"parts": "text"}}]},
        {"candidates": "none"},
        {"candidates": [{"content": {"parts": [{"text": 42}]}}]},
    ])
    def test_envelope_with_wrong_shapes(self, gemini, body):
        with pytest.raises(MalformedResponseError) as exc_info:
            normalize(httpx.Response(200, json=body), gemini)
        assert not isinstance(exc_info.value, UnparseableProviderOutputError)

    def test_status_without_message(self, gemini):
        with pytest.raises(ProviderStatusError) as exc_info:
            normalize(httpx.Response(503), gemini)
        assert "503" in exc_info.value.message
