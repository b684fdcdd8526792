"""Unit tests for howto.llm."""

from unittest.mock import MagicMock, patch

import pytest

from howto.errors import ProviderError
from howto.llm import LiteLLMClient, query_llm
from howto.prompt import build_request


def _make_choice(content):
    choice = MagicMock()
    choice.message.content = content
    return choice


def _make_response(*contents):
    response = MagicMock()
    response.choices = [_make_choice(c) for c in contents]
    return response


class StubClient:
    def __init__(self, candidates=None, error=None):
        self.candidates = candidates if candidates is not None else []
        self.error = error
        self.requests = []

    def complete(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.candidates


# ---------------------------------------------------------------------------
# LiteLLMClient
# ---------------------------------------------------------------------------


class TestLiteLLMClient:
    @patch("howto.llm.litellm.completion")
    def test_passes_request_fields(self, mock_completion):
        mock_completion.return_value = _make_response("<command>ls</command>")
        request = build_request("list files")

        LiteLLMClient(api_key="sk-test").complete(request)

        mock_completion.assert_called_once_with(
            model=request.model,
            messages=list(request.messages),
            temperature=0.0,
            max_tokens=1024,
            api_key="sk-test",
        )

    @patch("howto.llm.litellm.completion")
    def test_returns_candidate_contents_in_order(self, mock_completion):
        mock_completion.return_value = _make_response("first", None, "last")
        candidates = LiteLLMClient(api_key="sk-test").complete(build_request("x"))
        assert candidates == ["first", None, "last"]


# ---------------------------------------------------------------------------
# query_llm()
# ---------------------------------------------------------------------------


class TestQueryLlm:
    def test_returns_last_candidate(self):
        client = StubClient(candidates=["first", "last"])
        assert query_llm(build_request("x"), client) == "last"

    def test_sends_request_unchanged(self):
        client = StubClient(candidates=["reply"])
        request = build_request("list files")
        query_llm(request, client)
        assert client.requests == [request]

    def test_missing_content_passes_through_as_none(self):
        client = StubClient(candidates=[None])
        assert query_llm(build_request("x"), client) is None

    def test_no_candidates_raises(self):
        client = StubClient(candidates=[])
        with pytest.raises(ProviderError, match="No response from model"):
            query_llm(build_request("x"), client)

    def test_client_error_is_wrapped(self):
        cause = ConnectionError("network down")
        client = StubClient(error=cause)
        with pytest.raises(ProviderError, match="request failed") as exc_info:
            query_llm(build_request("x"), client)

        assert exc_info.value.__cause__ is cause
        assert "network down" in str(exc_info.value)

    def test_does_not_log_api_key(self, caplog):
        caplog.set_level("DEBUG", logger="howto")
        with patch("howto.llm.litellm.completion", return_value=_make_response("ok")):
            query_llm(build_request("x"), LiteLLMClient(api_key="sk-secret"))
        assert "sk-secret" not in caplog.text
