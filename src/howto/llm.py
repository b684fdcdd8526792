"""LLM interaction for howto."""

import json
import logging
from typing import Protocol

import litellm

from howto.errors import ProviderError
from howto.models import CompletionRequest

log = logging.getLogger(__name__)

# Suppress litellm's noisy logging
litellm.suppress_debug_info = True


class ChatClient(Protocol):
    """Anything that can turn a completion request into candidate replies."""

    def complete(self, request: CompletionRequest) -> list[str | None]: ...


class LiteLLMClient:
    """ChatClient backed by litellm."""

    def __init__(self, api_key: str) -> None:
        self._api_key = api_key

    def complete(self, request: CompletionRequest) -> list[str | None]:
        response = litellm.completion(
            model=request.model,
            messages=list(request.messages),
            temperature=request.temperature,
            max_tokens=request.max_tokens,
            api_key=self._api_key,
        )
        return [choice.message.content for choice in response.choices]


def query_llm(request: CompletionRequest, client: ChatClient) -> str | None:
    """Send the request and return the content of the last candidate reply."""
    log.debug("model=%s", request.model)
    log.debug("messages=%s", json.dumps(list(request.messages), indent=2))
    try:
        candidates = client.complete(request)
    except Exception as e:
        raise ProviderError(f"Unable to generate command. OpenAI request failed: {e}") from e

    if not candidates:
        raise ProviderError("Unable to generate command. No response from model.")

    content = candidates[-1]
    log.debug("raw response: %s", content)
    return content
