"""Core logic for howto."""

import logging

from howto.config import get_api_key
from howto.extract import extract_command
from howto.llm import ChatClient, LiteLLMClient, query_llm
from howto.prompt import build_request

log = logging.getLogger("howto")


def build_client() -> ChatClient:
    """Resolve the API key and build the default model client."""
    return LiteLLMClient(api_key=get_api_key())


def run(action: str, client: ChatClient | None = None) -> str:
    """Run the howto pipeline: resolve credentials, query the LLM, extract the command."""
    action = action.strip()
    log.debug("action=%r", action)
    if client is None:
        client = build_client()
    request = build_request(action)
    reply = query_llm(request, client)
    return extract_command(reply)
