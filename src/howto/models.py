"""Value types for howto."""

from typing import TypedDict

from pydantic import BaseModel, ConfigDict


class LLMMessage(TypedDict):
    """Single chat message for the LLM API."""

    role: str
    content: str


class CompletionRequest(BaseModel):
    """Everything sent to the chat-completion service for one action."""

    model_config = ConfigDict(frozen=True)

    model: str
    temperature: float
    max_tokens: int
    messages: tuple[dict[str, str], ...]
