"""Prompt construction for howto."""

from howto.config import MAX_TOKENS, MODEL, TEMPERATURE
from howto.models import CompletionRequest, LLMMessage

SYSTEM_PROMPT = """\
You are an expert Unix system operator. You have intimate and detailed knowledge \
of CLI tools, both old and new.

When the user asks for a command that accomplishes a high-level action, you \
respond with a CLI command that accomplishes that action.

Example input:
<action>
go to my home directory
</action>

Example output:
<command>
cd ~
</command>

If the action cannot be accomplished via the CLI, you must respond with:
<no_command/>
"""


def wrap_action(action: str) -> str:
    """Wrap the trimmed action in the tags the system prompt describes."""
    return f"<action>\n{action.strip()}\n</action>"


def build_messages(action: str) -> list[LLMMessage]:
    """Build the message list for the LLM call."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": wrap_action(action)},
    ]


def build_request(action: str) -> CompletionRequest:
    """Build the full completion request for an action."""
    return CompletionRequest(
        model=MODEL,
        temperature=TEMPERATURE,
        max_tokens=MAX_TOKENS,
        messages=tuple(build_messages(action)),
    )
