"""Pull the generated command out of a model reply."""

import logging

from howto.errors import NoCommandError

log = logging.getLogger(__name__)

OPEN_TAG = "<command>"
CLOSE_TAG = "</command>"


def extract_command(reply: str | None) -> str:
    """Return the text between the first <command> and the first </command>.

    This is a plain substring search, not a markup parser. A reply without
    both tags, or with the closing tag first, raises NoCommandError; so does
    an explicit <no_command/> answer.
    """
    content = reply or ""
    start = content.find(OPEN_TAG)
    end = content.find(CLOSE_TAG)
    if start == -1 or end == -1 or end < start + len(OPEN_TAG):
        log.debug("no command block in reply (start=%d end=%d)", start, end)
        raise NoCommandError("No command could be generated for the action.")
    command = content[start + len(OPEN_TAG):end].strip()
    if not command:
        log.debug("command block in reply is empty")
        raise NoCommandError("No command could be generated for the action.")
    return command
