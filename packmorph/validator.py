"""
Pre-tokenizing validation.

Rejects input that is empty or that composes the package manager command
with other shell commands (`;`, newlines, `&&`, `||`, subshells). This is a
regex heuristic, not a shell grammar.
"""

import re

from packmorph.constants import EXEC_SHORTHANDS, INVALID_COMMAND_PATTERNS
from packmorph.results import ErrorReason


def select_pattern(command: str) -> re.Pattern[str]:
    """
    Choose the forbidden pattern for `command`.

    Exec invocations (`npx`, `bunx`, `<manager> dlx`) use the exec variant so
    that a parenthesized prefix may be followed by `npx` or `bunx`.
    """
    words = command.split()
    if words and (words[0] in EXEC_SHORTHANDS or (len(words) > 1 and words[1] == "dlx")):
        return INVALID_COMMAND_PATTERNS["exec"]
    return INVALID_COMMAND_PATTERNS["standard"]


def validate_command(command: str, pattern: re.Pattern[str] | None = None) -> ErrorReason | None:
    """
    Check `command` before tokenizing.

    Args:
        command: The raw command line
        pattern: Forbidden pattern; chosen with select_pattern when omitted

    Returns:
        None if the command may be tokenized, otherwise the rejection reason
    """
    trimmed = command.strip()
    if not trimmed:
        return ErrorReason.NOT_SUPPORTED_COMMAND

    if pattern is None:
        pattern = select_pattern(trimmed)
    if pattern.search(trimmed):
        return ErrorReason.NOT_SUPPORTED_COMMAND

    return None
