"""
Argument re-quoting and command assembly.

Arguments are printed the way the user wrote them: unquoted input stays
unquoted, quoted input is quoted again with the same quote character.
"""

from typing import Iterable


def quote_argument(value: str, was_quoted: bool = False, quote_char: str | None = None) -> str:
    """
    Decide the printed form of an argument.

    Args:
        value: The argument text with quotes and escapes removed
        was_quoted: Whether the argument was quoted in the input
        quote_char: The quote character used in the input

    Returns:
        `value` unchanged when it was not quoted; otherwise `value` wrapped
        in `quote_char`, with backslashes and that character escaped inside it

    Example:
        >>> quote_argument('some"thing', True, '"')
        '"some\\\\"thing"'
    """
    if not was_quoted:
        return value
    quote = quote_char or '"'
    escaped = value.replace("\\", "\\\\").replace(quote, "\\" + quote)
    return f"{quote}{escaped}{quote}"


def build_command(parts: Iterable[str | Iterable[str]]) -> str:
    """Join command parts with single spaces, flattening nested lists and dropping empty parts."""
    flat: list[str] = []
    for part in parts:
        if isinstance(part, str):
            flat.append(part)
        else:
            flat.extend(part)
    return " ".join(part for part in flat if part != "")
