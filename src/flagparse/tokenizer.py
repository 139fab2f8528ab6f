"""
Splitting of raw command-line tokens into flag names and inline values.
"""

from typing import NamedTuple, Optional


class FlagToken(NamedTuple):
    """
    A flag-shaped token split into its parts.

    `inline_value` is None when the token holds no separator, and an empty
    string when the separator is the last thing in the token (``--name=``).
    """

    name: str
    inline_value: Optional[str] = None

    @property
    def has_separator(self) -> bool:
        return self.inline_value is not None


def is_flag(token: str, prefix: str) -> bool:
    """
    Return True if `token` starts with `prefix` and has something after it.

    A token that is exactly the prefix is not a flag.
    """
    return len(token) > len(prefix) and token.startswith(prefix)


def split_flag(token: str, prefix: str, separator: str) -> FlagToken:
    """
    Split a flag-shaped token into its name and optional inline value.

    The search for the separator starts right after the prefix and the whole
    separator must match. Without a separator the name is everything after
    the prefix.

    Args:
        token: A token for which is_flag() holds.
        prefix: The flag prefix, e.g. "--".
        separator: The name/value separator, e.g. "=".

    Returns:
        FlagToken with the candidate name and the inline value, if any.
    """
    start = len(prefix)
    end = token.find(separator, start)
    if end == -1:
        return FlagToken(token[start:])
    return FlagToken(token[start:end], token[end + len(separator) :])


def tokenize(token: str, prefix: str, separator: str) -> Optional[FlagToken]:
    """Return the split flag for `token`, or None if it is positional."""
    if not is_flag(token, prefix):
        return None
    return split_flag(token, prefix, separator)
