"""
Conversion of raw value text into typed flag values.
"""

import re

from result import Err, Ok, Result

from .flag import FlagData, FlagKind

# Decimal floating-point literal: optional minus sign, digits with an
# optional fraction, optional exponent with its own sign. A plus sign is
# rejected only at the start. No whitespace, no digit separators, no hex.
_NUMBER_RE = re.compile(
    r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?"
    r"|-?(?:inf|infinity|nan)",
    re.IGNORECASE,
)


def parse_number(text: str) -> Result[float, str]:
    """
    Parse `text` as a base-10 floating-point number.

    The whole text must be a number literal. Trailing garbage and surrounding
    whitespace are failures, not partial parses.
    """
    if _NUMBER_RE.fullmatch(text) is None:
        return Err(f"Invalid number value: '{text}'")
    return Ok(float(text))


def coerce(text: str, kind: FlagKind) -> Result[FlagData, str]:
    """
    Convert raw value text to the flag kind.

    String values are kept verbatim. Boolean flags never take a value from
    the command line, so asking for one is an error.

    Returns:
        Ok with the typed value, or Err with a description of the failure.
    """
    if kind is FlagKind.STRING:
        return Ok(text)
    if kind is FlagKind.NUMBER:
        return parse_number(text)
    return Err(f"Boolean flags do not take a value: '{text}'")
