"""
flagparse - A small command-line flag parser.

This package classifies an argument vector into typed flags (string, number
or boolean, with aliases and inline or separate values) and positional
arguments, reporting the first parse error as a result value. Flag defaults
and parser options can also be loaded from YAML or JSON files.
"""

from .config import ParserOptions, load_config_file
from .errors import (
    CallbackError,
    DuplicateFlagKeyError,
    FlagError,
    FlagValueError,
    UnknownFlagError,
)
from .flag import Flag, FlagKind, ParseResult
from .parser import FlagParser
from .registry import FlagRegistry

__version__ = "1.0.0"
__all__ = [
    "CallbackError",
    "DuplicateFlagKeyError",
    "Flag",
    "FlagError",
    "FlagKind",
    "FlagParser",
    "FlagRegistry",
    "FlagValueError",
    "ParseResult",
    "ParserOptions",
    "UnknownFlagError",
    "load_config_file",
]
