"""
Flag declarations and parse results.

A Flag is declared once, before parsing starts. Only its `value` and
`triggered` fields change afterwards, when the parser assigns a value taken
from the command line.
"""

import dataclasses
import enum
from typing import Any, Callable, Optional, Union

from result import Err, Ok, Result

from .errors import (
    INVALID_FLAG_ID,
    INVALID_FLAG_VALUE,
    CallbackError,
    FlagError,
    FlagValueError,
    UnknownFlagError,
)

FlagData = Union[str, float, bool]


class FlagKind(enum.Enum):
    """The type of value a flag holds."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


_ZERO_VALUES = {FlagKind.NUMBER: 0.0, FlagKind.BOOLEAN: False}


def infer_kind(value: Any) -> FlagKind:
    """
    Infer the flag kind from a default value.

    bool is checked before the numeric types since it is a subclass of int.
    """
    if isinstance(value, bool):
        return FlagKind.BOOLEAN
    if isinstance(value, (int, float)):
        return FlagKind.NUMBER
    if isinstance(value, str):
        return FlagKind.STRING
    raise TypeError(
        f"Unsupported flag value: {value!r}. Must be a str, int, float or bool"
    )


def normalize_value(value: Any, kind: FlagKind) -> FlagData:
    """
    Check that `value` fits `kind` and return it in its stored form.

    Raises:
        TypeError: If the value does not match the flag kind.
    """
    if infer_kind(value) is not kind:
        raise TypeError(
            f"Expected a {kind.value} value, got {type(value).__name__}: {value!r}"
        )
    if kind is FlagKind.NUMBER:
        return float(value)
    return value


@dataclasses.dataclass(frozen=True)
class ParseResult:
    """
    Outcome of a parse or callback run.

    On failure `flag_id` holds the offending key (possibly one that never
    resolved) and `error` holds the error classification. Both are empty on
    success.
    """

    ok: bool = True
    flag_id: str = ""
    error: str = ""

    @classmethod
    def success(cls) -> "ParseResult":
        return cls()

    @classmethod
    def failure(cls, flag_id: str, error: str) -> "ParseResult":
        return cls(ok=False, flag_id=flag_id, error=error)

    def __bool__(self) -> bool:
        return self.ok

    def to_exception(self) -> Optional[FlagError]:
        """Build the exception matching this result, or None when ok."""
        if self.ok:
            return None
        if self.error == INVALID_FLAG_ID:
            return UnknownFlagError(self.flag_id)
        if self.error == INVALID_FLAG_VALUE:
            return FlagValueError(self.flag_id)
        return CallbackError(self.flag_id, self.error)

    def raise_for_error(self) -> None:
        error = self.to_exception()
        if error is not None:
            raise error

    def to_result(self) -> Result[None, FlagError]:
        error = self.to_exception()
        if error is None:
            return Ok(None)
        return Err(error)


Callback = Callable[["Flag"], Optional[ParseResult]]


@dataclasses.dataclass(eq=False)
class Flag:
    """
    A named, typed, optionally aliased program option.

    `value` is the default until the parser overwrites it. When `kind` is
    omitted it is inferred from the default value; numbers are always stored
    as floats.

    Example:
        Flag("count", "Number of items", 1, aliases=("c",))
    """

    name: str
    description: str = ""
    value: FlagData = ""
    aliases: tuple[str, ...] = ()
    kind: Optional[FlagKind] = None
    callback: Optional[Callback] = None
    triggered: bool = dataclasses.field(default=False, init=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Flag name must not be empty")
        if isinstance(self.aliases, str):
            self.aliases = (self.aliases,)
        else:
            self.aliases = tuple(self.aliases)
        if self.kind is None:
            self.kind = infer_kind(self.value)
        elif self.value == "" and self.kind is not FlagKind.STRING:
            # No default given for a non-string kind
            self.value = _ZERO_VALUES[self.kind]
        self.value = normalize_value(self.value, self.kind)

    @property
    def keys(self) -> tuple[str, ...]:
        """The name followed by every alias."""
        return (self.name, *self.aliases)

    def trigger(self, value: FlagData) -> None:
        self.value = value
        self.triggered = True
