"""Exceptions raised by flagparse."""

INVALID_FLAG_ID = "invalid flag id used"
INVALID_FLAG_VALUE = "could not set flag value"


class FlagError(Exception):
    """Base class for flag errors. Carries the offending flag id."""

    def __init__(self, flag_id: str, message: str) -> None:
        super().__init__(f"{message}: {flag_id}")
        self.flag_id = flag_id
        self.message = message


class UnknownFlagError(FlagError):
    def __init__(self, flag_id: str) -> None:
        super().__init__(flag_id, INVALID_FLAG_ID)


class FlagValueError(FlagError):
    def __init__(self, flag_id: str) -> None:
        super().__init__(flag_id, INVALID_FLAG_VALUE)


class DuplicateFlagKeyError(FlagError):
    """A flag name or alias is already taken by another flag."""

    def __init__(self, flag_id: str, owner: str) -> None:
        super().__init__(flag_id, f"flag key already registered by '{owner}'")
        self.owner = owner


class CallbackError(FlagError):
    """A flag callback reported a failure."""
