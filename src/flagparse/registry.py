"""
Storage and lookup of declared flags.

Flags live in a list in registration order. The lookup table maps every name
and alias to the flag's index in that list, so registering more flags never
invalidates an earlier lookup.
"""

import logging
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from .errors import DuplicateFlagKeyError
from .flag import Flag

logger = logging.getLogger(__name__)


class FlagRegistry:
    """
    The declared flags of one parser, indexed by name and alias.

    Example:
        registry = FlagRegistry()
        registry.register(Flag("verbose", "Print more", False, aliases=("v",)))
        registry.resolve("v") is registry.resolve("verbose")  # True
    """

    def __init__(self) -> None:
        self._flags: list[Flag] = []
        self._table: dict[str, int] = {}

    def register(self, flag: Flag) -> Flag:
        """
        Add a flag and index it under its name and all aliases.

        Raises:
            DuplicateFlagKeyError: If any of the flag's keys is already taken,
                or the flag repeats one of its own keys. Nothing is registered
                in that case.
        """
        seen: set[str] = set()
        for key in flag.keys:
            if key in self._table:
                owner = self._flags[self._table[key]].name
                raise DuplicateFlagKeyError(key, owner)
            if key in seen:
                raise DuplicateFlagKeyError(key, flag.name)
            seen.add(key)

        index = len(self._flags)
        self._flags.append(flag)
        for key in flag.keys:
            self._table[key] = index

        logger.debug("Registered flag %r with aliases %r", flag.name, flag.aliases)
        return flag

    def resolve(self, key: str) -> Optional[Flag]:
        """Look up a flag by exact name or alias."""
        index = self._table.get(key)
        if index is None:
            return None
        return self._flags[index]

    @property
    def flags(self) -> tuple[Flag, ...]:
        return tuple(self._flags)

    @property
    def table(self) -> Mapping[str, Flag]:
        """Read-only mapping of every name and alias to its flag."""
        return MappingProxyType(
            {key: self._flags[index] for key, index in self._table.items()}
        )

    def keys(self) -> list[str]:
        return list(self._table)

    def triggered(self) -> list[Flag]:
        return [flag for flag in self._flags if flag.triggered]

    def __contains__(self, key: object) -> bool:
        return key in self._table

    def __iter__(self) -> Iterator[Flag]:
        return iter(self._flags)

    def __len__(self) -> int:
        return len(self._flags)
