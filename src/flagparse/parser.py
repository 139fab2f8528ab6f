"""
FlagParser - classifies an argument vector into flags and positional arguments.

Each token is either a flag (a known name or alias behind the configured
prefix, with an optional typed value) or a positional argument. Parsing stops
at the first error and reports it as a ParseResult instead of raising.
"""

import logging
import sys
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from result import Result

from .coercion import coerce
from .config import ParserOptions, load_config_file
from .errors import INVALID_FLAG_ID, INVALID_FLAG_VALUE, FlagError
from .flag import Flag, FlagKind, ParseResult, normalize_value
from .registry import FlagRegistry
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

FlagDeclaration = Union[Flag, tuple, list, dict]


class FlagParser:
    """
    A command-line parser for prefixed, typed flags.

    Flags are registered before parsing. Parsing walks the argument vector
    left to right: tokens without the prefix are collected as positional
    arguments, flag tokens take their value either inline (``--name=value``)
    or from the next token (``--name value``). Boolean flags never take a
    value; seeing them sets them to True.

    Example:
        parser = FlagParser(["--name=demo", "input.txt"], ParserOptions(prefix="--"))
        parser.add_flag("name", "n", description="Name to use", value="default")
        result = parser.parse()
        if result.ok:
            parser.resolve("n").value  # "demo"
            parser.args                # ["input.txt"]
    """

    def __init__(
        self,
        args: Optional[Sequence[str]] = None,
        options: Optional[ParserOptions] = None,
        *,
        flags: Optional[Iterable[FlagDeclaration]] = None,
    ) -> None:
        """
        Initialize the parser with an argument vector and options.

        Args:
            args: The arguments to parse. If None, uses sys.argv[1:]. The
                vector is processed as given, position 0 is not special.
            options: Prefix, separator and strictness. Defaults to
                ParserOptions().
            flags: Flags to register up front. Each item may be one of:
                - a Flag instance
                - (names, kwargs) where names is a str or a tuple/list of
                  name and aliases, and kwargs holds the Flag fields
                - {'names': name_or_list, 'kwargs': {...}}
        """
        self.options: ParserOptions = options or ParserOptions()
        self._argv: list[str] = list(sys.argv[1:] if args is None else args)
        self.registry: FlagRegistry = FlagRegistry()
        self._flagless: list[str] = []

        if flags:
            for item in flags:
                if isinstance(item, Flag):
                    self.set(item)
                    continue
                if isinstance(item, dict) and "names" in item:
                    names = item["names"]
                    kwargs = item.get("kwargs", {})
                elif isinstance(item, (list, tuple)) and len(item) == 2:
                    names, kwargs = item
                else:
                    raise ValueError(
                        "Each flag must be a Flag, (names, kwargs) tuple or "
                        "{'names': ..., 'kwargs': ...} dict"
                    )

                # Normalize single name to tuple
                if isinstance(names, str):
                    names = (names,)

                self.add_flag(*names, **(kwargs or {}))

    def set(self, flag: Flag) -> "FlagParser":
        """
        Register a flag and return the parser so calls can be chained.

        Raises:
            DuplicateFlagKeyError: If the flag's name or an alias is taken.
        """
        self.registry.register(flag)
        return self

    def add_flag(self, name: str, *aliases: str, **kwargs: Any) -> Flag:
        """
        Declare and register a flag.

        Example:
            parser.add_flag("verbose", "v", description="Enable verbose", value=False)

        Args:
            name: The flag name, without the prefix.
            *aliases: Additional keys resolving to the same flag.
            **kwargs: Remaining Flag fields (description, value, kind, callback).

        Returns:
            The registered Flag.
        """
        return self.registry.register(Flag(name, aliases=aliases, **kwargs))

    def parse(self) -> ParseResult:
        """
        Parse the argument vector.

        Positional arguments collected by an earlier call are discarded.
        Flags keep whatever an earlier call assigned to them.

        Returns:
            ParseResult with ok=True, or the first error: an unknown flag in
            strict mode ("invalid flag id used"), or a missing or invalid
            value ("could not set flag value"). Work done before the error
            is kept.
        """
        self._flagless = []
        prefix = self.options.prefix
        separator = self.options.separator
        argv = self._argv

        index = 0
        while index < len(argv):
            token = argv[index]
            index += 1

            split = tokenize(token, prefix, separator)
            if split is None:
                self._flagless.append(token)
                continue

            flag = self.registry.resolve(split.name)
            if flag is None:
                if self.options.strict:
                    return self._fail(split.name, INVALID_FLAG_ID)
                continue

            if flag.kind is FlagKind.BOOLEAN:
                flag.trigger(True)
                continue

            # The next token is taken verbatim, even when it looks like a flag.
            # A trailing separator only gives "" when no token follows.
            if split.inline_value:
                text = split.inline_value
            elif index < len(argv):
                text = argv[index]
                index += 1
            elif split.has_separator:
                text = ""
            else:
                return self._fail(split.name, INVALID_FLAG_VALUE)

            coerced = coerce(text, flag.kind)
            if coerced.is_err():
                logger.debug("Rejected value for %r: %s", split.name, coerced.err())
                return self._fail(split.name, INVALID_FLAG_VALUE)
            flag.trigger(coerced.unwrap())

        return ParseResult.success()

    def safe_parse(self) -> Result[list[str], FlagError]:
        """
        Parse the argument vector and wrap the outcome in a Result.

        Returns:
            Result[list[str], FlagError]:
                - Ok with the positional arguments,
                - Err with the exception matching the first parse error.
        """
        return self.parse().to_result().map(lambda _: self.args)

    def call(self) -> ParseResult:
        """
        Run the callbacks of all triggered flags in registration order.

        A callback returning None counts as success. The first failing
        callback stops the run and its result is returned.
        """
        for flag in self.registry:
            if not flag.triggered or flag.callback is None:
                continue
            result = flag.callback(flag)
            if result is not None and not result.ok:
                logger.debug("Callback for %r failed: %s", flag.name, result.error)
                return result
        return ParseResult.success()

    def resolve(self, key: str) -> Optional[Flag]:
        """Look up a flag by name or alias."""
        return self.registry.resolve(key)

    def apply_defaults(self, defaults: Mapping[str, Any]) -> None:
        """
        Replace the default values of registered flags.

        Keys may be flag names or aliases. Flags are not marked triggered.

        Raises:
            TypeError: If a value does not match the flag kind.
            ValueError: If a key is unknown and the parser is strict.
        """
        for key, value in defaults.items():
            flag = self.registry.resolve(key)
            if flag is None:
                if self.options.strict:
                    raise ValueError(f"Unknown flag in configuration: {key}")
                continue
            try:
                flag.value = normalize_value(value, flag.kind)
            except TypeError as e:
                raise TypeError(f"Invalid default for flag '{key}': {e}")

    def load_config(self, config_path: str) -> None:
        """
        Load options and flag defaults from a YAML or JSON file.

        Options named in the `options` section override the current parser
        options, the others are kept. The `flags` section is applied
        afterwards with apply_defaults().
        """
        config_data = load_config_file(config_path)
        if config_data.get("options"):
            self.options = ParserOptions.from_mapping(
                config_data["options"], base=self.options
            )
        self.apply_defaults(config_data.get("flags") or {})

    @property
    def flags(self) -> tuple[Flag, ...]:
        """Registered flags in registration order."""
        return self.registry.flags

    @property
    def table(self) -> Mapping[str, Flag]:
        """Lookup table from every name and alias to its flag."""
        return self.registry.table

    @property
    def args(self) -> list[str]:
        """Positional arguments from the last parse, in input order."""
        return list(self._flagless)

    @property
    def argv(self) -> list[str]:
        return list(self._argv)

    def format_help(self) -> str:
        return "".join(
            f"{self.options.prefix}{flag.name}\t\t{flag.description}\n"
            for flag in self.registry
        )

    to_string = format_help

    def __str__(self) -> str:
        return self.format_help()

    def _fail(self, flag_id: str, error: str) -> ParseResult:
        logger.debug("Parsing stopped at %r: %s", flag_id, error)
        return ParseResult.failure(flag_id, error)
