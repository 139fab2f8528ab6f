"""
Parser options and configuration file loading.

A configuration file is YAML or JSON and may hold two sections:

    options:
      prefix: "--"
      separator: "="
      strict: false
    flags:
      name: alice
      count: 3
"""

import dataclasses
import json
import logging
import os
from typing import Any, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class ParserOptions:
    """
    Tokenizing and matching policy for a parser.

    Attributes:
        prefix: Leading text marking a token as a flag.
        separator: Text splitting a flag token into name and inline value.
        strict: When True an unknown flag aborts parsing, otherwise the token
            is dropped.
    """

    prefix: str = "-"
    separator: str = "="
    strict: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.prefix, str):
            raise TypeError(f"prefix must be a string, got {self.prefix!r}")
        if not isinstance(self.separator, str) or not self.separator:
            raise ValueError(
                f"separator must be a non-empty string, got {self.separator!r}"
            )
        if not isinstance(self.strict, bool):
            raise TypeError(f"strict must be a boolean, got {self.strict!r}")

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], base: Optional["ParserOptions"] = None
    ) -> "ParserOptions":
        """
        Build options from a mapping, rejecting unknown keys.

        Options missing from the mapping are taken from `base` when given,
        otherwise they keep their defaults.

        Raises:
            ValueError: If the mapping holds keys that are not options.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(
                f"Unknown parser options: {', '.join(unknown)}. "
                f"Supported options are: {', '.join(sorted(known))}"
            )
        if base is not None:
            return dataclasses.replace(base, **data)
        return cls(**data)

    @classmethod
    def from_file(cls, config_path: str) -> "ParserOptions":
        """Build options from the `options` section of a config file."""
        return cls.from_mapping(load_config_file(config_path).get("options") or {})


def load_config_file(config_path: str) -> dict[str, Any]:
    """
    Load configuration from a YAML or JSON file.

    Args:
        config_path (str): Path to the configuration file.

    Returns:
        dict[str, Any]: Dictionary containing the configuration data. An empty
        file yields an empty dictionary.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ValueError: If the file format is not supported or invalid.
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    file_ext = os.path.splitext(config_path)[1].lower()

    with open(config_path, "r") as f:
        if file_ext in [".yaml", ".yml"]:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML file: {e}")
        elif file_ext == ".json":
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON file: {e}")
        else:
            raise ValueError(
                f"Unsupported file format: {file_ext}. "
                "Supported formats are: .yaml, .yml, .json"
            )

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Configuration file must contain a mapping, got {type(data).__name__}"
        )

    logger.debug("Loaded configuration from %s", config_path)
    return data
