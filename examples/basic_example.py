#!/usr/bin/env python3
"""
Example script demonstrating the usage of FlagParser.

This script declares flags of each kind and parses the command line,
printing the flag values and the remaining positional arguments.

    python basic_example.py --name=run1 --temperature 31.5 -v input.csv
"""

import sys

from flagparse import FlagParser, ParserOptions


def main() -> None:
    """Main function demonstrating the parser."""
    parser = FlagParser(options=ParserOptions(prefix="--"))
    parser.add_flag("name", description="Name of the simulation", value="sim")
    parser.add_flag("temperature", "t", description="Temperature in Celsius", value=27.0)
    parser.add_flag("verbose", "v", description="Enable verbose output", value=False)

    print("FlagParser Example")
    print("=" * 50)
    print(parser.format_help())

    result = parser.parse()
    if not result.ok:
        print(f"error: {result.error}: {result.flag_id}", file=sys.stderr)
        sys.exit(2)

    print("Parsed Flags:")
    print("-" * 30)
    for flag in parser.flags:
        source = "command line" if flag.triggered else "default"
        print(f"{flag.name}: {flag.value!r} ({source})")
    print()
    print(f"Positional arguments: {parser.args}")


if __name__ == "__main__":
    main()
