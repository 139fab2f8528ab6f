#!/usr/bin/env python3
"""
Example demonstrating flag callbacks.

Callbacks run after a successful parse, for triggered flags only, in the
order the flags were registered. The first failing callback stops the run.
"""

import sys

from flagparse import Flag, FlagParser, ParseResult


def show_version(flag: Flag) -> ParseResult:
    print("callbacks_example 1.0.0")
    return ParseResult.success()


def check_jobs(flag: Flag) -> ParseResult:
    if flag.value < 1:
        return ParseResult.failure(flag.name, "must be at least 1")
    print(f"running with {int(flag.value)} jobs")
    return ParseResult.success()


if __name__ == "__main__":
    parser = FlagParser(
        ["-version", "-j", "4", "build"],
        flags=[
            Flag("version", "Print the version", False, callback=show_version),
            (("jobs", "j"), {"value": 1, "description": "Parallel jobs", "callback": check_jobs}),
        ],
    )

    for result in (parser.parse(), parser.call()):
        if not result.ok:
            print(f"error: {result.error}: {result.flag_id}", file=sys.stderr)
            sys.exit(1)

    print(f"targets: {parser.args}")
