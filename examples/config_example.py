#!/usr/bin/env python3
"""
Example demonstrating parser options and flag defaults loaded from a file.

Values given on the command line override the defaults from the file.
"""

import os
import tempfile
import textwrap

from flagparse import FlagParser

CONFIG = textwrap.dedent("""
    options:
      prefix: "--"
      separator: ":"
    flags:
      host: example.org
      port: 8080
    """)


if __name__ == "__main__":
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write(CONFIG)
        config_path = f.name

    try:
        parser = FlagParser(["--port:9090", "serve"])
        parser.add_flag("host", description="Host to bind")
        parser.add_flag("port", description="Port to bind", value=80)
        parser.load_config(config_path)

        parser.parse().raise_for_error()
        print(f"host={parser.resolve('host').value} port={int(parser.resolve('port').value)}")
        print(f"positional: {parser.args}")
    finally:
        os.unlink(config_path)
