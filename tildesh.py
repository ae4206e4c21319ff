#!/usr/bin/env python3
# tildesh.py
#
# REPL: render prompt -> read line -> execute -> repeat.
# `exit` is the only way out (plus end of input when exit_on_eof is set).

from __future__ import annotations

import readline  # noqa: F401  line editing for input()
import sys

from tildeshell.config import ShellConfig
from tildeshell.core import CommandError, init_core
from tildeshell.logs import setup_logging
from tildeshell.prompt import render_prompt
from tildeshell.reader import LineReader

ERROR_LABEL = "Command error:"


def run_repl(core, reader: LineReader, config: ShellConfig) -> int:
    while True:
        prompt = render_prompt(config, core.stderr)

        try:
            line = reader.read(prompt)
        except EOFError as e:
            print(f"Error reading input: {e}", file=core.stderr)
            if config.exit_on_eof:
                core.stdout.write("\n")
                core.stdout.flush()
                return 0
            continue
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error reading input: {e}", file=core.stderr)
            continue

        try:
            out = core.execute(line)
        except CommandError as e:
            print(f"{ERROR_LABEL} {e}", file=core.stderr)
            continue

        if out is not None:
            print(out, file=core.stdout)


def main() -> int:
    config = ShellConfig()
    setup_logging(config)
    core = init_core(config)
    reader = LineReader(None if sys.stdin.isatty() else sys.stdin, core.stdout)
    return run_repl(core, reader, config)


if __name__ == "__main__":
    raise SystemExit(main())
