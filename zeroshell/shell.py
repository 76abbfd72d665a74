"""The interactive read-evaluate-print loop."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from typing import TextIO

from zeroshell.parser import parse_line
from zeroshell.registry import CommandList, command_list


def get_prompt() -> str:
    """Build the prompt from the working directory, abbreviating HOME as ``~``."""
    try:
        cwd = os.getcwd()
    except OSError:
        cwd = ""
    home = os.environ.get("HOME", "")
    if home and cwd.startswith(home):
        return f"~{cwd[len(home):]} $ "
    return f"{cwd} $ "


def run(
    commands: CommandList, stdin: TextIO, stdout: TextIO, stderr: TextIO
) -> None:
    """Read lines from stdin and run them until end of input or ``exit``."""
    while True:
        stdout.write(get_prompt())
        stdout.flush()

        line = stdin.readline()
        if not line:
            return

        for call in parse_line(line.rstrip()):
            result = commands.execute(call.name, call.flags, call.args)
            if result.should_exit:
                return
            if result.stdout:
                stdout.write(result.stdout)
                stdout.flush()
            if result.stderr:
                stderr.write(result.stderr + "\n")
                stderr.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the shell on the standard streams."""
    run(command_list(), sys.stdin, sys.stdout, sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())