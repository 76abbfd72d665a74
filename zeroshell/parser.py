"""Splitting a command line into calls, tokens, flags and arguments."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CommandCall:
    """One command from a line: its lowercase name, expanded flags and arguments."""

    name: str
    flags: list[str] = field(default_factory=list)
    args: list[str] = field(default_factory=list)


def parse_line(line: str) -> list[CommandCall]:
    """Parse a line into the command calls separated by semicolons.

    Empty segments are skipped. The first token of each segment is the
    command name, lowercased; the rest are split into flags and arguments.
    """
    calls = []
    for chunk in line.split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        tokens = tokenize(chunk)
        if not tokens:
            continue
        name, *rest = tokens
        flags, args = separate_flags(rest)
        calls.append(CommandCall(name.lower(), flags, args))
    return calls


def separate_flags(tokens: list[str]) -> tuple[list[str], list[str]]:
    """Split tokens into flags and positional arguments.

    A token starting with ``-`` (other than ``-`` alone) is a flag. Combined
    short flags such as ``-la`` expand to ``-l`` and ``-a``; long flags
    starting with ``--`` are kept whole.
    """
    flags: list[str] = []
    args: list[str] = []
    for token in tokens:
        if token.startswith("-") and token != "-":
            if len(token) > 2 and not token.startswith("--"):
                flags.extend(f"-{char}" for char in token[1:])
            else:
                flags.append(token)
        else:
            args.append(token)
    return flags, args


def _escaped(char: str, in_double_quote: bool) -> str:
    """Return the text a backslash followed by ``char`` stands for."""
    if in_double_quote and char not in ('"', "\\", "$"):
        return "\\" + char
    return char


def tokenize(text: str) -> list[str]:
    """Split text into tokens, honouring quotes and backslash escapes.

    Single quotes are fully literal. Inside double quotes a backslash only
    escapes ``"``, ``\\`` and ``$``; elsewhere it escapes any character.
    Unquoted whitespace separates tokens; empty tokens are dropped.
    """
    tokens: list[str] = []
    current: list[str] = []
    in_single = False
    in_double = False
    escaped = False

    for char in text:
        if escaped:
            current.append(_escaped(char, in_double))
            escaped = False
        elif char == "\\" and not in_single:
            escaped = True
        elif char == "'" and not in_double:
            in_single = not in_single
        elif char == '"' and not in_single:
            in_double = not in_double
        elif char.isspace() and not in_single and not in_double:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)

    if current:
        tokens.append("".join(current))
    return tokens