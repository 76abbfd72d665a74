"""The built-in commands of the shell and their results."""

from __future__ import annotations

import os
import shutil
import stat
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass
class CommandResult:
    """Output of a command; ``should_exit`` asks the shell to stop."""

    stdout: str = ""
    stderr: str = ""
    should_exit: bool = False


_ECHO_ESCAPES = {
    "a": "\x07",
    "b": "\x08",
    "e": "\x1b",
    "f": "\x0c",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\x0b",
    "\\": "\\",
}

_RWX = ("---", "--x", "-w-", "-wx", "r--", "r-x", "rw-", "rwx")


def _reason(error: Exception) -> str:
    """Describe an error the way it is shown to the user."""
    if isinstance(error, UnicodeDecodeError):
        return "stream did not contain valid UTF-8"
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error)


def _result(stdout: str = "", errors: Sequence[str] = ()) -> CommandResult:
    return CommandResult(stdout=stdout, stderr="\n".join(errors))


def exit_shell(flags: Sequence[str], args: Sequence[str]) -> CommandResult:
    """Ask the shell to exit."""
    return CommandResult(should_exit=True)


def _interpret_escapes(text: str) -> tuple[str, bool]:
    """Expand backslash escapes; the flag is True when ``\\c`` stopped output."""
    out: list[str] = []
    chars = iter(text)
    for char in chars:
        if char != "\\":
            out.append(char)
            continue
        following = next(chars, None)
        if following is None:
            out.append("\\")
        elif following == "c":
            return "".join(out), True
        else:
            out.append(_ECHO_ESCAPES.get(following, "\\" + following))
    return "".join(out), False


def echo(flags: Sequence[str], args: Sequence[str]) -> CommandResult:
    """Print the arguments joined by spaces; ``-e`` interprets escapes."""
    text = " ".join(args)
    if "-e" not in flags:
        return CommandResult(stdout=text + "\n")
    output, stopped = _interpret_escapes(text)
    return CommandResult(stdout=output if stopped else output + "\n")


def pwd(flags: Sequence[str], args: Sequence[str]) -> CommandResult:
    """Print the current working directory."""
    try:
        return CommandResult(stdout=os.getcwd() + "\n")
    except OSError as error:
        return CommandResult(
            stderr=f"pwd: error retrieving current directory: {_reason(error)}"
        )


def cd(flags: Sequence[str], args: Sequence[str]) -> CommandResult:
    """Change directory to the first argument, else HOME, else ``/``."""
    destination = args[0] if args else os.environ.get("HOME", "/")
    try:
        os.chdir(destination)
    except OSError as error:
        return CommandResult(stderr=f"cd: {destination}: {_reason(error)}")
    return CommandResult()


def mkdir(flags: Sequence[str], args: Sequence[str]) -> CommandResult:
    """Create each directory with its parents; existing ones are fine."""
    errors = []
    for path in args:
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as error:
            errors.append(f"mkdir: cannot create directory '{path}': {_reason(error)}")
    return _result(errors=errors)


def _echo_stdin() -> str:
    """Copy standard input to standard output line by line until end of input."""
    try:
        for line in sys.stdin:
            sys.stdout.write(line)
            sys.stdout.flush()
    except OSError as error:
        return f"cat: {_reason(error)}"
    return ""


def cat(flags: Sequence[str], args: Sequence[str]) -> CommandResult:
    """Concatenate files; with no files, echo standard input."""
    if not args:
        return CommandResult(stderr=_echo_stdin())

    contents = []
    errors = []
    for file_path in args:
        try:
            with open(file_path, encoding="utf-8", newline="") as handle:
                contents.append(handle.read())
        except (OSError, UnicodeDecodeError) as error:
            errors.append(f"cat: {file_path}: {_reason(error)}")
    return _result("".join(contents), errors)


def _resolve_destination(source: str, destination: str) -> str:
    """Return the target path, placing the source inside a directory target."""
    if not os.path.isdir(destination):
        return destination
    name = Path(source).name
    if not name or name == "..":
        raise ValueError(f"invalid source path: {source}")
    return os.path.join(destination, name)


def _split_operands(command: str, args: Sequence[str]) -> tuple[list[str], str]:
    """Split arguments into sources and a destination, checking their count."""
    if len(args) < 2:
        raise ValueError(f"{command}: missing destination file operand after source")
    *sources, destination = args
    if len(sources) > 1 and not os.path.isdir(destination):
        raise ValueError(f"{command}: target '{destination}' is not a directory")
    return sources, destination


def cp(flags: Sequence[str], args: Sequence[str]) -> CommandResult:
    """Copy files to a destination file or into a directory."""
    try:
        sources, destination = _split_operands("cp", args)
    except ValueError as error:
        return CommandResult(stderr=str(error))

    errors = []
    for source in sources:
        try:
            target = _resolve_destination(source, destination)
        except ValueError as error:
            errors.append(f"cp: {error}")
            continue
        try:
            shutil.copy(source, target)
        except OSError as error:
            errors.append(f"cp: {source}: {_reason(error)}")
    return _result(errors=errors)


def mv(flags: Sequence[str], args: Sequence[str]) -> CommandResult:
    """Move or rename files to a destination or into a directory."""
    try:
        sources, destination = _split_operands("mv", args)
    except ValueError as error:
        return CommandResult(stderr=str(error))

    errors = []
    for source in sources:
        try:
            target = _resolve_destination(source, destination)
        except ValueError as error:
            errors.append(f"mv: {error}")
            continue
        try:
            os.rename(source, target)
        except OSError as error:
            errors.append(
                f"mv: cannot move '{source}' to '{destination}': {_reason(error)}"
            )
    return _result(errors=errors)


def _remove(path: str, recursive: bool) -> None:
    if not os.path.exists(path):
        raise ValueError(f"rm: cannot remove '{path}': No such file or directory")
    if os.path.isdir(path):
        if not recursive:
            raise ValueError(f"rm: cannot remove '{path}': Is a directory")
        try:
            if os.path.islink(path):
                os.unlink(path)
            else:
                shutil.rmtree(path)
        except OSError as error:
            raise ValueError(f"rm: {path}: {_reason(error)}") from error
        return
    try:
        os.remove(path)
    except OSError as error:
        raise ValueError(f"rm: {path}: {_reason(error)}") from error


def rm(flags: Sequence[str], args: Sequence[str]) -> CommandResult:
    """Remove files; ``-r`` or ``-R`` also removes directories."""
    recursive = "-r" in flags or "-R" in flags
    errors = []
    for path in args:
        try:
            _remove(path, recursive)
        except ValueError as error:
            errors.append(str(error))
    return _result(errors=errors)


def is_executable(mode: int) -> bool:
    """Whether any execute bit is set in a file mode."""
    return mode & 0o111 != 0


def format_permissions(mode: int) -> str:
    """Render a file mode as a permission string such as ``drwxr-xr-x``."""
    kind = "d" if mode & 0o40000 else "-"
    return kind + _RWX[(mode >> 6) & 7] + _RWX[(mode >> 3) & 7] + _RWX[mode & 7]


def _format_entry(entry: os.DirEntry, long: bool, classify: bool) -> str:
    info = entry.stat(follow_symlinks=False)
    name = entry.name
    if classify:
        if stat.S_ISDIR(info.st_mode):
            name += "/"
        elif is_executable(info.st_mode):
            name += "*"
    if not long:
        return f"{name}  "
    modified = datetime.fromtimestamp(info.st_mtime).strftime("%b %d %H:%M")
    return f"{format_permissions(info.st_mode)} {info.st_size:>8} {modified} {name}\n"


def ls(flags: Sequence[str], args: Sequence[str]) -> CommandResult:
    """List directory contents; supports ``-a``, ``-l`` and ``-F``."""
    show_all = "-a" in flags
    long = "-l" in flags
    classify = "-F" in flags
    paths = list(args) or ["."]
    multi_path = len(paths) > 1

    out: list[str] = []
    errors: list[str] = []
    for position, path in enumerate(paths):
        if multi_path:
            if position:
                out.append("\n")
            out.append(f"{path}:\n")
        try:
            with os.scandir(path) as listing:
                entries = [e for e in listing if show_all or not e.name.startswith(".")]
        except OSError as error:
            errors.append(f"ls: cannot access '{path}': {_reason(error)}")
            continue
        entries.sort(key=lambda entry: entry.name)
        for entry in entries:
            try:
                out.append(_format_entry(entry, long, classify))
            except OSError as error:
                errors.append(f"ls: {_reason(error)}")
        if not long:
            out.append("\n")
    return _result("".join(out), errors)