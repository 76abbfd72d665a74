"""The table of built-in commands and how a call is dispatched to one."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from zeroshell import commands
from zeroshell.commands import CommandResult

Callback = Callable[[Sequence[str], Sequence[str]], CommandResult]


@dataclass(frozen=True)
class Command:
    """A built-in command: its usage text, whether it needs operands, and its code."""

    help: str
    require_args: bool
    callback: Callback


@dataclass
class CommandList:
    """Registered commands, looked up by name."""

    commands: dict[str, Command] = field(default_factory=dict)

    def register(self, name: str, command: Command) -> None:
        """Add a command, replacing any command already under that name."""
        self.commands[name] = command

    def execute(
        self, name: str, flags: Sequence[str], args: Sequence[str]
    ) -> CommandResult:
        """Run the named command, handling ``help``, ``--help`` and missing operands."""
        if name == "help":
            lines = "".join(
                f"  {cmd_name:<10} - {cmd.help}\n"
                for cmd_name, cmd in self.commands.items()
            )
            return CommandResult(stdout="Available commands:\n" + lines)

        command = self.commands.get(name)
        if command is None:
            return CommandResult(stderr=f"0-shell: {name}: command not found")

        if any(flag in ("--help", "-h") for flag in flags):
            return CommandResult(stdout=f"Usage: {command.help}\n")

        if command.require_args and not args:
            return CommandResult(
                stderr=(
                    f"{name}: missing operand.\n"
                    f"Try 'help' or '{name} --help' for more information."
                )
            )

        return command.callback(list(flags), list(args))


def command_list() -> CommandList:
    """Build the list of all built-in commands."""
    registry = CommandList()
    builtins = [
        ("exit", "exit - cause the shell to exit", False, commands.exit_shell),
        ("echo", "echo [-e] [text ...] - display a line of text", False, commands.echo),
        ("pwd", "pwd - print name of current/working directory", False, commands.pwd),
        ("cd", "cd [DIRECTORY] - change the working directory", False, commands.cd),
        ("mkdir", "mkdir DIRECTORY... - create directories", True, commands.mkdir),
        (
            "cat",
            "cat [FILE...] - concatenate files and print on the standard output",
            False,
            commands.cat,
        ),
        (
            "cp",
            "cp SOURCE DEST or cp SOURCE... DIRECTORY - copy files and directories",
            True,
            commands.cp,
        ),
        (
            "mv",
            "mv SOURCE DEST or mv SOURCE... DIRECTORY - move (rename) files",
            True,
            commands.mv,
        ),
        ("rm", "rm [-r] FILE... - remove files or directories", True, commands.rm),
        (
            "ls",
            "ls [-a] [-l] [-F] [FILE...] - list directory contents",
            False,
            commands.ls,
        ),
    ]
    for name, help_text, require_args, callback in builtins:
        registry.register(name, Command(help_text, require_args, callback))
    return registry