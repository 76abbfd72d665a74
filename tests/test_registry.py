import pytest

from zeroshell.commands import CommandResult
from zeroshell.registry import Command, CommandList, command_list


@pytest.fixture
def cmds():
    return command_list()


def test_help_lists_commands(cmds):
    res = cmds.execute("help", [], [])
    assert res.stdout.startswith("Available commands")
    for name in ("exit", "echo", "pwd", "cd", "mkdir", "cat", "cp", "mv", "rm", "ls"):
        assert f"  {name:<10} - " in res.stdout


def test_unknown_command(cmds):
    res = cmds.execute("nope", [], [])
    assert "command not found" in res.stderr
    assert res.stderr == "0-shell: nope: command not found"
    assert res.stdout == ""


def test_short_help_flag(cmds):
    res = cmds.execute("ls", ["-h"], [])
    assert "Usage: ls [-a] [-l] [-F] [FILE...]" in res.stdout


def test_long_help_flag(cmds):
    res = cmds.execute("mkdir", ["--help"], [])
    assert res.stdout == "Usage: mkdir DIRECTORY... - create directories\n"


def test_required_args(cmds):
    res = cmds.execute("mkdir", [], [])
    assert "missing operand" in res.stderr
    assert res.stderr == (
        "mkdir: missing operand.\n"
        "Try 'help' or 'mkdir --help' for more information."
    )


def test_dispatches_echo(cmds):
    res = cmds.execute("echo", [], ["hello", "world"])
    assert res.stdout == "hello world\n"


def test_dispatches_exit(cmds):
    assert cmds.execute("exit", [], []).should_exit is True


def test_required_args_satisfied(cmds, tmp_path):
    target = tmp_path / "made"
    res = cmds.execute("mkdir", [], [str(target)])
    assert res.stderr == ""
    assert target.is_dir()


def test_register_custom_command():
    seen = []

    def callback(flags, args):
        seen.append((list(flags), list(args)))
        return CommandResult(stdout="ran")

    registry = CommandList()
    registry.register("thing", Command("thing - do it", False, callback))
    res = registry.execute("thing", ["-x"], ["a"])
    assert res.stdout == "ran"
    assert seen == [(["-x"], ["a"])]


def test_register_replaces_existing():
    registry = CommandList()
    registry.register("x", Command("first", False, lambda f, a: CommandResult(stdout="1")))
    registry.register("x", Command("second", False, lambda f, a: CommandResult(stdout="2")))
    assert registry.execute("x", [], []).stdout == "2"
    assert registry.execute("help", [], []).stdout.count("x") == 1