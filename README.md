# zeroshell

A small interactive shell with its own built-in commands. Every command
runs inside the shell itself; nothing is handed to other programs.

## Installation

```
pip install .
```

## Usage

Start the shell:

```
zeroshell
```

It can also be started with `python -m zeroshell.shell`.

The prompt shows the current directory, with your home directory (`$HOME`)
shortened to `~`. Press Ctrl+D or type `exit` to leave.

Commands can be chained with `;`:

```
~ $ mkdir notes; cd notes; echo -e "first\tline"
first	line
```

Command names are case-insensitive: `LS` runs `ls`.

### Built-in commands

| Command | Description |
|---------|-------------|
| `help` | list available commands |
| `exit` | leave the shell |
| `echo [-e] [text ...]` | print text; `-e` interprets backslash escapes (`\a \b \e \f \n \r \t \v \\`, and `\c` stops output) |
| `pwd` | print the working directory |
| `cd [DIRECTORY]` | change directory (defaults to `$HOME`, or `/`) |
| `mkdir DIRECTORY...` | create directories, including parents |
| `cat [FILE...]` | print files, or copy standard input to output |
| `cp SOURCE DEST` / `cp SOURCE... DIRECTORY` | copy files |
| `mv SOURCE DEST` / `mv SOURCE... DIRECTORY` | move or rename files |
| `rm [-r] FILE...` | remove files; `-r` or `-R` removes directories |
| `ls [-a] [-l] [-F] [FILE...]` | list directory contents; `-a` shows hidden entries, `-l` the long format, `-F` marks directories with `/` and executables with `*` |

Any command accepts `-h` or `--help` to show its usage line. Short flags may
be combined, so `ls -la` is the same as `ls -l -a`. A lone `-` is treated as
an ordinary argument.

### Quoting

Single quotes keep text literal. Double quotes group words and allow `\"`,
`\\` and `\$` escapes; any other backslash inside double quotes is kept.
Outside quotes, a backslash makes the next character literal, so
`echo hello\ world` prints one argument.

## What it does not do

The shell only knows its built-in commands; any other name reports
`command not found`. There are no pipes, redirections, background jobs,
variable expansion, globbing or command history.

## Using it as a library

```python
from zeroshell.parser import parse_line
from zeroshell.registry import command_list

commands = command_list()
for call in parse_line("echo hello; pwd"):
    result = commands.execute(call.name, call.flags, call.args)
    print(result.stdout, end="")
```

`parse_line` returns `CommandCall` objects with `name`, `flags` and `args`.
`CommandList.execute` returns a `CommandResult` with `stdout`, `stderr` and
`should_exit`. The loop itself is `zeroshell.shell.run(commands, stdin,
stdout, stderr)`, which reads lines from any text streams until end of input
or `exit`.

## Running the tests

```
pip install .[test]
pytest
```