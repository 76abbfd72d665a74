import pytest

from zeroshell.parser import CommandCall, parse_line, separate_flags, tokenize


def test_tokenize_simple():
    assert tokenize("ls -la /home") == ["ls", "-la", "/home"]


def test_tokenize_quotes():
    assert tokenize("echo \"hello world\" 'single quote'") == [
        "echo",
        "hello world",
        "single quote",
    ]


def test_tokenize_escapes():
    assert tokenize('echo \\"hello\\ world\\"') == ["echo", '"hello world"']


def test_tokenize_single_quotes_keep_backslash():
    assert tokenize("'a\\b c'") == ["a\\b c"]


@pytest.mark.parametrize(
    "text, expected",
    [
        ('"a\\nb"', ["a\\nb"]),
        ('"a\\"b"', ['a"b']),
        ('"a\\\\b"', ["a\\b"]),
        ('"\\$HOME"', ["$HOME"]),
    ],
)
def test_tokenize_double_quote_escapes(text, expected):
    assert tokenize(text) == expected


def test_tokenize_collapses_whitespace_and_drops_empty_quotes():
    assert tokenize('  a   ""  b\t') == ["a", "b"]


def test_tokenize_trailing_backslash_is_dropped():
    assert tokenize("abc\\") == ["abc"]


def test_tokenize_adjacent_quotes_join():
    assert tokenize("ab'c d'\"e\"") == ["abc de"]


def test_parse_line_chaining():
    calls = parse_line("ls -l; echo hi")
    assert len(calls) == 2
    assert calls[0].name == "ls"
    assert calls[0].flags == ["-l"]
    assert calls[1].name == "echo"
    assert calls[1].args == ["hi"]


def test_parse_line_flags_expansion():
    calls = parse_line("ls -la /tmp")
    assert calls[0].flags == ["-l", "-a"]
    assert calls[0].args == ["/tmp"]


def test_parse_line_long_flags():
    calls = parse_line("ls --all /tmp")
    assert calls[0].flags == ["--all"]


def test_parse_line_skips_empty_segments_and_lowercases():
    calls = parse_line(" ; ;  LS  ;")
    assert calls == [CommandCall("ls", [], [])]


def test_separate_flags_dash_alone_is_argument():
    assert separate_flags(["-", "-a", "x", "--help"]) == (["-a", "--help"], ["-", "x"])


def test_separate_flags_empty():
    assert separate_flags([]) == ([], [])