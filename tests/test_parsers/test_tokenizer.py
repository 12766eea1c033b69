import pytest

from dotargs.parser import split_command_line


@pytest.mark.parametrize(
    "text,expected",
    [
        ("", []),
        ("   ", []),
        ("--a=1 --b", ["--a=1", "--b"]),
        ("  --a   value  ", ["--a", "value"]),
        ("--name 'John Smith' /q", ["--name", "John Smith", "/q"]),
        ('--name "John Smith"', ["--name", "John Smith"]),
        ("--msg=\"it's here\"", ["--msg=it's here"]),
        ("--msg='say \"hi\"'", ['--msg=say "hi"']),
        ("a\tb\nc", ["a", "b", "c"]),
        ("C:\\temp\\dir", ["C:\\temp\\dir"]),
    ],
)
def test_split_command_line(text, expected):
    assert split_command_line(text) == expected


def test_unterminated_quote_runs_to_end():
    assert split_command_line("--path 'C:/Program Files  x") == [
        "--path",
        "C:/Program Files  x",
    ]


def test_empty_quotes_are_dropped():
    assert split_command_line("a '' \"\" b") == ["a", "b"]


def test_quoted_whitespace_only_is_dropped():
    assert split_command_line("a '   ' b") == ["a", "b"]


def test_adjacent_quoted_spans_join():
    assert split_command_line("--x='a b'\"c d\"") == ["--x=a bc d"]
