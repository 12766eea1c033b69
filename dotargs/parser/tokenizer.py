# DotArgs — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Quote-aware splitting of a raw command-line string.

Unlike `shlex.split`, the tokenizer never fails: an unterminated quote simply
runs to the end of the input, and backslashes have no special meaning, which
keeps Windows-style paths intact.
"""
from __future__ import annotations

QUOTES = ("'", '"')


def split_command_line(text: str) -> list[str]:
    """
    Split `text` into whitespace-separated tokens.

    Whitespace inside a single- or double-quoted span is kept and the quote
    characters are dropped. Quote kinds do not nest, so a `"` inside `'...'`
    is literal and vice versa. Empty tokens are dropped.

    Args:
        text (str): The raw command line.

    Returns:
        list[str]: The tokens in order.

    Example:
        split_command_line("--name 'John Smith' /q") == ["--name", "John Smith", "/q"]
    """
    tokens: list[str] = []
    buffer: list[str] = []
    quote: str | None = None

    for char in text:
        if quote is not None:
            if char == quote:
                quote = None
            else:
                buffer.append(char)
        elif char in QUOTES:
            quote = char
        elif char.isspace():
            _flush(buffer, tokens)
        else:
            buffer.append(char)

    _flush(buffer, tokens)
    return tokens


def _flush(buffer: list[str], tokens: list[str]) -> None:
    token = "".join(buffer)
    if token.strip():
        tokens.append(token)
    buffer.clear()
