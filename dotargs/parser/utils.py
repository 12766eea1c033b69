# DotArgs — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token helpers for the DotArgs resolver.

Functions:
- is_argument_name: Whether a token starts with a name prefix (`-`, `--`, `/`).
- get_arg_name: The bare argument name carried by a token.
- extract_value: The inline value carried by a token, if any.
- dedupe: Drop repeated strings while keeping first-occurrence order.
"""
from __future__ import annotations

from typing import Iterable

PREFIXES = ("-", "/")
SEPARATORS = ("=", ":")


def is_argument_name(token: str) -> bool:
    """Return True if `token` starts with a name prefix."""
    return token.startswith(PREFIXES)


def _find_separator(token: str) -> int:
    positions = [token.find(separator) for separator in SEPARATORS]
    found = [position for position in positions if position != -1]
    return min(found) if found else -1


def get_arg_name(token: str) -> str:
    """
    Return the bare name in `token`.

    The leading run of prefix characters is stripped and everything from the
    first `=` or `:` onward is dropped.

    Example:
        get_arg_name("--name=value") == "name"
        get_arg_name("/name:value") == "name"
        get_arg_name("value") == "value"
    """
    name = token.lstrip("".join(PREFIXES))
    index = _find_separator(name)
    if index != -1:
        name = name[:index]
    return name


def extract_value(token: str) -> str | None:
    """
    Return the text after the first `=` or `:` in `token`, or None.

    An empty inline value (`--name=`) is returned as an empty string.
    """
    index = _find_separator(token)
    if index == -1:
        return None
    return token[index + 1 :]


def dedupe(items: Iterable[str]) -> list[str]:
    """Return `items` without repeats, in order of first occurrence."""
    return list(dict.fromkeys(items))
