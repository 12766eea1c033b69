# DotArgs — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentKind`, the closed set of argument behaviours supported by
DotArgs.

Each kind fixes the Python type its value is stored as, whether it consumes a
value token, whether repeated assignment appends, and the placeholder shown in
the usage line.

Members:
    FLAG: Presence-only switch, stored as `bool`.
    OPTION: Free-form value, stored as `str`.
    SET: Value restricted to a fixed set of strings, stored as `str`.
    COLLECTION: Repeatable value, stored as a `tuple[str, ...]`.

Aliases:
    - "bool" / "switch" → "flag"
    - "choice" / "enum" → "set"
    - "list" / "append" → "collection"

Example:
    ArgumentKind("choice") → ArgumentKind.SET
"""
from __future__ import annotations

from enum import Enum


class ArgumentKind(Enum):
    """Kinds of command-line arguments."""

    FLAG = "flag"
    OPTION = "option"
    SET = "set"
    COLLECTION = "collection"

    @property
    def value_type(self) -> type:
        """Type the argument value is stored as."""
        if self is ArgumentKind.FLAG:
            return bool
        if self is ArgumentKind.COLLECTION:
            return tuple
        return str

    @property
    def needs_value(self) -> bool:
        return self is not ArgumentKind.FLAG

    @property
    def supports_multiple_values(self) -> bool:
        return self is ArgumentKind.COLLECTION

    @property
    def placeholder(self) -> str | None:
        """Default usage placeholder for this kind."""
        if self is ArgumentKind.COLLECTION:
            return "COLLECTION"
        if self.needs_value:
            return "OPTION"
        return None

    @classmethod
    def choices(cls) -> list[ArgumentKind]:
        """Return a list of all argument kinds."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "bool": "flag",
            "switch": "flag",
            "choice": "set",
            "enum": "set",
            "list": "collection",
            "append": "collection",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgumentKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value
