# DotArgs — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentRegistry`, the entry point of DotArgs.

A registry owns a set of named `Argument` declarations, matches a raw command
line against them, and hands the validated values back. It is deliberately
small: names are free-form, any of `-name`, `--name` and `/name` select an
argument, values follow `=`, `:` or a space, and every problem in the command
line is reported at once instead of stopping at the first.

Key Features:
- Flags, free-form options, enumerated options and repeatable collections
- Aliases that always follow the argument registered under the target name
- Positional arguments and a default argument for unnamed tokens
- Quote-aware tokenizing of single-string command lines
- Accumulated, de-duplicated error reporting
- Checked reads via `get_value(name, expected_type)`
- Post-validation processors run in registration order
- Deterministic help page rendered to a Rich console

Public Interface:
- `register_argument(name, argument)`: Register a new argument.
- `register_alias(original_name, alias)`: Add a second name for an argument.
- `register_help_argument(name)`: Register a flag that prints the help page.
- `set_default_argument(name)`: Pick the argument that absorbs unnamed tokens.
- `add_example(description, command_line)`: Add an example to the help page.
- `validate(args)`: Parse and check a command line.
- `get_value(name, expected_type)`: Read back a value.
- `process()`: Run every processor with its argument's value.
- `print_help(error_message)`: Print the help page.

Example Usage:
    registry = ArgumentRegistry(application_info="SmartRouter 1.0")
    registry.register_argument("h", Argument.option("192.168.1.1"))
    registry.register_argument("pu", Argument.option(required=True))
    registry.register_help_argument()

    result = registry.validate(["--pu=alice", "/h:10.0.0.1"])
    if not result:
        registry.print_help("\\n".join(result.errors))

    registry.get_value("h", str)  # '10.0.0.1'

Design Notes:
A registry is mutated by every `validate` call and is not meant to be shared
between threads; use one registry per concurrent parse.
"""
from __future__ import annotations

import sys
from typing import Any, Iterator

from rich.console import Console
from rich.text import Text

from dotargs.console import console as default_console
from dotargs.exceptions import (
    ArgumentRegistrationError,
    ArgumentTypeError,
    DuplicateArgumentError,
    DuplicatePositionError,
    UnknownArgumentError,
)
from dotargs.logger import logger
from dotargs.parser.argument import Argument
from dotargs.parser.argument_kind import ArgumentKind
from dotargs.parser.help_formatter import HelpFormatter
from dotargs.parser.parser_types import Alias, TokenLike, ValidationResult
from dotargs.parser.resolver import ArgumentResolver
from dotargs.parser.tokenizer import split_command_line
from dotargs.utils import get_executable_name


class ArgumentRegistry:
    """
    Registry of command-line arguments for one program.

    Attributes:
        application_info (str): Banner printed at the top of the help page.
        executable_name (str): Program name shown in the usage line.
        console (Console): Output sink for the help page.
        default_argument (str | None): Name of the argument that absorbs unnamed tokens.
    """

    def __init__(
        self,
        application_info: str = "",
        executable_name: str | None = None,
        console: Console | None = None,
    ) -> None:
        self.application_info: str = application_info
        self.executable_name: str = executable_name or get_executable_name()
        self.console: Console = console or default_console
        self.default_argument: str | None = None
        self._entries: dict[str, Argument | Alias] = {}
        self._examples: dict[str, str] = {}
        self._resolver = ArgumentResolver(self)
        self._formatter = HelpFormatter(self)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def examples(self) -> list[tuple[str, str]]:
        """Examples as `(description, command_line)` pairs, sorted by description."""
        return sorted(self._examples.items())

    def get_entry(self, name: str) -> Argument | Alias:
        """Return the raw entry registered under `name` without following aliases."""
        if name not in self._entries:
            raise UnknownArgumentError(f"An argument with the name {name} was not registered.")
        return self._entries[name]

    def get_argument(self, name: str) -> Argument:
        """
        Return the argument registered under `name`, following aliases.

        Raises:
            UnknownArgumentError: If `name` (or an alias target) is not registered.
        """
        seen: set[str] = set()
        entry = self.get_entry(name)
        while isinstance(entry, Alias):
            if entry.target in seen:
                raise UnknownArgumentError(f"Alias cycle detected for {name}.")
            seen.add(entry.target)
            entry = self.get_entry(entry.target)
        return entry

    def is_alias(self, name: str) -> bool:
        return isinstance(self.get_entry(name), Alias)

    def get_name_for_position(self, position: int) -> str | None:
        """Return the first argument name declared at `position`, if any."""
        for name, entry in self._entries.items():
            if isinstance(entry, Argument) and entry.position == position:
                return name
        return None

    def _check_name(self, name: str, replace: bool) -> None:
        if not isinstance(name, str) or not name:
            raise ArgumentRegistrationError("Argument names must be non-empty strings")
        if name in self._entries and not replace:
            raise DuplicateArgumentError(
                f"An argument with the name {name} is already registered. "
                "Pass replace=True to overwrite it."
            )

    def register_argument(
        self, name: str, argument: Argument, replace: bool = False
    ) -> Argument:
        """
        Register `argument` under `name`.

        Args:
            name (str): Name used on the command line, without prefix.
            argument (Argument): The argument declaration.
            replace (bool): Overwrite an existing entry with the same name.

        Returns:
            Argument: The registered argument.

        Raises:
            DuplicateArgumentError: If `name` is taken and `replace` is False.
            DuplicatePositionError: If another argument already claims the position.
        """
        if not isinstance(argument, Argument):
            raise ArgumentRegistrationError(
                f"Expected an Argument for {name}, got {type(argument).__name__}"
            )
        self._check_name(name, replace)
        if argument.position is not None:
            owner = self.get_name_for_position(argument.position)
            if (
                owner is not None
                and owner != name
                and self._entries[owner] is not argument
            ):
                raise DuplicatePositionError(
                    f"Position {argument.position} is already used by {owner}"
                )
        if name in self._entries:
            logger.debug("Replacing argument '%s'", name)
        self._entries[name] = argument
        logger.debug("Registered %s argument '%s'", argument.kind, name)
        return argument

    def register_alias(self, original_name: str, alias: str, replace: bool = False) -> None:
        """
        Register `alias` as a second name for `original_name`.

        The alias stores the name it points to, so replacing the original later
        makes the alias follow the new argument.

        Raises:
            UnknownArgumentError: If `original_name` is not registered.
        """
        if original_name not in self._entries:
            raise UnknownArgumentError(
                f"An entry with the name {original_name} was not registered."
            )
        self._check_name(alias, replace)
        target = original_name
        entry = self._entries[target]
        while isinstance(entry, Alias):
            target = entry.target
            entry = self.get_entry(target)
        if target == alias:
            raise ArgumentRegistrationError(f"{alias} cannot be an alias for itself")
        self._entries[alias] = Alias(target)
        logger.debug("Registered alias '%s' for '%s'", alias, target)

    def register_help_argument(self, name: str = "help") -> Argument:
        """Register a flag that prints the help page when processed."""

        def _print_help(value: bool) -> None:
            if value:
                self.print_help()

        return self.register_argument(
            name,
            Argument.flag(help="Displays this help.", processor=_print_help),
        )

    def set_default_argument(self, name: str) -> None:
        """
        Make `name` absorb unnamed and unknown tokens.

        Raises:
            ArgumentRegistrationError: If `name` is not registered.
        """
        if name not in self._entries:
            raise ArgumentRegistrationError(f"Argument {name} was not registered")
        self.default_argument = name
        logger.debug("Default argument set to '%s'", name)

    def add_example(self, description: str, command_line: str) -> None:
        """Add an example shown on the help page."""
        self._examples[description] = command_line

    def reset(self) -> None:
        """Restore every argument to its default value."""
        for entry in self._entries.values():
            if isinstance(entry, Argument):
                entry.reset()

    def _tokenize(self, args: TokenLike) -> list[str]:
        if args is None:
            return list(sys.argv[1:])
        if isinstance(args, str):
            return split_command_line(args)
        return [str(arg) for arg in args if str(arg).strip()]

    def validate(self, args: TokenLike = None) -> ValidationResult:
        """
        Parse `args` into the registered arguments and check the result.

        Args:
            args (str | Sequence[str] | None): A raw command line, already split
                tokens, or None for `sys.argv[1:]`.

        Returns:
            ValidationResult: Truthy when no errors were found. Unpacks as
            `(success, errors)`.
        """
        self.reset()
        tokens = self._tokenize(args)
        errors = self._resolver.resolve(tokens)
        if errors:
            logger.debug("Validation failed with %d error(s): %s", len(errors), errors)
        else:
            logger.debug("Validated %d token(s)", len(tokens))
        return ValidationResult(success=not errors, errors=errors)

    def get_value(self, name: str, expected_type: type | None = None) -> Any:
        """
        Return the current value of the argument registered under `name`.

        Args:
            name (str): Argument or alias name.
            expected_type (type | None): If given, the value must be an instance
                of this type. `None` values pass any check. Collections may be
                read as `list` to get a mutable copy.

        Raises:
            UnknownArgumentError: If `name` is not registered.
            ArgumentTypeError: If the value is not an `expected_type`.
        """
        argument = self.get_argument(name)
        value = argument.get_value()
        if expected_type is None or value is None:
            return value
        if argument.kind is ArgumentKind.COLLECTION and expected_type is list:
            return list(value)
        if not isinstance(value, expected_type):
            raise ArgumentTypeError(
                f"Argument {name} holds a {argument.kind} value of type "
                f"{type(value).__name__}, not {expected_type.__name__}"
            )
        return value

    def values(self) -> dict[str, Any]:
        """Return `{name: value}` for every argument that is not an alias."""
        return {
            name: entry.get_value()
            for name, entry in self._entries.items()
            if isinstance(entry, Argument)
        }

    def process(self) -> None:
        """Run each argument's processor with its value, in registration order."""
        for name, entry in list(self._entries.items()):
            if isinstance(entry, Alias) or entry.processor is None:
                continue
            logger.debug("Processing argument '%s'", name)
            entry.processor(entry.get_value())

    def format_help(self, error_message: str | None = None) -> str:
        """Return the help page as a string."""
        return self._formatter.format_help(error_message)

    def print_help(self, error_message: str | None = None) -> None:
        """Print the help page, optionally preceded by `error_message`."""
        for text, style in self._formatter.build_lines(error_message):
            self.console.print(Text(text, style=style), soft_wrap=True, highlight=False)

    def __str__(self) -> str:
        aliases = sum(isinstance(entry, Alias) for entry in self._entries.values())
        required = sum(
            entry.required for entry in self._entries.values() if isinstance(entry, Argument)
        )
        return (
            f"ArgumentRegistry(args={len(self._entries) - aliases}, aliases={aliases}, "
            f"required={required}, default={self.default_argument!r})"
        )

    def __repr__(self) -> str:
        return str(self)
