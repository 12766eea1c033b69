# DotArgs — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Argument` dataclass registered with an `ArgumentRegistry`.

An `Argument` is one command-line declaration: its kind, default value,
whether it is required, an optional position, help metadata, and optional
validator and processor callbacks. It also owns the mutable value slot that
`ArgumentRegistry.validate` fills in; the slot is reset to the default at the
start of every parse.

Arguments are usually created through the kind-specific constructors:

    Argument.flag(help="Enable verbose output.")
    Argument.option("192.168.1.1", help="Router address.")
    Argument.choice(["cli", "json"], "cli")
    Argument.collection(help="Files to include.")

Key Attributes:
- `kind`: `ArgumentKind` selecting the behaviour (flag, option, set, collection)
- `default`: Value restored on reset (forced to `None` for required arguments)
- `required`: Whether the argument must be supplied on the command line
- `position`: Zero-based token index the argument may be given at without a name
- `choices`: Allowed values for `ArgumentKind.SET`
- `validator`: Optional predicate over the final value, called with `None` when unset
- `processor`: Optional callback run by `ArgumentRegistry.process()`
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from dotargs.exceptions import ArgumentRegistrationError, ArgumentTypeError
from dotargs.parser.argument_kind import ArgumentKind


@dataclass(eq=False)
class Argument:
    """
    Represents a command-line argument and its current value.

    Attributes:
        kind (ArgumentKind): Behaviour of the argument.
        default (Any): Value restored on reset. `bool` for flags, `str | None`
            for options and sets, always an empty tuple for collections.
        required (bool): True if the argument must be given on the command line.
        position (int | None): Token index the argument may be given at without a name.
        help (str): Help message shown on the help page.
        placeholder (str | None): Usage placeholder, defaults to the kind's label.
        choices (tuple[str, ...]): Allowed values for set arguments.
        validator (Callable[[Any], bool] | None): Extra predicate over the value.
            Receives `None` when an optional argument was not given.
        processor (Callable[[Any], Any] | None): Callback run by `process()`.
    """

    kind: ArgumentKind = ArgumentKind.OPTION
    default: Any = None
    required: bool = False
    position: int | None = None
    help: str = ""
    placeholder: str | None = None
    choices: tuple[str, ...] = ()
    validator: Callable[[Any], bool] | None = None
    processor: Callable[[Any], Any] | None = None
    _value: Any = field(default=None, init=False, repr=False)
    _values: list[str] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        try:
            self.kind = ArgumentKind(self.kind)
        except ValueError as error:
            raise ArgumentRegistrationError(str(error)) from error

        if self.position is not None and (
            isinstance(self.position, bool)
            or not isinstance(self.position, int)
            or self.position < 0
        ):
            raise ArgumentRegistrationError(
                f"position must be a non-negative integer, got {self.position!r}"
            )

        self.choices = tuple(self.choices)
        if self.kind is ArgumentKind.SET:
            if not self.choices:
                raise ArgumentRegistrationError("set arguments need at least one choice")
            if not all(isinstance(choice, str) for choice in self.choices):
                raise ArgumentRegistrationError("choices must be strings")
        elif self.choices:
            raise ArgumentRegistrationError(
                f"choices cannot be specified for {self.kind} arguments"
            )

        self.default = self._normalize_default(self.default)
        if self.placeholder is None:
            self.placeholder = self.kind.placeholder
        self.reset()

    def _normalize_default(self, default: Any) -> Any:
        if self.required:
            return None
        if self.kind is ArgumentKind.FLAG:
            if default is None:
                return False
            if not isinstance(default, bool):
                raise ArgumentRegistrationError(
                    f"Flag default must be a bool, got {default!r}"
                )
            return default
        if self.kind is ArgumentKind.COLLECTION:
            if default:
                raise ArgumentRegistrationError(
                    "Collection arguments always start empty and take no default"
                )
            return ()
        if default is not None and not isinstance(default, str):
            raise ArgumentRegistrationError(
                f"Default for {self.kind} arguments must be a string, got {default!r}"
            )
        if self.kind is ArgumentKind.SET and default and default not in self.choices:
            raise ArgumentRegistrationError(
                f"Default {default!r} is not one of {{{','.join(self.choices)}}}"
            )
        return default

    @classmethod
    def flag(
        cls,
        default: bool = False,
        required: bool = False,
        position: int | None = None,
        **kwargs: Any,
    ) -> Argument:
        """Create a presence-only flag."""
        return cls(
            ArgumentKind.FLAG,
            default=default,
            required=required,
            position=position,
            **kwargs,
        )

    @classmethod
    def option(
        cls,
        default: str | None = None,
        required: bool = False,
        position: int | None = None,
        **kwargs: Any,
    ) -> Argument:
        """Create an option that accepts any string value."""
        return cls(
            ArgumentKind.OPTION,
            default=default,
            required=required,
            position=position,
            **kwargs,
        )

    @classmethod
    def choice(
        cls,
        choices: Iterable[str],
        default: str | None = None,
        required: bool = False,
        position: int | None = None,
        **kwargs: Any,
    ) -> Argument:
        """Create an option restricted to `choices`."""
        return cls(
            ArgumentKind.SET,
            default=default,
            required=required,
            position=position,
            choices=tuple(choices),
            **kwargs,
        )

    @classmethod
    def collection(
        cls,
        required: bool = False,
        position: int | None = None,
        **kwargs: Any,
    ) -> Argument:
        """Create an option that collects every value it is given."""
        return cls(
            ArgumentKind.COLLECTION,
            required=required,
            position=position,
            **kwargs,
        )

    @property
    def needs_value(self) -> bool:
        return self.kind.needs_value

    @property
    def supports_multiple_values(self) -> bool:
        return self.kind.supports_multiple_values

    @property
    def has_default(self) -> bool:
        """True if the default is worth showing on the help page."""
        return self.default is not None and self.default != "" and self.default != ()

    def get_value(self) -> Any:
        """Return the current value; collections return an immutable snapshot."""
        if self.kind is ArgumentKind.COLLECTION:
            return tuple(self._values)
        return self._value

    def set_value(self, value: Any) -> None:
        """
        Store a value. Collections append, every other kind overwrites.

        Raises:
            ArgumentTypeError: If the value does not match the kind.
        """
        if self.kind is ArgumentKind.FLAG:
            if not isinstance(value, bool):
                raise ArgumentTypeError(f"Flag values must be bool, got {value!r}")
            self._value = value
        elif not isinstance(value, str):
            raise ArgumentTypeError(
                f"Values for {self.kind} arguments must be str, got {value!r}"
            )
        elif self.kind is ArgumentKind.COLLECTION:
            self._values.append(value)
        else:
            self._value = value

    def reset(self) -> None:
        """Restore the default value."""
        self._values.clear()
        self._value = None if self.kind is ArgumentKind.COLLECTION else self.default

    def is_empty(self) -> bool:
        """True if no usable value is present."""
        value = self.get_value()
        return value is None or (self.kind is ArgumentKind.COLLECTION and not value)

    def validate(self, value: Any) -> bool:
        """Return True if `value` is acceptable for this argument."""
        if self.kind is ArgumentKind.FLAG:
            return isinstance(value, bool)
        if self.kind is ArgumentKind.SET and value not in self.choices:
            return False
        if self.validator is not None:
            return bool(self.validator(value))
        return True

    def describe(self, name: str) -> str:
        """Return the usage fragment for this argument, e.g. `[/name=OPTION, x]`."""
        text = f"/{name}"
        if self.needs_value:
            text += f"={self.placeholder}"
        if self.required:
            return f"<{text}>"
        if self.has_default:
            text += f", {format_value(self.default)}"
        return f"[{text}]"

    def get_info_text(self) -> str:
        """Return the required/optional summary shown under the help message."""
        if self.required:
            return "Required"
        if self.has_default:
            return f"Optional, Default value: {format_value(self.default)}"
        return "Optional"


def format_value(value: Any) -> str:
    """Format a stored value for help and error messages."""
    if value is None:
        return ""
    if isinstance(value, tuple):
        return ",".join(value)
    return str(value)
