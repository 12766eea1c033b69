# DotArgs — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by DotArgs.

These exceptions cover programmer errors made while declaring arguments or
reading them back. Bad user input is never raised: `ArgumentRegistry.validate`
collects it into a list of error strings instead.

Several exceptions also derive from the matching builtin so callers can catch
them the usual way (`KeyError` for lookups, `ValueError` for bad declarations,
`TypeError` for checked reads).

Exception Hierarchy:
- DotArgsError
    ├── UnknownArgumentError (KeyError)
    ├── ArgumentRegistrationError (ValueError)
    │   ├── DuplicateArgumentError
    │   └── DuplicatePositionError
    ├── ArgumentTypeError (TypeError)
    └── ConfigError
"""


class DotArgsError(Exception):
    """Base exception for DotArgs."""


class UnknownArgumentError(DotArgsError, KeyError):
    """Raised when a name that was never registered is looked up."""

    def __str__(self) -> str:
        return Exception.__str__(self)


class ArgumentRegistrationError(DotArgsError, ValueError):
    """Raised when an argument declaration or registration is invalid."""


class DuplicateArgumentError(ArgumentRegistrationError):
    """Raised when a name is registered twice without `replace=True`."""


class DuplicatePositionError(ArgumentRegistrationError):
    """Raised when two arguments claim the same position."""


class ArgumentTypeError(DotArgsError, TypeError):
    """Raised when a value is read or written as the wrong type."""


class ConfigError(DotArgsError):
    """Raised when an argument config file cannot be loaded."""
