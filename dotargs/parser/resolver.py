# DotArgs — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `ArgumentResolver`, the matching and validation pass behind
`ArgumentRegistry.validate`.

For each token the resolver works out which argument it belongs to, trying in
order:

1. An explicit name (`-name`, `--name`, `/name`, or a bare registered name).
2. A positional argument declared at the token's index.
3. The registry's default argument, which absorbs one stray token, or every
   stray token if it is a collection.

Arguments that need a value take it inline (`--name=value`, `/name:value`) or
from the next token, unless that token names a registered argument. Flags are
set to `True` by their presence alone.

Once every token is consumed, each registered entry is checked: required
arguments must hold a value and every value must pass its kind's validation.
All problems are collected as strings and returned together; nothing here
raises for bad user input.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from dotargs.logger import logger
from dotargs.parser.argument import format_value
from dotargs.parser.parser_types import ResolutionState
from dotargs.parser.utils import dedupe, extract_value, get_arg_name, is_argument_name

if TYPE_CHECKING:
    from dotargs.parser.registry import ArgumentRegistry


class ArgumentResolver:
    """Maps tokens onto the arguments of one `ArgumentRegistry`."""

    def __init__(self, registry: ArgumentRegistry) -> None:
        self.registry = registry

    def _claim_default(self, state: ResolutionState) -> str | None:
        """Return the default argument name if it may absorb another token."""
        if state.default_name is None:
            return None
        default = self.registry.get_argument(state.default_name)
        if state.default_used and not default.supports_multiple_values:
            return None
        state.mark_default_used()
        return state.default_name

    def resolve(self, tokens: list[str]) -> list[str]:
        """
        Assign values from `tokens` and return the list of errors found.

        Every registered argument is expected to be reset before this is called.
        """
        registry = self.registry
        state = ResolutionState(default_name=registry.default_argument)
        errors: list[str] = []

        index = 0
        while index < len(tokens):
            token = tokens[index]
            name = get_arg_name(token)

            if not is_argument_name(token):
                positional_name = registry.get_name_for_position(index)
                if positional_name is not None:
                    token, name = f"/{positional_name}={token}", positional_name
                    logger.debug("Token %d resolved by position to '%s'", index, name)
                else:
                    default_name = self._claim_default(state)
                    if default_name is not None:
                        token, name = f"/{default_name}={token}", default_name
                        logger.debug("Token %d absorbed by default '%s'", index, name)

            if name not in registry:
                default_name = self._claim_default(state)
                if default_name is None:
                    errors.append(f"Unknown option: '{name}'")
                    index += 1
                    continue
                token, name = f"/{default_name}={token}", default_name
                logger.debug("Unknown token %d absorbed by default '%s'", index, name)

            argument = registry.get_argument(name)
            if argument.needs_value:
                value = extract_value(token)
                if value is None and index + 1 < len(tokens):
                    candidate = tokens[index + 1]
                    if get_arg_name(candidate) not in registry:
                        value = candidate
                        index += 1
                if value is None:
                    errors.append(f"Missing value for option '{name}'")
                else:
                    argument.set_value(value)
            else:
                argument.set_value(True)
            index += 1

        errors.extend(self.check_values())
        return dedupe(errors)

    def check_values(self) -> list[str]:
        """Run the required and per-kind checks over every registered entry."""
        errors: list[str] = []
        for name in self.registry:
            argument = self.registry.get_argument(name)
            value = argument.get_value()
            if argument.required and argument.is_empty():
                errors.append(f"Missing value for option '{name}'")
            if not argument.validate(value):
                errors.append(f"{name}: Invalid value {format_value(value)}")
        return errors
