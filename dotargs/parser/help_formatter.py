# DotArgs — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Builds the help page for an `ArgumentRegistry`.

The page is plain, deterministic text so it can be compared in tests and
written to any console:

    <application info>

    <optional error message>

    Usage:
    <executable> [/flag] </required=OPTION> [/optional=OPTION, default]

    name      help message
              Required | Optional, Default value: ...

    Examples:

    <description>
    <command line>

Arguments and examples are listed alphabetically. Each line is paired with a
console style name so `ArgumentRegistry.print_help` can colour it.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from dotargs.parser.parser_types import Alias

if TYPE_CHECKING:
    from dotargs.parser.registry import ArgumentRegistry

NAME_WIDTH = 10

HelpLine = tuple[str, str]


class HelpFormatter:
    """Formats usage and help text for one `ArgumentRegistry`."""

    def __init__(self, registry: ArgumentRegistry, name_width: int = NAME_WIDTH) -> None:
        self.registry = registry
        self.name_width = name_width

    def get_usage(self) -> str:
        """Return the usage line: executable name followed by every argument."""
        fragments = [
            self.registry.get_argument(name).describe(name)
            for name in sorted(self.registry)
        ]
        return " ".join([self.registry.executable_name, *fragments]).rstrip()

    def get_help_message(self, name: str) -> str:
        entry = self.registry.get_entry(name)
        if isinstance(entry, Alias):
            return f"Alias for '{entry.target}'."
        return entry.help or ""

    def build_lines(self, error_message: str | None = None) -> list[HelpLine]:
        """Return `(text, style)` pairs for the whole help page."""
        lines: list[HelpLine] = [
            (self.registry.application_info, "dotargs.banner"),
            ("", ""),
        ]
        if error_message and error_message.strip():
            lines.append((error_message, "dotargs.error"))
            lines.append(("", ""))

        lines.append(("Usage:", "dotargs.heading"))
        lines.append((self.get_usage(), ""))

        for name in sorted(self.registry):
            argument = self.registry.get_argument(name)
            lines.append(("", ""))
            lines.append(
                (f"{name:<{self.name_width}}{self.get_help_message(name)}", "dotargs.name")
            )
            lines.append(
                (f"{'':<{self.name_width}}{argument.get_info_text()}", "dotargs.dim")
            )

        examples = self.registry.examples
        if examples:
            lines.append(("", ""))
            lines.append(("Examples:", "dotargs.heading"))
            for description, command_line in examples:
                lines.append(("", ""))
                lines.append((description, ""))
                lines.append((command_line, "dotargs.dim"))

        return lines

    def format_help(self, error_message: str | None = None) -> str:
        """Return the help page as a single string."""
        return "\n".join(text for text, _ in self.build_lines(error_message))
