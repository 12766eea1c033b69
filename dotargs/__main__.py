"""
DotArgs

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from typing import Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dotargs.config import find_config, loader
from dotargs.console import console as default_console
from dotargs.exceptions import ConfigError
from dotargs.logger import logger
from dotargs.parser import Argument, ArgumentRegistry
from dotargs.parser.argument import format_value
from dotargs.utils import setup_logging
from dotargs.version import __version__


def build_cli_registry(console: Console | None = None) -> ArgumentRegistry:
    """Declare the arguments of the `dotargs` command itself."""
    config_path = find_config()
    registry = ArgumentRegistry(
        application_info=f"dotargs {__version__}: check a command line against an argument config",
        executable_name="dotargs",
        console=console,
    )
    registry.register_argument(
        "config",
        Argument.option(
            str(config_path) if config_path else None,
            position=None if config_path else 0,
            help="YAML or TOML file declaring the arguments to check against.",
            placeholder="PATH",
        ),
    )
    registry.register_alias("config", "c")
    registry.register_argument(
        "line",
        Argument.option(
            help="Command line to check, given as one quoted string.",
            placeholder="TEXT",
        ),
    )
    registry.register_argument(
        "args",
        Argument.collection(help="Tokens to check when --line is not given."),
    )
    registry.register_argument(
        "log-mode",
        Argument.choice(["cli", "json"], "cli", help="Console log format."),
    )
    registry.register_argument(
        "verbose", Argument.flag(help="Show debug logs on the console.")
    )
    registry.register_alias("verbose", "v")
    registry.register_help_argument()
    registry.set_default_argument("args")
    registry.add_example(
        "Check a quoted command line",
        "dotargs router.yaml --line \"--pu=alice --pp='s3cret pass'\"",
    )
    registry.add_example(
        "Check trailing tokens", "dotargs router.yaml --pu=alice /pp:secret"
    )
    return registry


def render_values(registry: ArgumentRegistry, console: Console) -> None:
    table = Table(title="Parsed arguments", box=box.SIMPLE, title_justify="left")
    table.add_column("Name", style="dotargs.name")
    table.add_column("Kind")
    table.add_column("Value")
    for name, value in registry.values().items():
        kind = registry.get_argument(name).kind
        table.add_row(escape(name), str(kind), escape(format_value(value)))
    console.print(table)


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    console = console or default_console
    cli = build_cli_registry(console=console)
    result = cli.validate(list(sys.argv[1:] if argv is None else argv))
    if not result:
        cli.print_help("\n".join(result.errors))
        return 2

    setup_logging(
        mode=cli.get_value("log-mode", str),
        console_log_level=logging.DEBUG if cli.get_value("verbose", bool) else logging.WARNING,
    )
    cli.process()
    if cli.get_value("help", bool):
        return 0

    config_path = cli.get_value("config", str)
    if not config_path:
        cli.print_help("No config file given and none found in the current directory.")
        return 2

    try:
        registry = loader(config_path, console=console)
    except ConfigError as error:
        logger.error("Failed to load config '%s': %s", config_path, error)
        console.print(f"[dotargs.error]❌ {escape(str(error))}[/]")
        return 2

    line = cli.get_value("line", str)
    tokens = line if line is not None else cli.get_value("args", list)
    result = registry.validate(tokens)
    if not result:
        for error in result.errors:
            console.print(f"[dotargs.error]❌ {escape(error)}[/]")
        console.print()
        registry.print_help()
        return 1

    render_values(registry, console)
    registry.process()
    return 0


if __name__ == "__main__":
    sys.exit(main())
