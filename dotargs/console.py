# DotArgs — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance used as the default output sink for DotArgs."""
from rich.console import Console
from rich.theme import Theme

dotargs_theme = Theme(
    {
        "dotargs.banner": "bold",
        "dotargs.heading": "bold",
        "dotargs.error": "bold red",
        "dotargs.name": "cyan",
        "dotargs.dim": "dim",
    }
)

console = Console(theme=dotargs_theme)
