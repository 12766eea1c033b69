"""
DotArgs

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .logger import logger
from .parser import Alias, Argument, ArgumentKind, ArgumentRegistry, ValidationResult
from .version import __version__

__all__ = [
    "Alias",
    "Argument",
    "ArgumentKind",
    "ArgumentRegistry",
    "ValidationResult",
    "logger",
    "__version__",
]
