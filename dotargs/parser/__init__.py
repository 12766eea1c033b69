"""
DotArgs

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import Argument
from .argument_kind import ArgumentKind
from .parser_types import Alias, ValidationResult
from .registry import ArgumentRegistry
from .tokenizer import split_command_line

__all__ = [
    "Alias",
    "Argument",
    "ArgumentKind",
    "ArgumentRegistry",
    "ValidationResult",
    "split_command_line",
]
