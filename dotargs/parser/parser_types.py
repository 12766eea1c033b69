# DotArgs — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Small data structures shared by the registry and the resolver.

Contents:
- `Alias`: A second registry name for an argument, stored as a name reference
  so it always follows whatever is registered under the target name.
- `ValidationResult`: Outcome of `ArgumentRegistry.validate`, truthy on success
  and unpackable as `(success, errors)`.
- `ResolutionState`: Per-parse bookkeeping for the default argument.
- `TokenLike`: Accepted input for `validate`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence, Union


@dataclass(frozen=True)
class Alias:
    """Name reference to another registered entry."""

    target: str


@dataclass
class ValidationResult:
    """Success flag plus every user-input error found during a parse."""

    success: bool
    errors: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.success

    def __iter__(self) -> Iterator:
        yield self.success
        yield self.errors


@dataclass
class ResolutionState:
    """Tracks whether the default argument already absorbed a token."""

    default_name: str | None = None
    default_used: bool = False

    def mark_default_used(self) -> None:
        self.default_used = True

    def reset(self) -> None:
        self.default_used = False


TokenLike = Union[str, Sequence[str], None]
