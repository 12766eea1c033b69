# DotArgs — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader that builds an `ArgumentRegistry` from a YAML or TOML file."""
from __future__ import annotations

import importlib
import os
from pathlib import Path
from typing import Any, Callable

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator
from rich.console import Console

from dotargs.exceptions import ArgumentRegistrationError, ConfigError, UnknownArgumentError
from dotargs.logger import logger
from dotargs.parser.argument import Argument
from dotargs.parser.argument_kind import ArgumentKind
from dotargs.parser.registry import ArgumentRegistry

CONFIG_EXAMPLE = (
    "Example:\n"
    "application_info: 'My tool 1.0'\n"
    "arguments:\n"
    "  - name: host\n"
    "    kind: option\n"
    "    default: 192.168.1.1\n"
)


def import_callable(dotted_path: str) -> Callable[..., Any]:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ConfigError(f"Invalid callable path: {dotted_path}")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ConfigError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        function = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ConfigError(f"Module '{module_path}' has no attribute '{attr}'") from error
    if not callable(function):
        raise ConfigError(f"'{dotted_path}' is not callable")
    return function


class RawArgument(BaseModel):
    """One argument declaration in a DotArgs config file."""

    name: str
    kind: ArgumentKind = ArgumentKind.OPTION
    default: bool | str | None = None
    required: bool = False
    position: int | None = Field(default=None, ge=0)
    help: str = ""
    placeholder: str | None = None
    choices: list[str] = Field(default_factory=list)
    validator: str | None = None
    processor: str | None = None
    aliases: list[str] = Field(default_factory=list)

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value: Any) -> ArgumentKind:
        return ArgumentKind(value)

    @field_validator("default", mode="before")
    @classmethod
    def stringify_default(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("choices", mode="before")
    @classmethod
    def stringify_choices(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return [str(choice) for choice in value]
        return value

    def to_argument(self) -> Argument:
        return Argument(
            self.kind,
            default=self.default,
            required=self.required,
            position=self.position,
            help=self.help,
            placeholder=self.placeholder,
            choices=tuple(self.choices),
            validator=import_callable(self.validator) if self.validator else None,
            processor=import_callable(self.processor) if self.processor else None,
        )


class RawExample(BaseModel):
    """Example shown on the help page."""

    description: str
    command_line: str


class DotArgsConfig(BaseModel):
    """DotArgs registry configuration model."""

    application_info: str = ""
    executable_name: str | None = None
    default_argument: str | None = None
    help_argument: str | None = None
    arguments: list[RawArgument] = Field(default_factory=list)
    examples: list[RawExample] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_names(self) -> DotArgsConfig:
        seen: set[str] = set()
        for argument in self.arguments:
            for name in (argument.name, *argument.aliases):
                if name in seen:
                    raise ValueError(f"Duplicate argument name: {name}")
                seen.add(name)
        if self.help_argument and self.help_argument in seen:
            raise ValueError(f"Duplicate argument name: {self.help_argument}")
        return self

    def to_registry(self, console: Console | None = None) -> ArgumentRegistry:
        registry = ArgumentRegistry(
            application_info=self.application_info,
            executable_name=self.executable_name,
            console=console,
        )
        for raw_argument in self.arguments:
            registry.register_argument(raw_argument.name, raw_argument.to_argument())
            for alias in raw_argument.aliases:
                registry.register_alias(raw_argument.name, alias)
        if self.help_argument:
            registry.register_help_argument(self.help_argument)
        if self.default_argument:
            registry.set_default_argument(self.default_argument)
        for example in self.examples:
            registry.add_example(example.description, example.command_line)
        return registry


def find_config() -> Path | None:
    """Return the first DotArgs config file found in the usual places."""
    candidates = [
        Path.cwd() / "dotargs.yaml",
        Path.cwd() / "dotargs.toml",
        Path.cwd() / ".dotargs.yaml",
        Path.cwd() / ".dotargs.toml",
    ]
    env_path = os.environ.get("DOTARGS_CONFIG")
    if env_path:
        candidates.append(Path(env_path))
    return next((path for path in candidates if path.is_file()), None)


def loader(file_path: Path | str, console: Console | None = None) -> ArgumentRegistry:
    """
    Load an `ArgumentRegistry` from a YAML or TOML file.

    The file should contain a mapping with a list of arguments. Each argument
    needs at least a `name`; `kind` defaults to `option`.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).
        console (Console | None): Output sink for the registry's help page.

    Returns:
        ArgumentRegistry: A registry with every declared argument registered.

    Raises:
        ConfigError: If the file is missing, malformed, or declares invalid arguments.
    """
    if not isinstance(file_path, (str, Path)):
        raise TypeError("file_path must be a string or Path object.")
    path = Path(file_path)

    if not path.is_file():
        raise ConfigError(f"No such config file: {file_path}")

    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Could not parse {path}: {error}") from error

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a mapping with a list of arguments.\n"
            + CONFIG_EXAMPLE
        )

    try:
        config = DotArgsConfig.model_validate(raw_config)
        registry = config.to_registry(console=console)
    except ValidationError as error:
        raise ConfigError(f"Invalid config {path}:\n{error}") from error
    except (ArgumentRegistrationError, UnknownArgumentError) as error:
        raise ConfigError(f"Invalid argument in {path}: {error}") from error

    logger.debug("Loaded %d argument(s) from %s", len(registry), path)
    return registry
