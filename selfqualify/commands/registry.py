"""Command registry for dynamic dispatch of rewrites."""

import importlib
import pkgutil
from pathlib import Path
from typing import Any, Dict, Type

from selfqualify.commands.base import BaseCommand

_registry: Dict[str, Type[BaseCommand]] = {}


def register_command(command_class: Type[BaseCommand]) -> None:
    """Register a command class.

    Args:
        command_class: The command class to register

    Raises:
        ValueError: If command_class doesn't have a name attribute
    """
    if not hasattr(command_class, "name"):
        raise ValueError(f"Command class {command_class.__name__} must have a 'name' attribute")
    _registry[command_class.name] = command_class


def get_command(name: str) -> Type[BaseCommand]:
    """Get a command class by name.

    Args:
        name: The name of the command

    Returns:
        The command class

    Raises:
        ValueError: If command is not registered
    """
    if name not in _registry:
        raise ValueError(f"Unknown command: {name}")
    return _registry[name]


def discover_and_register_commands() -> None:
    """Import every command module in this package.

    Each module calls register_command() at import time, so importing it is
    enough to make the command available.
    """
    commands_dir = Path(__file__).parent
    for module_info in pkgutil.iter_modules([str(commands_dir)]):
        if module_info.name not in ("base", "registry") and not module_info.name.startswith("_"):
            importlib.import_module(f"selfqualify.commands.{module_info.name}")


def apply_command(name: str, file_path: Path, **params: Any) -> None:
    """Apply a command using the registry.

    Args:
        name: Name of the command to apply
        file_path: Path to the file to rewrite
        **params: Additional parameters for the command

    Raises:
        ValueError: If the command is unknown or parameters are invalid
    """
    command_class = get_command(name)
    command = command_class(file_path, **params)
    command.validate()
    command.execute()
