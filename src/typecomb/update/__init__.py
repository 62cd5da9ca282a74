"""Immutable update interpreter with a pluggable command registry."""

from typecomb.update.commands import (
    COMMAND_REGISTRY,
    commands_frozen,
    freeze_commands,
    get_command,
    register_command,
    unregister_command,
)
from typecomb.update.interpreter import update

__all__ = [
    "COMMAND_REGISTRY",
    "commands_frozen",
    "freeze_commands",
    "get_command",
    "register_command",
    "unregister_command",
    "update",
]
