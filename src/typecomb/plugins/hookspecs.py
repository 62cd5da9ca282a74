"""Pluggy hook specifications for typecomb extensions.

Both hooks are setup-time: they let a plugin contribute update commands and
irreducible types to the process-wide registries before first use.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from typecomb.combinators.irreducible import IrreducibleType
    from typecomb.update.commands import CommandHandler

hookspec = pluggy.HookspecMarker("typecomb")
hookimpl = pluggy.HookimplMarker("typecomb")


class TypecombHookSpec:
    """Hook specifications for the typecomb plugin system."""

    @hookspec
    def register_update_commands(self) -> dict[str, CommandHandler] | None:
        """Return ``$name -> handler`` mappings to extend COMMAND_REGISTRY."""

    @hookspec
    def register_irreducibles(self) -> list[IrreducibleType] | None:
        """Return irreducible types to add to IRREDUCIBLE_REGISTRY."""
