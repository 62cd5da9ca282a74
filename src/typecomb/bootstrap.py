"""Apply a settings object to the process-wide engine state.

Call once at application start-up, before concurrent use begins: it
configures logging, sets diagnostic limits, loads plugins so they can
extend the registries, and optionally freezes the command registry.
"""

from __future__ import annotations

import logging

from typecomb.config.logging import configure_logging
from typecomb.config.settings import TypecombSettings
from typecomb.plugins.manager import PluginManager
from typecomb.update.commands import commands_frozen, freeze_commands
from typecomb.util import set_max_value_repr

logger = logging.getLogger(__name__)


def bootstrap(settings: TypecombSettings | None = None) -> PluginManager:
    """Initialize the engine from *settings* (discovered from env/TOML when None).

    Returns the plugin manager so callers can register further plugins.
    """
    if settings is None:
        settings = TypecombSettings.load()

    configure_logging(verbose=settings.logging.verbose, log_json=settings.logging.json_output)
    set_max_value_repr(settings.diagnostics.max_value_repr)

    manager = PluginManager(disabled=settings.plugins.disabled)
    if settings.plugins.enabled:
        names = manager.discover_and_load()
        logger.debug("Loaded plugins: %s", names)

    if settings.update.freeze_commands and not commands_frozen():
        freeze_commands()

    return manager
