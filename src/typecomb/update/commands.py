"""Update command registry and built-in command handlers.

A handler is called as ``handler(value, argument)`` and returns the new
value without modifying *value*. The registry is process-wide: it is
populated with the built-ins at import, may be extended by the embedding
application (or plugins) at any time before use, and is never reset. After
:func:`freeze_commands` further registrations fail.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from typecomb.domain.instances import Record
from typecomb.errors import UpdateError
from typecomb.util import fail, format_value

logger = logging.getLogger(__name__)

CommandHandler = Callable[[Any, Any], Any]

COMMAND_REGISTRY: dict[str, CommandHandler] = {}

_frozen = False


# ---------------------------------------------------------------------------
# Container helpers
# ---------------------------------------------------------------------------


def _require_sequence(value: Any, command: str) -> bool:
    if isinstance(value, (list, tuple)):
        return True
    fail(UpdateError(f"{command} requires a sequence, got {format_value(value)}", command=command))
    return False


def _require_mapping(value: Any, command: str) -> bool:
    if isinstance(value, (Mapping, Record)):
        return True
    fail(UpdateError(f"{command} requires a key-value container, got {format_value(value)}", command=command))
    return False


def _like(original: Any, items: list[Any]) -> Any:
    """Return *items* as a plain tuple if *original* is a tuple, else as a list."""
    return tuple(items) if isinstance(original, tuple) else items


def _as_dict(value: Any) -> dict[Any, Any]:
    return value._asdict() if isinstance(value, Record) else dict(value)


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# ---------------------------------------------------------------------------
# Built-in handlers
# ---------------------------------------------------------------------------


def _set(value: Any, argument: Any) -> Any:
    return argument


def _apply(value: Any, fn: Any) -> Any:
    if not callable(fn):
        return fail(UpdateError(f"$apply requires a callable, got {format_value(fn)}", command="$apply"))
    return fn(value)


def _push(value: Any, items: Any) -> Any:
    if not _require_sequence(value, "$push") or not _require_sequence(items, "$push"):
        return value
    return _like(value, [*value, *items])


def _unshift(value: Any, items: Any) -> Any:
    if not _require_sequence(value, "$unshift") or not _require_sequence(items, "$unshift"):
        return value
    return _like(value, [*items, *value])


def _splice(value: Any, operations: Any) -> Any:
    """Apply ``[start, delete_count, *items]`` operations in order to a copy."""
    if not _require_sequence(value, "$splice") or not _require_sequence(operations, "$splice"):
        return value
    result = list(value)
    for op in operations:
        if not isinstance(op, (list, tuple)) or len(op) < 2:
            return fail(
                UpdateError(f"$splice operations are [start, delete_count, *items], got {op!r}", command="$splice")
            )
        start, delete_count, *items = op
        if not _is_index(start) or not _is_index(delete_count):
            return fail(
                UpdateError(
                    f"$splice start and delete_count must be integers, got {start!r}, {delete_count!r}",
                    command="$splice",
                )
            )
        start = max(len(result) + start, 0) if start < 0 else min(start, len(result))
        result[start : start + max(delete_count, 0)] = items
    return _like(value, result)


def _swap(value: Any, argument: Any) -> Any:
    if not _require_sequence(value, "$swap"):
        return value
    if not isinstance(argument, Mapping) or "from" not in argument or "to" not in argument:
        return fail(UpdateError(f"$swap requires {{'from': i, 'to': j}}, got {argument!r}", command="$swap"))
    source, target = argument["from"], argument["to"]
    result = list(value)
    try:
        result[source], result[target] = result[target], result[source]
    except (IndexError, TypeError):
        return fail(UpdateError(f"$swap indices {source!r}, {target!r} out of range", command="$swap"))
    return _like(value, result)


def _merge(value: Any, partial: Any) -> Any:
    if not _require_mapping(value, "$merge") or not _require_mapping(partial, "$merge"):
        return value
    return {**_as_dict(value), **_as_dict(partial)}


def _remove(value: Any, keys: Any) -> Any:
    if not _require_mapping(value, "$remove") or not _require_sequence(keys, "$remove"):
        return value
    removed = set(keys)
    return {k: v for k, v in _as_dict(value).items() if k not in removed}


def _builtin_command_map() -> dict[str, CommandHandler]:
    return {
        "$set": _set,
        "$apply": _apply,
        "$push": _push,
        "$unshift": _unshift,
        "$splice": _splice,
        "$swap": _swap,
        "$merge": _merge,
        "$remove": _remove,
    }


# ---------------------------------------------------------------------------
# Registry API
# ---------------------------------------------------------------------------


def is_command(key: Any) -> bool:
    """Whether *key* is in command position (``$``-prefixed string)."""
    return isinstance(key, str) and key.startswith("$")


def get_command(name: str) -> CommandHandler:
    """Resolve a command name, failing with :class:`UpdateError` if unknown."""
    handler = COMMAND_REGISTRY.get(name)
    if handler is None:
        return fail(UpdateError(f"Unknown update command {name!r}", command=name))
    return handler


def register_command(name: str, handler: CommandHandler) -> None:
    """Associate *name* with *handler* for every subsequent update.

    Built-in names are reserved and cannot be overridden.
    """
    if _frozen:
        fail(UpdateError(f"Cannot register {name!r}: the command registry is frozen", command=name))
        return

    normalized = name.strip() if isinstance(name, str) else ""
    if not is_command(normalized) or len(normalized) < 2:
        msg = f"Command name must start with '$', got {name!r}"
        raise ValueError(msg)

    if not callable(handler):
        msg = f"Handler for {normalized!r} must be callable"
        raise TypeError(msg)

    if normalized in _builtin_command_map():
        msg = f"Command {normalized!r} conflicts with a built-in command"
        raise ValueError(msg)

    existing = COMMAND_REGISTRY.get(normalized)
    if existing is not None and existing is not handler:
        msg = f"Command {normalized!r} is already registered"
        raise ValueError(msg)

    COMMAND_REGISTRY[normalized] = handler
    logger.debug("Registered update command: %s", normalized)


def unregister_command(name: str) -> None:
    """Remove a non-built-in command."""
    if _frozen:
        fail(UpdateError(f"Cannot unregister {name!r}: the command registry is frozen", command=name))
        return
    if name in _builtin_command_map():
        msg = f"Built-in command {name!r} cannot be unregistered"
        raise ValueError(msg)
    COMMAND_REGISTRY.pop(name, None)


def freeze_commands() -> None:
    """Make the registry read-only for the rest of the process."""
    global _frozen
    _frozen = True
    logger.debug("Update command registry frozen with %d commands", len(COMMAND_REGISTRY))


def commands_frozen() -> bool:
    return _frozen


def _register_commands() -> None:
    """Populate :data:`COMMAND_REGISTRY` with the built-in commands."""
    COMMAND_REGISTRY.update(_builtin_command_map())


_register_commands()
