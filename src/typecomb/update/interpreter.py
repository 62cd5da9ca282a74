"""Immutable update interpreter.

``update(instance, spec)`` walks *spec* in order. ``$``-prefixed keys are
resolved in :data:`~typecomb.update.commands.COMMAND_REGISTRY` and applied to
the current value; any other key patches that child recursively and the
parent is rebuilt around it, sharing untouched siblings. The patched value
is re-validated with the Type that built *instance* (when it has one), so
the result is always a legal instance. *instance* itself is never modified.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from typecomb.domain.instances import Record, type_of
from typecomb.errors import UpdateError
from typecomb.update.commands import get_command, is_command
from typecomb.util import fail, format_value


def update(instance: Any, spec: Mapping[Any, Any]) -> Any:
    """Return a new value obtained by applying *spec* to *instance*.

    Usage::

        update(point, {"x": {"$set": 3}})
        update(tags, {"$push": ["new"]})
    """
    if not isinstance(spec, Mapping):
        return fail(UpdateError(f"Invalid update spec {format_value(spec)} (expected a mapping)"))

    value = instance
    for key, argument in spec.items():
        if is_command(key):
            value = get_command(key)(value, argument)
        else:
            value = _patch_child(value, key, argument)

    if value is instance:
        return instance
    owner = type_of(instance)
    if owner is not None:
        return owner(value)
    return value


def _patch_child(container: Any, key: Any, spec: Any) -> Any:
    if isinstance(container, Record):
        if key not in container:
            return fail(
                UpdateError(f"{container._type.display_name} has no field {key!r} to update", field=str(key))
            )
        current = container[key]
        patched = update(current, spec)
        if patched is current:
            return container
        values = container._asdict()
        values[key] = patched
        return values

    if isinstance(container, Mapping):
        current = container.get(key)
        patched = update(current, spec)
        if key in container and patched is current:
            return container
        items = dict(container)
        items[key] = patched
        return items

    if isinstance(container, (list, tuple)):
        if not isinstance(key, int) or isinstance(key, bool) or not -len(container) <= key < len(container):
            return fail(
                UpdateError(f"Cannot update index {key!r} of a sequence of length {len(container)}", field=str(key))
            )
        current = container[key]
        patched = update(current, spec)
        if patched is current:
            return container
        items = list(container)
        items[key] = patched
        return tuple(items) if isinstance(container, tuple) else items

    return fail(UpdateError(f"Cannot update key {key!r} of {format_value(container)}", field=str(key)))
