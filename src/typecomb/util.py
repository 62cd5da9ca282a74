"""Utility layer: failure reporting hook, type names, conflict-checked merge.

The failure hook is process-wide state. Replace it before concurrent use
begins; the engine performs no locking around it.
"""

from __future__ import annotations

import logging
import reprlib
from collections.abc import Callable, Mapping
from typing import Any

from typecomb.errors import ConflictError, TypeCombError

logger = logging.getLogger(__name__)

FailureHook = Callable[[TypeCombError], Any]

DEFAULT_MAX_VALUE_REPR = 80
_MIN_VALUE_REPR = 10


def _raise_failure(error: TypeCombError) -> Any:
    raise error


_failure_hook: FailureHook = _raise_failure
_repr = reprlib.Repr()
_repr.maxstring = DEFAULT_MAX_VALUE_REPR
_repr.maxother = DEFAULT_MAX_VALUE_REPR


# ── Failure hook ─────────────────────────────────────────────────────


def fail(error: TypeCombError) -> Any:
    """Report *error* through the current hook.

    The default hook raises. A replacement hook that returns normally
    supplies the fallback value the failing operation returns instead.
    """
    return _failure_hook(error)


def set_failure_hook(hook: FailureHook) -> None:
    """Install *hook* as the single process-wide failure reporter."""
    global _failure_hook
    if not callable(hook):
        msg = f"Failure hook must be callable, got {type(hook).__name__}"
        raise TypeError(msg)
    _failure_hook = hook
    logger.debug("Installed failure hook: %s", get_type_name(hook))


def get_failure_hook() -> FailureHook:
    return _failure_hook


def reset_failure_hook() -> None:
    """Restore the raising default hook."""
    global _failure_hook
    _failure_hook = _raise_failure


# ── Diagnostics ──────────────────────────────────────────────────────


def set_max_value_repr(limit: int) -> None:
    """Cap the length of value reprs embedded in error messages."""
    if limit < _MIN_VALUE_REPR:
        msg = f"max_value_repr must be >= {_MIN_VALUE_REPR}, got {limit}"
        raise ValueError(msg)
    _repr.maxstring = limit
    _repr.maxother = limit


def format_value(value: Any) -> str:
    return _repr.repr(value)


def get_type_name(type_: Any) -> str:
    """Return the display name of a Type, or a best-effort name for anything else."""
    display_name = getattr(type_, "display_name", None)
    if isinstance(display_name, str):
        return display_name
    name = getattr(type_, "__name__", None)
    if isinstance(name, str):
        return name
    return format_value(type_)


def format_path(path: tuple[str, ...]) -> str:
    return "/".join(path)


# ── Merge ────────────────────────────────────────────────────────────


def mixin(
    target: Mapping[str, Any],
    source: Mapping[str, Any],
    override: bool = False,
) -> dict[str, Any]:
    """Return a new dict holding *target* overlaid with *source*.

    A key present in both fails with :class:`ConflictError` unless
    *override* is true, in which case the *source* value wins. Neither
    input is modified.
    """
    merged = dict(target)
    for key, value in source.items():
        if key in merged and not override:
            fail(
                ConflictError(
                    f"Cannot overwrite property {key!r} while merging (override not allowed)",
                    key=key,
                )
            )
            continue
        merged[key] = value
    return merged
