"""Irreducible types and their registry.

An irreducible is defined purely by a predicate; it never transforms the
value it validates. :data:`IRREDUCIBLE_REGISTRY` holds the built-ins
below plus anything an application (or a plugin) registers.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from datetime import date
from typing import Any

from typecomb.domain.base import Path, Type, is_type
from typecomb.domain.meta import IrreducibleMeta, Predicate
from typecomb.errors import TypeCombError
from typecomb.util import fail

logger = logging.getLogger(__name__)


class IrreducibleType(Type):
    """Leaf Type: ``is_`` is exactly the predicate."""

    def __init__(self, meta: IrreducibleMeta) -> None:
        super().__init__(meta)
        self._predicate = meta.predicate

    def is_(self, value: Any) -> bool:
        return bool(self._predicate(value))

    def _construct(self, value: Any, path: Path) -> Any:
        if not self._predicate(value):
            return self._invalid(value, path)
        return value


def irreducible(name: str, predicate: Predicate) -> IrreducibleType:
    """Build a leaf Type named *name* accepting values for which *predicate* holds."""
    if not isinstance(name, str) or not name:
        return fail(TypeCombError(f"Invalid argument name {name!r} supplied to irreducible(name, predicate)"))
    if not callable(predicate):
        return fail(
            TypeCombError(f"Invalid argument predicate {predicate!r} supplied to irreducible({name!r}, predicate)")
        )
    return IrreducibleType(IrreducibleMeta(predicate, name=name))


# ---------------------------------------------------------------------------
# Built-ins
# ---------------------------------------------------------------------------


def _is_num(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _is_int(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


Any_ = irreducible("Any", lambda x: True)
Nil = irreducible("Nil", lambda x: x is None)
Str = irreducible("Str", lambda x: isinstance(x, str))
Num = irreducible("Num", _is_num)
Int = irreducible("Int", _is_int)
Bool = irreducible("Bool", lambda x: isinstance(x, bool))
Arr = irreducible("Arr", lambda x: isinstance(x, (list, tuple)))
Obj = irreducible("Obj", lambda x: isinstance(x, Mapping))
Func = irreducible("Func", callable)
Err = irreducible("Err", lambda x: isinstance(x, BaseException))
Re = irreducible("Re", lambda x: isinstance(x, re.Pattern))
Dat = irreducible("Dat", lambda x: isinstance(x, date))
TypeT = irreducible("Type", is_type)

_BUILTINS: tuple[IrreducibleType, ...] = (Any_, Nil, Str, Num, Int, Bool, Arr, Obj, Func, Err, Re, Dat, TypeT)

IRREDUCIBLE_REGISTRY: dict[str, IrreducibleType] = {}


def _builtin_names() -> frozenset[str]:
    return frozenset(t.display_name for t in _BUILTINS)


def register_irreducible(type_: IrreducibleType) -> None:
    """Make an application irreducible available by name.

    Built-in names are reserved and cannot be replaced.
    """
    if not isinstance(type_, IrreducibleType):
        msg = f"Only irreducible types can be registered, got {type_!r}"
        raise TypeError(msg)

    name = type_.display_name
    if name in _builtin_names() and IRREDUCIBLE_REGISTRY.get(name) is not type_:
        msg = f"Irreducible {name!r} conflicts with a built-in registration"
        raise ValueError(msg)

    existing = IRREDUCIBLE_REGISTRY.get(name)
    if existing is not None and existing is not type_:
        msg = f"Irreducible {name!r} is already registered"
        raise ValueError(msg)

    IRREDUCIBLE_REGISTRY[name] = type_
    logger.debug("Registered irreducible: %s", name)


def get_irreducible(name: str) -> IrreducibleType:
    """Look up a registered irreducible.

    Raises:
        KeyError: If nothing is registered under *name*.
    """
    try:
        return IRREDUCIBLE_REGISTRY[name]
    except KeyError:
        msg = f"No irreducible registered under {name!r}"
        raise KeyError(msg) from None


def _register_builtins() -> None:
    """Populate :data:`IRREDUCIBLE_REGISTRY` with the built-in leaves."""
    IRREDUCIBLE_REGISTRY.update({t.display_name: t for t in _BUILTINS})


_register_builtins()
