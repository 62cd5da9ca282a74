"""Refinement: narrow an existing Type by an extra predicate."""

from __future__ import annotations

from typing import Any

from typecomb.domain.base import Path, Type
from typecomb.domain.meta import Predicate, SubtypeMeta
from typecomb.errors import TypeCombError
from typecomb.util import fail, get_type_name


class SubtypeType(Type):
    def __init__(self, meta: SubtypeMeta) -> None:
        super().__init__(meta)
        self._base = meta.base
        self._predicate = meta.predicate

    def is_(self, value: Any) -> bool:
        return self._base.is_(value) and bool(self._predicate(value))

    def _construct(self, value: Any, path: Path) -> Any:
        result = self._base(value, path)
        if not self._predicate(result):
            return self._invalid(value, path)
        return result

    def _default_name(self) -> str:
        return f"{self._base.display_name}{{{get_type_name(self._predicate)}}}"


def subtype(base: Type, predicate: Predicate, name: str | None = None) -> SubtypeType:
    """Build a Type accepting values of *base* for which *predicate* also holds.

    The base constructor runs first (so hydration and base failures happen
    before the predicate sees the value).
    """
    if not isinstance(base, Type):
        return fail(TypeCombError(f"Invalid argument base {base!r} supplied to subtype(base, predicate)"))
    if not callable(predicate):
        return fail(TypeCombError(f"Invalid argument predicate {predicate!r} supplied to subtype(base, predicate)"))
    return SubtypeType(SubtypeMeta(base, predicate, name=name))


refinement = subtype
