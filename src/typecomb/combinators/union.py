"""Tagged union with an assignable dispatch, plus intersection."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from typecomb.domain.base import Path, Type
from typecomb.domain.meta import IntersectionMeta, UnionMeta
from typecomb.errors import DispatchError, TypeCombError
from typecomb.util import fail, format_path, format_value

Dispatch = Callable[[Any], "Type | None"]


class UnionType(Type):
    """Closed choice among member Types.

    ``is_`` accepts a value any member accepts. Construction instead asks
    :attr:`dispatch` which single member governs the value, so an ambiguous
    value can pass ``is_`` yet still need a custom dispatch to construct.
    """

    def __init__(self, meta: UnionMeta) -> None:
        super().__init__(meta)
        self._types = meta.types
        self._dispatch: Dispatch = self.default_dispatch
        self._dispatch_assigned = False
        self._used = False

    @property
    def types(self) -> tuple[Type, ...]:
        return self._types

    @property
    def dispatch(self) -> Dispatch:
        return self._dispatch

    @dispatch.setter
    def dispatch(self, fn: Dispatch) -> None:
        if not callable(fn):
            fail(TypeCombError(f"Invalid dispatch {fn!r} supplied to {self.display_name}"))
            return
        if self._used or self._dispatch_assigned:
            fail(TypeCombError(f"Dispatch of {self.display_name} can only be assigned once, before first use"))
            return
        self._dispatch = fn
        self._dispatch_assigned = True

    def default_dispatch(self, value: Any) -> Type | None:
        """Return the first member whose ``is_`` accepts *value*."""
        for member in self._types:
            if member.is_(value):
                return member
        return None

    def is_(self, value: Any) -> bool:
        return any(member.is_(value) for member in self._types)

    def _construct(self, value: Any, path: Path) -> Any:
        self._used = True
        chosen = self._dispatch(value)
        if not isinstance(chosen, Type):
            return fail(
                DispatchError(
                    f"Invalid value {format_value(value)} supplied to {format_path(path)} "
                    "(no member type matches)",
                    value=value,
                    type_name=self.display_name,
                )
            )
        return chosen(value, (*path, chosen.display_name))

    def _default_name(self) -> str:
        return "Union[" + ", ".join(t.display_name for t in self._types) + "]"


def union(types: Sequence[Type], name: str | None = None) -> UnionType:
    if not isinstance(types, (list, tuple)) or len(types) < 2 or not all(isinstance(t, Type) for t in types):
        return fail(TypeCombError(f"Invalid argument types {types!r} supplied to union(types)"))
    return UnionType(UnionMeta(tuple(types), name=name))


class IntersectionType(Type):
    """A value must satisfy every member; it is returned unchanged."""

    def __init__(self, meta: IntersectionMeta) -> None:
        super().__init__(meta)
        self._types = meta.types

    def is_(self, value: Any) -> bool:
        return all(member.is_(value) for member in self._types)

    def _construct(self, value: Any, path: Path) -> Any:
        for member in self._types:
            if not member.is_(value):
                return self._invalid(value, path, f"not a {member.display_name}")
        return value

    def _default_name(self) -> str:
        return " & ".join(t.display_name for t in self._types)


def intersection(types: Sequence[Type], name: str | None = None) -> IntersectionType:
    if not isinstance(types, (list, tuple)) or len(types) < 2 or not all(isinstance(t, Type) for t in types):
        return fail(TypeCombError(f"Invalid argument types {types!r} supplied to intersection(types)"))
    return IntersectionType(IntersectionMeta(tuple(types), name=name))
