"""Fixed-arity, homogeneous and key-typed container combinators.

All three build a fresh immutable container on construction; an input
container is never mutated. Passing back an instance this same Type built
returns it unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from typecomb.domain.base import Path, Type, child_path
from typecomb.domain.instances import FrozenDict, FrozenList, FrozenTuple
from typecomb.domain.meta import DictMeta, ListMeta, TupleMeta
from typecomb.errors import ArityError, TypeCombError
from typecomb.util import fail, format_path, format_value


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


# ── tuple ────────────────────────────────────────────────────────────


class TupleType(Type):
    def __init__(self, meta: TupleMeta) -> None:
        super().__init__(meta)
        self._types = meta.types

    def is_(self, value: Any) -> bool:
        return (
            _is_sequence(value)
            and len(value) == len(self._types)
            and all(t.is_(v) for t, v in zip(self._types, value))
        )

    def _construct(self, value: Any, path: Path) -> Any:
        if isinstance(value, FrozenTuple) and value._type is self:
            return value
        if not _is_sequence(value):
            return self._invalid(value, path, "expected a sequence")
        if len(value) != len(self._types):
            return fail(
                ArityError(
                    f"Invalid value {format_value(value)} supplied to {format_path(path)} "
                    f"(expected {len(self._types)} items, got {len(value)})",
                    expected=len(self._types),
                    actual=len(value),
                    type_name=self.display_name,
                )
            )
        items = [t(v, child_path(path, i, t)) for i, (t, v) in enumerate(zip(self._types, value))]
        return FrozenTuple(items, self)

    def _default_name(self) -> str:
        return "Tuple[" + ", ".join(t.display_name for t in self._types) + "]"


def tuple_of(types: Sequence[Type], name: str | None = None) -> TupleType:
    if not _is_sequence(types) or not all(isinstance(t, Type) for t in types):
        return fail(TypeCombError(f"Invalid argument types {types!r} supplied to tuple_of(types)"))
    return TupleType(TupleMeta(tuple(types), name=name))


# ── list ─────────────────────────────────────────────────────────────


class ListType(Type):
    def __init__(self, meta: ListMeta) -> None:
        super().__init__(meta)
        self._item_type = meta.item_type

    def is_(self, value: Any) -> bool:
        return _is_sequence(value) and all(self._item_type.is_(v) for v in value)

    def _construct(self, value: Any, path: Path) -> Any:
        if isinstance(value, FrozenList) and value._type is self:
            return value
        if not _is_sequence(value):
            return self._invalid(value, path, "expected a sequence")
        item_type = self._item_type
        items = [item_type(v, child_path(path, i, item_type)) for i, v in enumerate(value)]
        return FrozenList(items, self)

    def _default_name(self) -> str:
        return f"List[{self._item_type.display_name}]"


def list_of(item_type: Type, name: str | None = None) -> ListType:
    if not isinstance(item_type, Type):
        return fail(TypeCombError(f"Invalid argument item_type {item_type!r} supplied to list_of(item_type)"))
    return ListType(ListMeta(item_type, name=name))


# ── dict ─────────────────────────────────────────────────────────────


class DictType(Type):
    def __init__(self, meta: DictMeta) -> None:
        super().__init__(meta)
        self._domain = meta.domain
        self._codomain = meta.codomain

    def is_(self, value: Any) -> bool:
        return isinstance(value, Mapping) and all(
            self._domain.is_(k) and self._codomain.is_(v) for k, v in value.items()
        )

    def _construct(self, value: Any, path: Path) -> Any:
        if isinstance(value, FrozenDict) and value._type is self:
            return value
        if not isinstance(value, Mapping):
            return self._invalid(value, path, "expected a mapping")
        domain, codomain = self._domain, self._codomain
        items: dict[Any, Any] = {}
        for k, v in value.items():
            key = domain(k, child_path(path, k, domain))
            items[key] = codomain(v, child_path(path, k, codomain))
        return FrozenDict(items, self)

    def _default_name(self) -> str:
        return f"Dict[{self._domain.display_name}, {self._codomain.display_name}]"


def dict_of(domain: Type, codomain: Type, name: str | None = None) -> DictType:
    if not isinstance(domain, Type) or not isinstance(codomain, Type):
        return fail(
            TypeCombError(f"Invalid arguments {domain!r}, {codomain!r} supplied to dict_of(domain, codomain)")
        )
    return DictType(DictMeta(domain, codomain, name=name))
