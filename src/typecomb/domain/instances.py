"""Immutable instances produced by composite Types.

Each instance remembers the Type that built it so the update interpreter
can re-validate a patched copy against the same Type. Equality with plain
host containers is preserved: ``FrozenList([1, 2]) == [1, 2]``.
"""

from __future__ import annotations

import copy
import types
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typecomb.combinators.struct import StructType
    from typecomb.domain.base import Type


def _immutable(self: Any, *args: Any, **kwargs: Any) -> Any:
    msg = f"{type(self).__name__} is immutable; use update() to derive a new value"
    raise TypeError(msg)


class Record:
    """Field-typed aggregate built by a struct Type.

    Fields are read as attributes or items. Attribute lookups that miss
    every field fall through the struct's explicit behavior lookup list.
    """

    __slots__ = ("_type", "_values")

    def __init__(self, type_: StructType, values: dict[str, Any]) -> None:
        object.__setattr__(self, "_type", type_)
        object.__setattr__(self, "_values", values)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        values = self._values
        if name in values:
            return values[name]
        for behavior in self._type.lookup_chain:
            if name in behavior:
                return types.MethodType(behavior[name], self)
        msg = f"{self._type.display_name} record has no attribute {name!r}"
        raise AttributeError(msg)

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"{self._type.display_name} records are immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"{self._type.display_name} records are immutable"
        raise AttributeError(msg)

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Record):
            return self._type is other._type and self._values == other._values
        if isinstance(other, Mapping):
            return self._values == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self._values.items())
        return f"{self._type.display_name}({fields})"

    def __copy__(self) -> Record:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Record:
        return Record(self._type, copy.deepcopy(self._values, memo))

    def _asdict(self) -> dict[str, Any]:
        return dict(self._values)

    def _replace(self, **changes: Any) -> Record:
        """Return a re-validated copy with *changes* applied."""
        return self._type({**self._values, **changes})


class FrozenList(list):
    """``list`` whose mutators raise ``TypeError``."""

    __slots__ = ("_type",)

    def __init__(self, items: Any = (), type_: Type | None = None) -> None:
        super().__init__(items)
        object.__setattr__(self, "_type", type_)

    __setattr__ = _immutable
    __setitem__ = _immutable
    __delitem__ = _immutable
    __iadd__ = _immutable
    __imul__ = _immutable
    append = _immutable
    extend = _immutable
    insert = _immutable
    pop = _immutable
    remove = _immutable
    clear = _immutable
    sort = _immutable
    reverse = _immutable

    def __reduce__(self) -> tuple[Any, ...]:
        return (FrozenList, (list(self), self._type))

    def __copy__(self) -> FrozenList:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> FrozenList:
        return FrozenList(copy.deepcopy(list(self), memo), self._type)


class FrozenDict(dict):
    """``dict`` whose mutators raise ``TypeError``."""

    __slots__ = ("_type",)

    def __init__(self, items: Any = (), type_: Type | None = None) -> None:
        super().__init__(items)
        object.__setattr__(self, "_type", type_)

    __setattr__ = _immutable
    __setitem__ = _immutable
    __delitem__ = _immutable
    __ior__ = _immutable
    clear = _immutable
    pop = _immutable
    popitem = _immutable
    setdefault = _immutable
    update = _immutable

    def __reduce__(self) -> tuple[Any, ...]:
        return (FrozenDict, (dict(self), self._type))

    def __copy__(self) -> FrozenDict:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> FrozenDict:
        return FrozenDict(copy.deepcopy(dict(self), memo), self._type)


class FrozenTuple(tuple):
    """``tuple`` that records the Type that built it."""

    _type: Type | None

    def __new__(cls, items: Any = (), type_: Type | None = None) -> FrozenTuple:
        obj = super().__new__(cls, items)
        object.__setattr__(obj, "_type", type_)
        return obj

    __setattr__ = _immutable

    def __reduce__(self) -> tuple[Any, ...]:
        return (FrozenTuple, (tuple(self), self._type))

    def __deepcopy__(self, memo: dict[int, Any]) -> FrozenTuple:
        return FrozenTuple(copy.deepcopy(tuple(self), memo), self._type)


def type_of(value: Any) -> Type | None:
    """Return the Type that built *value*, or None for plain host values."""
    if isinstance(value, (Record, FrozenList, FrozenDict, FrozenTuple)):
        return value._type
    return None
