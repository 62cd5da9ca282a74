"""Enumeration: a closed set of atomic values."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from typecomb.domain.base import Path, Type
from typecomb.domain.meta import EnumsMeta
from typecomb.errors import TypeCombError
from typecomb.util import fail


class EnumsType(Type):
    """Accepts exactly the keys of its map; values are labels."""

    def __init__(self, meta: EnumsMeta) -> None:
        super().__init__(meta)
        self._map = meta.map

    def is_(self, value: Any) -> bool:
        try:
            return value in self._map
        except TypeError:
            return False

    def _construct(self, value: Any, path: Path) -> Any:
        if not self.is_(value):
            return self._invalid(value, path)
        return value

    def _default_name(self) -> str:
        return "Literal[" + ", ".join(repr(k) for k in self._map) + "]"

    @classmethod
    def of(cls, keys: str | Iterable[Any], name: str | None = None) -> EnumsType:
        """Build an enumeration whose labels equal its keys.

        *keys* is either an iterable or a single space-separated string.
        """
        if isinstance(keys, str):
            keys = keys.split()
        return enums({k: k for k in keys}, name)


def enums(map: Mapping[Any, Any], name: str | None = None) -> EnumsType:
    if not isinstance(map, Mapping):
        return fail(TypeCombError(f"Invalid argument map {map!r} supplied to enums(map)"))
    return EnumsType(EnumsMeta(dict(map), name=name))


enums.of = EnumsType.of  # type: ignore[attr-defined]
