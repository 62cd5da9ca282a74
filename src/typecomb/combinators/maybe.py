"""Optional combinator: ``None`` or a value of the wrapped Type."""

from __future__ import annotations

from typing import Any

from typecomb.combinators.irreducible import Nil
from typecomb.domain.base import Path, Type
from typecomb.domain.meta import MaybeMeta
from typecomb.errors import TypeCombError
from typecomb.util import fail


class MaybeType(Type):
    """Union of :data:`Nil` and the wrapped Type with a fixed dispatch."""

    def __init__(self, meta: MaybeMeta) -> None:
        super().__init__(meta)
        self._type = meta.type

    @property
    def types(self) -> tuple[Type, Type]:
        return (Nil, self._type)

    def dispatch(self, value: Any) -> Type:
        return Nil if value is None else self._type

    def is_(self, value: Any) -> bool:
        return value is None or self._type.is_(value)

    def _construct(self, value: Any, path: Path) -> Any:
        if value is None:
            return None
        return self._type(value, path)

    def _default_name(self) -> str:
        return f"Optional[{self._type.display_name}]"


def maybe(type_: Type, name: str | None = None) -> MaybeType:
    if not isinstance(type_, Type):
        return fail(TypeCombError(f"Invalid argument type {type_!r} supplied to maybe(type)"))
    if isinstance(type_, MaybeType) and name is None:
        return type_
    return MaybeType(MaybeMeta(type_, name=name))
