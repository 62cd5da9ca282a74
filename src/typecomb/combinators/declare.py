"""Forward declarations for recursive types."""

from __future__ import annotations

from typing import Any

from typecomb.domain.base import Path, Type
from typecomb.domain.meta import DeclareMeta, MetaDescriptor
from typecomb.errors import TypeCombError
from typecomb.util import fail


class DeclareType(Type):
    """Placeholder bound exactly once to a real Type with :meth:`define`.

    Usage::

        Tree = declare("Tree")
        Tree.define(struct({"value": Num, "children": list_of(Tree)}))
    """

    def __init__(self, meta: DeclareMeta) -> None:
        super().__init__(meta)
        self._target: Type | None = None

    @property
    def target(self) -> Type | None:
        return self._target

    @property
    def meta(self) -> MetaDescriptor:
        """The defined Type's descriptor, or ``declare{name}`` until then."""
        return self._meta if self._target is None else self._target.meta

    @property
    def kind(self) -> str:
        return self.meta.kind

    @property
    def defined(self) -> bool:
        return self._target is not None

    def define(self, target: Type) -> DeclareType:
        if self._target is not None:
            return fail(TypeCombError(f"Declaration {self.display_name} is already defined"))
        if not isinstance(target, Type) or target is self:
            return fail(TypeCombError(f"Invalid type {target!r} supplied to {self.display_name}.define"))
        self._target = target
        return self

    def is_(self, value: Any) -> bool:
        return self._target is not None and self._target.is_(value)

    def _construct(self, value: Any, path: Path) -> Any:
        if self._target is None:
            return fail(TypeCombError(f"Type declared as {self.display_name} was used before being defined"))
        return self._target(value, path)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        target = self.__dict__.get("_target")
        if target is None:
            raise AttributeError(name)
        return getattr(target, name)


def declare(name: str) -> DeclareType:
    if not isinstance(name, str) or not name:
        return fail(TypeCombError(f"Invalid argument name {name!r} supplied to declare(name)"))
    return DeclareType(DeclareMeta(name=name))
