"""Meta descriptors: the introspectable record of how a Type was built.

One frozen dataclass per combinator kind. The ``kind`` tag never changes
after creation and determines which operations a Type supports.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from typecomb.domain.base import Type

Predicate = Callable[[Any], bool]


@dataclass(frozen=True)
class MetaDescriptor:
    """Common base: every descriptor has a tag and an optional explicit name."""

    kind: ClassVar[str] = ""

    name: str | None = field(default=None, kw_only=True)


@dataclass(frozen=True)
class IrreducibleMeta(MetaDescriptor):
    kind: ClassVar[str] = "irreducible"

    predicate: Predicate


@dataclass(frozen=True)
class SubtypeMeta(MetaDescriptor):
    kind: ClassVar[str] = "subtype"

    base: Type
    predicate: Predicate


@dataclass(frozen=True)
class EnumsMeta(MetaDescriptor):
    kind: ClassVar[str] = "enums"

    map: Mapping[Any, Any]


@dataclass(frozen=True)
class StructMeta(MetaDescriptor):
    """Record shape.

    ``path`` lists the ancestor sources an extended struct was merged
    from, base first. A struct built directly has an empty path.
    """

    kind: ClassVar[str] = "struct"

    props: Mapping[str, Type]
    path: tuple[Any, ...] = ()
    defaults: Mapping[str, Any] = field(default_factory=dict)
    strict: bool = False


@dataclass(frozen=True)
class TupleMeta(MetaDescriptor):
    kind: ClassVar[str] = "tuple"

    types: tuple[Type, ...]


@dataclass(frozen=True)
class ListMeta(MetaDescriptor):
    kind: ClassVar[str] = "list"

    item_type: Type


@dataclass(frozen=True)
class DictMeta(MetaDescriptor):
    kind: ClassVar[str] = "dict"

    domain: Type
    codomain: Type


@dataclass(frozen=True)
class UnionMeta(MetaDescriptor):
    kind: ClassVar[str] = "union"

    types: tuple[Type, ...]


@dataclass(frozen=True)
class IntersectionMeta(MetaDescriptor):
    kind: ClassVar[str] = "intersection"

    types: tuple[Type, ...]


@dataclass(frozen=True)
class MaybeMeta(MetaDescriptor):
    kind: ClassVar[str] = "maybe"

    type: Type


@dataclass(frozen=True)
class FuncMeta(MetaDescriptor):
    """Function signature. Equal descriptors (same member Types) are the same signature."""

    kind: ClassVar[str] = "func"

    domain: tuple[Type, ...]
    codomain: Type

    @property
    def arity(self) -> int:
        return len(self.domain)


@dataclass(frozen=True)
class DeclareMeta(MetaDescriptor):
    kind: ClassVar[str] = "declare"
