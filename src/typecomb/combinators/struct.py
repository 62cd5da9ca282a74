"""Record combinator (struct) with conflict-checked extension.

Fields are merged from ordered sources with :func:`typecomb.util.mixin`,
so a repeated field name fails unless the extension allows overrides
(later source wins). Behavior is resolved through an explicit lookup list:
the type's own methods first, then each ancestor's in extension order.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from typecomb.domain.base import Path, Type, child_path
from typecomb.domain.instances import Record
from typecomb.domain.meta import StructMeta
from typecomb.errors import ConflictError, TypeCombError
from typecomb.util import fail, mixin

logger = logging.getLogger(__name__)

Behavior = Mapping[str, Callable[..., Any]]


class StructType(Type):
    """Nominal record Type: ``is_`` accepts only Records this exact Type built."""

    def __init__(self, meta: StructMeta, inherited: tuple[Behavior, ...] = ()) -> None:
        super().__init__(meta)
        self._props: dict[str, Type] = dict(meta.props)
        self._defaults: dict[str, Any] = dict(meta.defaults)
        self._strict = meta.strict
        self._own_methods: dict[str, Callable[..., Any]] = {}
        self._inherited = inherited
        self._sealed = False

    @property
    def props(self) -> Mapping[str, Type]:
        return MappingProxyType(self._props)

    @property
    def lookup_chain(self) -> tuple[Behavior, ...]:
        """Behavior maps consulted, in order, for attribute lookups on Records."""
        return (self._own_methods, *self._inherited)

    def is_(self, value: Any) -> bool:
        return isinstance(value, Record) and value._type is self

    def method(self, fn: Callable[..., Any]) -> Callable[..., Any]:
        """Attach *fn* as a method of this struct's Records (usable as a decorator).

        Only allowed before the first construction or extension.
        """
        name = getattr(fn, "__name__", "")
        if self._sealed:
            return fail(TypeCombError(f"Cannot attach method {name!r} to {self.display_name} after first use"))
        if not callable(fn) or not name.isidentifier() or name.startswith("_"):
            return fail(TypeCombError(f"Invalid method {fn!r} supplied to {self.display_name}.method"))
        if name in self._props:
            return fail(ConflictError(f"Method {name!r} collides with a field of {self.display_name}", key=name))
        if name in self._own_methods:
            return fail(ConflictError(f"Method {name!r} is already attached to {self.display_name}", key=name))
        self._own_methods[name] = fn
        return fn

    def extend(
        self,
        mixins: Any,
        name: str | None = None,
        *,
        override: bool = False,
    ) -> StructType:
        """Build a new struct from this one plus *mixins*.

        *mixins* is one source or a list of sources. A source is a field map
        (``{name: Type}``), another struct (its props, defaults and behavior
        are merged), or a class whose public functions become behavior.
        """
        sources = list(mixins) if isinstance(mixins, (list, tuple)) else [mixins]
        return self._build_extension(sources, name, override=override, lineage=(*self.meta.path, self))

    def _build_extension(
        self,
        sources: list[Any],
        name: str | None,
        *,
        override: bool,
        lineage: tuple[Any, ...],
    ) -> StructType:
        props: dict[str, Type] = dict(self._props)
        defaults: dict[str, Any] = dict(self._defaults)
        strict = self._strict
        behaviors: list[Behavior] = list(self.lookup_chain)
        self._sealed = True

        for source in sources:
            if isinstance(source, StructType):
                props = mixin(props, source.props, override)
                defaults = mixin(defaults, source.meta.defaults, override)
                strict = strict or source.meta.strict
                source._sealed = True
                behaviors.extend(source.lookup_chain)
            elif isinstance(source, Mapping):
                _check_props(source, "extend")
                props = mixin(props, source, override)
            elif inspect.isclass(source):
                behaviors.append(_behavior_of(source))
            else:
                return fail(TypeCombError(f"Invalid mixin {source!r} supplied to {self.display_name}.extend"))

        for behavior in behaviors:
            for method_name in behavior:
                if method_name in props:
                    return fail(
                        ConflictError(
                            f"Method {method_name!r} collides with a field while extending {self.display_name}",
                            key=method_name,
                        )
                    )

        meta = StructMeta(
            props,
            path=(*lineage, *sources),
            defaults=defaults,
            strict=strict,
            name=name,
        )
        extended = StructType(meta, inherited=tuple(behaviors))
        logger.debug("Extended struct %s into %s", self.display_name, extended.display_name)
        return extended

    def _construct(self, value: Any, path: Path) -> Any:
        if self.is_(value):
            return value
        self._sealed = True

        source = value._asdict() if isinstance(value, Record) else value
        if not isinstance(source, Mapping):
            return self._invalid(value, path, "expected a mapping")

        if self._strict:
            unknown = sorted(str(k) for k in source if k not in self._props)
            if unknown:
                return self._invalid(value, path, f"unknown fields: {', '.join(unknown)}")

        values: dict[str, Any] = {}
        for key, field_type in self._props.items():
            if key in source:
                raw = source[key]
            else:
                raw = self._defaults.get(key)
            values[key] = field_type(raw, child_path(path, key, field_type))
        return Record(self, values)

    def _default_name(self) -> str:
        fields = ", ".join(f"{k}: {t.display_name}" for k, t in self._props.items())
        return f"Struct{{{fields}}}"


def _check_props(props: Any, caller: str) -> None:
    if not isinstance(props, Mapping):
        fail(TypeCombError(f"Invalid argument props {props!r} supplied to {caller}(props)"))
        return
    for key, field_type in props.items():
        if not isinstance(key, str) or not key.isidentifier() or key.startswith("_"):
            fail(TypeCombError(f"Invalid field name {key!r} supplied to {caller}(props)"))
        if not isinstance(field_type, Type):
            fail(TypeCombError(f"Invalid field type {field_type!r} for {key!r} supplied to {caller}(props)"))


def _behavior_of(cls: type) -> dict[str, Callable[..., Any]]:
    """Collect the public functions of a behavior-bearing class."""
    return {name: fn for name, fn in inspect.getmembers(cls, inspect.isfunction) if not name.startswith("_")}


def struct(
    props: Mapping[str, Type],
    name: str | None = None,
    *,
    defaults: Mapping[str, Any] | None = None,
    strict: bool = False,
) -> StructType:
    """Build a record Type with named, typed fields.

    Args:
        props: Field name to field Type, in declaration order.
        name: Explicit display name.
        defaults: Values used for fields missing from the input.
        strict: Reject input keys that are not declared fields.
    """
    _check_props(props, "struct")
    defaults = dict(defaults or {})
    unknown = [k for k in defaults if k not in props]
    if unknown:
        return fail(TypeCombError(f"Defaults for undeclared fields {unknown!r} supplied to struct(props)"))
    return StructType(StructMeta(dict(props), defaults=defaults, strict=strict, name=name))


def extend(
    mixins: Sequence[Any],
    name: str | None = None,
    *,
    override: bool = False,
) -> StructType:
    """Build a struct purely from *mixins*, merged left to right.

    The resulting ``meta.path`` lists only the mixins.
    """
    sources = list(mixins) if isinstance(mixins, (list, tuple)) else [mixins]
    return struct({})._build_extension(sources, name, override=override, lineage=())
