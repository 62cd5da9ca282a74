"""Type: the uniform contract every combinator produces.

A Type is a validating constructor: ``T(value)`` returns a validated
(possibly hydrated) instance or reports a failure. ``T.is_(value)`` is the
non-failing membership predicate and ``T.meta`` describes how ``T`` was
built.
"""

from __future__ import annotations

from typing import Any

from typecomb.domain.meta import MetaDescriptor
from typecomb.errors import ValidationError
from typecomb.util import fail, format_path, format_value

Path = tuple[str, ...]


class Type:
    """Base class for all Types.

    Subclasses implement ``_construct``, ``is_`` and ``_default_name``.

    Usage::

        Point = struct({"x": Num, "y": Num}, "Point")
        p = Point({"x": 1, "y": 2})
        assert Point.is_(p)
        assert Point(p) is p
    """

    def __init__(self, meta: MetaDescriptor) -> None:
        self._meta = meta

    @property
    def meta(self) -> MetaDescriptor:
        return self._meta

    @property
    def kind(self) -> str:
        return self._meta.kind

    @property
    def name(self) -> str | None:
        return self._meta.name

    @property
    def display_name(self) -> str:
        return self._meta.name or self._default_name()

    def __call__(self, value: Any, path: Path | None = None) -> Any:
        if path is None:
            path = (self.display_name,)
        return self._construct(value, path)

    def is_(self, value: Any) -> bool:
        raise NotImplementedError

    def update(self, instance: Any, spec: Any) -> Any:
        """Patch *instance* with *spec* and re-validate the result with this Type."""
        from typecomb.update.interpreter import update

        return self(update(instance, spec))

    def _construct(self, value: Any, path: Path) -> Any:
        raise NotImplementedError

    def _default_name(self) -> str:
        return type(self).__name__

    def _invalid(self, value: Any, path: Path, reason: str | None = None) -> Any:
        message = f"Invalid value {format_value(value)} supplied to {format_path(path)}"
        if reason:
            message = f"{message} ({reason})"
        return fail(
            ValidationError(
                message,
                value=value,
                type_name=self.display_name,
                path=path,
                value_repr=format_value(value),
            )
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.display_name}>"


def child_path(path: Path, key: Any, child: Type) -> Path:
    """Extend *path* with a ``key: TypeName`` segment for nested construction."""
    return (*path, f"{key}: {child.display_name}")


def is_type(value: Any) -> bool:
    return isinstance(value, Type)
