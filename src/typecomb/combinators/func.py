"""Typed functions with per-call domain/codomain checks and currying.

A :class:`CheckedFunction` is a small state machine. While awaiting
arguments it holds the validated arguments bound so far; each application
validates the new arguments, and either returns a new checked function
awaiting the remainder (curried mode) or runs the wrapped callable and
validates its result.

Membership is nominal: ``F.is_(f)`` holds only for checked functions whose
declared signature has the same member Types as ``F``. A plain callable is
never a member, however it behaves.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Sequence
from typing import Any

from typecomb.combinators.maybe import MaybeType
from typecomb.domain.base import Path, Type
from typecomb.domain.meta import FuncMeta
from typecomb.errors import ArityError, TypeCombError
from typecomb.util import fail, get_type_name


class FuncType(Type):
    def __init__(self, meta: FuncMeta) -> None:
        super().__init__(meta)
        self._domain = meta.domain
        self._codomain = meta.codomain
        required = len(self._domain)
        while required and isinstance(self._domain[required - 1], MaybeType):
            required -= 1
        self._required = required

    @property
    def domain(self) -> tuple[Type, ...]:
        return self._domain

    @property
    def codomain(self) -> Type:
        return self._codomain

    @property
    def arity(self) -> int:
        return len(self._domain)

    @property
    def required_arity(self) -> int:
        """Number of leading parameters that are not optional (``maybe``) types."""
        return self._required

    def is_(self, value: Any) -> bool:
        if not isinstance(value, CheckedFunction):
            return False
        other = value.type
        return other.domain == self._domain and other.codomain is self._codomain

    def of(self, fn: Callable[..., Any], curried: bool = False) -> CheckedFunction:
        """Wrap *fn* so every call is checked against this signature."""
        if self.is_(fn) and fn.curried == curried:
            return fn
        if not callable(fn):
            return fail(TypeCombError(f"Invalid argument fn {fn!r} supplied to {self.display_name}.of(fn)"))
        return CheckedFunction(self, fn, curried=curried)

    def _construct(self, value: Any, path: Path) -> Any:
        if self.is_(value):
            return value
        return self._invalid(value, path, "expected a function checked against this signature")

    def _default_name(self) -> str:
        params = ", ".join(t.display_name for t in self._domain)
        return f"Callable[[{params}], {self._codomain.display_name}]"


class CheckedFunction:
    """Callable produced by :meth:`FuncType.of`."""

    def __init__(
        self,
        type_: FuncType,
        fn: Callable[..., Any],
        *,
        curried: bool = False,
        bound: tuple[Any, ...] = (),
    ) -> None:
        functools.update_wrapper(self, fn, updated=())
        self._type = type_
        self._fn = fn
        self._curried = curried
        self._bound = bound

    @property
    def type(self) -> FuncType:
        return self._type

    @property
    def curried(self) -> bool:
        return self._curried

    @property
    def bound(self) -> tuple[Any, ...]:
        """Validated arguments already supplied to earlier curried applications."""
        return self._bound

    def __call__(self, *args: Any) -> Any:
        ftype = self._type
        domain = ftype.domain
        arity = len(domain)
        supplied = len(args)

        if supplied > arity or (not self._curried and supplied < ftype.required_arity):
            expected = arity if supplied > arity else ftype.required_arity
            return fail(
                ArityError(
                    f"Invalid arguments supplied to {ftype.display_name} (expected {expected}, got {supplied})",
                    expected=expected,
                    actual=supplied,
                    type_name=ftype.display_name,
                )
            )

        root = ftype.display_name
        validated = tuple(
            param(arg, (root, f"arguments[{i}]: {param.display_name}"))
            for i, (param, arg) in enumerate(zip(domain, args))
        )

        if self._curried and supplied < arity:
            remaining = FuncType(FuncMeta(domain[supplied:], ftype.codomain))
            return CheckedFunction(remaining, self._fn, curried=True, bound=self._bound + validated)

        padding = (None,) * (arity - supplied)
        result = self._fn(*self._bound, *validated, *padding)
        codomain = ftype.codomain
        return codomain(result, (root, f"return: {codomain.display_name}"))

    def __repr__(self) -> str:
        return f"<checked {get_type_name(self._fn)}: {self._type.display_name}>"


def func(
    domain: Type | Sequence[Type],
    codomain: Type,
    name: str | None = None,
) -> FuncType:
    """Build a function Type from one parameter Type or an ordered sequence of them."""
    params = tuple(domain) if isinstance(domain, (list, tuple)) else (domain,)
    if not all(isinstance(t, Type) for t in params):
        return fail(TypeCombError(f"Invalid argument domain {domain!r} supplied to func(domain, codomain)"))
    if not isinstance(codomain, Type):
        return fail(TypeCombError(f"Invalid argument codomain {codomain!r} supplied to func(domain, codomain)"))
    return FuncType(FuncMeta(params, codomain, name=name))
