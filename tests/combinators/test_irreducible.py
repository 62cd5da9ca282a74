"""Tests for irreducible types and the irreducible registry."""

from __future__ import annotations

import re
from datetime import date, datetime

import pytest

import typecomb as t
from typecomb.combinators.irreducible import IRREDUCIBLE_REGISTRY


class TestIrreducible:
    def test_returns_value_unchanged(self) -> None:
        value = ["a"]
        assert t.Arr(value) is value

    def test_failure_names_type_and_value(self) -> None:
        with pytest.raises(t.ValidationError) as exc_info:
            t.Str(1)
        err = exc_info.value
        assert err.type_name == "Str"
        assert err.value == 1
        assert str(err) == "Invalid value 1 supplied to Str"

    def test_is_is_the_predicate(self) -> None:
        Even = t.irreducible("Even", lambda x: isinstance(x, int) and x % 2 == 0)
        assert Even.is_(2)
        assert not Even.is_(3)
        assert Even(4) == 4

    def test_meta(self) -> None:
        predicate = callable
        T = t.irreducible("Callable", predicate)
        assert T.meta.kind == "irreducible"
        assert T.meta.name == "Callable"
        assert T.meta.predicate is predicate

    def test_rejects_bad_arguments(self) -> None:
        with pytest.raises(t.TypeCombError):
            t.irreducible("", lambda x: True)
        with pytest.raises(t.TypeCombError):
            t.irreducible("X", "not callable")  # type: ignore[arg-type]


class TestBuiltins:
    @pytest.mark.parametrize(
        ("type_", "good", "bad"),
        [
            (t.Nil, None, 0),
            (t.Str, "a", b"a"),
            (t.Num, 1.5, True),
            (t.Int, 3, 3.0),
            (t.Bool, False, 0),
            (t.Arr, (1,), "ab"),
            (t.Obj, {"a": 1}, [("a", 1)]),
            (t.Func, len, 1),
            (t.Err, ValueError("x"), ValueError),
            (t.Re, re.compile("a"), "a"),
            (t.Dat, date(2026, 1, 1), "2026-01-01"),
            (t.TypeT, t.Str, str),
        ],
    )
    def test_builtin_predicates(self, type_: t.IrreducibleType, good: object, bad: object) -> None:
        assert type_.is_(good)
        assert not type_.is_(bad)

    def test_any_accepts_everything(self) -> None:
        assert t.Any_.is_(None)
        assert t.Any_(object) is object

    def test_dat_accepts_datetime(self) -> None:
        assert t.Dat.is_(datetime(2026, 1, 1, 12, 0))

    def test_num_excludes_bool(self) -> None:
        with pytest.raises(t.ValidationError):
            t.Num(True)


class TestIrreducibleRegistry:
    def test_builtins_registered(self) -> None:
        assert {"Any", "Nil", "Str", "Num", "Int", "Bool", "Arr", "Obj", "Func", "Err", "Re", "Dat", "Type"} <= set(
            IRREDUCIBLE_REGISTRY
        )
        assert t.get_irreducible("Str") is t.Str

    def test_register_application_type(self) -> None:
        Email = t.irreducible("Email", lambda x: isinstance(x, str) and "@" in x)
        t.register_irreducible(Email)
        assert t.get_irreducible("Email") is Email

    def test_register_same_type_twice_is_noop(self) -> None:
        Email = t.irreducible("Email", lambda x: True)
        t.register_irreducible(Email)
        t.register_irreducible(Email)
        assert t.get_irreducible("Email") is Email

    def test_builtin_names_reserved(self) -> None:
        with pytest.raises(ValueError, match="built-in"):
            t.register_irreducible(t.irreducible("Str", lambda x: True))

    def test_duplicate_name_rejected(self) -> None:
        t.register_irreducible(t.irreducible("Email", lambda x: True))
        with pytest.raises(ValueError, match="already registered"):
            t.register_irreducible(t.irreducible("Email", lambda x: False))

    def test_only_irreducibles(self) -> None:
        with pytest.raises(TypeError):
            t.register_irreducible(t.list_of(t.Str))  # type: ignore[arg-type]

    def test_missing_lookup(self) -> None:
        with pytest.raises(KeyError):
            t.get_irreducible("Nope")
