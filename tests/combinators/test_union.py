"""Tests for union dispatch and intersection."""

from __future__ import annotations

import pytest

import typecomb as t


class TestUnion:
    def test_default_dispatch_picks_first_match(self) -> None:
        U = t.union([t.Str, t.Num])
        assert U.dispatch("a") is t.Str
        assert U.dispatch(1) is t.Num
        assert U.dispatch(True) is None

    def test_construction_without_match_fails(self) -> None:
        U = t.union([t.Str, t.Num], "StrOrNum")
        with pytest.raises(t.DispatchError) as exc_info:
            U(True)
        assert exc_info.value.type_name == "StrOrNum"

    def test_construction_delegates(self) -> None:
        U = t.union([t.Str, t.Num])
        assert U("a") == "a"
        assert U(2) == 2

    def test_default_dispatch_accepts_sequence_literals(self) -> None:
        Pair = t.tuple_of([t.Num, t.Num], "Pair")
        U = t.union([Pair, t.Str])
        assert U.dispatch([1, 2]) is Pair
        result = U([1, 2])
        assert Pair.is_(result)
        assert isinstance(result, t.FrozenTuple)

    def test_is_any_member(self) -> None:
        U = t.union([t.Str, t.Num])
        assert U.is_("a")
        assert U.is_(1)
        assert not U.is_(None)

    def test_custom_dispatch_routes_raw_values(self) -> None:
        Circle = t.struct({"kind": t.enums.of("circle"), "radius": t.Num}, "Circle")
        Square = t.struct({"kind": t.enums.of("square"), "side": t.Num}, "Square")
        Shape = t.union([Circle, Square], "Shape")
        Shape.dispatch = lambda x: Circle if x["kind"] == "circle" else Square

        shape = Shape({"kind": "square", "side": 2})
        assert Square.is_(shape)
        assert Shape.is_(shape)

    def test_dispatch_assigned_once(self) -> None:
        U = t.union([t.Str, t.Num])
        U.dispatch = lambda x: t.Str
        with pytest.raises(t.TypeCombError):
            U.dispatch = lambda x: t.Num

    def test_dispatch_not_assignable_after_use(self) -> None:
        U = t.union([t.Str, t.Num])
        U("a")
        with pytest.raises(t.TypeCombError):
            U.dispatch = lambda x: t.Num

    def test_member_failure_path(self) -> None:
        Point = t.struct({"x": t.Num}, "Point")
        U = t.union([Point, t.Str], "U")
        U.dispatch = lambda x: Point
        with pytest.raises(t.ValidationError) as exc_info:
            U({"x": "a"})
        assert exc_info.value.path == ("U", "Point", "x: Num")

    def test_needs_two_members(self) -> None:
        with pytest.raises(t.TypeCombError):
            t.union([t.Str])

    def test_meta(self) -> None:
        U = t.union([t.Str, t.Num])
        assert U.meta.kind == "union"
        assert U.meta.types == (t.Str, t.Num)
        assert U.display_name == "Union[Str, Num]"


class TestIntersection:
    def test_requires_all_members(self) -> None:
        Small = t.subtype(t.Num, lambda x: x < 10)
        Even = t.subtype(t.Int, lambda x: x % 2 == 0)
        SmallEven = t.intersection([Small, Even], "SmallEven")
        assert SmallEven(4) == 4
        assert SmallEven.is_(8)
        assert not SmallEven.is_(12)
        with pytest.raises(t.ValidationError):
            SmallEven(3)

    def test_meta(self) -> None:
        I = t.intersection([t.Num, t.Int])  # noqa: E741
        assert I.meta.kind == "intersection"
        assert I.display_name == "Num & Int"
