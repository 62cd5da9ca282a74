"""Tests for tuple_of, list_of, and dict_of."""

from __future__ import annotations

import types

import pytest

import typecomb as t


class TestTupleOf:
    def test_exact_arity(self) -> None:
        Pair = t.tuple_of([t.Num, t.Num])
        assert Pair([1, 2]) == (1, 2)

    def test_too_many_items(self) -> None:
        Pair = t.tuple_of([t.Num, t.Num])
        with pytest.raises(t.ArityError) as exc_info:
            Pair([1, 2, 3])
        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 3

    def test_position_failure(self) -> None:
        Pair = t.tuple_of([t.Str, t.Num], "Pair")
        with pytest.raises(t.ValidationError) as exc_info:
            Pair(["a", "b"])
        assert exc_info.value.path == ("Pair", "1: Num")

    def test_is_checks_length_and_positions(self) -> None:
        Pair = t.tuple_of([t.Str, t.Num])
        assert Pair.is_(("a", 1))
        assert not Pair.is_(("a",))
        assert not Pair.is_((1, "a"))
        assert Pair.is_(["a", 1])
        assert not Pair.is_("a1")

    def test_idempotent(self) -> None:
        Pair = t.tuple_of([t.Str, t.Num])
        pair = Pair(["a", 1])
        assert Pair(pair) is pair
        assert Pair.is_(pair)

    def test_hydrates_positions(self) -> None:
        Inner = t.struct({"n": t.Num})
        Wrapped = t.tuple_of([Inner, t.Str])
        result = Wrapped([{"n": 1}, "a"])
        assert Inner.is_(result[0])

    def test_rejects_non_sequences(self) -> None:
        with pytest.raises(t.ValidationError):
            t.tuple_of([t.Str])("a")

    def test_default_name(self) -> None:
        assert t.tuple_of([t.Str, t.Num]).display_name == "Tuple[Str, Num]"


class TestListOf:
    def test_builds_frozen_list(self) -> None:
        Nums = t.list_of(t.Num)
        value = [1, 2]
        result = Nums(value)
        assert result == [1, 2]
        assert isinstance(result, t.FrozenList)
        assert result is not value
        assert t.type_of(result) is Nums

    def test_item_failure_path(self) -> None:
        Nums = t.list_of(t.Num, "Nums")
        with pytest.raises(t.ValidationError) as exc_info:
            Nums([1, "x"])
        assert exc_info.value.path == ("Nums", "1: Num")

    def test_is(self) -> None:
        Nums = t.list_of(t.Num)
        assert Nums.is_([1, 2.5])
        assert not Nums.is_([1, "a"])
        assert Nums.is_((1, 2))
        assert not Nums.is_({1, 2})

    def test_idempotent(self) -> None:
        Nums = t.list_of(t.Num)
        nums = Nums([1])
        assert Nums(nums) is nums

    def test_hydrates_items(self) -> None:
        Point = t.struct({"x": t.Num})
        points = t.list_of(Point)([{"x": 1}, {"x": 2}])
        assert all(Point.is_(p) for p in points)

    def test_result_is_immutable(self) -> None:
        nums = t.list_of(t.Num)([1])
        with pytest.raises(TypeError):
            nums.append(2)
        with pytest.raises(TypeError):
            nums[0] = 5

    def test_default_name(self) -> None:
        assert t.list_of(t.Str).display_name == "List[Str]"


class TestDictOf:
    def test_builds_frozen_dict(self) -> None:
        Scores = t.dict_of(t.Str, t.Num)
        result = Scores({"a": 1})
        assert result == {"a": 1}
        assert isinstance(result, t.FrozenDict)

    def test_key_failure(self) -> None:
        Scores = t.dict_of(t.Str, t.Num)
        with pytest.raises(t.ValidationError) as exc_info:
            Scores({1: 1})
        assert exc_info.value.type_name == "Str"

    def test_value_failure(self) -> None:
        Scores = t.dict_of(t.Str, t.Num, "Scores")
        with pytest.raises(t.ValidationError) as exc_info:
            Scores({"a": "b"})
        assert exc_info.value.path == ("Scores", "a: Num")

    def test_is(self) -> None:
        Scores = t.dict_of(t.Str, t.Num)
        assert Scores.is_({"a": 1})
        assert not Scores.is_({"a": "b"})
        assert not Scores.is_([("a", 1)])
        assert Scores.is_(types.MappingProxyType({"a": 1}))

    def test_idempotent_and_immutable(self) -> None:
        Scores = t.dict_of(t.Str, t.Num)
        scores = Scores({"a": 1})
        assert Scores(scores) is scores
        with pytest.raises(TypeError):
            scores["b"] = 2

    def test_meta(self) -> None:
        Scores = t.dict_of(t.Str, t.Num)
        assert Scores.meta.kind == "dict"
        assert Scores.meta.domain is t.Str
        assert Scores.meta.codomain is t.Num
        assert Scores.display_name == "Dict[Str, Num]"
