"""Combinators: every function here builds a Type from Types or parameters."""

from typecomb.combinators.containers import DictType, ListType, TupleType, dict_of, list_of, tuple_of
from typecomb.combinators.declare import DeclareType, declare
from typecomb.combinators.enums import EnumsType, enums
from typecomb.combinators.func import CheckedFunction, FuncType, func
from typecomb.combinators.irreducible import (
    IRREDUCIBLE_REGISTRY,
    IrreducibleType,
    get_irreducible,
    irreducible,
    register_irreducible,
)
from typecomb.combinators.maybe import MaybeType, maybe
from typecomb.combinators.refinement import SubtypeType, refinement, subtype
from typecomb.combinators.struct import StructType, extend, struct
from typecomb.combinators.union import IntersectionType, UnionType, intersection, union

__all__ = [
    "IRREDUCIBLE_REGISTRY",
    "CheckedFunction",
    "DeclareType",
    "DictType",
    "EnumsType",
    "FuncType",
    "IntersectionType",
    "IrreducibleType",
    "ListType",
    "MaybeType",
    "StructType",
    "SubtypeType",
    "TupleType",
    "UnionType",
    "declare",
    "dict_of",
    "enums",
    "extend",
    "func",
    "get_irreducible",
    "intersection",
    "irreducible",
    "list_of",
    "maybe",
    "refinement",
    "register_irreducible",
    "struct",
    "subtype",
    "tuple_of",
    "union",
]
