"""typecomb: runtime structural types built from composable combinators.

Usage::

    import typecomb as t

    Point = t.struct({"x": t.Num, "y": t.Num}, "Point")
    p = Point({"x": 1, "y": 2})
    q = t.update(p, {"x": {"$set": 3}})
"""

from typecomb.combinators import (
    IRREDUCIBLE_REGISTRY,
    CheckedFunction,
    DeclareType,
    DictType,
    EnumsType,
    FuncType,
    IntersectionType,
    IrreducibleType,
    ListType,
    MaybeType,
    StructType,
    SubtypeType,
    TupleType,
    UnionType,
    declare,
    dict_of,
    enums,
    extend,
    func,
    get_irreducible,
    intersection,
    irreducible,
    list_of,
    maybe,
    refinement,
    register_irreducible,
    struct,
    subtype,
    tuple_of,
    union,
)
from typecomb.combinators.irreducible import (
    Any_,
    Arr,
    Bool,
    Dat,
    Err,
    Func,
    Int,
    Nil,
    Num,
    Obj,
    Re,
    Str,
    TypeT,
)
from typecomb.domain.base import Type, is_type
from typecomb.domain.instances import FrozenDict, FrozenList, FrozenTuple, Record, type_of
from typecomb.errors import (
    ArityError,
    ConflictError,
    DispatchError,
    ErrorPayload,
    TypeCombError,
    UpdateError,
    ValidationError,
)
from typecomb.update import (
    COMMAND_REGISTRY,
    commands_frozen,
    freeze_commands,
    register_command,
    unregister_command,
    update,
)
from typecomb.util import (
    fail,
    get_failure_hook,
    get_type_name,
    mixin,
    reset_failure_hook,
    set_failure_hook,
)

__version__ = "0.1.0"

__all__ = [
    "COMMAND_REGISTRY",
    "IRREDUCIBLE_REGISTRY",
    "Any_",
    "ArityError",
    "Arr",
    "Bool",
    "CheckedFunction",
    "ConflictError",
    "Dat",
    "DeclareType",
    "DictType",
    "DispatchError",
    "EnumsType",
    "Err",
    "ErrorPayload",
    "FrozenDict",
    "FrozenList",
    "FrozenTuple",
    "Func",
    "FuncType",
    "Int",
    "IntersectionType",
    "IrreducibleType",
    "ListType",
    "MaybeType",
    "Nil",
    "Num",
    "Obj",
    "Re",
    "Record",
    "Str",
    "StructType",
    "SubtypeType",
    "TupleType",
    "Type",
    "TypeCombError",
    "TypeT",
    "UnionType",
    "UpdateError",
    "ValidationError",
    "commands_frozen",
    "declare",
    "dict_of",
    "enums",
    "extend",
    "fail",
    "freeze_commands",
    "func",
    "get_failure_hook",
    "get_irreducible",
    "get_type_name",
    "intersection",
    "irreducible",
    "is_type",
    "list_of",
    "maybe",
    "mixin",
    "refinement",
    "register_command",
    "register_irreducible",
    "reset_failure_hook",
    "set_failure_hook",
    "struct",
    "subtype",
    "tuple_of",
    "type_of",
    "union",
    "unregister_command",
    "update",
]
