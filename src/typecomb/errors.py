"""Engine error taxonomy and the structured payload embedders can forward.

INVARIANT: Every failure the engine detects is one of the classes below and
is routed through :func:`typecomb.util.fail` at the point of detection.
There is no aggregation; the first failure halts the surrounding operation.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, Field


class ErrorPayload(BaseModel):
    """Serializable description of an engine failure."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class TypeCombError(TypeError):
    """Base class for every error raised by the combinator engine.

    Attributes:
        code: Short machine-readable kind (``"validation"``, ``"arity"``...).
        message: Human-readable diagnostic.
        detail: Extra context (type name, path, offending value repr...).
    """

    code: ClassVar[str] = "typecomb"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(code=self.code, message=self.message, detail=dict(self.detail))


class ValidationError(TypeCombError):
    """A value fails a type's predicate or shape."""

    code = "validation"

    def __init__(
        self,
        message: str,
        *,
        value: Any = None,
        type_name: str | None = None,
        path: tuple[str, ...] = (),
        **detail: Any,
    ) -> None:
        super().__init__(message, type_name=type_name, path=list(path), **detail)
        self.value = value
        self.type_name = type_name
        self.path = path


class ArityError(TypeCombError):
    """A sequence or argument list has the wrong length."""

    code = "arity"

    def __init__(self, message: str, *, expected: int, actual: int, **detail: Any) -> None:
        super().__init__(message, expected=expected, actual=actual, **detail)
        self.expected = expected
        self.actual = actual


class ConflictError(TypeCombError):
    """A name is defined twice during extension or a non-overriding merge."""

    code = "conflict"

    def __init__(self, message: str, *, key: str, **detail: Any) -> None:
        super().__init__(message, key=key, **detail)
        self.key = key


class DispatchError(TypeCombError):
    """No union member accepts the value being constructed."""

    code = "dispatch"

    def __init__(self, message: str, *, value: Any = None, type_name: str | None = None) -> None:
        super().__init__(message, type_name=type_name)
        self.value = value
        self.type_name = type_name


class UpdateError(TypeCombError):
    """An update spec names an unknown command or misapplies one."""

    code = "update"

    def __init__(self, message: str, *, command: str | None = None, **detail: Any) -> None:
        super().__init__(message, command=command, **detail)
        self.command = command
