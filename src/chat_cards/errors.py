from __future__ import annotations

from typing import Any, ClassVar, Sequence


def child_path(parent: str, key: str | int) -> str:
    """Extend a wire path with an object key or a list index."""
    if isinstance(key, int):
        return f"{parent}[{key}]"
    if not parent:
        return key
    return f"{parent}.{key}"


def describe_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


class CardValidationError(ValueError):
    """Base class for structural problems found in a card document.

    ``path`` is the wire path of the offending node, e.g.
    ``cardsV2[0].card.sections[1].widgets[0]``. The root is ``""``.
    """

    kind: ClassVar[str] = "CardValidationError"

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path or '<root>'}: {message}")
        self.path = path
        self.detail = message

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "path": self.path, "message": self.detail}


class UnknownEnumValue(CardValidationError):
    kind = "UnknownEnumValue"

    def __init__(self, path: str, value: Any, enum: type) -> None:
        super().__init__(path, f"{value!r} is not a member of {enum.__name__}")
        self.value = value
        self.enum = enum

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "value": self.value, "enum": self.enum.__name__}


class AmbiguousUnion(CardValidationError):
    kind = "AmbiguousUnion"

    def __init__(self, path: str, alternatives: Sequence[str]) -> None:
        names = ", ".join(alternatives)
        super().__init__(path, f"only one of the union alternatives may be set, got: {names}")
        self.alternatives = tuple(alternatives)

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "alternatives": list(self.alternatives)}


class MalformedInteger(CardValidationError):
    kind = "MalformedInteger"

    def __init__(self, path: str, raw: str) -> None:
        super().__init__(path, f"{raw!r} is not a 64-bit decimal integer")
        self.raw = raw

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "raw": self.raw}


class TypeMismatch(CardValidationError):
    kind = "TypeMismatch"

    def __init__(self, path: str, expected: str, value: Any) -> None:
        actual = describe_value(value)
        super().__init__(path, f"expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "expected": self.expected, "actual": self.actual}


__all__ = [
    "AmbiguousUnion",
    "CardValidationError",
    "MalformedInteger",
    "TypeMismatch",
    "UnknownEnumValue",
    "child_path",
    "describe_value",
]
