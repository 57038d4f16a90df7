from __future__ import annotations

import math
import types
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Annotated, Any, Union, get_args, get_origin

from .errors import TypeMismatch, UnknownEnumValue
from .models.base import CardModel, DecimalString, UnionGroup
from .models.enums import CardEnum


class FieldKind(str, Enum):
    string = "string"
    boolean = "boolean"
    integer = "integer"
    number = "number"
    decimal_string = "decimal string"
    enum = "enum token"
    message = "object"


@dataclass(frozen=True)
class FieldSpec:
    name: str
    wire_name: str
    kind: FieldKind
    target: type | None = None
    repeated: bool = False


def fields_of(model: type[CardModel]) -> tuple[FieldSpec, ...]:
    """Wire-level description of ``model``'s fields, in declaration order."""
    return _describe(model)


def wire_name(model: type[CardModel], name: str) -> str:
    info = model.model_fields[name]
    if info.alias:
        return info.alias
    generator = model.model_config.get("alias_generator")
    return generator(name) if callable(generator) else name


def union_members(model: type[CardModel], group: UnionGroup) -> list[FieldSpec]:
    by_name = {spec.name: spec for spec in fields_of(model)}
    return [by_name[name] for name in group.members]


@lru_cache(maxsize=None)
def _describe(model: type[CardModel]) -> tuple[FieldSpec, ...]:
    specs = []
    for name, info in model.model_fields.items():
        annotation = _strip_optional(info.annotation)
        repeated = False
        if get_origin(annotation) is tuple:
            annotation = get_args(annotation)[0]
            repeated = True
        kind, target = _classify(annotation, info.metadata)
        specs.append(
            FieldSpec(
                name=name,
                wire_name=wire_name(model, name),
                kind=kind,
                target=target,
                repeated=repeated,
            )
        )
    return tuple(specs)


def _strip_optional(annotation: Any) -> Any:
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _classify(annotation: Any, metadata: list[Any]) -> tuple[FieldKind, type | None]:
    markers = list(metadata)
    if get_origin(annotation) is Annotated:
        annotation, *extra = get_args(annotation)
        markers.extend(extra)
    if any(isinstance(marker, DecimalString) for marker in markers):
        return FieldKind.decimal_string, None
    if annotation is bool:
        return FieldKind.boolean, None
    if annotation is int:
        return FieldKind.integer, None
    if annotation is float:
        return FieldKind.number, None
    if annotation is str:
        return FieldKind.string, None
    if isinstance(annotation, type) and issubclass(annotation, CardEnum):
        return FieldKind.enum, annotation
    if isinstance(annotation, type) and issubclass(annotation, CardModel):
        return FieldKind.message, annotation
    raise TypeError(f"unsupported card field annotation: {annotation!r}")


def coerce_enum(enum: type[CardEnum], value: Any, path: str) -> CardEnum:
    """Normalize a member, its token or its declaration index to the member."""
    if isinstance(value, enum):
        return value
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise TypeMismatch(path, FieldKind.enum.value, value)
    try:
        return enum(value)
    except ValueError:
        raise UnknownEnumValue(path, value, enum) from None


def finite_float(value: Any, path: str) -> float:
    """Convert a JSON number to a float; NaN, infinities and overflow are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeMismatch(path, FieldKind.number.value, value)
    try:
        number = float(value)
    except OverflowError:
        raise TypeMismatch(path, FieldKind.number.value, value) from None
    if not math.isfinite(number):
        raise TypeMismatch(path, FieldKind.number.value, value)
    return number


__all__ = ["FieldKind", "FieldSpec", "coerce_enum", "finite_float", "fields_of", "union_members", "wire_name"]
