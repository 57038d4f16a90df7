"""Structural checks for documents built in memory.

Constructing models directly does not stop a caller from setting two
alternatives of a union, and ``model_construct`` skips validation entirely.
``validate`` walks such a document in the same order ``decode`` would and
reports every problem it finds.
"""

from __future__ import annotations

from typing import Any, Iterator

from .errors import (
    AmbiguousUnion,
    CardValidationError,
    MalformedInteger,
    TypeMismatch,
    child_path,
)
from .models.base import INT64_MAX, INT64_MIN, CardModel
from .schema import FieldKind, FieldSpec, coerce_enum, fields_of, finite_float, wire_name

_SCALARS: dict[FieldKind, tuple[type, ...]] = {
    FieldKind.string: (str,),
    FieldKind.boolean: (bool,),
    FieldKind.integer: (int,),
    FieldKind.number: (int, float),
}


def validate(document: CardModel) -> list[CardValidationError]:
    return list(iter_errors(document))


def iter_errors(document: CardModel, path: str = "") -> Iterator[CardValidationError]:
    model = type(document)
    for group in model.unions:
        chosen = document.populated(group)
        if len(chosen) > 1:
            yield AmbiguousUnion(
                child_path(path, group.name) if group.name else path,
                [wire_name(model, choice.name) for choice in chosen],
            )

    for spec in fields_of(model):
        value = getattr(document, spec.name, None)
        if value is None:
            continue
        field_path = child_path(path, spec.wire_name)
        if not spec.repeated:
            yield from _check_value(spec, value, field_path)
        elif not isinstance(value, (tuple, list)):
            yield TypeMismatch(field_path, "array", value)
        else:
            for index, item in enumerate(value):
                yield from _check_value(spec, item, child_path(field_path, index))


def _check_value(spec: FieldSpec, value: Any, path: str) -> Iterator[CardValidationError]:
    kind = spec.kind
    if kind is FieldKind.message:
        if isinstance(value, spec.target):
            yield from iter_errors(value, path)
        else:
            yield TypeMismatch(path, spec.target.__name__, value)
    elif kind is FieldKind.enum:
        try:
            coerce_enum(spec.target, value, path)
        except CardValidationError as exc:
            yield exc
    elif kind is FieldKind.decimal_string:
        if isinstance(value, bool) or not isinstance(value, int):
            yield TypeMismatch(path, "integer", value)
        elif not INT64_MIN <= value <= INT64_MAX:
            yield MalformedInteger(path, str(value))
    elif kind is FieldKind.number:
        try:
            finite_float(value, path)
        except CardValidationError as exc:
            yield exc
    elif isinstance(value, bool) and kind is not FieldKind.boolean:
        yield TypeMismatch(path, kind.value, value)
    elif not isinstance(value, _SCALARS[kind]):
        yield TypeMismatch(path, kind.value, value)


__all__ = ["iter_errors", "validate"]
