"""Decode and encode card documents to and from their JSON wire form.

Decoding is a recursive descent over the model classes. At every object the
union groups are checked before any child is visited, then keys are visited in
wire order; the first problem found stops the walk and is raised. Keys the
schema does not know are carried along on the node and written back after the
known keys by ``encode``.
"""

from __future__ import annotations

import copy
import json
import re
from typing import Any, Mapping, TypeVar

from .errors import (
    AmbiguousUnion,
    MalformedInteger,
    TypeMismatch,
    child_path,
)
from .models.base import INT64_MAX, INT64_MIN, CardModel
from .models.message import CardMessage
from .schema import FieldKind, FieldSpec, coerce_enum, fields_of, finite_float, union_members
from .validator import iter_errors

M = TypeVar("M", bound=CardModel)

_DECIMAL = re.compile(r"[+-]?[0-9]+")


def decode(payload: str | bytes | Mapping[str, Any], model: type[M] = CardMessage) -> M:
    """Build a ``model`` document from wire data.

    Raises the first :class:`~chat_cards.errors.CardValidationError` met in
    depth-first, left-to-right order.
    """
    if isinstance(payload, (str, bytes, bytearray)):
        payload = json.loads(payload)
    return _decode_object(payload, model, "")


def loads(text: str | bytes, model: type[M] = CardMessage) -> M:
    return decode(json.loads(text), model)


def encode(document: CardModel) -> dict[str, Any]:
    """Canonical wire form of ``document``.

    The document is validated first; an ambiguous union or a value outside
    its enum is raised rather than written.
    """
    error = next(iter_errors(document), None)
    if error is not None:
        raise error
    return _encode_object(document)


def dumps(document: CardModel, **kwargs: Any) -> str:
    kwargs.setdefault("ensure_ascii", False)
    kwargs.setdefault("allow_nan", False)
    return json.dumps(encode(document), **kwargs)


def parse_decimal(raw: Any, path: str) -> int:
    if not isinstance(raw, str):
        raise TypeMismatch(path, FieldKind.decimal_string.value, raw)
    if not _DECIMAL.fullmatch(raw):
        raise MalformedInteger(path, raw)
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise MalformedInteger(path, raw)
    return value


def _decode_object(raw: Any, model: type[M], path: str) -> M:
    if not isinstance(raw, Mapping):
        raise TypeMismatch(path, "object", raw)

    for group in model.unions:
        present = [spec.wire_name for spec in union_members(model, group) if spec.wire_name in raw]
        if len(present) > 1:
            raise AmbiguousUnion(child_path(path, group.name) if group.name else path, present)

    known = {spec.wire_name: spec for spec in fields_of(model)}
    values: dict[str, Any] = {}
    unknown: dict[str, Any] = {}
    for key, value in raw.items():
        spec = known.get(key)
        if spec is None:
            unknown[key] = copy.deepcopy(value)
            continue
        values[key] = _decode_field(spec, value, child_path(path, key))

    # by_name=False keeps an unknown key such as "image_url" out of the
    # snake_case attribute of the same name.
    return model.model_validate({**values, **unknown}, by_alias=True, by_name=False)


def _decode_field(spec: FieldSpec, raw: Any, path: str) -> Any:
    if not spec.repeated:
        return _decode_value(spec, raw, path)
    if not isinstance(raw, list):
        raise TypeMismatch(path, "array", raw)
    return tuple(_decode_value(spec, item, child_path(path, index)) for index, item in enumerate(raw))


def _decode_value(spec: FieldSpec, raw: Any, path: str) -> Any:
    kind = spec.kind
    if kind is FieldKind.message:
        return _decode_object(raw, spec.target, path)
    if kind is FieldKind.enum:
        return coerce_enum(spec.target, raw, path)
    if kind is FieldKind.decimal_string:
        return parse_decimal(raw, path)
    if kind is FieldKind.string:
        if not isinstance(raw, str):
            raise TypeMismatch(path, kind.value, raw)
        return raw
    if kind is FieldKind.boolean:
        if not isinstance(raw, bool):
            raise TypeMismatch(path, kind.value, raw)
        return raw
    if kind is FieldKind.integer:
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise TypeMismatch(path, kind.value, raw)
        return raw
    if kind is FieldKind.number:
        return finite_float(raw, path)
    raise AssertionError(f"unhandled field kind {kind}")


def _encode_object(node: CardModel) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for spec in fields_of(type(node)):
        value = getattr(node, spec.name)
        if value is None:
            continue
        if spec.repeated:
            out[spec.wire_name] = [_encode_value(spec, item) for item in value]
        else:
            out[spec.wire_name] = _encode_value(spec, value)
    for key, value in (node.model_extra or {}).items():
        out.setdefault(key, copy.deepcopy(value))
    return out


def _encode_value(spec: FieldSpec, value: Any) -> Any:
    if spec.kind is FieldKind.message:
        return _encode_object(value)
    if spec.kind is FieldKind.enum:
        return coerce_enum(spec.target, value, "").value
    if spec.kind is FieldKind.decimal_string:
        return str(value)
    if spec.kind is FieldKind.number:
        return float(value)
    return value


__all__ = ["decode", "dumps", "encode", "loads", "parse_decimal"]
