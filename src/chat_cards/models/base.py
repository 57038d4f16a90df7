from __future__ import annotations

from typing import Annotated, Any, ClassVar, NamedTuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..errors import AmbiguousUnion

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class DecimalString:
    """Marks an integer field that travels as a decimal string on the wire."""

    def __repr__(self) -> str:
        return "DecimalString()"


EpochMillis = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX), DecimalString()]


class UnionGroup(NamedTuple):
    """Mutually exclusive fields of a model.

    ``name`` is ``None`` when the whole object is the union (Widget, OnClick).
    """

    name: str | None
    members: tuple[str, ...]


class Choice(NamedTuple):
    name: str
    value: Any


class CardModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_alias=True,
        validate_by_name=True,
        frozen=True,
        extra="allow",
        allow_inf_nan=False,
    )

    unions: ClassVar[tuple[UnionGroup, ...]] = ()

    @property
    def unknown_fields(self) -> dict[str, Any]:
        """Wire keys this version of the schema does not know, in arrival order."""
        return dict(self.model_extra or {})

    def populated(self, group: UnionGroup) -> list[Choice]:
        return [
            Choice(name, getattr(self, name))
            for name in group.members
            if getattr(self, name, None) is not None
        ]

    def choice(self, group_name: str | None = None) -> Choice | None:
        """Return the populated alternative of a union group, or ``None``."""
        for group in self.unions:
            if group.name == group_name:
                break
        else:
            raise KeyError(group_name)
        chosen = self.populated(group)
        if len(chosen) > 1:
            fields = type(self).model_fields
            raise AmbiguousUnion(
                group.name or "",
                [fields[c.name].alias or to_camel(c.name) for c in chosen],
            )
        return chosen[0] if chosen else None


__all__ = [
    "CardModel",
    "Choice",
    "DecimalString",
    "EpochMillis",
    "INT64_MAX",
    "INT64_MIN",
    "UnionGroup",
]
