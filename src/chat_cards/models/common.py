from __future__ import annotations

from typing import ClassVar

from .base import CardModel, Choice, UnionGroup
from .enums import (
    BorderType,
    ImageCropType,
    ImageType,
    Interaction,
    LoadIndicator,
    OnClose,
    OpenAs,
)


class Color(CardModel):
    """RGBA color, each channel conventionally in [0, 1].

    Two colors are equal when every channel differs by at most ``TOLERANCE``;
    an absent channel counts as 0.
    """

    TOLERANCE: ClassVar[float] = 1e-5

    red: float | None = None
    green: float | None = None
    blue: float | None = None
    alpha: float | None = None

    def channels(self) -> tuple[float, float, float, float]:
        return (self.red or 0.0, self.green or 0.0, self.blue or 0.0, self.alpha or 0.0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        close = all(
            abs(mine - theirs) <= self.TOLERANCE
            for mine, theirs in zip(self.channels(), other.channels())
        )
        return close and (self.model_extra or {}) == (other.model_extra or {})

    def __hash__(self) -> int:
        # Tolerant equality admits no finer hash.
        return hash(Color)


class Icon(CardModel):
    alt_text: str | None = None
    image_type: ImageType | None = None
    known_icon: str | None = None
    icon_url: str | None = None


class ActionParameter(CardModel):
    key: str | None = None
    value: str | None = None


class Action(CardModel):
    function: str | None = None
    parameters: tuple[ActionParameter, ...] | None = None
    load_indicator: LoadIndicator | None = None
    persist_values: bool | None = None
    interaction: Interaction | None = None

    def values_for(self, key: str) -> list[str | None]:
        """All values bound to ``key``, in order. Duplicate keys are legal."""
        return [param.value for param in self.parameters or () if param.key == key]


class OpenLink(CardModel):
    url: str | None = None
    open_as: OpenAs | None = None
    on_close: OnClose | None = None


class ImageCropStyle(CardModel):
    type: ImageCropType | None = None
    aspect_ratio: float | None = None


class BorderStyle(CardModel):
    type: BorderType | None = None
    stroke_color: Color | None = None
    corner_radius: int | None = None


class ImageComponent(CardModel):
    image_uri: str | None = None
    alt_text: str | None = None
    crop_style: ImageCropStyle | None = None
    border_style: BorderStyle | None = None


class TextParagraph(CardModel):
    text: str | None = None


class Divider(CardModel):
    pass


class SuggestionItem(CardModel):
    unions = (UnionGroup("content", ("text",)),)

    text: str | None = None

    @property
    def content(self) -> Choice | None:
        return self.choice("content")


class Suggestions(CardModel):
    items: tuple[SuggestionItem, ...] | None = None


class SelectionItem(CardModel):
    text: str | None = None
    value: str | None = None
    selected: bool | None = None


__all__ = [
    "Action",
    "ActionParameter",
    "BorderStyle",
    "Color",
    "Divider",
    "Icon",
    "ImageComponent",
    "ImageCropStyle",
    "OpenLink",
    "SelectionItem",
    "SuggestionItem",
    "Suggestions",
    "TextParagraph",
]
