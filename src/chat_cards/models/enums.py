from __future__ import annotations

from enum import Enum


class CardEnum(str, Enum):
    """Closed set of upper-snake tokens.

    Members also answer to their declaration index (``ImageType(1) is
    ImageType.CIRCLE``), the numeric form some senders emit.
    """

    @classmethod
    def _missing_(cls, value: object) -> CardEnum | None:
        if isinstance(value, int) and not isinstance(value, bool):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
        return None

    @property
    def ordinal(self) -> int:
        return list(type(self)).index(self)


class ImageType(CardEnum):
    SQUARE = "SQUARE"
    CIRCLE = "CIRCLE"


class LoadIndicator(CardEnum):
    SPINNER = "SPINNER"
    NONE = "NONE"


class Interaction(CardEnum):
    INTERACTION_UNSPECIFIED = "INTERACTION_UNSPECIFIED"
    OPEN_DIALOG = "OPEN_DIALOG"


class OpenAs(CardEnum):
    FULL_SIZE = "FULL_SIZE"
    OVERLAY = "OVERLAY"


class OnClose(CardEnum):
    NOTHING = "NOTHING"
    RELOAD = "RELOAD"


class ControlType(CardEnum):
    SWITCH = "SWITCH"
    CHECKBOX = "CHECKBOX"  # deprecated in favor of CHECK_BOX
    CHECK_BOX = "CHECK_BOX"


class TextInputType(CardEnum):
    SINGLE_LINE = "SINGLE_LINE"
    MULTIPLE_LINE = "MULTIPLE_LINE"


class SelectionType(CardEnum):
    CHECK_BOX = "CHECK_BOX"
    RADIO_BUTTON = "RADIO_BUTTON"
    SWITCH = "SWITCH"
    DROPDOWN = "DROPDOWN"


class DateTimePickerType(CardEnum):
    DATE_AND_TIME = "DATE_AND_TIME"
    DATE_ONLY = "DATE_ONLY"
    TIME_ONLY = "TIME_ONLY"


class ImageCropType(CardEnum):
    IMAGE_CROP_TYPE_UNSPECIFIED = "IMAGE_CROP_TYPE_UNSPECIFIED"
    SQUARE = "SQUARE"
    CIRCLE = "CIRCLE"
    RECTANGLE_CUSTOM = "RECTANGLE_CUSTOM"
    RECTANGLE_4_3 = "RECTANGLE_4_3"


class BorderType(CardEnum):
    BORDER_TYPE_UNSPECIFIED = "BORDER_TYPE_UNSPECIFIED"
    NO_BORDER = "NO_BORDER"
    STROKE = "STROKE"


class GridItemLayout(CardEnum):
    GRID_ITEM_LAYOUT_UNSPECIFIED = "GRID_ITEM_LAYOUT_UNSPECIFIED"
    TEXT_BELOW = "TEXT_BELOW"
    TEXT_ABOVE = "TEXT_ABOVE"


class DisplayStyle(CardEnum):
    DISPLAY_STYLE_UNSPECIFIED = "DISPLAY_STYLE_UNSPECIFIED"  # deprecated
    PEEK = "PEEK"
    REPLACE = "REPLACE"


__all__ = [
    "BorderType",
    "CardEnum",
    "ControlType",
    "DateTimePickerType",
    "DisplayStyle",
    "GridItemLayout",
    "ImageCropType",
    "ImageType",
    "Interaction",
    "LoadIndicator",
    "OnClose",
    "OpenAs",
    "SelectionType",
    "TextInputType",
]
