from __future__ import annotations

from .base import CardModel, Choice, EpochMillis, UnionGroup
from .common import (
    Action,
    BorderStyle,
    Color,
    Divider,
    Icon,
    ImageComponent,
    OpenLink,
    SelectionItem,
    Suggestions,
    TextParagraph,
)
from .enums import (
    ControlType,
    DateTimePickerType,
    DisplayStyle,
    GridItemLayout,
    ImageType,
    SelectionType,
    TextInputType,
)


class OnClick(CardModel):
    """What happens when a user clicks an interactive element.

    Exactly one of the four alternatives applies; ``variant`` names it.
    """

    unions = (UnionGroup(None, ("action", "open_link", "open_dynamic_link_action", "card")),)

    action: Action | None = None
    open_link: OpenLink | None = None
    open_dynamic_link_action: Action | None = None
    card: Card | None = None

    @property
    def variant(self) -> Choice | None:
        return self.choice()


class Button(CardModel):
    text: str | None = None
    icon: Icon | None = None
    color: Color | None = None
    on_click: OnClick | None = None
    disabled: bool | None = None
    alt_text: str | None = None


class SwitchControl(CardModel):
    name: str | None = None
    value: str | None = None
    selected: bool | None = None
    on_change_action: Action | None = None
    control_type: ControlType | None = None


class Image(CardModel):
    image_url: str | None = None
    on_click: OnClick | None = None
    alt_text: str | None = None


class DecoratedText(CardModel):
    unions = (UnionGroup("control", ("button", "switch_control", "end_icon")),)

    icon: Icon | None = None
    start_icon: Icon | None = None
    top_label: str | None = None
    text: str | None = None
    wrap_text: bool | None = None
    bottom_label: str | None = None
    on_click: OnClick | None = None
    button: Button | None = None
    switch_control: SwitchControl | None = None
    end_icon: Icon | None = None

    @property
    def control(self) -> Choice | None:
        return self.choice("control")


class ButtonList(CardModel):
    buttons: tuple[Button, ...] | None = None


class TextInput(CardModel):
    name: str | None = None
    label: str | None = None
    hint_text: str | None = None
    value: str | None = None
    type: TextInputType | None = None
    on_change_action: Action | None = None
    initial_suggestions: Suggestions | None = None
    auto_complete_action: Action | None = None


class SelectionInput(CardModel):
    name: str | None = None
    label: str | None = None
    type: SelectionType | None = None
    items: tuple[SelectionItem, ...] | None = None
    on_change_action: Action | None = None


class DateTimePicker(CardModel):
    name: str | None = None
    label: str | None = None
    type: DateTimePickerType | None = None
    value_ms_epoch: EpochMillis | None = None
    timezone_offset_date: int | None = None
    on_change_action: Action | None = None


class GridItem(CardModel):
    id: str | None = None
    image: ImageComponent | None = None
    title: str | None = None
    subtitle: str | None = None
    layout: GridItemLayout | None = None


class Grid(CardModel):
    title: str | None = None
    items: tuple[GridItem, ...] | None = None
    border_style: BorderStyle | None = None
    column_count: int | None = None
    on_click: OnClick | None = None


class Widget(CardModel):
    """A single UI element; at most one of its fields is set."""

    unions = (
        UnionGroup(
            None,
            (
                "text_paragraph",
                "image",
                "decorated_text",
                "button_list",
                "text_input",
                "selection_input",
                "date_time_picker",
                "divider",
                "grid",
            ),
        ),
    )

    text_paragraph: TextParagraph | None = None
    image: Image | None = None
    decorated_text: DecoratedText | None = None
    button_list: ButtonList | None = None
    text_input: TextInput | None = None
    selection_input: SelectionInput | None = None
    date_time_picker: DateTimePicker | None = None
    divider: Divider | None = None
    grid: Grid | None = None

    @property
    def variant(self) -> Choice | None:
        return self.choice()


class Section(CardModel):
    header: str | None = None
    widgets: tuple[Widget, ...] | None = None
    collapsible: bool | None = None
    uncollapsible_widgets_count: int | None = None

    @property
    def uncollapsible_count(self) -> int | None:
        # The count only means something on a collapsible section; it may
        # exceed len(widgets), clients clamp it when rendering.
        if not self.collapsible:
            return None
        return self.uncollapsible_widgets_count


class CardHeader(CardModel):
    title: str | None = None
    subtitle: str | None = None
    image_type: ImageType | None = None
    image_url: str | None = None
    image_alt_text: str | None = None


class CardAction(CardModel):
    action_label: str | None = None
    on_click: OnClick | None = None


class CardFixedFooter(CardModel):
    primary_button: Button | None = None
    secondary_button: Button | None = None


class Card(CardModel):
    header: CardHeader | None = None
    sections: tuple[Section, ...] | None = None
    card_actions: tuple[CardAction, ...] | None = None
    name: str | None = None
    fixed_footer: CardFixedFooter | None = None
    display_style: DisplayStyle | None = None
    peek_card_header: CardHeader | None = None


for _model in (OnClick, Button, Image, DecoratedText, Grid, Widget, Section, CardAction, CardFixedFooter, Card):
    _model.model_rebuild()


__all__ = [
    "Button",
    "ButtonList",
    "Card",
    "CardAction",
    "CardFixedFooter",
    "CardHeader",
    "DateTimePicker",
    "DecoratedText",
    "Grid",
    "GridItem",
    "Image",
    "OnClick",
    "Section",
    "SelectionInput",
    "SwitchControl",
    "TextInput",
    "Widget",
]
