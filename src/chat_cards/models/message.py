from __future__ import annotations

from pydantic import Field

from .base import CardModel
from .card import Card


class CardWithId(CardModel):
    # Uniqueness of card_id across a message is the sender's concern.
    card_id: str | None = None
    card: Card | None = None


class CardMessage(CardModel):
    """Top-level webhook payload: ``{"cardsV2": [{"cardId": ..., "card": ...}]}``."""

    cards_v2: tuple[CardWithId, ...] | None = Field(default=None, alias="cardsV2")


__all__ = ["CardMessage", "CardWithId"]
