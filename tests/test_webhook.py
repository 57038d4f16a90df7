import asyncio
import json

import httpx
import pytest

from chat_cards.codec import decode, encode
from chat_cards.errors import AmbiguousUnion
from chat_cards.models.card import Card, Section, Widget
from chat_cards.models.common import Divider, TextParagraph
from chat_cards.models.message import CardMessage, CardWithId
from chat_cards.webhook import WebhookSender

WEBHOOK_URL = "https://chat.example.com/v1/spaces/AAAA/messages?key=k&token=t"


class RecordingHandler:
    def __init__(self, status_code: int = 200) -> None:
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json={"name": "spaces/AAAA/messages/1"})


def test_send_posts_canonical_json(contact_card):
    handler = RecordingHandler()
    sender = WebhookSender(WEBHOOK_URL, transport=httpx.MockTransport(handler))
    message = decode(contact_card)

    response = sender.send(message)

    assert response.status_code == 200
    [request] = handler.requests
    assert request.method == "POST"
    assert str(request.url) == WEBHOOK_URL
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == encode(message)


def test_send_raises_on_error_status_without_retrying(contact_card):
    handler = RecordingHandler(status_code=500)
    sender = WebhookSender(WEBHOOK_URL, transport=httpx.MockTransport(handler))

    with pytest.raises(httpx.HTTPStatusError):
        sender.send(decode(contact_card))

    assert len(handler.requests) == 1


def test_invalid_message_is_never_sent():
    handler = RecordingHandler()
    sender = WebhookSender(WEBHOOK_URL, transport=httpx.MockTransport(handler))
    message = CardMessage(
        cards_v2=[
            CardWithId(
                card=Card(sections=[Section(widgets=[Widget(divider=Divider(), text_paragraph=TextParagraph())])])
            )
        ]
    )

    with pytest.raises(AmbiguousUnion):
        sender.send(message)

    assert handler.requests == []


def test_send_async(contact_card):
    handler = RecordingHandler(status_code=202)
    sender = WebhookSender(WEBHOOK_URL, transport=httpx.MockTransport(handler))

    response = asyncio.run(sender.send_async(decode(contact_card)))

    assert response.status_code == 202
    [request] = handler.requests
    assert json.loads(request.content) == contact_card
