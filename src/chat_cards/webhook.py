from __future__ import annotations

import logging

import httpx

from .codec import dumps
from .models.message import CardMessage

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class WebhookSender:
    """Posts card messages to a chat space's incoming webhook.

    One request per call: no retries, and the response body is not inspected.
    Non-2xx responses raise ``httpx.HTTPStatusError``.
    """

    def __init__(
        self,
        webhook_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the sender.

        Args:
            webhook_url: Incoming webhook URL, including its key/token query
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use ``httpx.MockTransport``)
        """
        self.webhook_url = webhook_url
        self.timeout = timeout
        self._transport = transport

    def send(self, message: CardMessage) -> httpx.Response:
        """Encode ``message`` and POST it.

        Args:
            message: The card message to deliver

        Returns:
            The webhook's response
        """
        body = dumps(message)
        with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
            response = client.post(self.webhook_url, content=body, headers=JSON_HEADERS)
            response.raise_for_status()
        self._log_sent(message, response)
        return response

    async def send_async(self, message: CardMessage) -> httpx.Response:
        """Async variant of :meth:`send`."""
        body = dumps(message)
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(self.webhook_url, content=body, headers=JSON_HEADERS)
            response.raise_for_status()
        self._log_sent(message, response)
        return response

    def _log_sent(self, message: CardMessage, response: httpx.Response) -> None:
        logger.info(
            "Posted card message to webhook",
            extra={
                "card_ids": [entry.card_id for entry in message.cards_v2 or ()],
                "status_code": response.status_code,
            },
        )


__all__ = ["JSON_HEADERS", "WebhookSender"]
