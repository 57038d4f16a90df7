from __future__ import annotations

import logging
import os
import uuid
from typing import Any

import httpx
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from chat_cards.codec import decode, encode
from chat_cards.errors import CardValidationError
from chat_cards.logging_config import set_trace_id, setup_logging
from chat_cards.webhook import WebhookSender

# Environment configuration
ENVIRONMENT = os.getenv("ENVIRONMENT", "dev")
PROJECT_ID = os.getenv("PROJECT_ID")
CARD_WEBHOOK_URL = os.getenv("CARD_WEBHOOK_URL")
WEBHOOK_TIMEOUT_SECONDS = float(os.getenv("WEBHOOK_TIMEOUT_SECONDS", "10"))

# Setup logging
setup_logging(environment=ENVIRONMENT, project_id=PROJECT_ID)
logger = logging.getLogger(__name__)

app = FastAPI(title="Chat Cards API", version="0.1.0")

webhook_sender = (
    WebhookSender(CARD_WEBHOOK_URL, timeout=WEBHOOK_TIMEOUT_SECONDS) if CARD_WEBHOOK_URL else None
)


@app.middleware("http")
async def assign_trace_id(request: Request, call_next):
    # Cloud Run forwards "TRACE_ID/SPAN_ID;o=1"
    header = request.headers.get("x-cloud-trace-context", "")
    trace_id = header.split("/", 1)[0] or uuid.uuid4().hex
    set_trace_id(f"projects/{PROJECT_ID}/traces/{trace_id}" if PROJECT_ID else trace_id)
    return await call_next(request)


@app.exception_handler(CardValidationError)
async def card_validation_error_handler(request: Request, exc: CardValidationError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"error": exc.to_dict()})


async def _read_payload(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Request body is not valid JSON: {exc}") from exc


@app.post("/v1/messages:validate")
async def validate_message(request: Request) -> dict[str, Any]:
    payload = await _read_payload(request)
    try:
        decode(payload)
    except CardValidationError as exc:
        return {"valid": False, "error": exc.to_dict()}
    return {"valid": True, "error": None}


@app.post("/v1/messages:canonicalize")
async def canonicalize_message(request: Request) -> dict[str, Any]:
    payload = await _read_payload(request)
    return encode(decode(payload))


@app.post("/v1/messages:send")
async def send_message(request: Request) -> dict[str, Any]:
    if webhook_sender is None:
        raise HTTPException(
            status_code=503,
            detail="Card webhook not configured. Set CARD_WEBHOOK_URL to enable sending.",
        )
    message = decode(await _read_payload(request))
    try:
        response = await webhook_sender.send_async(message)
    except httpx.HTTPStatusError as exc:
        logger.warning(
            "Webhook rejected card message",
            extra={"status_code": exc.response.status_code},
        )
        raise HTTPException(status_code=502, detail="Webhook rejected the card message") from exc
    except httpx.HTTPError as exc:
        logger.warning("Webhook request failed", extra={"error": str(exc)})
        raise HTTPException(status_code=502, detail="Webhook request failed") from exc
    return {"status": "sent", "webhook_status": response.status_code}


@app.get("/health")
async def healthcheck() -> JSONResponse:
    return JSONResponse({"status": "ok"})
