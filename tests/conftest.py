"""Shared fixtures: the sample contact-card message."""

import copy
import json
from pathlib import Path

import pytest

MESSAGES_DIR = Path(__file__).resolve().parents[1] / "data" / "messages"


def load_message(name: str) -> dict:
    return json.loads((MESSAGES_DIR / f"{name}.json").read_text(encoding="utf-8"))


@pytest.fixture(scope="session")
def _contact_card() -> dict:
    return load_message("contact-card")


@pytest.fixture
def contact_card(_contact_card: dict) -> dict:
    """A fresh copy of the contact card payload for each test."""
    return copy.deepcopy(_contact_card)
