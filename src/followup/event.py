"""Trigger event parsing and the issue-card filter."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any


class EventError(Exception):
    """Raised when the trigger payload cannot be used."""


@dataclass(frozen=True)
class TriggerEvent:
    """The project card event that started the run.

    Attributes:
        content_url: API URL of the content linked to the card. ``None`` for
            note cards, which link to nothing.
    """

    content_url: str | None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> TriggerEvent:
        """Build an event from a ``project_card`` webhook payload.

        Raises:
            EventError: If the payload has no ``project_card`` object.
        """
        card = payload.get("project_card")
        if not isinstance(card, dict):
            raise EventError(
                "Event payload has no project_card; is the workflow triggered by project_card?"
            )
        return cls(content_url=card.get("content_url") or None)


def load_event(path: str | Path) -> TriggerEvent:
    """Read the event payload file written by the runner.

    Args:
        path: Path to the JSON payload (``GITHUB_EVENT_PATH``).

    Raises:
        EventError: If the file is unreadable or not a project card payload.
    """
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise EventError(f"Cannot read event payload {path}: {e}") from e
    if not isinstance(payload, dict):
        raise EventError(f"Event payload {path} is not a JSON object")
    return TriggerEvent.from_payload(payload)


def is_issue_card(content_url: str | None) -> bool:
    """Return True if the card content is an issue.

    Issue URLs contain an ``issues`` path segment; pull requests and notes do not.
    """
    if not content_url:
        return False
    return "issues" in content_url.split("/")


def get_issue_number(content_url: str) -> str:
    """Extract the issue number, the last path segment of the content URL.

    Raises:
        EventError: If the last segment is not an issue number.
    """
    number = content_url.rstrip("/").split("/")[-1]
    if not (number.isascii() and number.isdigit()) or int(number) == 0:
        raise EventError(f"Cannot read an issue number from {content_url}")
    return number
