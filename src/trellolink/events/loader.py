"""Load and classify the triggering GitHub event."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from trellolink.events.exceptions import EventPayloadError
from trellolink.events.models import CommitEvent, PullRequestEvent

logger = logging.getLogger(__name__)


def load_event_payload(path: str | Path) -> dict[str, Any]:
    """Read the event payload JSON written by the Actions runner.

    Args:
        path: Path to the event file (GITHUB_EVENT_PATH).

    Returns:
        The decoded payload.

    Raises:
        EventPayloadError: If the file cannot be read or is not a JSON object.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise EventPayloadError(f"Cannot read event payload {path}: {e}") from e

    if not isinstance(data, dict):
        raise EventPayloadError(f"Event payload {path} is not a JSON object")
    return data


def select_event(payload: dict[str, Any]) -> CommitEvent | PullRequestEvent | None:
    """Pick the event to handle.

    A head commit with a message wins over a pull request; a pull request
    needs a title. Returns None when neither is present.
    """
    head_commit = payload.get("head_commit")
    if isinstance(head_commit, dict) and head_commit.get("message"):
        return CommitEvent.from_payload(head_commit)

    pull_request = payload.get("pull_request")
    if isinstance(pull_request, dict) and pull_request.get("title"):
        return PullRequestEvent.from_payload(pull_request)

    logger.debug("Payload has neither a head commit nor a pull request")
    return None
