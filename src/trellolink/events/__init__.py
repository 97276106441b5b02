"""Events - The triggering push or pull request."""

from trellolink.events.exceptions import EventPayloadError
from trellolink.events.loader import load_event_payload, select_event
from trellolink.events.models import CommitEvent, PullRequestEvent

__all__ = [
    "CommitEvent",
    "EventPayloadError",
    "PullRequestEvent",
    "load_event_payload",
    "select_event",
]
