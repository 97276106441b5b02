"""Data models for the Event Dispatcher."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class DispatchPath(StrEnum):
    """Which handling path a run took."""

    COMMIT = "commit"
    PULL_REQUEST = "pull_request"
    NONE = "none"


@dataclass
class CardOutcome:
    """What happened for one card identifier.

    Attributes:
        identifier: Card number extracted from text.
        card_id: Resolved card reference, None if the card was not found.
        action: Action applied ("attachment", "comment"), None if skipped.
        success: Whether the action request succeeded.
        error: Failure description for a lookup or action error.
    """

    identifier: str
    card_id: str | None = None
    action: str | None = None
    success: bool = False
    error: str | None = None


@dataclass
class DispatchReport:
    """Result of handling one triggering event.

    Attributes:
        path: The path taken.
        identifiers: Card identifiers extracted, in handling order.
        outcomes: One outcome per identifier that was handled.
        error: Message of an error caught at the path level.
    """

    path: DispatchPath = DispatchPath.NONE
    identifiers: list[str] = field(default_factory=list)
    outcomes: list[CardOutcome] = field(default_factory=list)
    error: str | None = None
