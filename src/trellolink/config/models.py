"""Data models for action configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class CardAction(StrEnum):
    """Side effect applied to a matched card."""

    ATTACHMENT = "attachment"
    COMMENT = "comment"

    @classmethod
    def parse(cls, value: str | None) -> CardAction | None:
        """Parse an action name case-insensitively.

        Returns None for unknown or empty values, meaning no action is taken.
        """
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class ActionConfig:
    """Configuration resolved once at startup, read-only for the run.

    Attributes:
        api_key: Trello API key.
        auth_token: Trello API auth token.
        board_id: Board that card lookups are scoped to.
        card_action: Action to apply, or None when the configured value is unknown.
        card_action_raw: The action value as configured, for logging.
        card_id_pattern: Prefix preceding the card number in text.
        api_base_url: Base URL for card mutations.
        web_base_url: Base URL for board lookups.
        timeout_seconds: HTTP timeout for every request.
        max_concurrency: Maximum cards handled at once.
    """

    api_key: str
    auth_token: str
    board_id: str
    card_action: CardAction | None
    card_action_raw: str = ""
    card_id_pattern: str = "#"
    api_base_url: str = "https://api.trello.com"
    web_base_url: str = "https://trello.com"
    timeout_seconds: float = 30.0
    max_concurrency: int = 5
