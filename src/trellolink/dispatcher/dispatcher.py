"""EventDispatcher - Turns a push or pull request into card actions."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from trellolink.config import CardAction
from trellolink.dispatcher.models import CardOutcome, DispatchPath, DispatchReport
from trellolink.events import CommitEvent, PullRequestEvent, select_event
from trellolink.extractor import InputFormatError, extract_all_identifiers, extract_identifiers
from trellolink.logging import truncate_output

if TYPE_CHECKING:
    from trellolink.board import BoardClient
    from trellolink.config import ActionConfig

logger = logging.getLogger(__name__)


def describe_error(error: object) -> str:
    """Best-effort message for a caught error."""
    if isinstance(error, str):
        return error or "Unknown error"
    if isinstance(error, BaseException):
        return str(error) or type(error).__name__
    return "Unknown error"


class EventDispatcher:
    """Handles one triggering event.

    A head commit is handled through the commit path, otherwise a pull
    request through the pull-request path. For every card identifier found,
    the card is looked up on the configured board and the configured action
    is applied to it. Identifiers are handled concurrently and all of them
    are awaited before a handler returns.
    """

    def __init__(self, config: ActionConfig, board: BoardClient) -> None:
        """Initialize the Event Dispatcher.

        Args:
            config: Action configuration for the run.
            board: Board Client used for lookups and actions.
        """
        self.config = config
        self.board = board

    async def run(self, payload: dict[str, Any]) -> DispatchReport:
        """Handle the event payload. Never raises.

        Args:
            payload: Decoded GitHub event payload.

        Returns:
            DispatchReport describing what was done.
        """
        try:
            event = select_event(payload)
        except ValidationError as e:
            logger.error("Invalid event payload: %s", e)
            return DispatchReport(error=describe_error(e))

        if isinstance(event, CommitEvent):
            return await self.handle_commit(event)
        if isinstance(event, PullRequestEvent):
            return await self.handle_pull_request(event)

        logger.info("Event carries no head commit or pull request; nothing to do")
        return DispatchReport()

    async def handle_commit(self, event: CommitEvent) -> DispatchReport:
        """Apply the configured action for every card referenced by a commit."""
        logger.info("Handling head commit %s by %s", event.url, event.author_name)
        logger.debug("Commit message: %s", truncate_output(event.message))
        report = DispatchReport(path=DispatchPath.COMMIT)
        try:
            report.identifiers = extract_identifiers(event.message, self.config.card_id_pattern)
            logger.info("Card identifiers in commit: %s", report.identifiers)
            report.outcomes = await self._apply_all(
                report.identifiers, event.url, event.author_name, event.message
            )
        except Exception as e:
            report.error = self._log_path_error(e)
        return report

    async def handle_pull_request(self, event: PullRequestEvent) -> DispatchReport:
        """Apply the configured action for every card referenced by a pull request."""
        logger.info("Handling pull request %s on branch %s", event.url, event.branch_name)
        report = DispatchReport(path=DispatchPath.PULL_REQUEST)
        try:
            identifiers = extract_all_identifiers(
                event.title, event.branch_name, self.config.card_id_pattern
            )
            if not identifiers:
                logger.info("No card numbers found")
                return report

            report.identifiers = sorted(identifiers, key=lambda card: (len(card), card))
            logger.info("Card identifiers in pull request: %s", report.identifiers)
            report.outcomes = await self._apply_all(
                report.identifiers, event.url, event.author_name, event.title
            )
        except Exception as e:
            report.error = self._log_path_error(e)
        return report

    def _log_path_error(self, error: Exception) -> str:
        message = describe_error(error)
        if isinstance(error, InputFormatError):
            logger.error("%s", message)
        else:
            logger.exception("Error handling event: %s", message)
        return message

    async def _apply_all(
        self,
        identifiers: list[str],
        url: str,
        author_name: str,
        message: str,
    ) -> list[CardOutcome]:
        """Handle every identifier concurrently and wait for all of them."""
        if not identifiers:
            return []
        if self.config.card_action is None:
            logger.warning(
                "Unknown card action %r; cards will be looked up but not updated",
                self.config.card_action_raw,
            )

        semaphore = asyncio.Semaphore(self.config.max_concurrency)

        async def bounded(identifier: str) -> CardOutcome:
            async with semaphore:
                return await self._apply(identifier, url, author_name, message)

        results = await asyncio.gather(
            *(bounded(identifier) for identifier in identifiers),
            return_exceptions=True,
        )

        outcomes: list[CardOutcome] = []
        for identifier, result in zip(identifiers, results, strict=True):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                error = describe_error(result)
                logger.error("Card #%s failed: %s", identifier, error)
                outcomes.append(CardOutcome(identifier=identifier, error=error))
            else:
                outcomes.append(result)
        return outcomes

    async def _apply(
        self,
        identifier: str,
        url: str,
        author_name: str,
        message: str,
    ) -> CardOutcome:
        """Look up one card and apply the configured action to it."""
        card = await self.board.find_card(self.config.board_id, identifier)
        if not card.ok:
            logger.warning("Lookup of card #%s failed: %s", identifier, card.failure)
            return CardOutcome(identifier=identifier, error=str(card.failure))
        if not card.value:
            logger.info("Card #%s not found on board %s", identifier, self.config.board_id)
            return CardOutcome(identifier=identifier)

        action = self.config.card_action
        match action:
            case CardAction.ATTACHMENT:
                result = await self.board.attach(card.value, url)
            case CardAction.COMMENT:
                result = await self.board.comment(card.value, author_name, message, url)
            case _:
                return CardOutcome(identifier=identifier, card_id=card.value)

        outcome = CardOutcome(
            identifier=identifier,
            card_id=card.value,
            action=str(action),
            success=bool(result.ok and result.value),
        )
        if not result.ok:
            outcome.error = str(result.failure)
            logger.warning(
                "Could not apply %s to card #%s: %s", action, identifier, result.failure
            )
        else:
            logger.info("Applied %s to card #%s (%s)", action, identifier, card.value)
        return outcome
