"""BoardClient - Minimal async client for the Trello REST API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from trellolink.board.exceptions import ClientClosedError
from trellolink.board.models import BoardFailure, BoardResult
from trellolink.logging import get_logger, sanitize_for_log

if TYPE_CHECKING:
    from trellolink.config import ActionConfig

logger = get_logger("board")


class BoardClient:
    """Client for the four Trello operations the action needs.

    Every operation returns a BoardResult. Transport errors and non-2xx
    responses are logged with the request URL and status and returned as a
    failure; they are never raised.
    """

    def __init__(self, config: ActionConfig) -> None:
        """Initialize the Board Client.

        Args:
            config: Action configuration holding credentials and base URLs.
        """
        self.api_key = config.api_key
        self.auth_token = config.auth_token
        self.api_base_url = config.api_base_url.rstrip("/")
        self.web_base_url = config.web_base_url.rstrip("/")
        self.timeout = config.timeout_seconds
        self._client: httpx.AsyncClient | None = None
        self._closed = False

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._closed:
            raise ClientClosedError("BoardClient is closed")
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        return self._client

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        self._closed = True

    async def __aenter__(self) -> BoardClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    @property
    def _credentials(self) -> dict[str, str]:
        return {"key": self.api_key, "token": self.auth_token}

    def _failure(self, url: str, status_code: int | None, message: str) -> BoardFailure:
        failure = BoardFailure(
            url=url, status_code=status_code, message=sanitize_for_log(message)
        )
        logger.error("%s", failure)
        return failure

    async def _get_json(self, url: str) -> BoardResult[Any]:
        """GET a URL with credentials as query params and decode the JSON body."""
        try:
            response = await self.client.get(url, params=self._credentials)
        except httpx.HTTPError as e:
            return BoardResult.failed(self._failure(url, None, str(e) or type(e).__name__))

        if not 200 <= response.status_code < 300:
            return BoardResult.failed(
                self._failure(url, response.status_code, response.reason_phrase)
            )

        try:
            return BoardResult.success(response.json())
        except ValueError as e:
            return BoardResult.failed(
                self._failure(url, response.status_code, f"Invalid JSON: {e}")
            )

    async def _post(self, url: str, body: dict[str, Any]) -> BoardResult[bool]:
        """POST a JSON body with credentials; value is True only on HTTP 200."""
        payload = {**self._credentials, **body}
        try:
            response = await self.client.post(url, json=payload)
        except httpx.HTTPError as e:
            return BoardResult.failed(self._failure(url, None, str(e) or type(e).__name__))

        if not 200 <= response.status_code < 300:
            return BoardResult.failed(
                self._failure(url, response.status_code, response.reason_phrase)
            )

        return BoardResult.success(response.status_code == 200)

    async def find_card(self, board_id: str, card_identifier: str) -> BoardResult[str]:
        """Look up a card on a board by its short identifier.

        Args:
            board_id: Board to search.
            card_identifier: Card number extracted from text.

        Returns:
            The card's internal id, or None when the identifier is empty.
            A 404 or any other error yields a failure.
        """
        logger.debug("find_card(%s, %s)", board_id, card_identifier)
        if not card_identifier:
            return BoardResult.success(None)

        url = f"{self.web_base_url}/1/boards/{board_id}/cards/{card_identifier}"
        result = await self._get_json(url)
        if not result.ok:
            return BoardResult(failure=result.failure)

        data = result.value
        card_id = data.get("id") if isinstance(data, dict) else None
        return BoardResult.success(str(card_id) if card_id else None)

    async def find_list(self, board_id: str, list_name: str) -> BoardResult[str]:
        """Find the first open list on a board with exactly this name.

        Args:
            board_id: Board to search.
            list_name: List name to match.

        Returns:
            The list's id, or None when no open list matches.
        """
        logger.debug("find_list(%s, %s)", board_id, list_name)
        url = f"{self.web_base_url}/1/boards/{board_id}/lists"
        result = await self._get_json(url)
        if not result.ok:
            return BoardResult(failure=result.failure)

        lists = result.value if isinstance(result.value, list) else []
        for board_list in lists:
            if not isinstance(board_list, dict):
                continue
            if board_list.get("closed") is False and board_list.get("name") == list_name:
                return BoardResult.success(board_list.get("id"))
        return BoardResult.success(None)

    async def attach(self, card_ref: str, url: str) -> BoardResult[bool]:
        """Attach a URL to a card.

        Args:
            card_ref: Card's internal id.
            url: Link to attach (commit or pull request URL).
        """
        logger.info("Attaching %s to card %s", url, card_ref)
        endpoint = f"{self.api_base_url}/1/cards/{card_ref}/attachments"
        return await self._post(endpoint, {"url": url})

    async def comment(
        self,
        card_ref: str,
        author_name: str,
        message: str,
        url: str,
    ) -> BoardResult[bool]:
        """Post a comment on a card as "{author}: {message} {url}".

        Args:
            card_ref: Card's internal id.
            author_name: Commit or pull request author.
            message: Commit message or pull request title.
            url: Link to the commit or pull request.
        """
        logger.info("Commenting on card %s for %s", card_ref, url)
        endpoint = f"{self.api_base_url}/1/cards/{card_ref}/actions/comments"
        return await self._post(endpoint, {"text": f"{author_name}: {message} {url}"})
