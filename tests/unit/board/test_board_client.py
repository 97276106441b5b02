"""Unit tests for BoardClient."""

import logging
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from trellolink.board import BoardClient, BoardFailure, ClientClosedError
from trellolink.config import ActionConfig


@pytest.fixture
def mock_client() -> MagicMock:
    """Create a mock async HTTP client."""
    client = MagicMock()
    client.get = AsyncMock()
    client.post = AsyncMock()
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def board(action_config: ActionConfig, mock_client: MagicMock) -> BoardClient:
    """Create a BoardClient with mocked HTTP client."""
    board = BoardClient(action_config)
    board._client = mock_client
    return board


def _mock_response(status_code: int = 200, data=None, reason: str = "OK") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.reason_phrase = reason
    response.json.return_value = data
    return response


@pytest.mark.unit
class TestFindCard:
    """Tests for find_card."""

    @pytest.mark.asyncio
    async def test_returns_card_id(self, board: BoardClient, mock_client: MagicMock) -> None:
        mock_client.get.return_value = _mock_response(data={"id": "5f1a", "idShort": 123})

        result = await board.find_card("board-1", "123")

        assert result.ok
        assert result.value == "5f1a"
        mock_client.get.assert_awaited_once_with(
            "https://trello.com/1/boards/board-1/cards/123",
            params={"key": "test-key", "token": "test-token"},
        )

    @pytest.mark.asyncio
    async def test_not_found_returns_failure(
        self, board: BoardClient, mock_client: MagicMock
    ) -> None:
        """A 404 is a failure result, not a raised error."""
        mock_client.get.return_value = _mock_response(404, reason="Not Found")

        result = await board.find_card("board-1", "999")

        assert not result.ok
        assert result.value is None
        assert result.failure == BoardFailure(
            url="https://trello.com/1/boards/board-1/cards/999",
            status_code=404,
            message="Not Found",
        )

    @pytest.mark.asyncio
    async def test_empty_identifier_makes_no_request(
        self, board: BoardClient, mock_client: MagicMock
    ) -> None:
        result = await board.find_card("board-1", "")

        assert result.ok
        assert result.value is None
        mock_client.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_network_error_returns_failure(
        self, board: BoardClient, mock_client: MagicMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Transport errors are logged with the URL and swallowed."""
        mock_client.get.side_effect = httpx.ConnectError("connection refused")

        with caplog.at_level(logging.ERROR, logger="trellolink.board"):
            result = await board.find_card("board-1", "1")

        assert result.value is None
        assert result.failure is not None
        assert result.failure.status_code is None
        assert "connection refused" in result.failure.message
        assert "https://trello.com/1/boards/board-1/cards/1" in caplog.text

    @pytest.mark.asyncio
    async def test_invalid_json_returns_failure(
        self, board: BoardClient, mock_client: MagicMock
    ) -> None:
        response = _mock_response()
        response.json.side_effect = ValueError("Expecting value")
        mock_client.get.return_value = response

        result = await board.find_card("board-1", "1")

        assert not result.ok
        assert "Invalid JSON" in result.failure.message


@pytest.mark.unit
class TestFindList:
    """Tests for find_list."""

    @pytest.mark.asyncio
    async def test_returns_first_open_list(
        self, board: BoardClient, mock_client: MagicMock
    ) -> None:
        mock_client.get.return_value = _mock_response(
            data=[
                {"id": "l1", "name": "Done", "closed": True},
                {"id": "l2", "name": "Doing", "closed": False},
                {"id": "l3", "name": "Done", "closed": False},
                {"id": "l4", "name": "Done", "closed": False},
            ]
        )

        result = await board.find_list("board-1", "Done")

        assert result.value == "l3"
        mock_client.get.assert_awaited_once_with(
            "https://trello.com/1/boards/board-1/lists",
            params={"key": "test-key", "token": "test-token"},
        )

    @pytest.mark.asyncio
    async def test_no_match_returns_none(
        self, board: BoardClient, mock_client: MagicMock
    ) -> None:
        """Name matching is exact."""
        mock_client.get.return_value = _mock_response(
            data=[{"id": "l1", "name": "done", "closed": False}]
        )

        result = await board.find_list("board-1", "Done")

        assert result.ok
        assert result.value is None

    @pytest.mark.asyncio
    async def test_skips_entries_that_are_not_objects(
        self, board: BoardClient, mock_client: MagicMock
    ) -> None:
        mock_client.get.return_value = _mock_response(
            data=["Done", None, 3, {"id": "l1", "name": "Done", "closed": False}]
        )

        result = await board.find_list("board-1", "Done")

        assert result.ok
        assert result.value == "l1"

    @pytest.mark.asyncio
    async def test_error_returns_failure(self, board: BoardClient, mock_client: MagicMock) -> None:
        mock_client.get.return_value = _mock_response(401, reason="Unauthorized")

        result = await board.find_list("board-1", "Done")

        assert result.value is None
        assert result.failure.status_code == 401


@pytest.mark.unit
class TestAttach:
    """Tests for attach."""

    @pytest.mark.asyncio
    async def test_attach_posts_url(self, board: BoardClient, mock_client: MagicMock) -> None:
        mock_client.post.return_value = _mock_response(200, data={"id": "att1"})

        result = await board.attach("card-1", "https://github.com/o/r/commit/abc")

        assert result.ok
        assert result.value is True
        mock_client.post.assert_awaited_once_with(
            "https://api.trello.com/1/cards/card-1/attachments",
            json={
                "key": "test-key",
                "token": "test-token",
                "url": "https://github.com/o/r/commit/abc",
            },
        )

    @pytest.mark.asyncio
    async def test_attach_non_200_success_is_false(
        self, board: BoardClient, mock_client: MagicMock
    ) -> None:
        """Only HTTP 200 counts as True."""
        mock_client.post.return_value = _mock_response(201, reason="Created")

        result = await board.attach("card-1", "https://example.com")

        assert result.ok
        assert result.value is False

    @pytest.mark.asyncio
    async def test_attach_error_is_logged(
        self, board: BoardClient, mock_client: MagicMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        mock_client.post.return_value = _mock_response(500, reason="Internal Server Error")

        with caplog.at_level(logging.ERROR, logger="trellolink.board"):
            result = await board.attach("card-1", "https://example.com")

        assert result.value is None
        assert result.failure.status_code == 500
        assert (
            "https://api.trello.com/1/cards/card-1/attachments Error 500 Internal Server Error"
            in caplog.text
        )


@pytest.mark.unit
class TestComment:
    """Tests for comment."""

    @pytest.mark.asyncio
    async def test_comment_text_format(self, board: BoardClient, mock_client: MagicMock) -> None:
        mock_client.post.return_value = _mock_response(200)

        result = await board.comment("card-1", "Ada", "Fix bug #123", "https://gh/c/1")

        assert result.value is True
        mock_client.post.assert_awaited_once_with(
            "https://api.trello.com/1/cards/card-1/actions/comments",
            json={
                "key": "test-key",
                "token": "test-token",
                "text": "Ada: Fix bug #123 https://gh/c/1",
            },
        )

    @pytest.mark.asyncio
    async def test_comment_timeout_returns_failure(
        self, board: BoardClient, mock_client: MagicMock
    ) -> None:
        mock_client.post.side_effect = httpx.ReadTimeout("timed out")

        result = await board.comment("card-1", "Ada", "msg", "https://gh/c/1")

        assert result.value is None
        assert result.failure.url == "https://api.trello.com/1/cards/card-1/actions/comments"


@pytest.mark.unit
class TestLifecycle:
    """Tests for client creation and closing."""

    def test_base_urls_from_config(self) -> None:
        config = ActionConfig(
            api_key="k",
            auth_token="t",
            board_id="b",
            card_action=None,
            api_base_url="http://localhost:9000/",
            web_base_url="http://localhost:9001/",
        )
        board = BoardClient(config)

        assert board.api_base_url == "http://localhost:9000"
        assert board.web_base_url == "http://localhost:9001"

    def test_client_created_lazily(self, action_config: ActionConfig) -> None:
        board = BoardClient(action_config)

        assert board._client is None
        assert isinstance(board.client, httpx.AsyncClient)

    @pytest.mark.asyncio
    async def test_aclose_closes_http_client(
        self, board: BoardClient, mock_client: MagicMock
    ) -> None:
        await board.aclose()

        mock_client.aclose.assert_awaited_once()
        with pytest.raises(ClientClosedError):
            _ = board.client

    @pytest.mark.asyncio
    async def test_context_manager_closes(self, action_config: ActionConfig) -> None:
        async with BoardClient(action_config) as board:
            mock = MagicMock()
            mock.aclose = AsyncMock()
            board._client = mock

        mock.aclose.assert_awaited_once()
