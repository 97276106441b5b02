"""Board Client - Interfaces with the Trello REST API for card updates."""

from trellolink.board.client import BoardClient
from trellolink.board.exceptions import BoardError, ClientClosedError
from trellolink.board.models import BoardFailure, BoardResult

__all__ = [
    "BoardClient",
    "BoardError",
    "BoardFailure",
    "BoardResult",
    "ClientClosedError",
]
