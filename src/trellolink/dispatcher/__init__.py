"""Event Dispatcher - Routes a push or pull request to card actions."""

from trellolink.dispatcher.dispatcher import EventDispatcher, describe_error
from trellolink.dispatcher.models import CardOutcome, DispatchPath, DispatchReport

__all__ = [
    "CardOutcome",
    "DispatchPath",
    "DispatchReport",
    "EventDispatcher",
    "describe_error",
]
