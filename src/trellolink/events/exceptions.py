"""Exceptions for event payload loading."""


class EventPayloadError(Exception):
    """Event payload file is missing or not valid JSON."""
