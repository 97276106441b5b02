"""Exceptions for the Identifier Extractor."""


class ExtractorError(Exception):
    """Base exception for identifier extraction errors."""


class InputFormatError(ExtractorError):
    """Text does not reference a card the way the guidelines require."""
