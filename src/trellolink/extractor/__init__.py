"""Identifier Extractor - Parses card numbers out of commit and PR text."""

from trellolink.extractor.exceptions import ExtractorError, InputFormatError
from trellolink.extractor.extractor import (
    DEFAULT_PREFIX_PATTERN,
    extract_all_identifiers,
    extract_identifiers,
)

__all__ = [
    "DEFAULT_PREFIX_PATTERN",
    "ExtractorError",
    "InputFormatError",
    "extract_all_identifiers",
    "extract_identifiers",
]
