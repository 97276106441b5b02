"""Identifier Extractor - Finds card numbers in commit and pull request text."""

from __future__ import annotations

import logging
import re

from trellolink.extractor.exceptions import InputFormatError

logger = logging.getLogger(__name__)

DEFAULT_PREFIX_PATTERN = "#"

# GitHub merge commit boilerplate; its "#N" is a PR number, not a card.
MERGE_PULL_REQUEST_MARKER = re.compile(r"Merge pull request #\d+ from")


def extract_identifiers(
    text: str | None,
    prefix_pattern: str = DEFAULT_PREFIX_PATTERN,
) -> list[str]:
    """Extract card identifiers from free text.

    Args:
        text: Commit message, pull request title or branch name.
        prefix_pattern: Regular expression fragment preceding the card number.

    Returns:
        Card numbers in order of appearance, without the prefix. Empty when
        the text is empty or nothing matches.
    """
    logger.debug("Extracting card identifiers (pattern=%r) from %r", prefix_pattern, text)
    if not text:
        return []

    cleaned = MERGE_PULL_REQUEST_MARKER.sub("", text)
    # The prefix may contain its own groups.
    matcher = re.compile(f"(?:{prefix_pattern})(?P<card>\\d+)")
    return [match.group("card") for match in matcher.finditer(cleaned)]


def extract_all_identifiers(
    title: str | None,
    branch: str | None,
    prefix_pattern: str = DEFAULT_PREFIX_PATTERN,
) -> set[str]:
    """Extract the card identifiers referenced by a pull request.

    Both the title and the branch name must reference at least one card.

    Args:
        title: Pull request title.
        branch: Head branch name.
        prefix_pattern: Regular expression fragment preceding the card number.

    Returns:
        Deduplicated set of card numbers from title and branch.

    Raises:
        InputFormatError: If either the title or the branch has no card number.
    """
    title_ids = extract_identifiers(title, prefix_pattern)
    branch_ids = extract_identifiers(branch, prefix_pattern)
    if not title_ids or not branch_ids:
        raise InputFormatError("PR title or branch name does not meet the guidelines")
    return {*title_ids, *branch_ids}
