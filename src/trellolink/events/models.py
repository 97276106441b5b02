"""Data models for triggering events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from trellolink.events.payloads import HeadCommitPayload, PullRequestPayload


@dataclass(frozen=True)
class CommitEvent:
    """A pushed head commit.

    Attributes:
        url: Commit URL on GitHub.
        message: Full commit message.
        author_name: Commit author's name.
    """

    url: str
    message: str
    author_name: str

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> CommitEvent:
        """Build from the `head_commit` object of a push event."""
        commit = HeadCommitPayload.model_validate(data)
        return cls(
            url=commit.url,
            message=commit.message,
            author_name=(commit.author.name if commit.author else None) or "",
        )


@dataclass(frozen=True)
class PullRequestEvent:
    """An opened or updated pull request.

    Attributes:
        url: Pull request page URL (html_url, falling back to the API url).
        title: Pull request title, used as the message.
        author_name: Author's display name, falling back to the login.
        branch_name: Head branch ref.
    """

    url: str
    title: str
    author_name: str
    branch_name: str

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> PullRequestEvent:
        """Build from the `pull_request` object of a pull_request event."""
        pr = PullRequestPayload.model_validate(data)
        return cls(
            url=pr.html_url or pr.url or "",
            title=pr.title,
            author_name=(pr.user.name or pr.user.login if pr.user else None) or "",
            branch_name=pr.head.ref if pr.head else "",
        )
