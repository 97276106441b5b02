"""Pydantic models for the subset of the GitHub event payload that is read.

Only the fields the action uses are declared; everything else is ignored.
"""

from pydantic import BaseModel, ConfigDict


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore")


class CommitAuthor(_Payload):
    name: str | None = None


class HeadCommitPayload(_Payload):
    """`head_commit` of a push event."""

    url: str = ""
    message: str = ""
    author: CommitAuthor | None = None


class PullRequestUser(_Payload):
    name: str | None = None
    login: str | None = None


class PullRequestHead(_Payload):
    ref: str = ""


class PullRequestPayload(_Payload):
    """`pull_request` of a pull_request event."""

    html_url: str | None = None
    url: str | None = None
    title: str = ""
    user: PullRequestUser | None = None
    head: PullRequestHead | None = None
