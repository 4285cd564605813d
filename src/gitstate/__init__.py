"""Cached, async orchestration of git tag, stash, merge and rebase commands."""

from gitstate.context import GitStateContext, create_context
from gitstate.errors import (
    ApplyFailure,
    GitStateError,
    LaunchFailure,
    MergeConflict,
    ParseFailure,
    RebaseConflict,
    RefNotFound,
    ToolReportedFailure,
)
from gitstate.services import MergeService, RepoServices, StashService, TagService

__all__ = [
    "ApplyFailure",
    "GitStateContext",
    "GitStateError",
    "LaunchFailure",
    "MergeConflict",
    "MergeService",
    "ParseFailure",
    "RebaseConflict",
    "RefNotFound",
    "RepoServices",
    "StashService",
    "TagService",
    "ToolReportedFailure",
    "create_context",
]
