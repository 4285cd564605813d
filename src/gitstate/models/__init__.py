"""Data models for gitstate."""

from gitstate.models.options import (
    MergeOptions,
    MergeStrategy,
    RebaseOptions,
    StashApplyOptions,
    StashOptions,
    TagOptions,
    check_ref_argument,
)
from gitstate.models.repository_state import RepositoryState
from gitstate.models.stash import Stash, stash_ref
from gitstate.models.tag import SemanticVersion, Tag

__all__ = [
    "MergeOptions",
    "MergeStrategy",
    "RebaseOptions",
    "RepositoryState",
    "SemanticVersion",
    "Stash",
    "StashApplyOptions",
    "StashOptions",
    "Tag",
    "TagOptions",
    "check_ref_argument",
    "stash_ref",
]
