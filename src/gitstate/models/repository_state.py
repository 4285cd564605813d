"""In-progress operation state of a working tree."""

from enum import Enum


class RepositoryState(str, Enum):
    """What git is in the middle of, read from its on-disk markers.

    This state belongs to git and can change under us at any time, so it
    is always queried live and never cached.
    """

    CLEAN = "clean"
    MERGING = "merging"
    REBASING = "rebasing"
    CHERRY_PICKING = "cherry_picking"
    REVERTING = "reverting"

    @property
    def in_progress(self) -> bool:
        return self is not RepositoryState.CLEAN
