"""Stash data model."""

from dataclasses import dataclass
from datetime import datetime


def stash_ref(index: int) -> str:
    """Render a stack position as git's stash selector."""
    if index < 0:
        raise ValueError(f"Stash index must be non-negative, got {index}")
    return f"stash@{{{index}}}"


@dataclass(frozen=True, eq=False)
class Stash:
    """A stash entry as listed by git.

    `index` is a position in git's stash stack (0 = newest), not an
    identity: it shifts whenever an entry above it is pushed or removed.
    Identity is the stash commit, so equality compares `sha`.
    """

    index: int
    message: str
    sha: str
    date: datetime
    branch_name: str | None = None

    @property
    def reference(self) -> str:
        return stash_ref(self.index)

    @property
    def short_sha(self) -> str:
        return self.sha[:7]

    @property
    def display_message(self) -> str:
        """Message without git's "WIP on <branch>:" / "On <branch>:" prefix."""
        for prefix in ("WIP on ", "On "):
            if self.message.startswith(prefix) and ":" in self.message:
                return self.message.split(":", 1)[1].strip()
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stash):
            return NotImplemented
        return self.sha == other.sha

    def __hash__(self) -> int:
        return hash(self.sha)
