"""Immutable option records for git commands.

Each record renders the arguments that follow the git subcommand.
"""

from dataclasses import dataclass
from enum import Enum


def check_ref_argument(value: str, what: str) -> str:
    """Reject a branch, tag or ref name git would not take as a name.

    Names are passed as bare arguments, so one starting with "-" would be
    read by git as an option.

    Raises:
        ValueError: If value is empty or starts with "-"
    """
    if not value.strip():
        raise ValueError(f"{what} must not be empty")
    if value.startswith("-"):
        raise ValueError(f"{what} must not start with '-', got {value!r}")
    return value


class MergeStrategy(str, Enum):
    """Strategies accepted by `git merge -s`."""

    ORT = "ort"
    RECURSIVE = "recursive"
    RESOLVE = "resolve"
    OCTOPUS = "octopus"
    OURS = "ours"
    SUBTREE = "subtree"


@dataclass(frozen=True)
class TagOptions:
    """Options for `git tag`."""

    name: str
    target_ref: str = "HEAD"
    message: str | None = None
    is_annotated: bool = True
    force: bool = False

    def __post_init__(self) -> None:
        check_ref_argument(self.name, "Tag name")
        check_ref_argument(self.target_ref, "Tag target")
        # git would open an editor to ask for the missing message
        if self.is_annotated and self.message is None:
            raise ValueError(f"Annotated tag '{self.name}' needs a message")

    def to_args(self) -> list[str]:
        args: list[str] = []
        if self.is_annotated:
            args.append("-a")
        args.append(self.name)
        if self.message is not None:
            args.extend(["-m", self.message])
        if self.force:
            args.append("-f")
        args.append(self.target_ref)
        return args


@dataclass(frozen=True)
class StashOptions:
    """Options for `git stash push`."""

    message: str | None = None
    include_untracked: bool = True
    keep_index: bool = False
    all: bool = False

    def to_args(self) -> list[str]:
        args = ["push"]
        if self.message is not None:
            args.extend(["-m", self.message])
        # git rejects --include-untracked together with --all
        if self.all:
            args.append("--all")
        elif self.include_untracked:
            args.append("--include-untracked")
        if self.keep_index:
            args.append("--keep-index")
        return args


@dataclass(frozen=True)
class StashApplyOptions:
    """Options for `git stash apply`."""

    stash_ref: str = "stash@{0}"
    restore_index: bool = False

    def to_args(self) -> list[str]:
        args: list[str] = []
        if self.restore_index:
            args.append("--index")
        args.append(self.stash_ref)
        return args


@dataclass(frozen=True)
class MergeOptions:
    """Options for `git merge`."""

    no_fast_forward: bool = False
    squash: bool = False
    commit_message: str | None = None
    strategy: MergeStrategy | None = None

    def __post_init__(self) -> None:
        if self.squash and self.no_fast_forward:
            raise ValueError("--squash cannot be combined with --no-ff")

    def to_args(self) -> list[str]:
        args: list[str] = []
        if self.no_fast_forward:
            args.append("--no-ff")
        if self.squash:
            args.append("--squash")
        if self.strategy is not None:
            args.extend(["-s", self.strategy.value])
        if self.commit_message is not None:
            args.extend(["-m", self.commit_message])
        return args


@dataclass(frozen=True)
class RebaseOptions:
    """Options for `git rebase`."""

    onto: str | None = None
    autosquash: bool = False

    def __post_init__(self) -> None:
        if self.onto is not None:
            check_ref_argument(self.onto, "Rebase onto")

    def to_args(self) -> list[str]:
        args: list[str] = []
        if self.autosquash:
            args.append("--autosquash")
        if self.onto is not None:
            args.extend(["--onto", self.onto])
        return args
