"""Tests for option records and their git arguments."""

import pytest

from gitstate.models.options import (
    MergeOptions,
    MergeStrategy,
    RebaseOptions,
    StashApplyOptions,
    StashOptions,
    TagOptions,
)
from gitstate.models.repository_state import RepositoryState


class TestTagOptions:
    """Tests for TagOptions."""

    def test_lightweight_tag_args(self) -> None:
        options = TagOptions(name="v1.0.0", is_annotated=False)

        assert options.to_args() == ["v1.0.0", "HEAD"]

    def test_annotated_tag_args(self) -> None:
        options = TagOptions(name="v1.0.0", message="Release 1.0", target_ref="abc123")

        assert options.to_args() == ["-a", "v1.0.0", "-m", "Release 1.0", "abc123"]

    def test_force_flag(self) -> None:
        options = TagOptions(name="v1", is_annotated=False, force=True)

        assert options.to_args() == ["v1", "-f", "HEAD"]

    def test_annotated_requires_message(self) -> None:
        with pytest.raises(ValueError, match="needs a message"):
            TagOptions(name="v1.0.0")

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            TagOptions(name="  ", is_annotated=False)

    def test_option_like_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not start with '-'"):
            TagOptions(name="-f", is_annotated=False)

    def test_option_like_target_rejected(self) -> None:
        with pytest.raises(ValueError, match="Tag target"):
            TagOptions(name="v1", is_annotated=False, target_ref="--contains")


class TestStashOptions:
    """Tests for StashOptions."""

    def test_defaults_include_untracked(self) -> None:
        assert StashOptions().to_args() == ["push", "--include-untracked"]

    def test_message_and_keep_index(self) -> None:
        options = StashOptions(message="wip", include_untracked=False, keep_index=True)

        assert options.to_args() == ["push", "-m", "wip", "--keep-index"]

    def test_all_replaces_include_untracked(self) -> None:
        assert StashOptions(all=True).to_args() == ["push", "--all"]


class TestStashApplyOptions:
    """Tests for StashApplyOptions."""

    def test_default_ref(self) -> None:
        assert StashApplyOptions().to_args() == ["stash@{0}"]

    def test_restore_index(self) -> None:
        options = StashApplyOptions(stash_ref="stash@{2}", restore_index=True)

        assert options.to_args() == ["--index", "stash@{2}"]


class TestMergeOptions:
    """Tests for MergeOptions."""

    def test_no_options(self) -> None:
        assert MergeOptions().to_args() == []

    def test_all_options(self) -> None:
        options = MergeOptions(
            no_fast_forward=True,
            commit_message="Merge feature",
            strategy=MergeStrategy.ORT,
        )

        assert options.to_args() == ["--no-ff", "-s", "ort", "-m", "Merge feature"]

    def test_squash(self) -> None:
        assert MergeOptions(squash=True).to_args() == ["--squash"]

    def test_squash_with_no_ff_rejected(self) -> None:
        with pytest.raises(ValueError, match="--squash"):
            MergeOptions(squash=True, no_fast_forward=True)


class TestRebaseOptions:
    """Tests for RebaseOptions."""

    def test_defaults(self) -> None:
        assert RebaseOptions().to_args() == []

    def test_option_like_onto_rejected(self) -> None:
        with pytest.raises(ValueError, match="Rebase onto"):
            RebaseOptions(onto="--root")

    def test_onto_and_autosquash(self) -> None:
        assert RebaseOptions(onto="main", autosquash=True).to_args() == [
            "--autosquash",
            "--onto",
            "main",
        ]


class TestRepositoryState:
    """Tests for RepositoryState."""

    def test_clean_is_not_in_progress(self) -> None:
        assert not RepositoryState.CLEAN.in_progress

    @pytest.mark.parametrize(
        "state",
        [
            RepositoryState.MERGING,
            RepositoryState.REBASING,
            RepositoryState.CHERRY_PICKING,
            RepositoryState.REVERTING,
        ],
    )
    def test_other_states_are_in_progress(self, state: RepositoryState) -> None:
        assert state.in_progress
