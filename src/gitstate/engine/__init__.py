"""Domain engine: git command construction and output parsing."""

from gitstate.engine.engine import GitEngine, scoped_patch_file

__all__ = ["GitEngine", "scoped_patch_file"]
