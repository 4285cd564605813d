"""Error taxonomy for git command orchestration.

Every failure raised by the executor, engine, or services derives from
GitStateError so callers can catch one type. The subclasses keep the
distinction that matters to a UI:

- LaunchFailure: git could not be started at all
- ToolReportedFailure: git ran and said no (raw diagnostic preserved)
- ParseFailure: git produced output we could not understand
- ApplyFailure: stash/patch/rebase application stopped part-way
"""

from collections.abc import Sequence


class GitStateError(Exception):
    """Base class for all gitstate errors."""


class LaunchFailure(GitStateError):
    """Raised when the external tool process cannot be started."""

    def __init__(self, command: Sequence[str], reason: str) -> None:
        self.command = list(command)
        self.reason = reason
        cmd_str = " ".join(self.command)
        super().__init__(f"Failed to launch '{cmd_str}': {reason}")


class ToolReportedFailure(GitStateError):
    """Raised when git ran but reported failure.

    The raw diagnostic text is kept on `message` so it can be shown to the
    user unchanged.
    """

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        self.message = message.strip()
        if self.message:
            super().__init__(f"Failed to {operation}: {self.message}")
        else:
            super().__init__(f"Failed to {operation}")


class RefNotFound(ToolReportedFailure):
    """Raised when a ref cannot be resolved to an object."""

    def __init__(self, ref: str, message: str = "") -> None:
        self.ref = ref
        super().__init__(f"resolve ref '{ref}'", message or f"unknown revision '{ref}'")


class MergeConflict(ToolReportedFailure):
    """Raised when a merge stops with conflicts."""

    def __init__(self, message: str) -> None:
        super().__init__("merge", message)


class RebaseConflict(ToolReportedFailure):
    """Raised when a rebase stops with conflicts."""

    def __init__(self, message: str) -> None:
        super().__init__("rebase", message)


class ParseFailure(GitStateError):
    """Raised when git output does not have the expected structure."""

    def __init__(self, operation: str, line: str, detail: str | None = None) -> None:
        self.operation = operation
        self.line = line
        self.detail = detail
        error_msg = f"Unexpected output from {operation}: {line!r}"
        if detail:
            error_msg += f" ({detail})"
        super().__init__(error_msg)


class ApplyFailure(GitStateError):
    """Raised when applying a stash, patch, or rebase step fails.

    Partial application or conflicts are possible; `message` carries git's
    own description of what is left to resolve.
    """

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        self.message = message.strip()
        if self.message:
            super().__init__(f"Failed to {operation}: {self.message}")
        else:
            super().__init__(f"Failed to {operation}")
