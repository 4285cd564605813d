"""External command execution integration."""

from gitstate.integrations.executor.abc import CommandExecutor, CommandResult
from gitstate.integrations.executor.fake import FakeCommandExecutor
from gitstate.integrations.executor.real import RealCommandExecutor

__all__ = ["CommandExecutor", "CommandResult", "FakeCommandExecutor", "RealCommandExecutor"]
