"""Core functionality for git-conv-commit."""
from typing import List, Optional

from rich.console import Console

from .commands import CommitCommand, GitCommand
from .observers import GitOperationObserver
from .repository import GitRepository


class GitCommitter:
    """Handles git operations using the Command Pattern."""

    def __init__(self, repository: GitRepository, console: Optional[Console] = None):
        self.repository = repository
        self.console = console or Console()
        self.observers: List[GitOperationObserver] = []
        self.command_history: List[GitCommand] = []

    def add_observer(self, observer: GitOperationObserver) -> None:
        """Add an observer to be notified of git operations."""
        self.observers.append(observer)

    def remove_observer(self, observer: GitOperationObserver) -> None:
        """Remove an observer from the notification list."""
        self.observers.remove(observer)

    def execute_command(self, command: GitCommand) -> bool:
        """Execute a git command and store it in history if successful."""
        for observer in self.observers:
            command.add_observer(observer)

        success = command.execute()

        if success:
            self.command_history.append(command)

        return success

    def undo_last_command(self) -> bool:
        """Undo the last executed command."""
        if not self.command_history:
            self.console.print("[yellow]No commands to undo[/yellow]")
            return False

        command = self.command_history.pop()
        return command.undo()

    def commit(self, message: str) -> Optional[str]:
        """Commit the staged changes with ``message`` and return the new hash."""
        command = CommitCommand(self.repository, message, self.console)
        self.execute_command(command)
        return command.commit_hash
