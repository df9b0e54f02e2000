"""Base command class for git operations.

This module provides the abstract base class for all git commands,
implementing the Command Pattern with observer support.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from rich.console import Console

from ..observers import GitOperationObserver
from ..repository import GitRepository


class GitCommand(ABC):
    """Abstract base class for git commands.

    Concrete commands implement execute() and undo().

    Attributes:
        repository (GitRepository): The git repository to operate on
        console (Console): Rich console for output
        observers (List[GitOperationObserver]): List of observers to notify
    """

    def __init__(self, repository: GitRepository, console: Optional[Console] = None):
        self.repository = repository
        self.console = console or Console()
        self.observers: List[GitOperationObserver] = []

    def add_observer(self, observer: GitOperationObserver) -> None:
        """Add an observer to be notified of command execution."""
        self.observers.append(observer)

    def remove_observer(self, observer: GitOperationObserver) -> None:
        """Remove an observer from the notification list."""
        self.observers.remove(observer)

    @abstractmethod
    def execute(self) -> bool:
        """Execute the git command.

        Returns:
            bool: True if the command was executed successfully, False otherwise
        """
        pass

    @abstractmethod
    def undo(self) -> bool:
        """Undo the git command.

        Returns:
            bool: True if the command was undone successfully, False otherwise
        """
        pass
