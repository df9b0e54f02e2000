"""Observer pattern for git operations."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console


class GitOperationObserver(ABC):
    """Abstract base class for git operation observers."""

    @abstractmethod
    def on_commit_created(self, commit_hash: str, message: str) -> None:
        """Called when a commit is created."""
        pass

    @abstractmethod
    def on_commit_undone(self, commit_hash: str) -> None:
        """Called when a commit is undone."""
        pass


class ConsoleLogObserver(GitOperationObserver):
    """Observer that logs git operations to the console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def on_commit_created(self, commit_hash: str, message: str) -> None:
        self.console.print(f"[green]Commit id: {commit_hash}[/green]")

    def on_commit_undone(self, commit_hash: str) -> None:
        self.console.print(f"[yellow]Undid commit {commit_hash}[/yellow]")


class FileLogObserver(GitOperationObserver):
    """Observer that logs git operations to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a") as f:
            f.write(f"{timestamp} - {message}\n")

    def on_commit_created(self, commit_hash: str, message: str) -> None:
        subject = message.split("\n", 1)[0]
        self._log(f"Created commit {commit_hash}: {subject}")

    def on_commit_undone(self, commit_hash: str) -> None:
        self._log(f"Undid commit {commit_hash}")
