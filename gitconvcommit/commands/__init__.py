"""Git operation commands using the Command Pattern.

Example:
    ```python
    from gitconvcommit.commands import CommitCommand
    from gitconvcommit.observers import FileLogObserver

    commit_cmd = CommitCommand(repository, message)
    commit_cmd.add_observer(FileLogObserver("git.log"))
    commit_cmd.execute()

    # Put HEAD back, keeping the changes staged
    commit_cmd.undo()
    ```
"""

from .base import GitCommand
from .commit import CommitCommand

__all__ = [
    "GitCommand",
    "CommitCommand",
]
