"""Command for creating git commits."""

from typing import Optional

from rich.console import Console

from ..exceptions import RepositoryError
from ..repository import GitRepository
from .base import GitCommand


class CommitCommand(GitCommand):
    """Command for committing the staged changes with a given message.

    Attributes:
        message (str): The full commit message
        commit_hash (Optional[str]): The hash of the created commit
        parent_hash (Optional[str]): The hash HEAD pointed to before the commit
    """

    def __init__(
        self,
        repository: GitRepository,
        message: str,
        console: Optional[Console] = None,
    ):
        super().__init__(repository, console)
        self.message = message
        self.commit_hash: Optional[str] = None
        self.parent_hash: Optional[str] = None

    def execute(self) -> bool:
        """Write the index as a tree and commit it on top of HEAD.

        A repository without commits gets a root commit.

        Raises:
            RepositoryError: If the tree or the commit cannot be written.
        """
        tree = self.repository.write_index_tree()
        head = self.repository.head_commit()
        parents = [head] if head is not None else []

        author = self.repository.author_signature()
        committer = self.repository.committer_signature()
        self.commit_hash = self.repository.create_commit(
            author, committer, self.message, tree, parents
        )
        self.parent_hash = head.hexsha if head is not None else None

        for observer in self.observers:
            observer.on_commit_created(self.commit_hash, self.message)

        return True

    def undo(self) -> bool:
        """Move HEAD back to the parent commit, keeping the changes staged."""
        if not self.commit_hash:
            self.console.print("[yellow]No commit to undo[/yellow]")
            return False

        if not self.parent_hash:
            self.console.print("[yellow]Cannot undo the root commit[/yellow]")
            return False

        try:
            self.repository.reset_head(self.parent_hash)
        except RepositoryError as e:
            self.console.print(f"[red]Failed to undo commit: {str(e)}[/red]")
            return False

        for observer in self.observers:
            observer.on_commit_undone(self.commit_hash)

        self.commit_hash = None
        return True
